"""Data models and schemas for the recipe converter.

Defines Pydantic models for the three request variants sent to the generation
service, the responses it returns, and the client-side state the orchestrator
keeps (request slots, last result, notifications).
All models use Pydantic v2; wire payloads use camelCase aliases.
"""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_serializer, field_validator

DATA_URL_PREFIX = "data:"
DEFAULT_IMAGE_PREFIX = "data:image/jpeg;base64,"


class InputMode(str, Enum):
    """Input modality. Exactly one is active at a time."""

    INGREDIENTS = "ingredients"
    PHOTO = "photo"
    DISH = "dish"


class CuisineTag(str, Enum):
    ANY = "any"
    ITALIAN = "italian"
    FRENCH = "french"
    MEXICAN = "mexican"
    CHINESE = "chinese"
    INDIAN = "indian"
    THAI = "thai"
    JAPANESE = "japanese"
    MEDITERRANEAN = "mediterranean"


class DietaryTag(str, Enum):
    NONE = "none"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    GLUTEN_FREE = "gluten-free"
    DAIRY_FREE = "dairy-free"
    KETO = "keto"
    PALEO = "paleo"
    LOW_CARB = "low-carb"


class Severity(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class Notification(BaseModel):
    """Payload handed to the notification sink (fire-and-forget)."""

    title: str
    description: str
    severity: Severity = Severity.DEFAULT


def ensure_data_url(image_data: str) -> str:
    """Prefix bare base64 image data with the default JPEG data-URL marker."""
    if image_data.startswith(DATA_URL_PREFIX):
        return image_data
    return f"{DEFAULT_IMAGE_PREFIX}{image_data}"


def _require_text(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("must not be empty")
    return value


class _WirePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    def to_payload(self) -> dict:
        """Serialize to the JSON body the generation service expects."""
        return self.model_dump(by_alias=True, mode="json")


class IngredientsRequest(_WirePayload):
    """Ingredients -> recipe request.

    The raw text is sent untrimmed; only its trimmed form has to be non-empty.
    Servings travel as a string under the legacy `scaleFactor` key.
    """

    raw_text: str = Field(alias="recipeText")
    conversion_type: Literal["ingredient-to-recipe"] = Field("ingredient-to-recipe", alias="conversionType")
    servings: PositiveInt = Field(alias="scaleFactor")
    humidity_adjust: bool = Field(False, alias="humidityAdjust")
    pro_mode: bool = Field(False, alias="proMode")

    @field_validator("raw_text")
    @classmethod
    def raw_text_not_blank(cls, value: str) -> str:
        return _require_text(value)

    @field_serializer("servings")
    def serialize_servings(self, servings: int) -> str:
        return str(servings)


class PhotoRequest(_WirePayload):
    """Photo -> recipe request carrying a data-URL encoded image."""

    image_data: str = Field(alias="image", min_length=1)

    @field_validator("image_data")
    @classmethod
    def image_has_data_url_prefix(cls, value: str) -> str:
        return ensure_data_url(value)


class DishRequest(_WirePayload):
    """Dish name -> recipe request."""

    dish_name: str = Field(alias="dishName")
    cuisine: CuisineTag = CuisineTag.ANY
    dietary: DietaryTag = DietaryTag.NONE

    @field_validator("dish_name")
    @classmethod
    def dish_name_not_blank(cls, value: str) -> str:
        return _require_text(value)


class ConvertRecipeResponse(BaseModel):
    """Success body of the ingredients endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    converted_recipe: str = Field(alias="convertedRecipe")


class RecipeEnvelope(BaseModel):
    """Body of the photo and dish endpoints.

    A 2xx response can still carry `success: false` with an error message.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    recipe_text: Optional[str] = Field(None, alias="recipeText")
    error: Optional[str] = None


class RequestStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


class RequestState(BaseModel):
    """Immutable snapshot of one modality's request slot."""

    model_config = ConfigDict(frozen=True)

    status: RequestStatus = RequestStatus.IDLE
    result: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def idle(cls) -> "RequestState":
        return cls()

    @classmethod
    def pending(cls) -> "RequestState":
        return cls(status=RequestStatus.PENDING)

    @classmethod
    def succeeded(cls, result: str) -> "RequestState":
        return cls(status=RequestStatus.SUCCESS, result=result)

    @classmethod
    def failed(cls, error: str) -> "RequestState":
        return cls(status=RequestStatus.ERROR, error=error)

    @property
    def is_pending(self) -> bool:
        return self.status is RequestStatus.PENDING


class ConvertedResult(BaseModel):
    """Most recent successful recipe text and the modality that produced it."""

    model_config = ConfigDict(frozen=True)

    text: str
    mode: InputMode
