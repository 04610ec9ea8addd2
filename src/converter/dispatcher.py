"""Request dispatch for the three input modalities.

Each modality owns an independent request slot (idle -> pending -> success |
error). Slots never cancel each other: a request keeps running after the user
switches modes, and when it resolves it still settles its own slot and, on
success, replaces the shared result. Whichever success lands last is what
the presenter shows, unless stale-result discarding is switched on.

Validation problems are refused before a slot is touched: no transition, no
network call, just a notification.
"""

from typing import Awaitable, Callable, NamedTuple, Optional

from src.converter.capabilities import Notifier
from src.converter.client import RecipeServiceClient
from src.converter.errors import (
    EmptyInputError,
    InactiveModeError,
    InputValidationError,
    MissingImageError,
    ServiceLogicalError,
    TransportError,
)
from src.converter.image_pipeline import ImagePipeline
from src.converter.input_mode import InputModeController
from src.converter.presenter import ResultPresenter
from src.converter.servings import ServingsResolver
from src.models.models import (
    DishRequest,
    IngredientsRequest,
    InputMode,
    Notification,
    PhotoRequest,
    RecipeEnvelope,
    RequestState,
    Severity,
)
from src.utils.config import config
from src.utils.logger import logger

StateListener = Callable[[InputMode, RequestState], None]


class ModeMessages(NamedTuple):
    success_title: str
    success_description: str
    logical_title: str
    logical_fallback: str
    transport_title: str
    transport_fallback: str


MODE_MESSAGES: dict[InputMode, ModeMessages] = {
    InputMode.INGREDIENTS: ModeMessages(
        "Recipe Converted",
        "Your recipe has been successfully converted",
        "Conversion Failed",
        "Failed to convert recipe",
        "Conversion Failed",
        "Failed to convert recipe",
    ),
    InputMode.PHOTO: ModeMessages(
        "Recipe Extracted",
        "Recipe successfully extracted from the image",
        "Extraction Error",
        "Failed to extract recipe from image",
        "Processing Error",
        "Failed to process image",
    ),
    InputMode.DISH: ModeMessages(
        "Recipe Generated",
        "Recipe successfully generated for your dish",
        "Generation Failed",
        "Failed to generate recipe for dish",
        "Recipe Generation Failed",
        "Failed to generate recipe",
    ),
}


def unwrap_envelope(envelope: RecipeEnvelope, fallback: str) -> str:
    """Return the recipe text of a successful envelope.

    Raises:
        ServiceLogicalError: If the envelope reports failure or carries no text.
    """
    if not envelope.success:
        raise ServiceLogicalError(envelope.error or fallback)
    if envelope.recipe_text is None:
        raise ServiceLogicalError(fallback)
    return envelope.recipe_text


class RequestDispatcher:
    """Builds requests from the form state and drives the three request slots.

    The dispatcher does not block re-submission of a pending modality; the
    calling surface (RecipeConverter) is responsible for that.
    """

    def __init__(
        self,
        client: RecipeServiceClient,
        controller: InputModeController,
        servings: ServingsResolver,
        images: ImagePipeline,
        presenter: ResultPresenter,
        notifier: Notifier,
        on_change: Optional[StateListener] = None,
        discard_stale: Optional[bool] = None,
    ) -> None:
        self.client = client
        self.controller = controller
        self.servings = servings
        self.images = images
        self.presenter = presenter
        self.notifier = notifier
        self.on_change = on_change
        self.discard_stale = config.DISCARD_STALE_RESULTS if discard_stale is None else discard_stale
        self._states: dict[InputMode, RequestState] = {mode: RequestState.idle() for mode in InputMode}
        self._latest_ticket = 0

    def state(self, mode: InputMode) -> RequestState:
        return self._states[mode]

    def is_pending(self, mode: InputMode) -> bool:
        return self._states[mode].is_pending

    async def submit_ingredients(self) -> RequestState:
        mode = InputMode.INGREDIENTS
        text = self.controller.text
        try:
            if self.controller.mode is not InputMode.INGREDIENTS:
                raise InactiveModeError("Switch to ingredients mode to generate a recipe from ingredients")
            if not text.strip():
                raise EmptyInputError("Please enter ingredients to generate a recipe")
        except InputValidationError as e:
            return self._refuse(mode, e)

        request = IngredientsRequest(
            raw_text=text,
            servings=self.servings.value,
            humidity_adjust=self.controller.humidity_adjust,
            pro_mode=self.controller.pro_mode,
        )

        async def _call() -> str:
            response = await self.client.convert_recipe(request)
            return response.converted_recipe

        return await self._dispatch(mode, _call)

    async def submit_photo(self) -> RequestState:
        mode = InputMode.PHOTO
        preview = self.images.preview
        if preview is None:
            return self._refuse(mode, MissingImageError("Please upload an image containing a recipe"))

        request = PhotoRequest(image_data=preview)

        async def _call() -> str:
            envelope = await self.client.photo_to_recipe(request)
            return unwrap_envelope(envelope, MODE_MESSAGES[mode].logical_fallback)

        return await self._dispatch(mode, _call)

    async def submit_dish(self) -> RequestState:
        mode = InputMode.DISH
        text = self.controller.text
        if not text.strip():
            return self._refuse(mode, EmptyInputError("Please enter a dish name to generate a recipe"))

        request = DishRequest(
            dish_name=text,
            cuisine=self.controller.cuisine,
            dietary=self.controller.dietary,
        )

        async def _call() -> str:
            envelope = await self.client.recipe_by_dish(request)
            return unwrap_envelope(envelope, MODE_MESSAGES[mode].logical_fallback)

        return await self._dispatch(mode, _call)

    async def _dispatch(self, mode: InputMode, call: Callable[[], Awaitable[str]]) -> RequestState:
        messages = MODE_MESSAGES[mode]
        self._latest_ticket += 1
        ticket = self._latest_ticket
        log_extra = {"mode": mode.value, "request_id": f"{mode.value}-{ticket}"}

        self._transition(mode, RequestState.pending())
        logger.info("Request dispatched", extra=log_extra)

        try:
            text = await call()
        except ServiceLogicalError as e:
            return self._fail(mode, messages.logical_title, str(e) or messages.logical_fallback, log_extra)
        except TransportError as e:
            return self._fail(mode, messages.transport_title, str(e) or messages.transport_fallback, log_extra)
        except Exception as e:
            logger.error(f"Unexpected failure: {e}", exc_info=True, extra=log_extra)
            return self._fail(mode, messages.transport_title, str(e) or messages.transport_fallback, log_extra)

        state = self._transition(mode, RequestState.succeeded(text))
        if self.discard_stale and ticket != self._latest_ticket:
            logger.info("Response superseded by a newer request, result not displayed", extra=log_extra)
        else:
            self.presenter.show(text, mode)
        logger.info(f"Request succeeded ({len(text)} chars)", extra=log_extra)
        self.notifier.notify(Notification(title=messages.success_title, description=messages.success_description))
        return state

    def _fail(self, mode: InputMode, title: str, message: str, log_extra: dict) -> RequestState:
        logger.warning(f"{title}: {message}", extra=log_extra)
        state = self._transition(mode, RequestState.failed(message))
        self.notifier.notify(Notification(title=title, description=message, severity=Severity.DESTRUCTIVE))
        return state

    def _refuse(self, mode: InputMode, error: InputValidationError) -> RequestState:
        logger.warning(f"Refused: {error}", extra={"mode": mode.value})
        self.notifier.notify(Notification(title=error.title, description=str(error), severity=Severity.DESTRUCTIVE))
        return self._states[mode]

    def _transition(self, mode: InputMode, state: RequestState) -> RequestState:
        self._states[mode] = state
        if self.on_change is not None:
            self.on_change(mode, state)
        return state
