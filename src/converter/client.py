"""HTTP client for the recipe generation service.

All three operations POST a JSON body and parse a JSON response. Transport
problems (connection errors, timeouts, non-2xx statuses, bodies that are not
the expected JSON) are raised as TransportError. Envelope-level failures
(`success: false`) are returned as-is; interpreting them is the dispatcher's job.
"""

import asyncio
from typing import Any, Optional, Type, TypeVar

import aiohttp
from pydantic import BaseModel, ValidationError

from src.converter.errors import TransportError
from src.models.models import (
    ConvertRecipeResponse,
    DishRequest,
    IngredientsRequest,
    PhotoRequest,
    RecipeEnvelope,
)
from src.utils.config import config
from src.utils.logger import logger

CONVERT_RECIPE_PATH = "/api/convert-recipe"
PHOTO_TO_RECIPE_PATH = "/api/photo-to-recipe"
RECIPE_BY_DISH_PATH = "/api/recipe-by-dish"

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class RecipeServiceClient:
    """Async client for the three generation endpoints.

    A session can be injected (and is then owned by the caller); otherwise a
    short-lived session is opened per call.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self.base_url = (base_url or config.RECIPE_API_BASE_URL).rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout_s or config.REQUEST_TIMEOUT_S)
        self.session = session

    async def convert_recipe(self, request: IngredientsRequest) -> ConvertRecipeResponse:
        return await self._post(CONVERT_RECIPE_PATH, request.to_payload(), ConvertRecipeResponse)

    async def photo_to_recipe(self, request: PhotoRequest) -> RecipeEnvelope:
        return await self._post(PHOTO_TO_RECIPE_PATH, request.to_payload(), RecipeEnvelope)

    async def recipe_by_dish(self, request: DishRequest) -> RecipeEnvelope:
        return await self._post(RECIPE_BY_DISH_PATH, request.to_payload(), RecipeEnvelope)

    async def _post(self, path: str, payload: dict, response_model: Type[ResponseT]) -> ResponseT:
        url = f"{self.base_url}{path}"
        logger.debug(f"POST {url}")

        if self.session is not None:
            body = await self._send(self.session, url, payload)
        else:
            async with aiohttp.ClientSession() as session:
                body = await self._send(session, url, payload)

        try:
            return response_model.model_validate(body)
        except ValidationError as e:
            logger.warning(f"Unexpected response from {path}: {e.error_count()} validation error(s)")
            raise TransportError(f"Unexpected response from recipe service ({path})") from e

    async def _send(self, session: aiohttp.ClientSession, url: str, payload: dict) -> Any:
        try:
            async with session.post(url, json=payload, timeout=self.timeout) as response:
                if response.status >= 400:
                    text = await response.text()
                    raise TransportError(f"{response.status}: {text or response.reason}", status=response.status)
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise TransportError(f"Invalid JSON from recipe service ({response.status})") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {url} timed out") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Could not reach recipe service: {e}") from e
