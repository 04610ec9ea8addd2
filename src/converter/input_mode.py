"""Active input modality and the form fields shared between modes."""

from typing import Union

from src.models.models import CuisineTag, DietaryTag, InputMode
from src.utils.logger import logger


class InputModeController:
    """Owns which modality is active plus the shared text field.

    The text is shared by ingredients and dish mode. Switching modes keeps
    whatever was typed; only set_text() changes it.
    """

    def __init__(self, mode: InputMode = InputMode.INGREDIENTS) -> None:
        self._mode = mode
        self._text = ""
        self._cuisine = CuisineTag.ANY
        self._dietary = DietaryTag.NONE
        self._humidity_adjust = False
        self._pro_mode = False

    @property
    def mode(self) -> InputMode:
        return self._mode

    @property
    def text(self) -> str:
        return self._text

    @property
    def cuisine(self) -> CuisineTag:
        return self._cuisine

    @property
    def dietary(self) -> DietaryTag:
        return self._dietary

    @property
    def humidity_adjust(self) -> bool:
        return self._humidity_adjust

    @property
    def pro_mode(self) -> bool:
        return self._pro_mode

    def set_mode(self, mode: Union[InputMode, str]) -> None:
        mode = InputMode(mode)
        if mode is not self._mode:
            logger.debug(f"Input mode {self._mode.value} -> {mode.value}")
        self._mode = mode

    def set_text(self, text: str) -> None:
        self._text = text

    def set_cuisine(self, cuisine: Union[CuisineTag, str]) -> None:
        self._cuisine = CuisineTag(cuisine)

    def set_dietary(self, dietary: Union[DietaryTag, str]) -> None:
        self._dietary = DietaryTag(dietary)

    def set_humidity_adjust(self, enabled: bool) -> None:
        self._humidity_adjust = bool(enabled)

    def set_pro_mode(self, enabled: bool) -> None:
        self._pro_mode = bool(enabled)
