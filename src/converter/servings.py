"""Serving count selection: fixed presets or an explicitly applied custom value."""

from enum import Enum
from typing import Optional, Union

from src.converter.capabilities import Notifier
from src.converter.errors import InvalidServingsError
from src.models.models import Notification, Severity
from src.utils.config import PRESET_SERVINGS, config
from src.utils.logger import logger


class ServingsSelection(str, Enum):
    PRESET = "preset"
    CUSTOM = "custom"


def parse_servings(draft: Union[str, int]) -> int:
    """Parse a custom servings draft as a strictly positive integer.

    Raises:
        InvalidServingsError: For non-numeric, fractional or non-positive drafts.
    """
    if isinstance(draft, bool):
        raise InvalidServingsError("Please enter a positive number")
    try:
        value = int(str(draft).strip())
    except ValueError:
        raise InvalidServingsError("Please enter a positive number") from None
    if value <= 0:
        raise InvalidServingsError("Please enter a positive number")
    return value


def resolve(selection: ServingsSelection, preset_value: int, custom_draft: Union[str, int]) -> int:
    """Resolve a selection into a single servings count."""
    if ServingsSelection(selection) is ServingsSelection.PRESET:
        return preset_value
    return parse_servings(custom_draft)


class ServingsResolver:
    """Tracks the committed servings value.

    A custom draft is never live: `value` only changes on select_preset() or a
    successful apply().
    """

    def __init__(self, notifier: Notifier, initial: Optional[int] = None) -> None:
        if initial is None:
            initial = config.DEFAULT_SERVINGS
        elif isinstance(initial, bool) or not isinstance(initial, int) or initial <= 0:
            raise ValueError(f"Initial servings must be a positive integer, got {initial!r}")
        self.notifier = notifier
        self._value = initial
        self.selection = ServingsSelection.PRESET
        self.draft = ""

    @property
    def value(self) -> int:
        return self._value

    def select_preset(self, servings: int) -> None:
        if servings not in PRESET_SERVINGS:
            raise ValueError(f"{servings} is not a preset, expected one of {PRESET_SERVINGS}")
        self.selection = ServingsSelection.PRESET
        self._value = servings

    def select_custom(self) -> None:
        self.selection = ServingsSelection.CUSTOM

    def set_draft(self, draft: Union[str, int]) -> None:
        self.draft = str(draft)

    def apply(self) -> Optional[int]:
        """Commit the custom draft.

        Returns:
            The new committed value, or None if the draft was rejected (the
            previous value stays in force).
        """
        try:
            servings = resolve(ServingsSelection.CUSTOM, self._value, self.draft)
        except InvalidServingsError as e:
            logger.warning(f"Rejected servings draft {self.draft!r}")
            self.notifier.notify(Notification(title=e.title, description=str(e), severity=Severity.DESTRUCTIVE))
            return None

        self._value = servings
        self.selection = ServingsSelection.PRESET
        logger.info(f"Servings set to {servings}")
        self.notifier.notify(
            Notification(title="Servings Applied", description=f"Recipe will be generated for {servings} people")
        )
        return servings
