"""Display of the latest recipe and the copy-to-clipboard acknowledgement."""

import asyncio
import html
from typing import Optional

from src.converter.capabilities import Clipboard, Notifier
from src.models.models import ConvertedResult, InputMode, Notification, Severity
from src.utils.config import config
from src.utils.errors import safe_execute_async
from src.utils.logger import logger

CONVERTED_RECIPE_MARKER = "# Converted Recipe"


class ResultPresenter:
    """Holds the single most recent successful result.

    Every success in any modality replaces it; errors never clear it.
    """

    def __init__(self, notifier: Notifier, clipboard: Optional[Clipboard] = None, copy_ack_ms: Optional[int] = None) -> None:
        self.notifier = notifier
        self.clipboard = clipboard
        self.copy_ack_seconds = (copy_ack_ms or config.COPY_ACK_MS) / 1000
        self.copied = False
        self._result: Optional[ConvertedResult] = None
        self._revert_handle: Optional[asyncio.TimerHandle] = None

    @property
    def result(self) -> Optional[ConvertedResult]:
        return self._result

    def show(self, text: str, mode: InputMode) -> None:
        self._result = ConvertedResult(text=text, mode=mode)

    @property
    def heading(self) -> Optional[str]:
        """Title shown above the result, chosen by the modality that produced it."""
        if self._result is None:
            return None
        if self._result.mode is InputMode.INGREDIENTS:
            if CONVERTED_RECIPE_MARKER in self._result.text:
                return "Converted Recipe"
            return "Generated Recipe from Ingredients"
        if self._result.mode is InputMode.PHOTO:
            return "Extracted Recipe"
        return "Generated Recipe by Dish Name"

    def render_html(self) -> str:
        """Result as HTML: text is escaped, newlines become <br>, nothing else is interpreted."""
        if self._result is None:
            return ""
        return html.escape(self._result.text).replace("\n", "<br>")

    async def copy(self) -> bool:
        """Copy the result verbatim and raise the acknowledgement for COPY_ACK_MS.

        A new copy supersedes the pending revert of the previous one.
        """
        if not self._result or not self._result.text:
            return False
        if self.clipboard is None:
            logger.warning("No clipboard available")
            return False

        text = self._result.text

        async def _write() -> bool:
            await self.clipboard.write_text(text)
            return True

        if not await safe_execute_async(_write(), "Clipboard write", default_return=False):
            self.notifier.notify(
                Notification(
                    title="Copy Failed",
                    description="Could not copy the recipe to your clipboard",
                    severity=Severity.DESTRUCTIVE,
                )
            )
            return False

        if self._revert_handle is not None:
            self._revert_handle.cancel()
        self.copied = True
        self._revert_handle = asyncio.get_running_loop().call_later(self.copy_ack_seconds, self._revert_copied)

        self.notifier.notify(
            Notification(
                title="Copied to clipboard",
                description="The converted recipe has been copied to your clipboard",
            )
        )
        return True

    def _revert_copied(self) -> None:
        self.copied = False
        self._revert_handle = None
