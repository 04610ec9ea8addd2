"""Host capabilities the orchestrator calls but does not own.

The notification sink, file picker and clipboard are injected into the
components that need them. LoggingNotifier is the default sink when the host
does not provide one.
"""

import asyncio
from pathlib import Path
from typing import Awaitable, Callable, Optional, Protocol

from pydantic import BaseModel

from src.models.models import Notification, Severity
from src.utils.logger import logger


class SelectedFile(BaseModel):
    """A file handed over by the picker.

    `content_type` is the type the host declares for the file, which is what
    the upload pipeline validates. Contents are either already in memory
    (`data`) or read lazily from `path`.
    """

    name: str
    content_type: str
    path: Optional[Path] = None
    data: Optional[bytes] = None


FileReader = Callable[[SelectedFile], Awaitable[bytes]]


async def read_file_bytes(file: SelectedFile) -> bytes:
    """Read a selected file's full contents without blocking the event loop."""
    if file.data is not None:
        return file.data
    if file.path is None:
        raise OSError(f"No contents available for {file.name}")
    return await asyncio.to_thread(file.path.read_bytes)


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None: ...


class FilePicker(Protocol):
    async def pick_file(self) -> Optional[SelectedFile]: ...


class Clipboard(Protocol):
    async def write_text(self, text: str) -> None: ...


class LoggingNotifier:
    """Notification sink that writes to the application log."""

    def notify(self, notification: Notification) -> None:
        if notification.severity is Severity.DESTRUCTIVE:
            logger.warning(f"{notification.title}: {notification.description}")
        else:
            logger.info(f"{notification.title}: {notification.description}")
