"""Client-side image ingestion: select -> validate type -> read -> encode -> preview.

Nothing here touches the network. The file read is the only suspension
point; every accepted selection gets a generation number and a read result is
applied only if its generation is still the latest, so replacing a file while
the previous one is still loading never resurrects the old image.
"""

import base64
from typing import Optional

import filetype

from src.converter.capabilities import FilePicker, FileReader, Notifier, SelectedFile, read_file_bytes
from src.converter.errors import FileReadError, ImageTooLargeError, InputValidationError, InvalidFileTypeError
from src.models.models import Notification, Severity
from src.utils.config import config
from src.utils.errors import safe_execute_async
from src.utils.logger import logger

ALLOWED_CONTENT_TYPES = ("image/jpeg", "image/png", "image/jpg")


def validate_file_type(content_type: str) -> None:
    """Reject any declared type other than JPEG/PNG.

    Raises:
        InvalidFileTypeError: If the type is not accepted.
    """
    if (content_type or "").lower() not in ALLOWED_CONTENT_TYPES:
        raise InvalidFileTypeError("Please upload a JPG or PNG image")


def validate_image_size(image_bytes: bytes, max_size_mb: int) -> None:
    """Check raw byte length against the upload limit.

    Raises:
        ImageTooLargeError: If the image exceeds max_size_mb.
    """
    size_mb = len(image_bytes) / (1024 * 1024)
    if size_mb > max_size_mb:
        raise ImageTooLargeError(f"Image is {size_mb:.1f}MB, the limit is {max_size_mb}MB")


def guess_content_type(image_bytes: bytes) -> Optional[str]:
    """Detect the media type from magic bytes (None if unknown)."""
    kind = filetype.guess(image_bytes)
    return kind.mime if kind is not None else None


def to_data_url(image_bytes: bytes, content_type: str) -> str:
    """Encode raw bytes as a base64 data URL."""
    mime = content_type.lower()
    if mime == "image/jpg":
        mime = "image/jpeg"
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime};base64,{encoded}"


class ImagePipeline:
    """Holds the preview image for photo mode."""

    def __init__(
        self,
        notifier: Notifier,
        file_picker: Optional[FilePicker] = None,
        reader: FileReader = read_file_bytes,
        max_image_size_mb: Optional[int] = None,
    ) -> None:
        self.notifier = notifier
        self.file_picker = file_picker
        self.reader = reader
        self.max_image_size_mb = max_image_size_mb or config.MAX_IMAGE_SIZE_MB
        self._preview: Optional[str] = None
        self._generation = 0

    @property
    def preview(self) -> Optional[str]:
        """Data URL of the current image, or None while showing the upload prompt."""
        return self._preview

    @property
    def has_preview(self) -> bool:
        return self._preview is not None

    async def select_file(self, file: SelectedFile) -> Optional[str]:
        """Validate, read and encode a selected file.

        Returns:
            The new preview if this selection's read completed and it is still
            the latest selection, otherwise None.
        """
        try:
            validate_file_type(file.content_type)
        except InvalidFileTypeError as e:
            self._report(e)
            return None

        self._generation += 1
        generation = self._generation
        logger.debug(f"Reading {file.name} ({file.content_type}), selection #{generation}")

        image_bytes = await safe_execute_async(self.reader(file), f"Read {file.name}", default_return=None)

        if generation != self._generation:
            logger.debug(f"Discarding read of {file.name}: selection #{generation} was superseded")
            return None

        try:
            if image_bytes is None:
                raise FileReadError(f"Could not read {file.name}")
            validate_image_size(image_bytes, self.max_image_size_mb)
        except InputValidationError as e:
            self._report(e)
            return None

        self._preview = to_data_url(image_bytes, file.content_type)
        logger.info(f"Loaded image {file.name} ({len(self._preview) / 1024:.1f} KB encoded)")
        return self._preview

    def clear_preview(self) -> None:
        """Drop the current image and any read still in flight."""
        self._generation += 1
        self._preview = None

    async def trigger_selection(self) -> Optional[str]:
        """Ask the host file picker for a file and ingest it."""
        if self.file_picker is None:
            logger.warning("No file picker available")
            return None
        file = await self.file_picker.pick_file()
        if file is None:
            return None
        return await self.select_file(file)

    def _report(self, error: InputValidationError) -> None:
        logger.warning(f"Image rejected: {error}")
        self.notifier.notify(
            Notification(title=error.title, description=str(error), severity=Severity.DESTRUCTIVE)
        )
