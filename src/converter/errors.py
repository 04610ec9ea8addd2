"""Exception hierarchy for the recipe converter.

Input validation errors never reach the network: the component that detects
them reports them to the notification sink using the class `title` and the
exception message as description. Transport and service errors settle the
request slot of the modality that raised them.
"""


class ConverterError(Exception):
    """Base class for all converter errors."""


class InputValidationError(ConverterError):
    """User input rejected locally."""

    title = "Invalid Input"


class EmptyInputError(InputValidationError):
    title = "Input Required"


class InactiveModeError(InputValidationError):
    title = "Wrong Input Mode"


class MissingImageError(InputValidationError):
    title = "No Image Selected"


class InvalidServingsError(InputValidationError):
    title = "Invalid Number"


class InvalidFileTypeError(InputValidationError):
    title = "Invalid File Type"


class ImageTooLargeError(InputValidationError):
    title = "Image Too Large"


class FileReadError(InputValidationError):
    title = "Upload Failed"


class TransportError(ConverterError):
    """Network failure, timeout, non-2xx status or unreadable body."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ServiceLogicalError(ConverterError):
    """Service answered 2xx but reported `success: false`."""
