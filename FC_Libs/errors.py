"""
Error types for Film Camera.

Filter and codec errors are local to the image-processing layer and are
converted by the capture pipeline into a single ``CaptureError`` with kind
``filter_failed``. Persistence failures surface as ``PersistError``.
"""


class FilmCameraError(Exception):
    """Base class for all Film Camera errors."""


class DecodeError(FilmCameraError):
    """Raised when bytes are not a supported image format or are truncated."""


class InvalidImage(FilmCameraError):
    """Raised when an image is not usable (zero dimension, wrong type, corrupt)."""


class PersistError(FilmCameraError):
    """Raised when a durable write (path store or image file) fails."""


class CaptureErrorKind:
    SOURCE_UNAVAILABLE = "source_unavailable"
    FILTER_FAILED = "filter_failed"
    BUSY = "busy"


class CaptureError(FilmCameraError):
    """
    Raised when a capture is abandoned.

    Attributes:
        kind: One of the CaptureErrorKind values
    """

    def __init__(self, kind: str, message: str = "") -> None:
        self.kind = kind
        super().__init__(message or kind)

    @classmethod
    def source_unavailable(cls, message: str = "") -> "CaptureError":
        return cls(CaptureErrorKind.SOURCE_UNAVAILABLE, message or "Capture source unavailable")

    @classmethod
    def filter_failed(cls, message: str = "") -> "CaptureError":
        return cls(CaptureErrorKind.FILTER_FAILED, message or "Filter processing failed")

    @classmethod
    def busy(cls, message: str = "") -> "CaptureError":
        return cls(CaptureErrorKind.BUSY, message or "A capture is already in progress")
