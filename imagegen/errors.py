"""Error type raised by the image generation clients."""

from __future__ import annotations

from enum import Enum


class ImageGenerationErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    NO_CANDIDATES = "no_candidates"
    NO_IMAGE_DATA = "no_image_data"
    SERVICE = "service"
    UNKNOWN = "unknown"


class ImageGenerationError(RuntimeError):
    """Raised for every failed image generation attempt.

    ``kind`` lets callers branch on the failure category without matching
    on ``message``.
    """

    def __init__(self, message: str, kind: ImageGenerationErrorKind = ImageGenerationErrorKind.UNKNOWN) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __repr__(self) -> str:
        return f"ImageGenerationError({self.message!r}, kind={self.kind.value!r})"
