"""Domain logic for turning image requests into Gemini calls."""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import HTTPException, status

from .aiservices.geminiimagegenerationclient import GeminiImageGenerationClient
from .aiservices.imagegenerationclient import ImageGenerationClient
from .config import Settings
from .errors import ImageGenerationError, ImageGenerationErrorKind

logger = logging.getLogger(__name__)


class ImageService:
    """High-level orchestrator for the image generation client."""

    def __init__(
        self,
        settings: Settings | None = None,
        image_client: ImageGenerationClient | None = None,
    ) -> None:
        self.settings = settings
        self._image_client = image_client or GeminiImageGenerationClient(settings)

    # ------------------------------------------------------------------
    # Image Generation
    # ------------------------------------------------------------------
    async def generate_image(self, prompt: str) -> str:
        """Generate a single image from a text prompt and return it as a data URL."""
        if not prompt.strip():
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Prompt must not be empty",
            )

        try:
            return await self._image_client.generate(prompt)
        except ImageGenerationError as exc:
            if exc.kind is ImageGenerationErrorKind.CONFIGURATION:
                raise HTTPException(
                    status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                    detail=exc.message,
                ) from exc
            logger.warning("Image generation failed (%s) for prompt '%s'", exc.kind.value, prompt)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=exc.message,
            ) from exc


@lru_cache
def get_imagegen_service() -> ImageService:
    # Settings stay unbound so the credential is looked up on every request.
    return ImageService()
