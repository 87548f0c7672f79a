# aiservices/geminiimagegenerationclient.py
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from google import genai
from google.genai import types

from ..config import Settings, get_settings
from ..errors import ImageGenerationError, ImageGenerationErrorKind
from ..utils import to_data_url
from .imagegenerationclient import ImageGenerationClient

logger = logging.getLogger(__name__)

# Output shape is fixed for every request.
ASPECT_RATIO = "1:1"

MISSING_API_KEY_MESSAGE = "API_KEY environment variable is not set."
NO_CANDIDATES_MESSAGE = "No candidates found in the Gemini API response."
NO_IMAGE_DATA_MESSAGE = "No image data found in the response."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred during image generation."


class GeminiImageGenerationClient(ImageGenerationClient):
    """
    Generates images with the Gemini API and returns them as data URLs.

    A fresh ``genai.Client`` is built for every call. When no settings are
    injected the credential is re-read from the environment each time.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: Callable[..., Any] = genai.Client,
    ) -> None:
        self._settings = settings
        self._client_factory = client_factory

    # --- Generation -----------------------------------------------------------

    async def generate(self, prompt: str) -> str:
        try:
            settings = self._settings or get_settings()
            client = self._build_client(settings)
        except ImageGenerationError:
            raise
        except Exception as exc:
            logger.exception("Could not create Gemini client")
            raise self._normalise_error(exc) from exc

        try:
            response = await client.aio.models.generate_content(
                model=settings.image_model_id,
                contents=[types.Content(role="user", parts=[types.Part.from_text(text=prompt)])],
                config=types.GenerateContentConfig(
                    image_config=types.ImageConfig(aspect_ratio=ASPECT_RATIO),
                ),
            )
            return self._extract_data_url(response)
        except Exception as exc:
            logger.exception("Error generating image from Gemini API")
            raise self._normalise_error(exc) from exc
        finally:
            await client.aio.aclose()
            client.close()

    # --- Internals ------------------------------------------------------------

    def _build_client(self, settings: Settings) -> Any:
        if not settings.has_api_key:
            logger.error("Image generation requested without an API key")
            raise ImageGenerationError(MISSING_API_KEY_MESSAGE, ImageGenerationErrorKind.CONFIGURATION)
        return self._client_factory(api_key=settings.api_key.get_secret_value())

    @staticmethod
    def _extract_data_url(response: Any) -> str:
        """Return the first inline image in candidate/part order as a data URL."""
        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            raise ImageGenerationError(NO_CANDIDATES_MESSAGE, ImageGenerationErrorKind.NO_CANDIDATES)

        for candidate in candidates:
            content = getattr(candidate, "content", None)
            for part in getattr(content, "parts", None) or []:
                inline = getattr(part, "inline_data", None)
                if inline is not None and getattr(inline, "data", None):
                    return to_data_url(inline.data, getattr(inline, "mime_type", None))

        raise ImageGenerationError(NO_IMAGE_DATA_MESSAGE, ImageGenerationErrorKind.NO_IMAGE_DATA)

    @staticmethod
    def _normalise_error(exc: Exception) -> ImageGenerationError:
        if isinstance(exc, ImageGenerationError):
            return ImageGenerationError(f"Failed to generate image: {exc.message}", exc.kind)
        text = str(exc).strip()
        if not text:
            return ImageGenerationError(UNKNOWN_ERROR_MESSAGE, ImageGenerationErrorKind.UNKNOWN)
        return ImageGenerationError(f"Failed to generate image: {text}", ImageGenerationErrorKind.SERVICE)


async def generate_image(prompt: str, settings: Optional[Settings] = None) -> str:
    """Generate one image for ``prompt`` and return it as a data URL."""
    return await GeminiImageGenerationClient(settings).generate(prompt)
