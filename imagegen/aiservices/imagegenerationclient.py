from __future__ import annotations

from abc import ABC, abstractmethod


class ImageGenerationClient(ABC):
    """Abstract interface for an image generation client.

    Implementations must provide an asynchronous generation method
    returning the image as a ``data:`` URL.
    """

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Generate an image from a prompt."""
