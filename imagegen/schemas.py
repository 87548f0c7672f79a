"""Pydantic models shared by the FastAPI endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ImageRequest(BaseModel):
    prompt: str = Field(..., description="Text prompt for image generation")


class ImageResponse(BaseModel):
    image: str = Field(..., description="Generated image as a base64 data URL")


class HealthResponse(BaseModel):
    status: str
    imageModel: Optional[str] = Field(None, description="Gemini model used for image generation")
    configured: bool = Field(..., description="Whether an API key is available")
