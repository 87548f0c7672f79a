"""FastAPI entry point exposing the image generation REST API."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .schemas import HealthResponse, ImageRequest, ImageResponse
from .service import ImageService, get_imagegen_service

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


APP_IMPORT_PATH = "imagegen.main:app"

app = FastAPI(title="Image Generation Backend", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse, summary="Health Check Endpoint")
async def healthcheck():
    settings = get_settings()
    return HealthResponse(
        status="ok",
        imageModel=settings.image_model_id,
        configured=settings.has_api_key,
    )


@app.post(
    "/generate-image",
    response_model=ImageResponse,
    summary="Generate an image from a text prompt",
)
async def generate_image(
    payload: ImageRequest,
    service: ImageService = Depends(get_imagegen_service),
):
    image = await service.generate_image(payload.prompt)
    return ImageResponse(image=image)


if __name__ == "__main__":  # pragma: no cover - convenience entry point
    import uvicorn

    uvicorn.run(APP_IMPORT_PATH, host="0.0.0.0", port=8000, reload=True)
