"""Configuration health check."""

from fastapi import APIRouter

from config import MODEL_LABEL, has_api_key
from schemas.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", hasApiKey=has_api_key(), model=MODEL_LABEL)
