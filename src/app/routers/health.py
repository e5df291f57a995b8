from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from app.shared import load_config

router = APIRouter(tags=["Health"])

config = load_config()


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    version: str


@router.get("/health", summary="Liveness check")
async def health() -> HealthResponse:
    return HealthResponse(
        status="UP",
        timestamp=datetime.now(UTC).isoformat(),
        version=config.api.version,
    )
