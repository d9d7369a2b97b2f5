from fastapi import APIRouter
from pydantic import BaseModel
from size_api.services import health as healthService


router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    analyzer: str


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return API liveness and the result of an analyzer self-check."""
    return HealthResponse(status="ok", analyzer=await healthService.health_check())
