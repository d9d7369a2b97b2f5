import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from size_analyzer import AnalysisError, AnalysisResult
from size_api.services import analysis as analysisService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analysis", tags=["analysis"])


# ── Schemas ───────────────────────────────────────────────────────────────────

class AnalysisRequest(BaseModel):
    transcript: str
    threshold: int | None = Field(default=None, ge=0)
    capacity: int | None = Field(default=None, ge=0)
    required_free: int | None = Field(default=None, ge=0)


# ── Routes ────────────────────────────────────────────────────────────────────

@router.post("", response_model=AnalysisResult)
async def analyze(body: AnalysisRequest) -> AnalysisResult:
    """Rebuild the tree described by a transcript and answer both size queries."""
    try:
        return await analysisService.run_analysis(
            transcript=body.transcript,
            threshold=body.threshold,
            capacity=body.capacity,
            required_free=body.required_free,
        )
    except AnalysisError as exc:
        logger.error("Rejected transcript: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
