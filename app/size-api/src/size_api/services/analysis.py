from size_analyzer import AnalysisResult, analyze_transcript
from size_analyzer.config import settings as analyzer_settings


async def run_analysis(
    transcript: str,
    threshold: int | None = None,
    capacity: int | None = None,
    required_free: int | None = None,
) -> AnalysisResult:
    overrides = {
        key: value
        for key, value in {
            "threshold": threshold,
            "capacity": capacity,
            "required_free": required_free,
        }.items()
        if value is not None
    }
    return analyze_transcript(transcript, analyzer_settings.model_copy(update=overrides))
