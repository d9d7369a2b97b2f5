import logging

from size_analyzer import AnalysisError, analyze_transcript

logger = logging.getLogger(__name__)

_PROBE = "$ cd /\n$ ls\n1 probe\n"


async def health_check() -> str:
    """Run the analyzer over a one-file transcript."""
    try:
        result = analyze_transcript(_PROBE)
    except AnalysisError as exc:
        logger.error("Analyzer self-check failed: %s", exc)
        return "failing"
    return "ok" if result.total_size == 1 else "failing"
