"""Exceptions raised while analyzing a transcript.

Every error is fatal for the run it occurs in: the analyzer produces no
partial results once one of these is raised.
"""


class AnalysisError(Exception):
    """Base class for all analyzer failures."""


class ParseError(AnalysisError):
    """A transcript line does not match any known command or entry shape."""

    def __init__(self, line: str, line_number: int | None = None) -> None:
        self.line = line
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"Unrecognised transcript {where}: {line!r}")


class StructuralError(AnalysisError):
    """The transcript describes an impossible navigation or listing."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class QueryError(AnalysisError):
    """A query cannot be answered over the given filesystem."""
