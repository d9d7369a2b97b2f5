"""Directory size analysis over cd/ls shell transcripts."""

from size_analyzer.analyze import AnalysisResult, analyze_transcript
from size_analyzer.components.aggregator import resolve_sizes
from size_analyzer.components.builder import TreeBuilder, build_filesystem
from size_analyzer.components.events import Event, EventKind, parse_line, parse_transcript
from size_analyzer.components.node import DirectoryRecord, DirRef, FileNode, Filesystem
from size_analyzer.components.queries import (
    bounded_size_sum,
    directory_sizes,
    min_qualifying_size,
    needed_space,
)
from size_analyzer.errors import AnalysisError, ParseError, QueryError, StructuralError

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "DirRef",
    "DirectoryRecord",
    "Event",
    "EventKind",
    "FileNode",
    "Filesystem",
    "ParseError",
    "QueryError",
    "StructuralError",
    "TreeBuilder",
    "analyze_transcript",
    "bounded_size_sum",
    "build_filesystem",
    "directory_sizes",
    "min_qualifying_size",
    "needed_space",
    "parse_line",
    "parse_transcript",
    "resolve_sizes",
]
