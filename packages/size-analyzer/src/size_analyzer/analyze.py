"""
SizeAnalyzer - rebuilds a directory tree from a shell transcript and sizes it.

The transcript is a sequence of ``$ cd``/``$ ls`` commands and their output:

    $ cd /
    $ ls
    dir a
    14848514 b.txt

Every listed directory gets a total size (its files plus all of its
sub-directories) and two figures are derived from them:

    part1: sum of the sizes of every sub-directory of at most <threshold> bytes
    part2: size of the smallest directory whose removal leaves <required_free>
           bytes free on a disk of <capacity> bytes

Usage (CLI):
    size-analyzer <transcript> [--threshold N] [--sizes] [--output <file.json>]

Usage (library):
    from size_analyzer.analyze import analyze_transcript
    result = analyze_transcript(open("input.txt").read())
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict

from pydantic import BaseModel, Field

from size_analyzer.components.aggregator import resolve_sizes
from size_analyzer.components.builder import build_filesystem
from size_analyzer.components.queries import (
    bounded_size_sum,
    directory_sizes,
    min_qualifying_size,
    needed_space,
)
from size_analyzer.config import LOG_LEVELS, AnalyzerSettings, settings as default_settings
from size_analyzer.errors import AnalysisError

logger = logging.getLogger(__name__)


class AnalysisResult(BaseModel):
    total_size: int
    bounded_size_sum: int
    needed_space: int
    min_qualifying_size: int
    directories: Dict[str, int] = Field(default_factory=dict)


def analyze_transcript(
    transcript: str, settings: AnalyzerSettings | None = None
) -> AnalysisResult:
    """Run parse, build, aggregate and both queries over *transcript*."""
    settings = settings or default_settings

    filesystem = resolve_sizes(build_filesystem(transcript))
    result = AnalysisResult(
        total_size=filesystem.root.size,
        bounded_size_sum=bounded_size_sum(filesystem, settings.threshold),
        needed_space=needed_space(filesystem, settings.capacity, settings.required_free),
        min_qualifying_size=min_qualifying_size(
            filesystem, settings.capacity, settings.required_free
        ),
        directories=directory_sizes(filesystem),
    )
    logger.info(
        "Analyzed %d directories, total size %d", len(result.directories), result.total_size
    )
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rebuild a directory tree from a cd/ls transcript and report sizes."
    )
    parser.add_argument("transcript", help="Transcript file to analyze")
    parser.add_argument("--threshold", type=int, help="Upper bound for the part1 sum")
    parser.add_argument("--capacity", type=int, help="Total disk capacity in bytes")
    parser.add_argument("--required-free", type=int, help="Free space required in bytes")
    parser.add_argument(
        "--sizes",
        action="store_true",
        help="Print the full result, including every directory size, as JSON",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write JSON output to FILE instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {
        key: value
        for key, value in {
            "threshold": args.threshold,
            "capacity": args.capacity,
            "required_free": args.required_free,
            "log_level": args.log_level,
        }.items()
        if value is not None
    }
    settings = default_settings.model_copy(update=overrides)
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        transcript = Path(args.transcript).read_text(encoding="utf-8")
        result = analyze_transcript(transcript, settings)
    except OSError as exc:
        logger.error("Cannot read transcript %s: %s", args.transcript, exc)
        return 1
    except AnalysisError as exc:
        logger.error("Analysis failed: %s", exc)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(json.dumps(result.model_dump(), indent=2))
        print(f"Result written to {args.output} ({len(result.directories)} directories)")
    elif args.sizes:
        print(json.dumps(result.model_dump(), indent=2))
    else:
        print(f"part1: {result.bounded_size_sum}")
        print(f"part2: {result.min_qualifying_size}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
