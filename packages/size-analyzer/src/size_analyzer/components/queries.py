import logging
from typing import Dict

from .node import Filesystem
from size_analyzer.errors import QueryError

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 100_000
DEFAULT_CAPACITY = 70_000_000
DEFAULT_REQUIRED_FREE = 30_000_000


def _root_size(filesystem: Filesystem) -> int:
    size = filesystem.root.size
    if size is None:
        raise QueryError("Directory sizes have not been resolved")
    return size


def bounded_size_sum(filesystem: Filesystem, threshold: int = DEFAULT_THRESHOLD) -> int:
    """Sum the sizes of all sub-directories whose size is at most *threshold*.

    The root is never counted since it is nobody's sub-directory. Nested
    directories are counted on their own even when an ancestor also
    qualifies.
    """
    _root_size(filesystem)
    return sum(
        record.size
        for record in filesystem
        if record.parent is not None and record.is_resolved and record.size <= threshold
    )


def needed_space(
    filesystem: Filesystem,
    capacity: int = DEFAULT_CAPACITY,
    required_free: int = DEFAULT_REQUIRED_FREE,
) -> int:
    """Bytes that must be freed to reach *required_free* on a *capacity* disk."""
    return required_free - (capacity - _root_size(filesystem))


def min_qualifying_size(
    filesystem: Filesystem,
    capacity: int = DEFAULT_CAPACITY,
    required_free: int = DEFAULT_REQUIRED_FREE,
) -> int:
    """Smallest directory size that would free enough space if deleted.

    Raises:
        QueryError: if no directory, the root included, is large enough.
    """
    needed = needed_space(filesystem, capacity, required_free)
    # The root is a candidate too, so deleting everything always qualifies
    # when required_free <= capacity.
    candidates = [r.size for r in filesystem if r.is_resolved and r.size >= needed]
    if not candidates:
        raise QueryError(f"No directory frees at least {needed} bytes")
    smallest = min(candidates)
    logger.debug("Need %d bytes, smallest qualifying directory has %d", needed, smallest)
    return smallest


def directory_sizes(filesystem: Filesystem) -> Dict[str, int]:
    """Map every resolved directory path to its size, ordered by path."""
    return {
        record.path: record.size
        for record in sorted(filesystem, key=lambda r: r.path)
        if record.is_resolved
    }
