import logging
from typing import List

from .node import ROOT, DirectoryRecord, Filesystem, join_path

logger = logging.getLogger(__name__)


def resolve_sizes(filesystem: Filesystem) -> Filesystem:
    """Resolve the total size of every directory reachable from the root.

    Walks the arena with an explicit stack in post-order: a directory with
    unresolved sub-directories is pushed back underneath them and revisited
    once they are done. Each size is written exactly once, so calling this
    again on a resolved filesystem changes nothing.
    """
    stack: List[str] = [ROOT]
    visited: set[str] = set()
    resolved = 0

    while stack:
        path = stack.pop()
        record = filesystem.get(path)
        if record is None or record.is_resolved:
            visited.add(path)
            continue

        pending = _pending_children(filesystem, record, visited)
        if pending:
            stack.append(path)
            stack.extend(pending)
            continue

        record.size = _total(filesystem, record)
        visited.add(path)
        resolved += 1
        logger.debug("Resolved %s = %d", path, record.size)

    unreachable = [r.path for r in filesystem if not r.is_resolved]
    if unreachable:
        logger.warning(
            "%d listed directories are not reachable from %s: %s",
            len(unreachable), ROOT, ", ".join(unreachable),
        )
    logger.info("Resolved %d directory sizes", resolved)
    return filesystem


def _pending_children(
    filesystem: Filesystem, record: DirectoryRecord, visited: set[str]
) -> List[str]:
    pending = []
    for name in record.subdir_names():
        child_path = join_path(record.path, name)
        child = filesystem.get(child_path)
        if child is not None and not child.is_resolved and child_path not in visited:
            pending.append(child_path)
    return pending


def _total(filesystem: Filesystem, record: DirectoryRecord) -> int:
    total = sum(f.size for f in record.files())
    # A directory declared twice in one listing is still one directory.
    for name in record.subdir_names():
        child_path = join_path(record.path, name)
        child = filesystem.get(child_path)
        if child is None:
            logger.warning(
                "Directory %s was declared but never listed; counting it as empty",
                child_path,
            )
            continue
        total += child.size or 0
    return total
