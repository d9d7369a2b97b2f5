import logging
from typing import Iterable, List

from .events import PARENT, Event, EventKind, parse_transcript
from .node import ROOT, DirectoryRecord, DirRef, FileNode, Filesystem, path_from_stack
from size_analyzer.errors import StructuralError

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Replays transcript events into a :class:`Filesystem`.

    The builder tracks the current directory as a stack of path components
    below the root. Entries are only accepted for a directory once it has
    been listed, and each directory may be listed a single time.
    """

    def __init__(self) -> None:
        self.filesystem = Filesystem()
        self._stack: List[str] = []

    @property
    def cwd(self) -> str:
        return path_from_stack(self._stack)

    def feed(self, event: Event) -> None:
        if event.kind == EventKind.CHDIR:
            self._change_directory(event)
        elif event.kind == EventKind.LIST:
            self._list(event)
        elif event.kind == EventKind.DIRECTORY:
            self._current_listing(event).entries.append(DirRef(name=event.name))
        elif event.kind == EventKind.FILE:
            self._current_listing(event).entries.append(
                FileNode(name=event.name, size=event.size)
            )

    def feed_all(self, events: Iterable[Event]) -> Filesystem:
        count = 0
        for event in events:
            self.feed(event)
            count += 1
        logger.info(
            "Replayed %d events into %d directories", count, len(self.filesystem)
        )
        return self.filesystem

    # ------------------------------------------------------------------ events

    def _change_directory(self, event: Event) -> None:
        if event.target == ROOT:
            self._stack.clear()
        elif event.target == PARENT:
            if not self._stack:
                raise StructuralError(
                    f"Cannot leave the root directory ({_where(event)})", path=ROOT
                )
            self._stack.pop()
        else:
            self._stack.append(event.target)
        logger.debug("cd %s -> %s", event.target, self.cwd)

    def _list(self, event: Event) -> None:
        path = self.cwd
        if self.filesystem.is_listed(path):
            raise StructuralError(
                f"Directory {path} listed more than once ({_where(event)})", path=path
            )
        self.filesystem.add_listing(path)

    def _current_listing(self, event: Event) -> DirectoryRecord:
        path = self.cwd
        if not self.filesystem.is_listed(path):
            raise StructuralError(
                f"Entry {event.name!r} appears before {path} was listed ({_where(event)})",
                path=path,
            )
        return self.filesystem.get(path)


def _where(event: Event) -> str:
    if event.line_number is None:
        return "unknown line"
    return f"line {event.line_number}"


def build_filesystem(transcript: str | Iterable[Event]) -> Filesystem:
    """Build the directory arena from transcript text or parsed events."""
    events = parse_transcript(transcript) if isinstance(transcript, str) else transcript
    return TreeBuilder().feed_all(events)
