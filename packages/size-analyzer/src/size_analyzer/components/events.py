import logging
import re
from enum import StrEnum
from typing import List

from pydantic import BaseModel, ConfigDict

from size_analyzer.errors import ParseError

logger = logging.getLogger(__name__)

# Names are single tokens with no path separator.
_NAME = r"[^\s/]+"

_CHDIR = re.compile(rf"^\$ cd (?P<target>/|\.\.|{_NAME})$")
_LIST = re.compile(r"^\$ ls$")
_DIRECTORY = re.compile(rf"^dir (?P<name>{_NAME})$")
_FILE = re.compile(rf"^(?P<size>\d+) (?P<name>{_NAME})$")

PARENT = ".."


class EventKind(StrEnum):
    CHDIR = "chdir"
    LIST = "list"
    DIRECTORY = "directory"
    FILE = "file"


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: EventKind
    target: str | None = None
    name: str | None = None
    size: int | None = None
    line_number: int | None = None


def parse_line(line: str, line_number: int | None = None) -> Event:
    """Turn one transcript line into an :class:`Event`.

    Raises:
        ParseError: if the line matches none of the four shapes.
    """
    text = line.rstrip("\r\n")

    match = _CHDIR.match(text)
    if match:
        return Event(kind=EventKind.CHDIR, target=match["target"], line_number=line_number)
    if _LIST.match(text):
        return Event(kind=EventKind.LIST, line_number=line_number)
    match = _DIRECTORY.match(text)
    if match:
        return Event(kind=EventKind.DIRECTORY, name=match["name"], line_number=line_number)
    match = _FILE.match(text)
    if match:
        return Event(
            kind=EventKind.FILE,
            name=match["name"],
            size=int(match["size"]),
            line_number=line_number,
        )

    raise ParseError(line, line_number)


def parse_transcript(text: str) -> List[Event]:
    """Parse a whole transcript, one event per line."""
    events = [parse_line(line, number) for number, line in enumerate(text.splitlines(), start=1)]
    logger.debug("Parsed %d transcript events", len(events))
    return events
