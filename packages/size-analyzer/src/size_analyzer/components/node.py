from pydantic import BaseModel, ConfigDict, Field
from typing import Iterator, List, Literal, Union
from enum import StrEnum

ROOT = "/"


class EntryType(StrEnum):
    FILE = "file"
    DIRECTORY = "directory"


class FileNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[EntryType.FILE] = EntryType.FILE
    name: str
    size: int = Field(ge=0)


class DirRef(BaseModel):
    """A sub-directory as declared inside its parent's listing."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[EntryType.DIRECTORY] = EntryType.DIRECTORY
    name: str


Entry = Union[FileNode, DirRef]


class DirectoryRecord(BaseModel):
    path: str
    name: str
    parent: str | None = None
    entries: List[Entry] = Field(default_factory=list)
    size: int | None = None

    @property
    def is_resolved(self) -> bool:
        return self.size is not None

    def files(self) -> Iterator[FileNode]:
        return (e for e in self.entries if isinstance(e, FileNode))

    def subdirs(self) -> Iterator[DirRef]:
        return (e for e in self.entries if isinstance(e, DirRef))

    def subdir_names(self) -> List[str]:
        """Distinct sub-directory names, in declaration order."""
        return list(dict.fromkeys(ref.name for ref in self.subdirs()))


def join_path(parent: str, name: str) -> str:
    """Append *name* to the directory path *parent*."""
    if parent == ROOT:
        return ROOT + name
    return f"{parent}/{name}"


def split_path(path: str) -> tuple[str | None, str]:
    """Split *path* into (parent path, basename). Root has no parent."""
    if path == ROOT:
        return None, ""
    parent, _, name = path.rpartition("/")
    return parent or ROOT, name


def path_from_stack(stack: List[str]) -> str:
    """Render a navigation stack of components (without the root) as a path."""
    return ROOT + "/".join(stack)


class Filesystem:
    """Arena of directory records addressed by path.

    Records never hold references to each other, only path strings, so the
    hierarchy is recovered by lookups into this map. The root record always
    exists; it accepts entries once it has been listed.
    """

    def __init__(self) -> None:
        self._records: dict[str, DirectoryRecord] = {
            ROOT: DirectoryRecord(path=ROOT, name=ROOT)
        }
        self._listed: set[str] = set()

    def __contains__(self, path: object) -> bool:
        return path in self._records

    def __iter__(self) -> Iterator[DirectoryRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    @property
    def root(self) -> DirectoryRecord:
        return self._records[ROOT]

    def get(self, path: str) -> DirectoryRecord | None:
        return self._records.get(path)

    def is_listed(self, path: str) -> bool:
        return path in self._listed

    def add_listing(self, path: str) -> DirectoryRecord:
        """Register *path* as listed, creating its record if needed."""
        self._listed.add(path)
        record = self._records.get(path)
        if record is None:
            parent, name = split_path(path)
            record = DirectoryRecord(path=path, name=name, parent=parent)
            self._records[path] = record
        return record

    def paths(self) -> List[str]:
        return list(self._records)
