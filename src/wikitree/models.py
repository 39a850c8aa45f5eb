"""Data types produced by directory scans."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Iterator, NamedTuple, Union


class EntryType(Enum):
    """Kinds of entries recorded by a scan."""

    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True)
class FileNode:
    """Leaf of a scanned tree."""

    def to_dict(self) -> bool:
        return False


@dataclass
class FolderNode:
    """Directory in a scanned tree.

    Children keep the order in which they were inserted, which is the order
    the filesystem listed them in.
    """

    children: dict[str, "Node"] = field(default_factory=dict)

    def __getitem__(self, name: str) -> "Node":
        return self.children[name]

    def __setitem__(self, name: str, node: "Node") -> None:
        self.children[name] = node

    def __contains__(self, name: object) -> bool:
        return name in self.children

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape used by amWiki: ``false`` for files, objects for folders."""
        return {name: node.to_dict() for name, node in self.children.items()}


Node = Union[FileNode, FolderNode]


@dataclass(frozen=True)
class EntryRecord:
    """One file or folder found by a scan.

    ``path`` is the directory that contains the entry, not the entry itself.
    """

    depth: int
    type: EntryType
    name: str
    path: str

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["type"] = self.type.value
        return data


class ScanResult(NamedTuple):
    """The (tree, entries, files) triple returned by every scan."""

    tree: FolderNode
    entries: list[EntryRecord]
    files: list[str]

    @classmethod
    def empty(cls) -> "ScanResult":
        return cls(FolderNode(), [], [])
