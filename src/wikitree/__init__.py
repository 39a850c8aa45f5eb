"""wikitree: folder tree tools for amWiki projects.

Scans wiki library folders and resolves library and project folders from
any path inside a wiki.
"""

__version__ = "0.1.0"

# Export the public API for easy access
from wikitree.exceptions import (
    WikiTreeError,
    LibraryNotFoundError,
    WikiNotFoundError,
    InvalidPathError,
    FolderOperationError,
)
from wikitree.manager import FolderManager
from wikitree.models import EntryRecord, EntryType, FileNode, FolderNode, ScanResult

__all__ = [
    "__version__",
    "WikiTreeError",
    "LibraryNotFoundError",
    "WikiNotFoundError",
    "InvalidPathError",
    "FolderOperationError",
    "FolderManager",
    "EntryRecord",
    "EntryType",
    "FileNode",
    "FolderNode",
    "ScanResult",
]
