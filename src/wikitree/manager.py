"""Folder scanning and management for amWiki projects."""

import logging
import os
from typing import Optional, Union

from wikitree import paths
from wikitree.core import (
    DEFAULT_MAX_ASCENT,
    FOLDER_MODE,
    LIBRARY_DIR_NAME,
    WIKI_MARKERS,
    is_home_file,
)
from wikitree.fs import FileSystem, LocalFileSystem
from wikitree.models import EntryRecord, EntryType, FileNode, FolderNode, ScanResult

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class FolderManager:
    """Scans wiki libraries and resolves project folders.

    The manager holds no state between calls. Every filesystem access goes
    through ``fs``, so tests can hand in an in-memory implementation.

    Args:
        fs: Filesystem to operate on. Defaults to the local disk.
        max_ascent: Maximum number of parent folders visited while looking
            for a library folder.
    """

    def __init__(self, fs: Optional[FileSystem] = None, max_ascent: int = DEFAULT_MAX_ASCENT):
        self.fs = fs if fs is not None else LocalFileSystem()
        self.max_ascent = max_ascent

    get_parent_folder = staticmethod(paths.get_parent_folder)
    get_base_name = staticmethod(paths.get_base_name)

    def scan(
        self,
        directory_path: PathLike,
        depth: int = 0,
        tree: Optional[FolderNode] = None,
    ) -> ScanResult:
        """Recursively scan a folder.

        Entries whose names start with ``.`` are skipped. Files directly under
        the scanned folder (depth 0) are skipped too: only folders are allowed
        at the top level.

        Args:
            directory_path: Folder to scan.
            depth: Depth of directory_path relative to the scan root.
            tree: Tree to fill in. A new one is created when omitted.

        Returns:
            ScanResult of the tree, the entry records in depth-first order and
            the file paths. If a folder cannot be read, the error is logged and
            whatever was collected so far is returned.
        """
        directory_path = os.fspath(directory_path)
        result = ScanResult(tree if tree is not None else FolderNode(), [], [])

        try:
            names = self.fs.listdir(directory_path)
        except OSError as e:
            logger.error("Cannot read folder %s: %s", directory_path, e)
            return result

        for name in names:
            if name.startswith("."):
                continue

            entry_path = paths.join(directory_path, name)
            if self.fs.is_dir(entry_path):
                sub_tree, sub_entries, sub_files = self.scan(entry_path, depth + 1)
                result.tree[name] = sub_tree
                result.entries.append(EntryRecord(depth, EntryType.FOLDER, name, directory_path))
                result.entries.extend(sub_entries)
                result.files.extend(sub_files)
            elif depth > 0:
                result.tree[name] = FileNode()
                result.entries.append(EntryRecord(depth, EntryType.FILE, name, directory_path))
                result.files.append(entry_path)

        return result

    def scan_library(self, path: PathLike) -> ScanResult:
        """Scan a library folder, seeding the tree with its home page.

        Args:
            path: Library folder path. Must end with ``library/`` (or ``library\\``).

        Returns:
            ScanResult for the library. Empty when path is not a library folder.
        """
        path = os.fspath(path)
        if not paths.is_library_dir(path):
            logger.warning("%s is not a library folder", path)
            return ScanResult.empty()

        tree = FolderNode()
        for name in self.fs.listdir(path):
            if is_home_file(name):
                tree[name] = FileNode()
                break

        return self.scan(path, 0, tree)

    def clean_folder(self, path: PathLike) -> None:
        """Delete everything inside a folder, keeping the folder itself.

        Folders whose names start with ``.`` are kept along with their
        contents, including links to folders. Other symbolic links are
        removed without being followed.

        Raises:
            OSError: If an entry cannot be listed or removed.
        """
        path = os.fspath(path)
        for name in self.fs.listdir(path):
            entry_path = paths.join(path, name)
            is_dir = self.fs.is_dir(entry_path)
            if is_dir and name.startswith("."):
                continue
            if is_dir and not self.fs.is_symlink(entry_path):
                self.clean_folder(entry_path)
                self.fs.rmdir(entry_path)
                logger.debug("Removed folder %s", entry_path)
            else:
                self.fs.unlink(entry_path)
                logger.debug("Removed file %s", entry_path)

    def create_folder(self, path: PathLike) -> None:
        """Create a folder along with any missing parents.

        Does nothing when the folder already exists.

        Raises:
            OSError: If a folder cannot be created.
        """
        path = os.fspath(path)
        parent = paths.get_parent_folder(path)
        if parent is None:
            # get_parent_folder stops at one separator, e.g. "out/site"
            parent = paths.normalize(path).rstrip("/").rpartition("/")[0] or None
        if parent is not None and not self.fs.exists(parent):
            self.create_folder(parent)
        if not self.fs.exists(path):
            self.fs.mkdir(path, FOLDER_MODE)
            logger.debug("Created folder %s", path)

    def get_library_folder(self, path: Optional[PathLike]) -> Optional[str]:
        """Find the library folder for a path by walking up its parents.

        A path without ``library`` in it is checked for a ``library`` child
        folder. A path that mentions ``library`` is climbed until it ends
        with a ``library`` segment.

        Args:
            path: File or folder inside a wiki project, or the project root.

        Returns:
            Library folder path ending in ``library/``, or None if there is
            none within ``max_ascent`` levels.
        """
        if not path:
            return None

        current = paths.normalize(os.fspath(path))
        for _ in range(self.max_ascent + 1):
            if LIBRARY_DIR_NAME not in current:
                candidate = paths.join(current, LIBRARY_DIR_NAME)
                if self.fs.is_dir(candidate):
                    return candidate + "/"
            elif paths.ends_with_library(current):
                return current if current.endswith("/") else current + "/"

            parent = paths.get_parent_folder(current)
            if parent is None:
                return None
            logger.debug("No library at %s, trying %s", current, parent)
            current = parent

        logger.warning(
            "Stopped looking for a library folder above %s after %d levels",
            path,
            self.max_ascent,
        )
        return None

    def get_project_folder(self, path: Optional[PathLike]) -> Optional[str]:
        """Get the project root (the folder holding ``library/``) for a path."""
        library = self.get_library_folder(path)
        if not library:
            return None
        return paths.strip_library(library)

    def get_level1_id(self, path: PathLike, lib_path: Optional[str] = None) -> str:
        """Get the id of the top-level library folder a path belongs to.

        The id is the part of the first segment below the library folder up
        to the first ``-`` or ``_``, e.g. ``001`` for
        ``/wiki/library/001-guide/intro.md``.

        Args:
            path: Path inside a library folder.
            lib_path: Library folder of path. Looked up when omitted.

        Returns:
            The id, or an empty string when path is not inside a library.
        """
        path = os.fspath(path)
        if LIBRARY_DIR_NAME not in path:
            return ""
        if not lib_path:
            lib_path = self.get_library_folder(path)
        if not lib_path or len(lib_path) < len(LIBRARY_DIR_NAME) + 1:
            return ""
        return paths.level1_id(path, lib_path)

    def is_amwiki(self, path: Optional[PathLike]) -> Optional[str]:
        """Check whether a path belongs to an amWiki project.

        Args:
            path: Any path inside the project, including its ``config.json``
                or ``index.html``.

        Returns:
            The project root path when ``library/``, ``amWiki/``,
            ``config.json`` and ``index.html`` all exist there, otherwise None.
        """
        if not path:
            return None

        path = paths.normalize(os.fspath(path))
        for marker_file in ("config.json", "index.html"):
            if marker_file in path:
                path = path.split(marker_file)[0]

        project = self.get_project_folder(path)
        if not project:
            return None

        if all(self.fs.exists(project + marker) for marker in WIKI_MARKERS):
            return project
        return None
