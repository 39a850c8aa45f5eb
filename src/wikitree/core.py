"""Core wikitree conventions and lookups."""

import re
from pathlib import Path
from typing import Optional, Union

from wikitree.exceptions import LibraryNotFoundError, WikiNotFoundError

# Name of the folder holding a wiki's content tree
LIBRARY_DIR_NAME = "library"

# Entries that must coexist at an amWiki project root
WIKI_MARKERS = ("library/", "amWiki/", "config.json", "index.html")

# Landing page at the library root
HOME_FILE_PATTERN = re.compile(r"^home[-_].*?\.md$")
HOME_FILE_ALIAS = "首页.md"

# Upper bound on folders climbed while looking for a library
DEFAULT_MAX_ASCENT = 64

FOLDER_MODE = 0o777


def is_home_file(name: str) -> bool:
    """Check whether ``name`` is a conventional home page file name."""
    return name == HOME_FILE_ALIAS or HOME_FILE_PATTERN.match(name) is not None


def find_library(start_path: Optional[Union[str, Path]] = None) -> str:
    """Find the library folder at or above start_path.

    Args:
        start_path: Starting path. Defaults to current working directory.

    Returns:
        Library folder path ending in ``library/``.

    Raises:
        LibraryNotFoundError: If no library folder is found.
    """
    from wikitree.manager import FolderManager

    start = str(start_path if start_path is not None else Path.cwd())
    library = FolderManager().get_library_folder(start)
    if not library:
        raise LibraryNotFoundError(start)
    return library


def find_wiki_root(start_path: Optional[Union[str, Path]] = None) -> str:
    """Find the amWiki project root that start_path belongs to.

    Raises:
        WikiNotFoundError: If start_path is not inside an amWiki project.
    """
    from wikitree.manager import FolderManager

    start = str(start_path if start_path is not None else Path.cwd())
    root = FolderManager().is_amwiki(start)
    if not root:
        raise WikiNotFoundError(start)
    return root
