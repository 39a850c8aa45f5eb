"""String-only path arithmetic.

Nothing in this module touches the filesystem. Paths are plain strings and
backslashes are treated as forward slashes, so Windows-style paths produced by
editors work the same as POSIX ones.
"""

import re
from typing import Optional

from wikitree.exceptions import InvalidPathError

_DRIVE_RE = re.compile(r"^[a-zA-Z]:")
_LAST_SEGMENT_RE = re.compile(r"/[^/]+$")
_BASE_NAME_RE = re.compile(r"/([^/]*?)$")
_LIBRARY_SUFFIX_RE = re.compile(r"library/?$")
_LIBRARY_DIR_RE = re.compile(r"library[\\/]$")
_LEVEL1_SPLIT_RE = re.compile(r"[-_]")


def normalize(path: str) -> str:
    """Replace backslashes with forward slashes."""
    return path.replace("\\", "/")


def _strip_trailing_slash(path: str) -> str:
    return path[:-1] if path.endswith("/") else path


def join(directory: str, name: str) -> str:
    """Append ``name`` to ``directory``, adding a separator only when needed."""
    if directory.endswith(("/", "\\")):
        return directory + name
    return f"{directory}/{name}"


def get_parent_folder(path: str) -> Optional[str]:
    """Get the folder containing ``path``.

    Args:
        path: File or folder path, with or without a trailing separator.

    Returns:
        Parent folder with a trailing ``/``, or None when the path is a bare
        drive (``C:``) or has no separator left to climb past.
    """
    path = normalize(path)
    if _DRIVE_RE.match(path) and len(path) < 3:
        return None
    stripped = _strip_trailing_slash(path)
    if stripped.count("/") <= 1:
        return None
    return _LAST_SEGMENT_RE.sub("/", stripped)


def get_base_name(path: str) -> str:
    """Get the last segment of ``path``.

    Raises:
        InvalidPathError: If the path has no ``/``-separated segment.
    """
    match = _BASE_NAME_RE.search(_strip_trailing_slash(normalize(path)))
    if match is None:
        raise InvalidPathError(path)
    return match.group(1)


def ends_with_library(path: str) -> bool:
    """Check whether the last segment of ``path`` is ``library`` (trailing ``/`` optional)."""
    return _LIBRARY_SUFFIX_RE.search(normalize(path)) is not None


def is_library_dir(path: str) -> bool:
    """Check that ``path`` ends with ``library`` followed by a separator."""
    return _LIBRARY_DIR_RE.search(path) is not None


def strip_library(path: str) -> str:
    """Remove a trailing ``library`` segment, leaving the project folder."""
    return _LIBRARY_SUFFIX_RE.sub("", normalize(path))


def level1_id(path: str, lib_path: str) -> str:
    """First ``-``/``_``-delimited token of ``path`` below ``lib_path``."""
    return _LEVEL1_SPLIT_RE.split(path[len(lib_path):])[0]
