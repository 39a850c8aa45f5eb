"""Shared fixtures for wikitree tests."""

import errno

import pytest


class MemoryFileSystem:
    """In-memory FileSystem that lists entries in insertion order."""

    def __init__(self):
        self.dirs: dict[str, list[str]] = {"/": []}
        self.files: set[str] = set()
        self.unreadable: set[str] = set()

    @staticmethod
    def _norm(path: str) -> str:
        path = path.replace("\\", "/")
        return path.rstrip("/") or "/"

    @staticmethod
    def _split(path: str):
        parent, _, name = path.rpartition("/")
        return parent or "/", name

    def add_dir(self, path: str) -> None:
        path = self._norm(path)
        if path in self.dirs:
            return
        parent, name = self._split(path)
        self.add_dir(parent)
        self.dirs[path] = []
        self.dirs[parent].append(name)

    def add_file(self, path: str) -> None:
        path = self._norm(path)
        parent, name = self._split(path)
        self.add_dir(parent)
        self.files.add(path)
        self.dirs[parent].append(name)

    def listdir(self, path: str) -> list[str]:
        path = self._norm(path)
        if path in self.unreadable:
            raise PermissionError(errno.EACCES, "Permission denied", path)
        if path not in self.dirs:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        return list(self.dirs[path])

    def is_dir(self, path: str) -> bool:
        return self._norm(path) in self.dirs

    def is_symlink(self, path: str) -> bool:
        return False

    def exists(self, path: str) -> bool:
        path = self._norm(path)
        return path in self.dirs or path in self.files

    def mkdir(self, path: str, mode: int) -> None:
        path = self._norm(path)
        if self.exists(path):
            raise FileExistsError(errno.EEXIST, "File exists", path)
        parent, name = self._split(path)
        if parent not in self.dirs:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        self.dirs[path] = []
        self.dirs[parent].append(name)

    def rmdir(self, path: str) -> None:
        path = self._norm(path)
        if self.dirs[path]:
            raise OSError(errno.ENOTEMPTY, "Directory not empty", path)
        parent, name = self._split(path)
        del self.dirs[path]
        self.dirs[parent].remove(name)

    def unlink(self, path: str) -> None:
        path = self._norm(path)
        parent, name = self._split(path)
        self.files.remove(path)
        self.dirs[parent].remove(name)


@pytest.fixture
def memory_fs():
    """Create an empty in-memory filesystem."""
    return MemoryFileSystem()


@pytest.fixture
def workspace(tmp_path_factory):
    """Create a scratch directory whose path never contains the word library."""
    return tmp_path_factory.mktemp("ws")


@pytest.fixture
def wiki_project(workspace):
    """Create an amWiki project on disk.

    Layout::

        wiki/
            amWiki/
            config.json
            index.html
            library/
                home-welcome.md
                .git/config
                001-guide/
                    intro.md
                    002_setup/
                        install.md
    """
    project = workspace / "wiki"
    library = project / "library"
    (project / "amWiki").mkdir(parents=True)
    (project / "config.json").write_text("{}", encoding="utf-8")
    (project / "index.html").write_text("<html></html>", encoding="utf-8")
    (library / ".git").mkdir(parents=True)
    (library / ".git" / "config").write_text("", encoding="utf-8")
    (library / "home-welcome.md").write_text("# Welcome", encoding="utf-8")
    (library / "001-guide" / "002_setup").mkdir(parents=True)
    (library / "001-guide" / "intro.md").write_text("# Intro", encoding="utf-8")
    (library / "001-guide" / "002_setup" / "install.md").write_text("# Install", encoding="utf-8")
    return project
