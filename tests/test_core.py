"""Unit tests for core wikitree conventions and lookups."""

import pytest

from wikitree.core import WIKI_MARKERS, find_library, find_wiki_root, is_home_file
from wikitree.exceptions import LibraryNotFoundError, WikiNotFoundError


class TestIsHomeFile:
    """Tests for is_home_file function."""

    def test_home_file_names(self):
        assert is_home_file("home-welcome.md") is True
        assert is_home_file("home_欢迎.md") is True
        assert is_home_file("首页.md") is True

    def test_other_names(self):
        assert is_home_file("homepage.md") is False
        assert is_home_file("home-welcome.txt") is False
        assert is_home_file("my-home-page.md") is False
        assert is_home_file("Home-welcome.md") is False


class TestFindLibrary:
    """Tests for find_library function."""

    def test_find_in_project(self, wiki_project):
        """Test finding the library from inside the project."""
        result = find_library(wiki_project / "library" / "001-guide")
        assert result == f"{wiki_project}/library/"

    def test_find_from_cwd(self, wiki_project, monkeypatch):
        """Test that None start_path defaults to current working directory."""
        monkeypatch.chdir(wiki_project / "amWiki")
        assert find_library(None) == f"{wiki_project}/library/"

    def test_not_found(self, workspace):
        """Test that LibraryNotFoundError is raised outside a wiki."""
        with pytest.raises(LibraryNotFoundError) as exc_info:
            find_library(workspace)

        assert exc_info.value.path == str(workspace)


class TestFindWikiRoot:
    """Tests for find_wiki_root function."""

    def test_find_root(self, wiki_project):
        assert find_wiki_root(wiki_project / "index.html") == f"{wiki_project}/"

    def test_incomplete_project(self, wiki_project):
        """Test that a project missing a marker is rejected."""
        (wiki_project / "index.html").unlink()

        with pytest.raises(WikiNotFoundError):
            find_wiki_root(wiki_project)

    def test_markers(self):
        assert WIKI_MARKERS == ("library/", "amWiki/", "config.json", "index.html")
