"""Tests for ignored-directory pattern utilities."""

from pathlib import Path

import pytest
from pyfakefs.fake_filesystem import FakeFilesystem

from gitprompt.utils import (
    collect_ignore_patterns,
    is_ignored_dir,
    load_ignore_patterns,
    normalize_pattern,
)


class TestLoadIgnorePatterns:
    def test_missing_file_returns_empty_list(self, fs: FakeFilesystem) -> None:
        assert load_ignore_patterns(Path("/config/ignore-dirs")) == []

    def test_skips_comments_and_blank_lines(self, fs: FakeFilesystem) -> None:
        path = Path("/config/ignore-dirs")
        _ = fs.create_file(
            path,
            contents="# big repositories\n\n/src/linux\n   \n  /srv/mirrors/*  \n",
        )

        assert load_ignore_patterns(path) == ["/src/linux", "/srv/mirrors/*"]


class TestNormalizePattern:
    def test_strips_trailing_slash(self) -> None:
        assert normalize_pattern("/src/linux/") == "/src/linux"

    def test_keeps_root(self) -> None:
        assert normalize_pattern("/") == "/"

    def test_expands_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", "/home/alice")
        assert normalize_pattern("~/src/big") == "/home/alice/src/big"


class TestCollectIgnorePatterns:
    def test_merges_file_and_extra_patterns(self, fs: FakeFilesystem) -> None:
        path = Path("/config/ignore-dirs")
        _ = fs.create_file(path, contents="/src/linux\n")

        patterns = collect_ignore_patterns(
            ignore_file=path, extra_patterns=["/srv/mirrors/*"]
        )

        assert patterns == ["/src/linux", "/srv/mirrors/*"]

    def test_deduplicates_preserving_order(self, fs: FakeFilesystem) -> None:
        path = Path("/config/ignore-dirs")
        _ = fs.create_file(path, contents="/b\n/a\n")

        patterns = collect_ignore_patterns(
            ignore_file=path, extra_patterns=["/a/", "/c"]
        )

        assert patterns == ["/b", "/a", "/c"]

    def test_without_file(self) -> None:
        assert collect_ignore_patterns(extra_patterns=["", "/x"]) == ["/x"]


class TestIsIgnoredDir:
    def test_exact_match(self) -> None:
        assert is_ignored_dir("/src/linux", ["/src/linux"]) is True

    def test_descendant_matches(self) -> None:
        assert is_ignored_dir("/src/linux/drivers/net", ["/src/linux"]) is True

    def test_sibling_with_common_prefix_does_not_match(self) -> None:
        assert is_ignored_dir("/src/linux-tools", ["/src/linux"]) is False

    def test_glob_matches_ancestor(self) -> None:
        assert is_ignored_dir("/srv/mirrors/gcc/libgcc", ["/srv/mirrors/*"]) is True

    def test_glob_is_case_sensitive(self) -> None:
        assert is_ignored_dir("/SRV/mirrors/gcc", ["/srv/mirrors/*"]) is False

    def test_no_patterns(self) -> None:
        assert is_ignored_dir("/src/linux", []) is False
