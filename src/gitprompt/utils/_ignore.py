"""Ignored-directory pattern loading and matching.

Repositories under an ignored directory skip the expensive status queries.
Patterns come from a plain-text list file and from configuration; each
pattern is a directory path, optionally containing shell-style wildcards.
"""

import os
from collections.abc import Iterable
from fnmatch import fnmatchcase
from pathlib import Path, PurePosixPath


def load_ignore_patterns(path: Path) -> list[str]:
    """Load patterns from an ignore-list file.

    Comments (lines starting with #) and empty lines are filtered out.

    Args:
        path: Path to the ignore-list file.

    Returns:
        List of patterns from the file. Returns empty list if file doesn't exist.
    """
    if not path.is_file():
        return []

    patterns: list[str] = []
    content = path.read_text(encoding="utf-8")

    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        patterns.append(stripped)

    return patterns


def normalize_pattern(pattern: str) -> str:
    """Expand ``~`` and drop trailing separators from a pattern."""
    expanded = os.path.expanduser(pattern.strip())
    if len(expanded) > 1:
        expanded = expanded.rstrip("/")
    return expanded


def collect_ignore_patterns(
    *,
    ignore_file: Path | None = None,
    extra_patterns: Iterable[str] = (),
) -> list[str]:
    """Collect ignore patterns from the list file and extra patterns.

    Args:
        ignore_file: Path to the ignore-list file, or None to skip it.
        extra_patterns: Additional patterns, e.g. from configuration.

    Returns:
        Normalized patterns, deduplicated while preserving order.
    """
    patterns: list[str] = []
    seen: set[str] = set()

    sources: list[str] = []
    if ignore_file is not None:
        sources.extend(load_ignore_patterns(ignore_file))
    sources.extend(extra_patterns)

    for raw in sources:
        pattern = normalize_pattern(raw)
        if pattern and pattern not in seen:
            seen.add(pattern)
            patterns.append(pattern)

    return patterns


def is_ignored_dir(cwd: Path | str, patterns: Iterable[str]) -> bool:
    """Check whether a directory lies under any ignored pattern.

    A pattern matches the directory itself or any of its ancestors, so a
    pattern names a whole subtree. Wildcards are matched case-sensitively.

    Args:
        cwd: Directory to check.
        patterns: Normalized patterns from collect_ignore_patterns().

    Returns:
        True if the directory is ignored.
    """
    path = PurePosixPath(cwd)
    candidates = [str(path), *(str(parent) for parent in path.parents)]

    for pattern in patterns:
        if any(fnmatchcase(candidate, pattern) for candidate in candidates):
            return True
    return False
