"""Restricted gitignore-style glob matching.

Supported syntax is a small subset of gitignore:

* plain names and paths match exactly, or as a directory prefix
  (``dir`` matches ``dir/sub/file.txt``);
* ``*``, ``?`` and ``[...]`` match within a single path segment; a pattern
  without ``/`` may also match the last segment at any depth;
* ``**`` spans any number of characters, including ``/``.

The ``**`` handling scans for each literal piece as a plain substring of the
remaining path rather than on segment boundaries, so ``a/**/b.txt`` also
matches ``xa/y/b.txt``. Existing ignore files rely on this behaviour.
"""

from __future__ import annotations

from fnmatch import fnmatchcase

WILDCARD_CHARS = frozenset("*?[")
RECURSIVE_WILDCARD = "**"
_EXTENSION_FAST_PATH = "**/*."


def has_wildcard(pattern: str) -> bool:
    return any(char in WILDCARD_CHARS for char in pattern)


def matches(path: str, pattern: str) -> bool:
    """Return True when a relative ``/``-separated path matches ``pattern``."""
    if path == pattern:
        return True
    if RECURSIVE_WILDCARD in pattern:
        if _is_extension_pattern(pattern):
            return _match_extension(path, pattern)
        return _match_recursive(path, pattern)
    if has_wildcard(pattern):
        return _match_wildcard(path, pattern)
    return path.startswith(pattern + "/")


def _is_extension_pattern(pattern: str) -> bool:
    if not pattern.startswith(_EXTENSION_FAST_PATH):
        return False
    suffix = pattern[len(_EXTENSION_FAST_PATH) :]
    return bool(suffix) and "/" not in suffix and not has_wildcard(suffix)


def _match_extension(path: str, pattern: str) -> bool:
    # "**/*.log" -> ".log"
    suffix = pattern[len(_EXTENSION_FAST_PATH) - 1 :]
    return path.rsplit("/", 1)[-1].endswith(suffix)


def _match_recursive(path: str, pattern: str) -> bool:
    pieces = pattern.split(RECURSIVE_WILDCARD)
    remaining = path
    for piece in pieces[:-1]:
        for cut in range(len(remaining)):
            if remaining[:cut].endswith(piece):
                remaining = remaining[cut:]
                break
        else:
            return False
    tail = pieces[-1]
    return not tail or remaining.endswith(tail)


def _match_wildcard(path: str, pattern: str) -> bool:
    if _match_segments(path, pattern):
        return True
    if "/" not in pattern and fnmatchcase(path.rsplit("/", 1)[-1], pattern):
        return True
    return path.startswith(pattern + "/")


def _match_segments(path: str, pattern: str) -> bool:
    path_parts = path.split("/")
    pattern_parts = pattern.split("/")
    if len(path_parts) != len(pattern_parts):
        return False
    return all(
        fnmatchcase(part, glob) for part, glob in zip(path_parts, pattern_parts)
    )
