"""Ignore-file parsing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skukozh.errors import IgnoreFileError


@dataclass(frozen=True)
class IgnoreRule:
    """Single rule from an ignore file."""

    pattern: str
    directory_only: bool = False
    negated: bool = False


IgnoreRuleSet = tuple[IgnoreRule, ...]


def parse_ignore_line(line: str) -> IgnoreRule | None:
    """Parse one line; blank lines and comments yield None."""
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    negated = line.startswith("!")
    if negated:
        line = line[1:]

    directory_only = line.endswith("/")
    if directory_only:
        line = line[:-1]

    return IgnoreRule(pattern=line, directory_only=directory_only, negated=negated)


def parse_ignore_text(text: str) -> IgnoreRuleSet:
    """Parse ignore-file text into rules, keeping file order."""
    rules = (parse_ignore_line(line) for line in text.splitlines())
    return tuple(rule for rule in rules if rule is not None)


def load_ignore_file(path: Path) -> IgnoreRuleSet:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IgnoreFileError(f"Could not read ignore file '{path}': {exc}") from exc
    return parse_ignore_text(text)
