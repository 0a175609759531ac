"""Discovery-stage schema contracts."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import Field, field_validator

from skukozh.schemas.base import FrozenSchemaModel, StrictSchemaModel
from skukozh.schemas.enums import VerdictReason


def normalize_extension(raw: str) -> str:
    """Lowercase an extension and make sure it carries a leading dot."""
    ext = raw.strip().lower()
    if not ext.startswith("."):
        ext = f".{ext}"
    return ext


def parse_extension_list(raw: str | Iterable[str] | None) -> frozenset[str]:
    """Turn a comma-separated flag value (or an iterable) into an allow-list."""
    if raw is None:
        return frozenset()
    items = raw.split(",") if isinstance(raw, str) else raw
    return frozenset(normalize_extension(item) for item in items if item.strip())


class TraversalOptions(FrozenSchemaModel):
    """Read-only configuration for a single walk."""

    extension_allow_list: frozenset[str] = Field(default_factory=frozenset)
    include_hidden: bool = False
    bypass_default_ignores: bool = False
    verbose: bool = False

    @field_validator("extension_allow_list", mode="before")
    @classmethod
    def normalize_allow_list(
        cls, value: str | Iterable[str] | None
    ) -> frozenset[str]:
        return parse_extension_list(value)


class SkipReasons(StrictSchemaModel):
    """Counts of rejected entries by policy reason."""

    tool_artifact: int = 0
    hidden: int = 0
    underscore_dir: int = 0
    vendor_dir: int = 0
    ignore_file: int = 0
    user_exclude: int = 0
    binary_extension: int = 0
    extension: int = 0


class DiscoveryStats(StrictSchemaModel):
    """Traversal statistics for one discovery run."""

    entries_seen: int = 0
    files_admitted: int = 0
    directories_visited: int = 0
    directories_pruned: int = 0
    entry_errors: int = 0
    ignore_rules_loaded: int = 0
    skipped_reasons: SkipReasons = Field(default_factory=SkipReasons)

    def record_skip(self, reason: VerdictReason) -> None:
        """Increment the counter matching a rejection reason."""
        field = reason.value
        setattr(self.skipped_reasons, field, getattr(self.skipped_reasons, field) + 1)
