"""Analysis-stage schema contracts."""

from __future__ import annotations

from pydantic import Field, computed_field

from skukozh.schemas.base import StrictSchemaModel

BYTES_PER_MB = 1024 * 1024


class FileStats(StrictSchemaModel):
    """Size and symbol counts for one file section of the result artifact."""

    path: str = Field(min_length=1)
    size_bytes: int = Field(ge=0)
    symbols: int = Field(ge=0)

    @property
    def size_kb(self) -> float:
        return self.size_bytes / 1024


class AnalysisReport(StrictSchemaModel):
    """Aggregate statistics over the whole result artifact."""

    total_bytes: int = Field(ge=0)
    total_symbols: int = Field(ge=0)
    files: list[FileStats] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_size_mb(self) -> float:
        return self.total_bytes / BYTES_PER_MB

    def top(self, count: int) -> list[FileStats]:
        """Return the ``count`` largest files."""
        return self.files[: max(count, 0)]
