"""Pydantic models for central YAML configuration."""

from __future__ import annotations

from pydantic import Field, field_validator, model_validator

from skukozh.constants import (
    BINARY_EXTENSIONS,
    FILE_LIST_NAME,
    IGNORE_FILE_NAME,
    RESULT_NAME,
    SCHEMA_VERSION,
    TEXT_EXTENSIONS,
    VENDOR_DIRS,
)
from skukozh.schemas.base import StrictSchemaModel
from skukozh.schemas.discovery_models import normalize_extension


class ScanPolicyConfig(StrictSchemaModel):
    """Built-in exclusion lists and user overrides for discovery."""

    ignore_file_name: str = Field(default=IGNORE_FILE_NAME, min_length=1)
    vendor_dirs: list[str] = Field(default_factory=lambda: list(VENDOR_DIRS))
    binary_extensions: list[str] = Field(
        default_factory=lambda: list(BINARY_EXTENSIONS)
    )
    text_extensions: list[str] = Field(default_factory=lambda: list(TEXT_EXTENSIONS))
    exclude_globs: list[str] = Field(default_factory=list)

    @field_validator("binary_extensions", "text_extensions")
    @classmethod
    def normalize_extensions(cls, value: list[str]) -> list[str]:
        return [normalize_extension(item) for item in value if item.strip()]

    @field_validator("ignore_file_name")
    @classmethod
    def reject_nested_ignore_file(cls, value: str) -> str:
        if "/" in value or "\\" in value:
            raise ValueError("ignore_file_name must be a plain file name")
        return value


class OutputConfig(StrictSchemaModel):
    """Artifact file names written by find and gen."""

    file_list_name: str = Field(default=FILE_LIST_NAME, min_length=1)
    result_name: str = Field(default=RESULT_NAME, min_length=1)

    @model_validator(mode="after")
    def validate_distinct_names(self) -> "OutputConfig":
        if self.file_list_name == self.result_name:
            raise ValueError("file_list_name and result_name must differ")
        return self

    @property
    def artifact_names(self) -> frozenset[str]:
        return frozenset({self.file_list_name, self.result_name})


class ContentConfig(StrictSchemaModel):
    """Controls for the concatenated result artifact."""

    strip_blank_lines: bool = True


class AnalysisConfig(StrictSchemaModel):
    """Controls for the analyze command."""

    top_count: int = Field(default=20, ge=1)


class AppConfig(StrictSchemaModel):
    """Central application configuration."""

    schema_version: str = Field(default=SCHEMA_VERSION, min_length=1)
    scan_policy: ScanPolicyConfig = Field(default_factory=ScanPolicyConfig)
    outputs: OutputConfig = Field(default_factory=OutputConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
