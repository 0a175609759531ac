"""Enum definitions for canonical contracts."""

from __future__ import annotations

from enum import Enum


class VerdictReason(str, Enum):
    ROOT = "root"
    ADMITTED = "admitted"
    TOOL_ARTIFACT = "tool_artifact"
    HIDDEN = "hidden"
    UNDERSCORE_DIR = "underscore_dir"
    VENDOR_DIR = "vendor_dir"
    IGNORE_FILE = "ignore_file"
    USER_EXCLUDE = "user_exclude"
    BINARY_EXTENSION = "binary_extension"
    EXTENSION = "extension"
