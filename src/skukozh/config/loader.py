"""Configuration loading and override resolution."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from skukozh.config.models import AppConfig
from skukozh.constants import CONFIG_FILE_NAME
from skukozh.errors import ConfigError

DEFAULT_CONFIG_PATH = Path(CONFIG_FILE_NAME)


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Could not read config file '{path}': {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("Configuration file must deserialize to a mapping")
    return data


def apply_overrides(
    raw_config: dict[str, Any],
    env: Mapping[str, str],
    cli_overrides: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """Apply precedence: CLI > env > YAML defaults."""
    merged = dict(raw_config)
    outputs = dict(merged.get("outputs") or {})
    if env.get("SKUKOZH_FILE_LIST_NAME"):
        outputs["file_list_name"] = env["SKUKOZH_FILE_LIST_NAME"]
    if env.get("SKUKOZH_RESULT_NAME"):
        outputs["result_name"] = env["SKUKOZH_RESULT_NAME"]
    if outputs:
        merged["outputs"] = outputs

    analysis = dict(merged.get("analysis") or {})
    if env.get("SKUKOZH_TOP_COUNT"):
        analysis["top_count"] = env["SKUKOZH_TOP_COUNT"]

    if cli_overrides:
        if cli_overrides.get("top_count") is not None:
            analysis["top_count"] = cli_overrides["top_count"]
        if cli_overrides.get("exclude_globs"):
            scan_policy = dict(merged.get("scan_policy") or {})
            scan_policy["exclude_globs"] = [
                *scan_policy.get("exclude_globs", []),
                *cli_overrides["exclude_globs"],
            ]
            merged["scan_policy"] = scan_policy
    if analysis:
        merged["analysis"] = analysis
    return merged


def load_app_config(
    config_path: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
    cli_overrides: Mapping[str, Any] | None = None,
) -> AppConfig:
    """Load and validate central application config.

    An explicit ``config_path`` must exist. Without one, ``skukozh.yaml`` in the
    working directory is used when present and built-in defaults otherwise.
    """
    active_env = os.environ if env is None else env
    if config_path is not None:
        raw = _load_yaml(config_path)
    elif DEFAULT_CONFIG_PATH.exists():
        raw = _load_yaml(DEFAULT_CONFIG_PATH)
    else:
        raw = {}
    merged = apply_overrides(raw, active_env, cli_overrides)
    try:
        return AppConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
