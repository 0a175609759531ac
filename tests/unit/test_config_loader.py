"""Configuration loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from skukozh.config.loader import load_app_config
from skukozh.errors import ConfigError


def _write_config(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "skukozh.yaml"
    config_path.write_text(content, encoding="utf-8")
    return config_path


def test_defaults_without_config_file(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    """Missing default config falls back to built-in settings."""
    monkeypatch.chdir(tmp_path)
    config = load_app_config(env={})
    assert config.outputs.file_list_name == "skukozh_file_list.txt"
    assert config.outputs.result_name == "skukozh_result.txt"
    assert config.analysis.top_count == 20
    assert config.scan_policy.ignore_file_name == ".gitignore"
    assert "node_modules" in config.scan_policy.vendor_dirs
    assert ".log" in config.scan_policy.text_extensions


def test_default_config_file_in_working_directory(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    """skukozh.yaml in the working directory is picked up implicitly."""
    _write_config(tmp_path, "analysis:\n  top_count: 7\n")
    monkeypatch.chdir(tmp_path)
    assert load_app_config(env={}).analysis.top_count == 7


def test_cli_overrides_env_and_yaml_defaults(tmp_path: Path) -> None:
    """CLI override should have highest precedence."""
    config_path = _write_config(
        tmp_path,
        """
analysis:
  top_count: 5
outputs:
  result_name: "yaml_result.txt"
""".strip(),
    )

    config = load_app_config(
        config_path,
        env={"SKUKOZH_TOP_COUNT": "9", "SKUKOZH_RESULT_NAME": "env_result.txt"},
        cli_overrides={"top_count": 3},
    )
    assert config.analysis.top_count == 3
    assert config.outputs.result_name == "env_result.txt"


def test_env_overrides_yaml(tmp_path: Path) -> None:
    """Environment variables beat YAML values."""
    config_path = _write_config(tmp_path, "analysis:\n  top_count: 5\n")
    config = load_app_config(config_path, env={"SKUKOZH_TOP_COUNT": "11"})
    assert config.analysis.top_count == 11


def test_cli_exclude_globs_extend_yaml(tmp_path: Path) -> None:
    """Command-line excludes are appended to configured ones."""
    config_path = _write_config(tmp_path, "scan_policy:\n  exclude_globs: ['docs/']\n")
    config = load_app_config(
        config_path, env={}, cli_overrides={"exclude_globs": ["*.snap"]}
    )
    assert config.scan_policy.exclude_globs == ["docs/", "*.snap"]


def test_extension_lists_are_normalized(tmp_path: Path) -> None:
    """Configured extensions are lowercased and dot-prefixed."""
    config_path = _write_config(
        tmp_path, "scan_policy:\n  text_extensions: ['GO', '.Py', '']\n"
    )
    config = load_app_config(config_path, env={})
    assert config.scan_policy.text_extensions == [".go", ".py"]


def test_missing_explicit_config_is_rejected(tmp_path: Path) -> None:
    """An explicit --config path must exist."""
    with pytest.raises(ConfigError):
        load_app_config(tmp_path / "nope.yaml", env={})


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "unknown_section: true\n",
        "analysis:\n  top_count: 0\n",
        "outputs:\n  file_list_name: same.txt\n  result_name: same.txt\n",
        "scan_policy:\n  ignore_file_name: nested/.gitignore\n",
        "analysis: [unclosed\n",
    ],
)
def test_invalid_config_is_rejected(tmp_path: Path, content: str) -> None:
    """Malformed or invalid settings raise a configuration error."""
    config_path = _write_config(tmp_path, content)
    with pytest.raises(ConfigError):
        load_app_config(config_path, env={})
