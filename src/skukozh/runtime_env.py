"""Runtime environment loading helpers."""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

_TRUTHY_VALUES = {"1", "true", "yes", "on"}


def env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY_VALUES


def load_runtime_env(*, filename: str = ".env") -> bool:
    """Load .env from cwd/parents without overriding existing process env."""
    if env_flag("SKUKOZH_DISABLE_DOTENV"):
        return False

    dotenv_path = find_dotenv(filename=filename, usecwd=True)
    if not dotenv_path:
        return False

    return bool(load_dotenv(dotenv_path=dotenv_path, override=False))
