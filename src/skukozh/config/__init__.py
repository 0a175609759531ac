"""Configuration exports."""

from skukozh.config.loader import DEFAULT_CONFIG_PATH, load_app_config
from skukozh.config.models import (
    AnalysisConfig,
    AppConfig,
    ContentConfig,
    OutputConfig,
    ScanPolicyConfig,
)

__all__ = [
    "AnalysisConfig",
    "AppConfig",
    "ContentConfig",
    "DEFAULT_CONFIG_PATH",
    "OutputConfig",
    "ScanPolicyConfig",
    "load_app_config",
]
