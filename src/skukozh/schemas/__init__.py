"""Schema exports."""

from skukozh.schemas.analysis_models import AnalysisReport, FileStats
from skukozh.schemas.base import FrozenSchemaModel, StrictSchemaModel
from skukozh.schemas.discovery_models import (
    DiscoveryStats,
    SkipReasons,
    TraversalOptions,
    normalize_extension,
    parse_extension_list,
)
from skukozh.schemas.enums import VerdictReason

__all__ = [
    "AnalysisReport",
    "DiscoveryStats",
    "FileStats",
    "FrozenSchemaModel",
    "SkipReasons",
    "StrictSchemaModel",
    "TraversalOptions",
    "VerdictReason",
    "normalize_extension",
    "parse_extension_list",
]
