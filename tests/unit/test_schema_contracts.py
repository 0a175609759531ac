"""Schema contract tests."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from skukozh.schemas.analysis_models import AnalysisReport, FileStats
from skukozh.schemas.discovery_models import (
    DiscoveryStats,
    TraversalOptions,
    parse_extension_list,
)
from skukozh.schemas.enums import VerdictReason


def test_extension_list_from_flag_value() -> None:
    """Comma-separated values are trimmed, lowercased and dot-prefixed."""
    assert parse_extension_list(" php, .JS ,ts,, ") == frozenset({".php", ".js", ".ts"})
    assert parse_extension_list(None) == frozenset()


def test_traversal_options_defaults_and_normalization() -> None:
    """Options normalize the allow-list and default to the strict policy."""
    options = TraversalOptions(extension_allow_list=["Go", ".rs"])
    assert options.extension_allow_list == frozenset({".go", ".rs"})
    assert not options.include_hidden
    assert not options.bypass_default_ignores
    assert not options.verbose
    assert TraversalOptions().extension_allow_list == frozenset()


def test_traversal_options_are_read_only() -> None:
    """Options cannot be toggled after construction."""
    options = TraversalOptions()
    with pytest.raises(ValidationError):
        options.include_hidden = True  # type: ignore[misc]


def test_traversal_options_reject_unknown_fields() -> None:
    """Unknown option names are rejected."""
    with pytest.raises(ValidationError):
        TraversalOptions(hidden=True)  # type: ignore[call-arg]


def test_discovery_stats_record_skip() -> None:
    """Skip counters are keyed by verdict reason."""
    stats = DiscoveryStats()
    stats.record_skip(VerdictReason.VENDOR_DIR)
    stats.record_skip(VerdictReason.VENDOR_DIR)
    stats.record_skip(VerdictReason.HIDDEN)
    assert stats.skipped_reasons.vendor_dir == 2
    assert stats.skipped_reasons.hidden == 1


def test_analysis_report_totals() -> None:
    """Derived size fields and top-N slicing."""
    report = AnalysisReport(
        total_bytes=3 * 1024 * 1024,
        total_symbols=10,
        files=[FileStats(path="a.go", size_bytes=2048, symbols=7)],
    )
    assert report.total_size_mb == 3.0
    assert report.files[0].size_kb == 2.0
    assert report.top(5) == report.files
    assert report.top(0) == []
    assert report.model_dump(mode="json")["total_size_mb"] == 3.0
