"""Result analysis exports."""

from skukozh.analysis.report import (
    analyze_text,
    count_symbols,
    load_result_file,
    parse_sections,
    write_report_json,
)

__all__ = [
    "analyze_text",
    "count_symbols",
    "load_result_file",
    "parse_sections",
    "write_report_json",
]
