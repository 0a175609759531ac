"""Statistics over the concatenated result artifact."""

from __future__ import annotations

from pathlib import Path

import orjson

from skukozh.content.generator import END_MARKER, FENCE, FILE_MARKER, START_MARKER
from skukozh.errors import ResultFileError
from skukozh.schemas.analysis_models import AnalysisReport, FileStats

_CONTENT_START = f"{START_MARKER}\n{FENCE}"
_CONTENT_END = f"{FENCE}\n{END_MARKER}"


def count_symbols(text: str) -> int:
    """Count characters that are not whitespace."""
    return sum(1 for char in text if not char.isspace())


def _parse_section(section: str) -> FileStats | None:
    path = section.split("\n", 1)[0].strip()
    if not path:
        return None

    start = section.find(_CONTENT_START)
    if start == -1:
        return None
    start += len(_CONTENT_START)
    # Skip the language tag on the opening fence.
    newline = section.find("\n", start)
    if newline == -1:
        return None
    start = newline + 1

    end = section.find(_CONTENT_END, start)
    if end == -1:
        return None

    body = section[start:end]
    return FileStats(
        path=path,
        size_bytes=len(body.encode("utf-8")),
        symbols=count_symbols(body),
    )


def parse_sections(text: str) -> list[FileStats]:
    """Extract per-file statistics; malformed sections are skipped."""
    sections = text.split(FILE_MARKER)[1:]
    parsed = (_parse_section(section) for section in sections)
    return [item for item in parsed if item is not None]


def analyze_text(text: str) -> AnalysisReport:
    files = sorted(parse_sections(text), key=lambda item: item.size_bytes, reverse=True)
    return AnalysisReport(
        total_bytes=len(text.encode("utf-8")),
        total_symbols=count_symbols(text),
        files=files,
    )


def load_result_file(path: Path) -> str:
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResultFileError(f"Could not read result file '{path}': {exc}") from exc


def write_report_json(report: AnalysisReport, path: Path) -> Path:
    """Write the report as indented JSON."""
    payload = orjson.dumps(report.model_dump(mode="json"), option=orjson.OPT_INDENT_2)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload + b"\n")
    except OSError as exc:
        raise ResultFileError(f"Could not write report '{path}': {exc}") from exc
    return path
