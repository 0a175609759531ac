"""Result artifact analysis tests."""

from __future__ import annotations

from pathlib import Path

import orjson
import pytest

from skukozh.analysis.report import (
    analyze_text,
    count_symbols,
    load_result_file,
    parse_sections,
    write_report_json,
)
from skukozh.content.generator import generate_content, render_section, write_content
from skukozh.errors import ResultFileError

SAMPLE = render_section("file1.go", "package main\nfunc main() {\n}") + render_section(
    "file2.js", "function test() {\n}\nfunction other() {\n}"
)


def test_count_symbols_ignores_whitespace() -> None:
    """Spaces, tabs and newlines are not symbols."""
    assert count_symbols("a b\tc\n d") == 4
    assert count_symbols("") == 0


def test_sections_are_measured() -> None:
    """Sizes are UTF-8 byte counts of the fenced body."""
    stats = {item.path: item for item in parse_sections(SAMPLE)}
    assert stats["file1.go"].size_bytes == len("package main\nfunc main() {\n}\n")
    assert stats["file1.go"].symbols == 23


def test_report_sorted_by_size_descending() -> None:
    """The largest file comes first."""
    report = analyze_text(SAMPLE)
    assert [item.path for item in report.files] == ["file2.js", "file1.go"]
    assert report.total_bytes == len(SAMPLE.encode("utf-8"))
    assert report.total_symbols == count_symbols(SAMPLE)


def test_multibyte_content_counts_bytes() -> None:
    """Non-ASCII content is measured in bytes, not characters."""
    report = analyze_text(render_section("u.txt", "żółw"))
    assert report.files[0].size_bytes == len("żółw\n".encode("utf-8"))
    assert report.files[0].symbols == 4


def test_empty_result_has_no_files() -> None:
    """An empty artifact yields zero totals and no files."""
    report = analyze_text("")
    assert report.files == []
    assert report.total_bytes == 0


def test_malformed_sections_are_skipped() -> None:
    """Sections missing their delimiters are ignored."""
    text = "#FILE broken.go\n#TYPE go\nno markers here\n" + render_section("ok.go", "x")
    report = analyze_text(text)
    assert [item.path for item in report.files] == ["ok.go"]


def test_load_missing_result_raises(tmp_path: Path) -> None:
    """A missing result file is a typed error."""
    with pytest.raises(ResultFileError):
        load_result_file(tmp_path / "missing.txt")


def test_write_report_json(tmp_path: Path) -> None:
    """The JSON report mirrors the rendered statistics."""
    path = write_report_json(analyze_text(SAMPLE), tmp_path / "report.json")
    payload = orjson.loads(path.read_bytes())
    assert [item["path"] for item in payload["files"]] == ["file2.js", "file1.go"]
    assert "total_size_mb" in payload


def test_crlf_content_measured_in_raw_bytes(tmp_path: Path) -> None:
    """Carriage returns written to the artifact count toward its size."""
    source = tmp_path / "src"
    source.mkdir()
    (source / "a.txt").write_bytes(b"one\r\ntwo\r\nthree\r\n")
    result_path = write_content(generate_content(source, ["a.txt"]), tmp_path / "result.txt")

    report = analyze_text(load_result_file(result_path))

    assert report.total_bytes == result_path.stat().st_size
    assert report.files[0].size_bytes == len(b"one\r\ntwo\r\nthree\r\n")
