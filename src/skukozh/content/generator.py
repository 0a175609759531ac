"""Concatenate discovered files into the delimited result artifact."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from skukozh.discovery.ignore_policy import file_extension
from skukozh.errors import FileListError, ResultFileError

LOGGER = logging.getLogger(__name__)

FILE_MARKER = "#FILE "
TYPE_MARKER = "#TYPE "
START_MARKER = "#START"
END_MARKER = "#END"
FENCE = "```"


@dataclass(frozen=True)
class ReadFailure:
    """File listed for inclusion that could not be read."""

    path: str
    error: str


@dataclass
class ContentBundle:
    """Rendered result text plus per-file outcomes."""

    text: str
    included: list[str] = field(default_factory=list)
    failures: list[ReadFailure] = field(default_factory=list)


def read_file_list(path: Path) -> list[str]:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileListError(f"Could not read file list '{path}': {exc}") from exc
    lines = (line.rstrip("\r") for line in content.split("\n"))
    return [line for line in lines if line.strip()]


def write_file_list(files: list[str] | tuple[str, ...], path: Path) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("".join(f"{item}\n" for item in files), encoding="utf-8")
    except OSError as exc:
        raise FileListError(f"Could not write file list '{path}': {exc}") from exc
    return path


def _strip_blank_lines(text: str) -> str:
    return "\n".join(line for line in text.split("\n") if line.strip())


def render_section(rel_path: str, content: str) -> str:
    """Render one file as a delimited, fenced block."""
    lang = file_extension(rel_path.rsplit("/", 1)[-1]).lstrip(".")
    if not content.endswith("\n"):
        content += "\n"
    return (
        f"{FILE_MARKER}{rel_path}\n"
        f"{TYPE_MARKER}{lang}\n"
        f"{START_MARKER}\n"
        f"{FENCE}{lang}\n"
        f"{content}"
        f"{FENCE}\n"
        f"{END_MARKER}\n\n"
    )


def generate_content(
    base_dir: Path,
    files: list[str],
    *,
    strip_blank_lines: bool = True,
) -> ContentBundle:
    """Read every listed file below ``base_dir`` and concatenate the sections."""
    sections: list[str] = []
    bundle = ContentBundle(text="")
    for rel_path in files:
        full_path = base_dir / rel_path
        try:
            raw = full_path.read_bytes()
        except OSError as exc:
            LOGGER.info("Error reading file %s: %s", full_path, exc)
            bundle.failures.append(ReadFailure(path=rel_path, error=str(exc)))
            continue

        content = raw.decode("utf-8", errors="replace")
        if strip_blank_lines:
            content = _strip_blank_lines(content)
        sections.append(render_section(rel_path, content))
        bundle.included.append(rel_path)

    bundle.text = "".join(sections)
    return bundle


def write_content(bundle: ContentBundle, path: Path) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(bundle.text, encoding="utf-8")
    except OSError as exc:
        raise ResultFileError(f"Could not write result file '{path}': {exc}") from exc
    return path
