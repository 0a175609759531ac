"""Content generation exports."""

from skukozh.content.generator import (
    ContentBundle,
    ReadFailure,
    generate_content,
    read_file_list,
    render_section,
    write_content,
    write_file_list,
)

__all__ = [
    "ContentBundle",
    "ReadFailure",
    "generate_content",
    "read_file_list",
    "render_section",
    "write_content",
    "write_file_list",
]
