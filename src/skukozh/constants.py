"""Project-wide constants."""

from __future__ import annotations

PACKAGE_VERSION = "0.3.0"
SCHEMA_VERSION = "1.0.0"

FILE_LIST_NAME = "skukozh_file_list.txt"
RESULT_NAME = "skukozh_result.txt"
CONFIG_FILE_NAME = "skukozh.yaml"
IGNORE_FILE_NAME = ".gitignore"

# Dependency caches and build output directories.
VENDOR_DIRS = (
    "node_modules",
    "vendor",
    "dist",
    "build",
    ".git",
    ".svn",
    ".hg",
    "bower_components",
    "target",
    "bin",
    "obj",
)

BINARY_EXTENSIONS = (
    # Images
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".ico", ".svg", ".webp",
    # Audio
    ".mp3", ".wav", ".ogg", ".flac", ".aac", ".m4a",
    # Video
    ".mp4", ".avi", ".mov", ".wmv", ".flv", ".mkv", ".webm",
    # Archives
    ".zip", ".tar", ".gz", ".rar", ".7z", ".jar", ".war",
    # Binaries
    ".exe", ".dll", ".so", ".dylib", ".bin", ".dat",
    # Documents
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx",
)

TEXT_EXTENSIONS = (
    # Programming languages
    ".go", ".py", ".js", ".ts", ".java", ".c", ".cpp", ".h", ".hpp", ".cs",
    ".php", ".rb", ".rs", ".swift",
    # Web
    ".html", ".htm", ".css", ".scss", ".sass", ".less", ".jsx", ".tsx",
    ".vue", ".svelte",
    # Config
    ".json", ".yaml", ".yml", ".toml", ".xml", ".ini", ".env",
    # Documentation and logs
    ".md", ".txt", ".rst", ".adoc", ".log",
    # Shell scripts
    ".sh", ".bash", ".zsh", ".fish", ".bat", ".cmd", ".ps1",
)
