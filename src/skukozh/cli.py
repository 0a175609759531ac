"""CLI for skukozh."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from skukozh.analysis import analyze_text, load_result_file, write_report_json
from skukozh.config import AppConfig, load_app_config
from skukozh.constants import PACKAGE_VERSION
from skukozh.content import (
    generate_content,
    read_file_list,
    write_content,
    write_file_list,
)
from skukozh.discovery import discover
from skukozh.errors import (
    FileListError,
    ResultFileError,
    RootAccessError,
    SkukozhError,
)
from skukozh.observability import configure_logging
from skukozh.runtime_env import env_flag
from skukozh.schemas.analysis_models import AnalysisReport
from skukozh.schemas.discovery_models import TraversalOptions

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="skukozh packs a codebase into a single text snapshot for LLM context.",
)
console = Console()

CONFIG_OPTION_HELP = "Path to skukozh.yaml override."
OUTPUT_DIR_HELP = "Directory holding the file list and result artifacts."


@app.command()
def version() -> None:
    """Print the skukozh version."""
    typer.echo(PACKAGE_VERSION)


@app.command("validate-config")
def validate_config(
    config: Path | None = typer.Option(None, "--config", help=CONFIG_OPTION_HELP),
) -> None:
    """Validate configuration and print the effective settings."""
    cfg = _load_config_or_exit(config)

    table = Table(title="Effective Configuration")
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("ignore file", cfg.scan_policy.ignore_file_name)
    table.add_row("vendor dirs", str(len(cfg.scan_policy.vendor_dirs)))
    table.add_row("binary extensions", str(len(cfg.scan_policy.binary_extensions)))
    table.add_row("text extensions", str(len(cfg.scan_policy.text_extensions)))
    table.add_row("exclude globs", ", ".join(cfg.scan_policy.exclude_globs) or "-")
    table.add_row("file list", cfg.outputs.file_list_name)
    table.add_row("result file", cfg.outputs.result_name)
    table.add_row("strip blank lines", str(cfg.content.strip_blank_lines))
    table.add_row("top count", str(cfg.analysis.top_count))
    console.print(table)


@app.command("find")
def find(
    directory: Path = typer.Argument(..., help="Directory to scan."),
    ext: str | None = typer.Option(
        None, "--ext", help="Comma-separated list of file extensions (e.g. 'php,js,ts')."
    ),
    no_ignore: bool = typer.Option(
        False, "--no-ignore", help="Don't apply default ignores for vendor dirs and binaries."
    ),
    hidden: bool = typer.Option(
        False, "--hidden", help="Include hidden files and don't follow .gitignore rules."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Narrate every admit/skip decision."
    ),
    exclude: list[str] | None = typer.Option(
        None, "--exclude", help="Extra gitignore-style exclude pattern (repeatable)."
    ),
    config: Path | None = typer.Option(None, "--config", help=CONFIG_OPTION_HELP),
    output_dir: Path = typer.Option(Path("."), "--output-dir", help=OUTPUT_DIR_HELP),
) -> None:
    """Find files and create the file list."""
    verbose = _resolve_verbose(verbose)
    cfg = _load_config_or_exit(config, cli_overrides={"exclude_globs": exclude})
    options = TraversalOptions(
        extension_allow_list=ext,
        include_hidden=hidden,
        bypass_default_ignores=no_ignore,
        verbose=verbose,
    )
    try:
        result = discover(directory, options, cfg.scan_policy, cfg.outputs)
    except RootAccessError as exc:
        console.print(f"[red]Error walking directory:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if not result.files:
        if hidden:
            console.print("No files found even with hidden files included.")
        else:
            console.print(
                "No files found! Use --hidden flag to include all files "
                "and override .gitignore."
            )
        return

    try:
        list_path = write_file_list(
            result.files, output_dir / cfg.outputs.file_list_name
        )
    except FileListError as exc:
        console.print(f"[red]Error writing file list:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    console.print(
        f"Found {len(result)} files. File list saved to {escape(str(list_path))}"
    )


@app.command("gen")
def gen(
    directory: Path = typer.Argument(..., help="Base directory of the listed files."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging."),
    config: Path | None = typer.Option(None, "--config", help=CONFIG_OPTION_HELP),
    output_dir: Path = typer.Option(Path("."), "--output-dir", help=OUTPUT_DIR_HELP),
) -> None:
    """Generate the content file from the file list."""
    _resolve_verbose(verbose)
    cfg = _load_config_or_exit(config)
    if not directory.is_dir():
        console.print(
            f"[red]Error:[/red] {escape(str(directory))} is not a directory"
        )
        raise typer.Exit(code=1)

    try:
        files = read_file_list(output_dir / cfg.outputs.file_list_name)
    except FileListError as exc:
        console.print(f"[red]Error reading file list:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    bundle = generate_content(
        directory, files, strip_blank_lines=cfg.content.strip_blank_lines
    )
    for failure in bundle.failures:
        console.print(
            f"[yellow]Error reading file {escape(failure.path)}:[/yellow] "
            f"{escape(failure.error)}"
        )

    try:
        result_path = write_content(bundle, output_dir / cfg.outputs.result_name)
    except ResultFileError as exc:
        console.print(f"[red]Error writing result file:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    console.print(f"Content file saved to {escape(str(result_path))}")


@app.command("analyze")
def analyze(
    count: int | None = typer.Option(
        None, "--count", min=1, help="Number of largest files to show (default 20)."
    ),
    json_path: Path | None = typer.Option(
        None, "--json", help="Also write the report as JSON to this path."
    ),
    config: Path | None = typer.Option(None, "--config", help=CONFIG_OPTION_HELP),
    output_dir: Path = typer.Option(Path("."), "--output-dir", help=OUTPUT_DIR_HELP),
) -> None:
    """Analyze the result file."""
    cfg = _load_config_or_exit(config, cli_overrides={"top_count": count})
    try:
        text = load_result_file(output_dir / cfg.outputs.result_name)
    except ResultFileError as exc:
        console.print(f"[red]Error reading result file:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    report = analyze_text(text)
    _render_report(report, cfg.analysis.top_count)

    if json_path is not None:
        try:
            write_report_json(report, json_path)
        except ResultFileError as exc:
            console.print(f"[red]Error writing report:[/red] {escape(str(exc))}")
            raise typer.Exit(code=1) from exc
        console.print(f"Report saved to {escape(str(json_path))}")


app.command("f", hidden=True, help="Alias for find.")(find)
app.command("g", hidden=True, help="Alias for gen.")(gen)
app.command("a", hidden=True, help="Alias for analyze.")(analyze)


def _resolve_verbose(verbose: bool) -> bool:
    verbose = verbose or env_flag("SKUKOZH_DEBUG")
    configure_logging(verbose)
    return verbose


def _load_config_or_exit(
    config: Path | None,
    cli_overrides: dict[str, object] | None = None,
) -> AppConfig:
    try:
        return load_app_config(config, cli_overrides=cli_overrides)
    except SkukozhError as exc:
        console.print(f"[red]Configuration validation failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _render_report(report: AnalysisReport, top_count: int) -> None:
    console.print()
    console.print("[bold]Analysis Report[/bold]")
    console.print("===============")
    console.print(f"Total file size: {report.total_size_mb:.2f} MB")
    console.print(f"Total symbols: {report.total_symbols}")
    console.print()

    if not report.files:
        console.print("No files found in the result file.")
        return

    table = Table(title=f"Top {top_count} largest files")
    table.add_column("File")
    table.add_column("Size (KB)", justify="right")
    table.add_column("Symbols", justify="right")
    for item in report.top(top_count):
        table.add_row(escape(item.path), f"{item.size_kb:.2f}", str(item.symbols))
    console.print(table)
