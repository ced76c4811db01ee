"""CLI entry point for equalfile."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from equalfile.core.comparator import Comparator, HashComparator, compare_all
from equalfile.core.errors import ConfigurationError
from equalfile.core.models import DEFAULT_BUFFER_SIZE, Options, OutputMode
from equalfile.output.rich_output import RichRenderer

if TYPE_CHECKING:
    from equalfile.core.models import CompareReport
    from equalfile.output.base import Renderer

EXIT_MATCH = 0
EXIT_DIFFER = 1
EXIT_USAGE = 2
EXIT_IO_ERROR = 3

app = typer.Typer(
    name="equal",
    help="Check whether files have identical content.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from equalfile import __version__

        typer.echo(f"equal {__version__}")
        raise typer.Exit()


def _parse_output_mode(value: str) -> OutputMode:
    """Parse output string to OutputMode enum."""
    try:
        return OutputMode(value)
    except ValueError:
        valid = ", ".join(o.value for o in OutputMode)
        msg = f"Invalid output mode '{value}'. Choose from: {valid}"
        raise typer.BadParameter(msg) from None


def _env_flag(name: str) -> bool:
    """Any non-empty value turns a switch on, '0' and 'false' included."""
    return bool(os.environ.get(name))


def _configure_logging(debug: bool) -> None:
    """Send equalfile debug diagnostics to stderr through Rich."""
    package_logger = logging.getLogger("equalfile")
    package_logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not debug:
        return
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def _build_comparator(
    *,
    file_count: int,
    options: Options,
    buf_size: int | None,
    no_hash: bool,
    compare_on_match: bool,
    hash_algo: str,
) -> Comparator:
    """Pick the hash-assisted comparator when more than two files are given."""
    buffer_size = buf_size if buf_size else DEFAULT_BUFFER_SIZE
    if file_count > 2 and not no_hash:
        return HashComparator(
            hash_algo,
            compare_on_match=compare_on_match,
            buffer_size=buffer_size,
            options=options,
        )
    return Comparator(buffer_size, options=options)


def _get_renderer(output_mode: OutputMode) -> Renderer:
    """Get the appropriate renderer for the output mode."""
    if output_mode == OutputMode.json:
        from equalfile.output.json_output import JsonRenderer

        return JsonRenderer()
    return RichRenderer()


def _exit_code(report: CompareReport) -> int:
    """Map a report to the process exit code."""
    if report.stats.errors:
        return EXIT_IO_ERROR
    if not report.all_equal:
        return EXIT_DIFFER
    return EXIT_MATCH


@app.command()
def main(
    files: Annotated[
        list[Path],
        typer.Argument(help="Two or more files; every pair is compared."),
    ],
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Log read statistics and hash diagnostics. (env: DEBUG)"),
    ] = False,
    force_file_read: Annotated[
        bool,
        typer.Option(
            "--force-file-read",
            help="Read contents even when both paths are the same file. (env: FORCE_FILE_READ)",
        ),
    ] = False,
    max_size: Annotated[
        int | None,
        typer.Option("--max-size", envvar="MAX_SIZE", help="Maximum bytes compared per pair."),
    ] = None,
    buf_size: Annotated[
        int | None,
        typer.Option("--buf-size", envvar="BUF_SIZE", help="Read buffer size in bytes."),
    ] = None,
    no_hash: Annotated[
        bool,
        typer.Option("--no-hash", help="Never use the hash fast path. (env: NO_HASH)"),
    ] = False,
    compare_on_match: Annotated[
        bool,
        typer.Option(
            "--compare-on-match",
            help="Confirm matching hashes byte by byte. (env: COMPARE_ON_MATCH)",
        ),
    ] = False,
    hash_algo: Annotated[
        str,
        typer.Option("--hash", help="Hash algorithm for the fast path."),
    ] = "sha256",
    output: Annotated[
        str,
        typer.Option("--output", "-o", help="Output mode: rich or json."),
    ] = "rich",
    stat: Annotated[
        bool,
        typer.Option("--stat", help="Show only summary statistics."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Check whether files have identical content.

    Every pair of FILES is compared. Exit codes: 0 all files match,
    1 some files differ, 2 usage error, 3 I/O error. A switch is also
    turned on by setting its environment variable to any non-empty value.
    """
    debug = debug or _env_flag("DEBUG")
    force_file_read = force_file_read or _env_flag("FORCE_FILE_READ")
    no_hash = no_hash or _env_flag("NO_HASH")
    compare_on_match = compare_on_match or _env_flag("COMPARE_ON_MATCH")

    if len(files) < 2:
        typer.echo("Error: at least two files are required", err=True)
        raise typer.Exit(code=EXIT_USAGE)

    _configure_logging(debug)

    try:
        output_mode = _parse_output_mode(output)
        options = Options(debug=debug, force_file_read=force_file_read, max_size=max_size)
        comparator = _build_comparator(
            file_count=len(files),
            options=options,
            buf_size=buf_size,
            no_hash=no_hash,
            compare_on_match=compare_on_match,
            hash_algo=hash_algo,
        )
        report = compare_all(comparator, files)
    except ConfigurationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=EXIT_USAGE) from None

    renderer = _get_renderer(output_mode)
    if stat:
        renderer.render_stats(report.stats)
    else:
        renderer.render(report)

    raise typer.Exit(code=_exit_code(report))
