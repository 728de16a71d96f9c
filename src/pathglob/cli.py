# Command-line interface definition for pathglob.
# This file is responsible only for argument parsing, validation,
# and dispatch into core application logic.
#
# No filesystem access or path logic should live here.

from __future__ import annotations

from pathlib import Path as FSPath
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from pathglob import __version__
from pathglob.core import run_copy, run_glob, run_match, run_normalize, run_split
from pathglob.errors import PathGlobError
from pathglob.listing import DEFAULT_LISTER
from pathglob.models import Convention, CopyOptions, EntryFilter, GlobOptions

app = typer.Typer(
    add_completion=False,
    help="Normalize paths, match wildcards, and expand recursive globs.",
)
console = Console()
err_console = Console(stderr=True)


def _resolve_filter(files_only: bool, dirs_only: bool) -> EntryFilter:
    # At most one entry filter may be active.
    if files_only and dirs_only:
        raise typer.BadParameter("--files-only and --dirs-only are mutually exclusive")
    if files_only:
        return EntryFilter.files
    if dirs_only:
        return EntryFilter.dirs
    return EntryFilter.all


def _fail(exc: PathGlobError) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(code=2)


def _version_callback(value: bool) -> None:
    # Handle version early and exit cleanly.
    if value:
        console.print(__version__)
        raise typer.Exit(code=0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
):
    pass


@app.command(help="Print the normalized form of each path.")
def normalize(
    paths: List[str] = typer.Argument(..., help="Paths to normalize."),
    convention: Optional[Convention] = typer.Option(
        None, "--convention",
        help="Path convention. Defaults to the host platform.",
    ),
):
    run_normalize(paths, convention or Convention.host())


@app.command(help="Show the prefix, absoluteness, and segments of a path.")
def split(
    path: str = typer.Argument(..., help="Path to split."),
    convention: Optional[Convention] = typer.Option(
        None, "--convention",
        help="Path convention. Defaults to the host platform.",
    ),
):
    run_split(path, convention or Convention.host())


@app.command(help="Test one name against a wildcard pattern; exit 1 if it does not match.")
def match(
    name: str = typer.Argument(..., help="Name to test (a single path segment)."),
    pattern: str = typer.Argument(..., help="Wildcard pattern, e.g. '[!a-r]*.c'."),
):
    try:
        matched = run_match(name, pattern)
    except PathGlobError as exc:
        _fail(exc)
    raise typer.Exit(code=0 if matched else 1)


@app.command(help="Expand glob patterns, including recursive '**' segments.")
def glob(
    patterns: List[str] = typer.Argument(..., help="Glob patterns. Quote them to keep the shell out."),

    # Expansion.
    simple: bool = typer.Option(
        False, "--simple",
        help="Treat '**' like '*' (no recursive descent).",
        rich_help_panel="Expansion",
    ),
    sort: bool = typer.Option(
        False, "--sort",
        help="Sort matches of each pattern before printing.",
        rich_help_panel="Expansion",
    ),
    convention: Optional[Convention] = typer.Option(
        None, "--convention",
        help="Path convention. Defaults to the host platform.",
        rich_help_panel="Expansion",
    ),
    lister: str = typer.Option(
        DEFAULT_LISTER, "--lister",
        help="Directory listing back end (scandir, pathlib).",
        rich_help_panel="Expansion",
    ),

    # Filtering.
    files_only: bool = typer.Option(
        False, "--files-only",
        help="Only print matches that are not directories.",
        rich_help_panel="Filtering",
    ),
    dirs_only: bool = typer.Option(
        False, "--dirs-only",
        help="Only print matches that are directories.",
        rich_help_panel="Filtering",
    ),

    report_path: Optional[FSPath] = typer.Option(
        None, "--report",
        help="Write a CSV report of all matches to this path.",
    ),
):
    opts = GlobOptions(
        convention=convention or Convention.host(),
        simple=simple,
        only=_resolve_filter(files_only, dirs_only),
        sort=sort,
        lister=lister,
        report_path=report_path,
    )
    try:
        run_glob(patterns, opts)
    except PathGlobError as exc:
        _fail(exc)


@app.command(help="Copy files into a directory; exit 1 unless every file was copied.")
def copy(
    paths: List[str] = typer.Argument(..., help="Source files followed by the destination directory."),
    create: bool = typer.Option(
        False, "--create",
        help="Create the destination directory if it does not exist.",
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run",
        help="Preview copies without making changes.",
    ),
    report_path: Optional[FSPath] = typer.Option(
        None, "--report",
        help="Write a CSV report of the copy to this path.",
    ),
):
    if len(paths) < 2:
        raise typer.BadParameter("expected at least one source and a destination directory")

    *sources, destination = paths
    opts = CopyOptions(create=create, dry_run=dry_run, report_path=report_path)
    if not run_copy(sources, destination, opts):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
