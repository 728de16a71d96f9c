# Core orchestration logic for pathglob.
# This file coordinates expansion, copying, reporting, and console output
# for the command-line interface.
#
# It intentionally contains no CLI parsing and no path or pattern logic.

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from rich.console import Console
from rich.markup import escape

from pathglob.fileops import check_copy, copy
from pathglob.listing import Lister, get_lister
from pathglob.models import Convention, CopyOptions, CopyResult, EntryFilter, GlobOptions
from pathglob.paths import normalize, split
from pathglob.patterns import match_segment
from pathglob.report import ReportWriter
from pathglob.traverse import eglob, glob

# Paths can be long; never wrap them mid-way.
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


# Simple counters used for the mandatory summary block.
@dataclass
class GlobCounters:
    patterns: int = 0
    matched: int = 0
    empty: int = 0


@dataclass
class CopyCounters:
    copied: int = 0
    failed: int = 0


def run_normalize(paths: Iterable[str], convention: Convention) -> List[str]:
    results = [normalize(p, convention.sep) for p in paths]
    for result in results:
        console.print(result, markup=False, highlight=False)
    return results


def run_split(path: str, convention: Convention) -> None:
    parts = split(path, convention.sep)
    # repr() keeps empty segments and backslashes visible.
    console.print(f"Prefix:   {parts.prefix!r}", markup=False, highlight=False)
    console.print(f"Absolute: {parts.is_absolute}", markup=False, highlight=False)
    console.print("Segments:")
    for seg in parts.segments:
        console.print(f"  {seg!r}", markup=False, highlight=False)


def run_match(name: str, pattern: str) -> bool:
    matched = match_segment(pattern, name)
    if matched:
        console.print(f"[green]Match:[/green] {escape(name)}")
    else:
        console.print(f"[yellow]No match:[/yellow] {escape(name)}")
    return matched


def run_glob(patterns: Iterable[str], opts: GlobOptions) -> int:
    # Expand each pattern in turn and print every match.
    # Returns the total number of matches printed.
    counters = GlobCounters()
    lister = get_lister(opts.lister)
    report_writer = ReportWriter(opts.report_path) if opts.report_path else None

    try:
        for pattern in patterns:
            counters.patterns += 1
            found = 0
            for match in _expand_one(pattern, opts, lister):
                found += 1
                console.print(match, markup=False, highlight=False)
                if report_writer:
                    report_writer.write("glob", pattern, match, "matched")

            if not found:
                counters.empty += 1
                console.print(f"[yellow]No matches:[/yellow] {escape(pattern)}")
            counters.matched += found
    finally:
        if report_writer:
            report_writer.close()

    _print_glob_summary(counters, opts)
    return counters.matched


def _expand_one(pattern: str, opts: GlobOptions, lister: Lister) -> Iterator[str]:
    expand = glob if opts.simple else eglob
    matches: Iterable[str] = expand(pattern, sep=opts.convention.sep, lister=lister)
    if opts.sort:
        matches = sorted(matches)

    for match in matches:
        if opts.only is EntryFilter.files and lister.is_dir(match):
            continue
        if opts.only is EntryFilter.dirs and not lister.is_dir(match):
            continue
        yield match


def run_copy(sources: List[str], destination: str, opts: CopyOptions) -> bool:
    # Entry point for bulk copies.
    # Returns True only when every source was copied (or would be, in a dry run).
    counters = CopyCounters()
    report_writer = ReportWriter(opts.report_path) if opts.report_path else None

    try:
        if opts.dry_run:
            # Same preconditions as a real run, so a preview never promises
            # a copy that would fail.
            result = check_copy(sources, destination, create_destination=opts.create)
            if result.ok:
                for source, target in zip(sources, result.copied):
                    console.print(f"DRY RUN: {escape(source)} -> {escape(target)}")
                    if report_writer:
                        report_writer.write("copy", source, target, "dry-run")
            else:
                _print_copy_result(sources, result, counters, report_writer)
            ok = result.ok
        else:
            result = copy(sources, destination, create_destination=opts.create)
            _print_copy_result(sources, result, counters, report_writer)
            ok = result.ok
    finally:
        if report_writer:
            report_writer.close()

    _print_copy_summary(counters, opts)
    return ok


def _print_copy_result(
    sources: List[str],
    result: CopyResult,
    counters: CopyCounters,
    report_writer: Optional[ReportWriter],
) -> None:
    # copied targets line up with the leading sources, in order.
    for source, target in zip(sources, result.copied):
        counters.copied += 1
        console.print(f"Copied: {escape(source)} -> {escape(target)}")
        if report_writer:
            report_writer.write("copy", source, target, "copied")

    if result.failure is not None:
        counters.failed += 1
        failure = result.failure
        err_console.print(
            f"[red]FAILED ({failure.kind.value}):[/red] {escape(failure.path)} ({escape(failure.message)})"
        )
        if report_writer:
            report_writer.write("copy", failure.path, None, "failed")


def _print_glob_summary(counters: GlobCounters, opts: GlobOptions) -> None:
    # Mandatory summary block printed at end of every run.
    console.print()
    console.print("[bold]Summary[/bold]")
    console.print(f"Patterns:   {counters.patterns}")
    console.print(f"Matched:    {counters.matched}")
    console.print(f"No matches: {counters.empty}")
    if opts.report_path:
        console.print(f"Report:     {escape(str(opts.report_path))}")


def _print_copy_summary(counters: CopyCounters, opts: CopyOptions) -> None:
    console.print()
    console.print("[bold]Summary[/bold]")
    console.print(f"Copied: {counters.copied}")
    console.print(f"Failed: {counters.failed}")
    if opts.report_path:
        console.print(f"Report: {escape(str(opts.report_path))}")
