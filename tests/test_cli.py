# Tests for the pathglob command-line interface.
# These drive the typer app end to end through CliRunner.

from __future__ import annotations

import csv
import os
from pathlib import Path

from typer.testing import CliRunner

from pathglob import __version__
from pathglob.cli import app

runner = CliRunner()


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_normalize_posix() -> None:
    result = runner.invoke(
        app, ["normalize", "--convention", "posix", "/foo/../bar/////baz", "//", ""]
    )
    assert result.exit_code == 0
    assert result.output.splitlines() == ["/bar/baz", "//", "."]


def test_normalize_windows() -> None:
    result = runner.invoke(
        app, ["normalize", "--convention", "windows", "\\\\server\\foo\\bar\\..\\baz"]
    )
    assert result.exit_code == 0
    assert result.output.strip() == "\\\\server\\foo\\baz"


def test_split_shows_segments() -> None:
    result = runner.invoke(app, ["split", "--convention", "windows", "c:\\foo\\bar"])
    assert result.exit_code == 0
    assert "'c:'" in result.output
    assert "Absolute: True" in result.output
    assert "'foo'" in result.output
    assert "'bar'" in result.output


def test_match_exit_codes() -> None:
    assert runner.invoke(app, ["match", "sabc", "[^a-r]*"]).exit_code == 0
    assert runner.invoke(app, ["match", "radfa.c", "[!a-r]*"]).exit_code == 1


def test_match_bad_pattern() -> None:
    result = runner.invoke(app, ["match", "abc", "[a-z"])
    assert result.exit_code == 2


def test_glob_prints_matches_and_summary(tmp_path: Path) -> None:
    for sub in ("d1", "d2"):
        (tmp_path / sub).mkdir()
        (tmp_path / sub / "a.scala").write_text("", encoding="utf-8")
        (tmp_path / sub / "README.md").write_text("", encoding="utf-8")

    pattern = os.path.join(str(tmp_path), "**", "*.scala")
    result = runner.invoke(app, ["glob", "--sort", pattern])

    assert result.exit_code == 0
    assert str(tmp_path / "d1" / "a.scala") in result.output
    assert str(tmp_path / "d2" / "a.scala") in result.output
    assert "README.md" not in result.output
    assert "Matched:    2" in result.output


def test_glob_dirs_only_and_files_only(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    (tmp_path / "file.txt").write_text("", encoding="utf-8")
    pattern = os.path.join(str(tmp_path), "*")

    dirs = runner.invoke(app, ["glob", "--dirs-only", pattern])
    files = runner.invoke(app, ["glob", "--files-only", pattern])

    assert str(tmp_path / "sub") in dirs.output
    assert str(tmp_path / "file.txt") not in dirs.output
    assert str(tmp_path / "file.txt") in files.output
    assert "Matched:    1" in files.output


def test_glob_rejects_conflicting_filters(tmp_path: Path) -> None:
    result = runner.invoke(app, ["glob", "--dirs-only", "--files-only", str(tmp_path)])
    assert result.exit_code != 0


def test_glob_no_matches_is_not_an_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["glob", os.path.join(str(tmp_path), "*.scala")])
    assert result.exit_code == 0
    assert "No matches" in result.output


def test_glob_bad_pattern_exits_2() -> None:
    result = runner.invoke(app, ["glob", "[a-z"])
    assert result.exit_code == 2


def test_glob_unknown_lister_exits_2(tmp_path: Path) -> None:
    result = runner.invoke(app, ["glob", "--lister", "ftp", str(tmp_path)])
    assert result.exit_code == 2


def test_glob_writes_report(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("", encoding="utf-8")
    report = tmp_path / "report.csv"
    pattern = os.path.join(str(tmp_path), "*.txt")

    result = runner.invoke(app, ["glob", "--report", str(report), pattern])

    assert result.exit_code == 0
    with report.open("r", newline="", encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))
    assert rows == [
        {
            "operation": "glob",
            "source": pattern,
            "target": str(tmp_path / "a.txt"),
            "status": "matched",
        }
    ]


def test_copy_success(tmp_path: Path) -> None:
    source = tmp_path / "a.txt"
    source.write_text("payload", encoding="utf-8")
    dest = tmp_path / "out"

    result = runner.invoke(app, ["copy", "--create", str(source), str(dest)])

    assert result.exit_code == 0
    assert (dest / "a.txt").read_text(encoding="utf-8") == "payload"
    assert "Copied: 1" in result.output


def test_copy_failure_exit_code(tmp_path: Path) -> None:
    source = tmp_path / "a.txt"
    source.write_text("payload", encoding="utf-8")

    result = runner.invoke(app, ["copy", str(source), str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert not (tmp_path / "missing").exists()


def test_copy_dry_run_writes_nothing(tmp_path: Path) -> None:
    source = tmp_path / "a.txt"
    source.write_text("payload", encoding="utf-8")
    dest = tmp_path / "out"
    dest.mkdir()

    result = runner.invoke(app, ["copy", "--dry-run", str(source), str(dest)])

    assert result.exit_code == 0
    assert "DRY RUN" in result.output
    assert list(dest.iterdir()) == []


def test_copy_dry_run_checks_preconditions(tmp_path: Path) -> None:
    source = tmp_path / "a.txt"
    source.write_text("payload", encoding="utf-8")
    missing = tmp_path / "missing"

    result = runner.invoke(app, ["copy", "--dry-run", str(source), str(missing)])

    assert result.exit_code == 1
    assert "DRY RUN" not in result.output
    assert "Failed: 1" in result.output
    assert not missing.exists()


def test_copy_dry_run_with_create_leaves_destination_alone(tmp_path: Path) -> None:
    source = tmp_path / "a.txt"
    source.write_text("payload", encoding="utf-8")
    dest = tmp_path / "out"

    result = runner.invoke(app, ["copy", "--dry-run", "--create", str(source), str(dest)])

    assert result.exit_code == 0
    assert "DRY RUN" in result.output
    assert not dest.exists()



def test_copy_needs_source_and_destination(tmp_path: Path) -> None:
    result = runner.invoke(app, ["copy", str(tmp_path)])
    assert result.exit_code != 0
