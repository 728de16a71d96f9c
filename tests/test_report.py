# Unit tests for pathglob.report.

from __future__ import annotations

import csv
from pathlib import Path

from pathglob.report import REPORT_HEADER, ReportWriter


def test_report_writer_writes_header_and_rows(tmp_path: Path) -> None:
    path = tmp_path / "reports" / "run.csv"

    with ReportWriter(path) as writer:
        writer.write("glob", "*.txt", "a.txt", "matched")
        writer.write("copy", "b.txt", None, "failed")

    with path.open("r", newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))

    assert rows == [
        REPORT_HEADER,
        ["glob", "*.txt", "a.txt", "matched"],
        ["copy", "b.txt", "", "failed"],
    ]


def test_report_writer_overwrites_previous_run(tmp_path: Path) -> None:
    path = tmp_path / "run.csv"
    path.write_text("stale\n", encoding="utf-8")

    writer = ReportWriter(path)
    writer.close()

    assert path.read_text(encoding="utf-8").splitlines() == [",".join(REPORT_HEADER)]
