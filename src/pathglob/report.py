# Run reports for pathglob.
# A report is a CSV record of what a glob or copy run did, one row per
# path, written as the run progresses.
#
# The file is overwritten per run and flushed after each row so a partial
# run still leaves a readable record.

from __future__ import annotations

import csv
from pathlib import Path
from typing import Optional

REPORT_HEADER = ["operation", "source", "target", "status"]


class ReportWriter:
    def __init__(self, path: Path):
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self.path.open("w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._fh)
        self._writer.writerow(REPORT_HEADER)

    def write(
        self,
        operation: str,
        source: str,
        target: Optional[str],
        status: str,
    ) -> None:
        self._writer.writerow([operation, source, target or "", status])
        self._fh.flush()

    def close(self) -> None:
        self._fh.close()

    def __enter__(self) -> "ReportWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
