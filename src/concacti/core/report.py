from __future__ import annotations

"""
Detailed runtime execution report.

Counters are filled by the ConcatenationEngine while a run progresses, so
a report returned after a failure still describes the partial output that
was left on disk.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ExecutionReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    root: str | None = None
    output: str | None = None

    files_visited: int = 0
    files_written: int = 0
    skipped_by_filter: int = 0
    skipped_non_file: int = 0
    skipped_self: int = 0

    bytes_written: int = 0

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {
            "tree": 0.0,
            "walk": 0.0,
        }
    )

    errors: List[str] = field(default_factory=list)

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def ok(self) -> bool:
        return not self.errors

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "root": self.root,
                "output": self.output,
                "files_visited": self.files_visited,
                "files_written": self.files_written,
                "skipped_by_filter": self.skipped_by_filter,
                "skipped_non_file": self.skipped_non_file,
                "skipped_self": self.skipped_self,
                "bytes_written": self.bytes_written,
                "time_by_stage": self.time_by_stage,
                "errors": self.errors,
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, report: ExecutionReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False
