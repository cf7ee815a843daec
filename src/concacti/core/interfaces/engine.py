from __future__ import annotations

"""
Protocol describing a minimal execution surface for engine runners.

NOTE:
    ConcatenationEngine implements `run`; EngineRunner adds the argv entry
    point used by the CLI.
"""

from typing import Protocol, Sequence

from concacti.core.models import ConcatConfig
from concacti.core.report import ExecutionReport


class ConcatEngineProtocol(Protocol):
    def run(self, config: ConcatConfig) -> ExecutionReport:
        ...


class EngineRunnerProtocol(ConcatEngineProtocol, Protocol):
    def run_argv(self, argv: Sequence[str]) -> ExecutionReport:
        ...
