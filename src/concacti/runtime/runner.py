from __future__ import annotations
import argparse
from typing import Optional, Sequence

from concacti.core.interfaces.engine import EngineRunnerProtocol
from concacti.core.models import ConcatConfig
from concacti.core.report import ExecutionReport
from concacti.logging.helpers import get_logger
from concacti.parsing.parser import _build_parser
from concacti.rendering.execution import ConcatenationEngine
from concacti.runtime.settings import config_from_namespace
from concacti.runtime.wiring import build_engine


class EngineRunner(EngineRunnerProtocol):
    def __init__(self, *, engine: Optional[ConcatenationEngine] = None, logger=None) -> None:
        self._log = logger or get_logger("runner")
        self._engine = engine or build_engine()

    @staticmethod
    def parse_argv(argv: Sequence[str]) -> argparse.Namespace:
        """Parse CLI flags; usage errors exit with status 2."""
        return _build_parser().parse_args(list(argv))

    def run(self, config: ConcatConfig) -> ExecutionReport:
        return self._engine.run(config)

    def run_namespace(self, ns: argparse.Namespace) -> ExecutionReport:
        config = config_from_namespace(ns)
        self._log.debug("config: %r", config)
        return self.run(config)

    def run_argv(self, argv: Sequence[str]) -> ExecutionReport:
        return self.run_namespace(self.parse_argv(argv))
