from __future__ import annotations

from logging import Logger
from typing import Optional

from concacti.constants import DEFAULT_BUFFER_SIZE, DEFAULT_COMMENT_STYLE
from concacti.cli import Concacti, main
from concacti.core.errors import (
    ConcactiError,
    ConfigError,
    EngineError,
    EngineFilterError,
    EngineIOError,
    FilterError,
    InvalidPatternError,
    OutputCreateError,
    PathResolveError,
)
from concacti.core.models import ConcatConfig, EntryKind, Pattern, WalkEntry
from concacti.core.report import ExecutionReport
from concacti.io.walker import DirectoryWalker
from concacti.matching.path_matcher import PatternSet, build as build_patterns
from concacti.rendering.execution import ConcatenationEngine
from concacti.rendering.tree import DirectoryTreeRenderer, TreeNode
from concacti.runtime.runner import EngineRunner
from concacti.runtime.wiring import build_engine

__version__ = '0.3.0'


def concatenate(config: ConcatConfig, *, logger: Optional[Logger] = None) -> ExecutionReport:
    """Run one concatenation with the default collaborators.

    Equivalent to ``build_engine(logger=logger).run(config)``.
    """
    return build_engine(logger=logger).run(config)


__all__ = [
    'Concacti',
    'ConcatConfig',
    'ConcatenationEngine',
    'ConcactiError',
    'ConfigError',
    'DEFAULT_BUFFER_SIZE',
    'DEFAULT_COMMENT_STYLE',
    'DirectoryTreeRenderer',
    'DirectoryWalker',
    'EngineError',
    'EngineFilterError',
    'EngineIOError',
    'EngineRunner',
    'EntryKind',
    'ExecutionReport',
    'FilterError',
    'InvalidPatternError',
    'OutputCreateError',
    'PathResolveError',
    'Pattern',
    'PatternSet',
    'TreeNode',
    'WalkEntry',
    'build_engine',
    'build_patterns',
    'concatenate',
    'main',
]
