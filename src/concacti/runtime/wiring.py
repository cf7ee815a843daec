from __future__ import annotations

import logging
from typing import Optional

from concacti.core.interfaces import MatcherFactoryProtocol, TreeRendererProtocol, WalkerProtocol
from concacti.io.walker import DirectoryWalker
from concacti.logging.helpers import get_logger
from concacti.matching.path_matcher import build as build_patterns
from concacti.rendering.execution import ConcatenationEngine
from concacti.rendering.tree import DirectoryTreeRenderer


def build_engine(
    *,
    logger: Optional[logging.Logger] = None,
    walker: Optional[WalkerProtocol] = None,
    tree_renderer: Optional[TreeRendererProtocol] = None,
    matcher_factory: Optional[MatcherFactoryProtocol] = None,
) -> ConcatenationEngine:
    """Wire default collaborators into a ConcatenationEngine; every one is overridable."""
    lg = logger or get_logger('engine')
    return ConcatenationEngine(
        walker=walker or DirectoryWalker(logger=get_logger('io.walker')),
        tree_renderer=tree_renderer or DirectoryTreeRenderer(logger=get_logger('render.tree')),
        matcher_factory=matcher_factory or build_patterns,
        logger=lg,
    )
