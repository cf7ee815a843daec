from .engine import ConcatEngineProtocol, EngineRunnerProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .matcher import MatcherFactoryProtocol, PathFilterProtocol
from .render import TreeRendererProtocol
from .walker import WalkerProtocol

__all__ = [
    'ConcatEngineProtocol',
    'EngineRunnerProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'MatcherFactoryProtocol',
    'PathFilterProtocol',
    'TreeRendererProtocol',
    'WalkerProtocol',
]
