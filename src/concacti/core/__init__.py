from __future__ import annotations

"""Public surface for concacti.core.

Stable import location for the data model, the error hierarchy and the
protocol types:

    from concacti.core import ConcatConfig, EngineError, WalkerProtocol
"""

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
from concacti.core.interfaces import (
    ConcatEngineProtocol,
    EngineRunnerProtocol,
    PathFilterProtocol,
    TreeRendererProtocol,
    WalkerProtocol,
)
from concacti.core.models import ConcatConfig, EntryKind, Pattern, WalkEntry

__all__ = [
    # Errors
    "ConcactiError",
    "ConfigError",
    "EngineError",
    "EngineFilterError",
    "EngineIOError",
    "FilterError",
    "InvalidPatternError",
    "OutputCreateError",
    "PathResolveError",
    # Protocols
    "ConcatEngineProtocol",
    "EngineRunnerProtocol",
    "PathFilterProtocol",
    "TreeRendererProtocol",
    "WalkerProtocol",
    # Models
    "ConcatConfig",
    "EntryKind",
    "Pattern",
    "WalkEntry",
]
