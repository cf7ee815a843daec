from __future__ import annotations

"""
Error hierarchy for concacti.

Every failure aborts the current run. Engine errors always chain the
underlying exception (``raise ... from exc``) so callers can inspect the
original OSError or FilterError.
"""

from pathlib import Path
from typing import Optional


class ConcactiError(Exception):
    """Base class of every error raised by concacti."""


class ConfigError(ConcactiError, ValueError):
    """Raised when a ConcatConfig holds an invalid value."""


class FilterError(ConcactiError, ValueError):
    """Base class for pattern-compilation failures."""


class InvalidPatternError(FilterError):
    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f'invalid pattern {pattern!r}: {reason}')
        self.pattern = pattern
        self.reason = reason


class EngineError(ConcactiError):
    """Base class for failures of a concatenation run."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path
        # Set by the engine before re-raising; describes the partial output.
        self.report = None


class OutputCreateError(EngineError):
    """The output file could not be created or truncated."""


class PathResolveError(EngineError):
    """The canonical form of the output path could not be resolved."""


class EngineIOError(EngineError):
    """Listing a directory, reading a source file or writing the output failed."""


class EngineFilterError(EngineError):
    """Pattern compilation failed while preparing the run."""

    def __init__(self, filter_error: FilterError) -> None:
        super().__init__(str(filter_error))
        self.filter_error = filter_error
