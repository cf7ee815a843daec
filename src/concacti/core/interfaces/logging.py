from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging surface the engine and its collaborators rely on."""

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...

    def isEnabledFor(self, level: int) -> bool: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Factory for scoped loggers."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return a logger instance scoped under the `concacti` namespace."""
        ...
