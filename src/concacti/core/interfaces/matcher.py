from __future__ import annotations
from pathlib import Path
from typing import Protocol, Sequence, Union, runtime_checkable


@runtime_checkable
class PathFilterProtocol(Protocol):
    """Per-path inclusion decision."""

    def should_process(self, path: Union[str, Path]) -> bool:
        """Return True when *path* is included and not excluded."""
        ...


@runtime_checkable
class MatcherFactoryProtocol(Protocol):
    """Compiles a pattern list into a PathFilterProtocol."""

    def __call__(self, patterns: Sequence[str]) -> PathFilterProtocol:
        ...
