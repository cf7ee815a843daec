from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TreeRendererProtocol(Protocol):
    """Renders the directory structure shown at the top of the output."""

    def render(self, root: Path) -> str:
        """Return the tree of *root* as text, each line terminated by a newline."""
        ...
