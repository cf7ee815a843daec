from __future__ import annotations
from pathlib import Path
from typing import Callable, Iterator, Optional, Protocol, runtime_checkable

from concacti.core.models import WalkEntry


@runtime_checkable
class WalkerProtocol(Protocol):
    """Abstract depth-bounded directory walker."""

    def iter_entries(self, root: Path, max_depth: Optional[int]) -> Iterator[WalkEntry]:
        """Yield non-directory entries below *root* in pre-order."""
        ...

    def walk(
        self,
        root: Path,
        max_depth: Optional[int],
        visit: Callable[[WalkEntry], None],
    ) -> None:
        """Invoke *visit* for every entry produced by `iter_entries`."""
        ...
