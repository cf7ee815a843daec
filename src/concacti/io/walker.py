from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple

from concacti.core.interfaces import WalkerProtocol
from concacti.core.models import EntryKind, WalkEntry
from concacti.logging.helpers import get_logger


class DirectoryWalker(WalkerProtocol):
    """
    Depth-bounded, pre-order directory enumerator.

    The root sits at depth 0. A directory deeper than *max_depth* is skipped
    entirely, so files directly inside a directory at exactly *max_depth*
    are still yielded. Subdirectories are entered at the position they
    occupy in the listing, which keeps the order identical to a recursive
    walk. Listing order is whatever ``os.scandir`` returns; nothing is
    sorted.

    Pending listings live on an explicit stack instead of the call stack so
    very deep trees do not hit the interpreter's recursion limit.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('io.walker')

    @staticmethod
    def _list_dir(path: Path) -> List[os.DirEntry]:
        with os.scandir(path) as it:
            return list(it)

    def iter_entries(self, root: Path, max_depth: Optional[int]) -> Iterator[WalkEntry]:
        root = Path(root)
        if not root.is_dir():
            self._log.debug('%s is not a directory – nothing to walk', root)
            return

        stack: List[Tuple[Iterator[os.DirEntry], Path, int]] = [
            (iter(self._list_dir(root)), root, 0)
        ]
        while stack:
            listing, parent, depth = stack[-1]
            entry = next(listing, None)
            if entry is None:
                stack.pop()
                continue

            path = parent / entry.name
            if entry.is_dir():
                child_depth = depth + 1
                if max_depth is not None and child_depth > max_depth:
                    self._log.debug('depth %d > %d – skipped %s', child_depth, max_depth, path)
                    continue
                stack.append((iter(self._list_dir(path)), path, child_depth))
                continue

            kind = EntryKind.FILE if entry.is_file() else EntryKind.OTHER
            yield WalkEntry(path=path, kind=kind, depth=depth)

    def walk(
        self,
        root: Path,
        max_depth: Optional[int],
        visit: Callable[[WalkEntry], None],
    ) -> None:
        for entry in self.iter_entries(root, max_depth):
            visit(entry)
