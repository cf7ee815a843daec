from __future__ import annotations

"""
Directory tree rendering.

`DirectoryTreeRenderer.build` turns a directory into a nested `TreeNode`
structure; `TreeNode.render` draws it with box-drawing glyphs:

    project
    ├── README.md
    └── src
        └── main.py

Children keep directory-listing order. Symlinked directories are shown as
leaves and not followed.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional

from concacti.core.interfaces.render import TreeRendererProtocol
from concacti.logging.helpers import get_logger

_TEE = '├── '
_LAST = '└── '
_VERT = '│   '
_SPACE = '    '


@dataclass
class TreeNode:
    label: str
    children: List['TreeNode'] = field(default_factory=list)

    def push(self, child: 'TreeNode') -> 'TreeNode':
        self.children.append(child)
        return self

    def _lines(self) -> Iterator[str]:
        yield self.label
        # (node, prefix) pairs; an explicit stack keeps deep trees off the call stack.
        stack = [(child, '', idx == len(self.children) - 1)
                 for idx, child in reversed(list(enumerate(self.children)))]
        while stack:
            node, prefix, last = stack.pop()
            yield f'{prefix}{_LAST if last else _TEE}{node.label}'
            child_prefix = prefix + (_SPACE if last else _VERT)
            n = len(node.children)
            for idx in range(n - 1, -1, -1):
                stack.append((node.children[idx], child_prefix, idx == n - 1))

    def render(self) -> str:
        return ''.join(f'{line}\n' for line in self._lines())

    def __str__(self) -> str:
        return self.render()


def _label(path: Path) -> str:
    return path.name or str(path)


class DirectoryTreeRenderer(TreeRendererProtocol):
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('render.tree')

    def build(self, root: Path) -> TreeNode:
        """Return the full tree below *root*; OSError while listing propagates."""
        root = Path(root)
        top = TreeNode(_label(root.resolve(strict=True)))
        pending = [(root, top)]
        while pending:
            directory, node = pending.pop()
            with os.scandir(directory) as it:
                entries = list(it)
            for entry in entries:
                child = TreeNode(entry.name)
                node.push(child)
                if entry.is_dir(follow_symlinks=False):
                    pending.append((Path(directory, entry.name), child))
        return top

    def render(self, root: Path) -> str:
        tree = self.build(root)
        self._log.debug('rendered tree of %s (%d top-level entries)', root, len(tree.children))
        return tree.render()
