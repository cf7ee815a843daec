from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from concacti.constants import DEFAULT_BUFFER_SIZE, DEFAULT_COMMENT_STYLE, NEGATION_MARKER
from concacti.core.errors import ConfigError


@dataclass(frozen=True)
class Pattern:
    """A single glob, optionally negated with a leading ``!``."""
    glob_text: str
    is_exclusion: bool = False

    @classmethod
    def parse(cls, raw: str) -> 'Pattern':
        if raw.startswith(NEGATION_MARKER):
            return cls(glob_text=raw[len(NEGATION_MARKER):], is_exclusion=True)
        return cls(glob_text=raw)


class EntryKind(enum.Enum):
    FILE = 'file'
    OTHER = 'other'


@dataclass(frozen=True)
class WalkEntry:
    """A non-directory entry discovered by the walker."""
    path: Path
    kind: EntryKind
    depth: int = 0

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE


@dataclass(frozen=True)
class ConcatConfig:
    """Immutable settings for one concatenation run.

    ``max_depth=None`` means unbounded; ``0`` limits the walk to the root
    directory itself.
    """
    root_directory: Path
    output_path: Path
    patterns: Tuple[str, ...] = ()
    max_depth: Optional[int] = None
    write_filenames: bool = True
    write_tree: bool = True
    comment_style: str = DEFAULT_COMMENT_STYLE
    buffer_size: int = DEFAULT_BUFFER_SIZE

    def __post_init__(self) -> None:
        # Accept str paths and any iterable of patterns from programmatic callers.
        object.__setattr__(self, 'root_directory', Path(self.root_directory))
        object.__setattr__(self, 'output_path', Path(self.output_path))
        object.__setattr__(self, 'patterns', tuple(self.patterns))

    def validate(self) -> 'ConcatConfig':
        if self.max_depth is not None and self.max_depth < 0:
            raise ConfigError(f'max_depth must be >= 0, got {self.max_depth}')
        if self.buffer_size < 1:
            raise ConfigError(f'buffer_size must be >= 1, got {self.buffer_size}')
        return self
