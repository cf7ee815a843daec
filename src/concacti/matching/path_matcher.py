from __future__ import annotations
"""Glob include/exclude filter.

Patterns are compiled with ``pathspec`` using the gitwildmatch dialect:

    * ``*``, ``?`` and ``[...]`` match inside one path segment.
    * ``**`` spans any number of segments.
    * ``{a,b}`` alternation is expanded before compiling (no nesting).
    * A pattern without a slash matches at any depth (``*.ts`` == ``**/*.ts``).
    * ``\\`` escapes the next character.

Glob text is always a glob, never a gitignore line: a leading ``#`` or
``!`` is matched literally.

Semantics:
    * A token starting with ``!`` is stripped of the marker and added to the
      exclude matcher; every other token goes to the include matcher.
    * An empty token list includes everything (``**/*``).
    * Exclusion always wins over inclusion.

Malformed globs (unclosed ``[``, unbalanced or nested ``{}``, dangling
``\\``) raise InvalidPatternError naming the token as typed.

Examples:
    build(["**/*.ts", "!**/node_modules/**"]).should_process("src/a.ts")            -> True
    build(["**/*.ts", "!**/node_modules/**"]).should_process("node_modules/b.ts")   -> False
    build(["**/*.{ts,tsx}"]).should_process("src/b.tsx")                             -> True
    build([]).should_process("Makefile")                                             -> True
"""

import itertools
import re
from pathlib import Path
from typing import List, Sequence, Tuple, Union

import pathspec

from concacti.constants import MATCH_ALL_GLOB
from concacti.core.errors import InvalidPatternError
from concacti.core.interfaces.matcher import PathFilterProtocol
from concacti.core.models import Pattern

_GLOB_DIALECT = 'gitwildmatch'
_LINE_MARKERS = ('#', '!')


def _class_end(text: str, start: int) -> int:
    """Index of the ``]`` closing the class opened at *start*, or -1."""
    i = start + 1
    if i < len(text) and text[i] in '!^':
        i += 1
    if i < len(text) and text[i] == ']':
        i += 1
    return text.find(']', i)


def _expand(raw: str, glob_text: str) -> List[str]:
    """Validate *glob_text* and expand its ``{a,b}`` groups.

    Raises:
        InvalidPatternError: malformed class, group or escape.
    """
    parts: List[List[str]] = [['']]
    group: List[str] = []
    in_group = False
    i = 0
    while i < len(glob_text):
        ch = glob_text[i]
        if ch == '\\':
            if i + 1 >= len(glob_text):
                raise InvalidPatternError(raw, 'dangling escape')
            piece = glob_text[i:i + 2]
            i += 2
        elif ch == '[':
            end = _class_end(glob_text, i)
            if end < 0:
                raise InvalidPatternError(raw, 'unclosed character class')
            piece = glob_text[i:end + 1]
            i = end + 1
        elif ch == '{':
            if in_group:
                raise InvalidPatternError(raw, 'nested alternate groups are not supported')
            in_group, group = True, ['']
            i += 1
            continue
        elif ch == '}':
            if not in_group:
                raise InvalidPatternError(raw, 'unopened alternate group')
            parts.append(group)
            parts.append([''])
            in_group = False
            i += 1
            continue
        elif ch == ',' and in_group:
            group.append('')
            i += 1
            continue
        else:
            piece = ch
            i += 1

        if in_group:
            group[-1] += piece
        else:
            parts[-1][-1] += piece

    if in_group:
        raise InvalidPatternError(raw, 'unclosed alternate group')
    return [''.join(combo) for combo in itertools.product(*parts)]


def _as_line(glob: str) -> str:
    # pathspec reads '#' as a comment and '!' as negation.
    return '\\' + glob if glob.startswith(_LINE_MARKERS) else glob


def _compile(pairs: List[Tuple[str, Pattern]]) -> pathspec.PathSpec:
    """Compile (raw_token, pattern) pairs into one PathSpec.

    Every expanded glob is compiled on its own first so an error can be
    attributed to the exact token the user typed.
    """
    lines: List[str] = []
    for raw, pat in pairs:
        for glob in _expand(raw, pat.glob_text):
            line = _as_line(glob)
            try:
                pathspec.PathSpec.from_lines(_GLOB_DIALECT, [line])
            except (ValueError, re.error) as exc:
                raise InvalidPatternError(raw, str(exc)) from exc
            lines.append(line)
    return pathspec.PathSpec.from_lines(_GLOB_DIALECT, lines)


class PatternSet(PathFilterProtocol):
    """Compiled include and exclude matchers."""

    def __init__(self, patterns: Sequence[str]) -> None:
        raw = list(patterns)
        parsed = [(tok, Pattern.parse(tok)) for tok in raw]
        include = [(tok, p) for tok, p in parsed if not p.is_exclusion]
        exclude = [(tok, p) for tok, p in parsed if p.is_exclusion]

        self._match_everything = not raw
        if self._match_everything:
            include = [(MATCH_ALL_GLOB, Pattern(MATCH_ALL_GLOB))]

        self._patterns: Tuple[Pattern, ...] = tuple(p for _, p in parsed)
        self._include = _compile(include)
        self._exclude = _compile(exclude)

    @property
    def match_everything(self) -> bool:
        return self._match_everything

    @property
    def patterns(self) -> Tuple[Pattern, ...]:
        return self._patterns

    def is_included(self, path: Union[str, Path]) -> bool:
        return self._match_everything or self._include.match_file(path)

    def is_excluded(self, path: Union[str, Path]) -> bool:
        return self._exclude.match_file(path)

    def should_process(self, path: Union[str, Path]) -> bool:
        return self.is_included(path) and not self.is_excluded(path)

    def __repr__(self) -> str:
        inc = [p.glob_text for p in self._patterns if not p.is_exclusion]
        exc = [p.glob_text for p in self._patterns if p.is_exclusion]
        return f'PatternSet(include={inc!r}, exclude={exc!r}, match_everything={self._match_everything})'


def build(patterns: Sequence[str]) -> PatternSet:
    """Compile *patterns* into a PatternSet, raising InvalidPatternError on bad globs."""
    return PatternSet(patterns)
