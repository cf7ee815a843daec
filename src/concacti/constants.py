from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Prefix of provenance lines. Tests import it as `concacti.DEFAULT_COMMENT_STYLE`.
DEFAULT_COMMENT_STYLE: str = '//'

DEFAULT_BUFFER_SIZE: int = 8192

# Leading marker that turns a pattern into an exclusion.
NEGATION_MARKER: str = '!'

# Include glob used when no pattern at all is supplied.
MATCH_ALL_GLOB: str = '**/*'
