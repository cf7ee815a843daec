"""
list_ops – Small list helpers shared by the CLI layer.
"""
from typing import List, Optional


def split_list(raw: Optional[List[str]]) -> List[str]:
    """Return a flat list splitting comma-separated tokens.

    Surrounding whitespace is trimmed; inner whitespace is legal in globs
    and is kept.

    Examples
    --------
    >>> split_list(["**/*.ts,!**/node_modules/**", "docs/*.md"])
    ['**/*.ts', '!**/node_modules/**', 'docs/*.md']
    """
    if not raw:
        return []
    out: List[str] = []
    for itm in raw:
        out.extend([x.strip() for x in itm.split(",") if x.strip()])
    return out
