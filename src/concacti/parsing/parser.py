# concacti/parsing/parser.py
from __future__ import annotations

import argparse

from concacti.constants import DEFAULT_BUFFER_SIZE, DEFAULT_COMMENT_STYLE

_EXAMPLES = """\
examples:
  # Concatenate all .ts files, excluding those in node_modules
  concacti -d ./src -o output.txt -p '**/*.ts' -p '!**/node_modules/**'

  # Concatenate all files, limit depth to 2, and write tree
  concacti -d ./project -o output.txt --max-depth 2 --write-tree

  # Use custom comment style and buffer size
  concacti -d ./docs -o output.md -p '**/*.md' --comment-style '<!--' --buffer-size 16384
"""


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def _positive_int(raw: str) -> int:
    value = _non_negative_int(raw)
    if value == 0:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Both output toggles default to on; use the --no-* forms to disable.
        - -p is repeatable and also accepts comma-separated lists.
    """
    from concacti import __version__

    p = argparse.ArgumentParser(
        prog="concacti",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="Concatenates files in a directory",
        epilog=_EXAMPLES,
    )

    g_sel = p.add_argument_group("Selection")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    # -----------------------
    # Selection
    # -----------------------
    g_sel.add_argument(
        "-d",
        "--directory",
        metavar="DIR",
        dest="directory",
        required=True,
        help="Sets the input directory to use.",
    )
    g_sel.add_argument(
        "-p",
        "--patterns",
        metavar="PATTERN",
        action="append",
        dest="patterns",
        help=(
            "File patterns to include or exclude (use ! for exclusion), "
            "comma-separated. Repeatable. Exclusions always win."
        ),
    )
    g_sel.add_argument(
        "--max-depth",
        metavar="N",
        type=_non_negative_int,
        dest="max_depth",
        default=None,
        help="Maximum depth for recursive search (0 = root directory only; default: unlimited).",
    )

    # -----------------------
    # Output
    # -----------------------
    g_out.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        required=True,
        help="Sets the output file. It is created or truncated; never included in itself.",
    )
    g_out.add_argument(
        "--write-filenames",
        action=argparse.BooleanOptionalAction,
        dest="write_filenames",
        default=True,
        help="Write each file's path as a comment line before its contents.",
    )
    g_out.add_argument(
        "--write-tree",
        action=argparse.BooleanOptionalAction,
        dest="write_tree",
        default=True,
        help="Write the directory tree at the top of the output file.",
    )
    g_out.add_argument(
        "--comment-style",
        metavar="PREFIX",
        dest="comment_style",
        default=DEFAULT_COMMENT_STYLE,
        help=f"Comment style to use for filenames (default: {DEFAULT_COMMENT_STYLE}).",
    )
    g_out.add_argument(
        "--buffer-size",
        metavar="BYTES",
        type=_positive_int,
        dest="buffer_size",
        default=DEFAULT_BUFFER_SIZE,
        help=f"Buffer size for writing, in bytes (default: {DEFAULT_BUFFER_SIZE}).",
    )

    # -----------------------
    # Miscellaneous
    # -----------------------
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit log records as JSON lines on stderr (also CONCACTI_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Log at DEBUG level.",
    )
    g_misc.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p
