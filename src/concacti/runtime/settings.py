from __future__ import annotations

import argparse
from pathlib import Path

from concacti.core.models import ConcatConfig
from concacti.parsing.list_ops import split_list


def config_from_namespace(ns: argparse.Namespace) -> ConcatConfig:
    """Map parsed CLI flags onto an immutable ConcatConfig."""
    return ConcatConfig(
        root_directory=Path(ns.directory),
        output_path=Path(ns.output),
        patterns=tuple(split_list(ns.patterns)),
        max_depth=ns.max_depth,
        write_filenames=ns.write_filenames,
        write_tree=ns.write_tree,
        comment_style=ns.comment_style,
        buffer_size=ns.buffer_size,
    ).validate()
