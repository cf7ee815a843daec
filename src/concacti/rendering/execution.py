from __future__ import annotations

"""
execution – ConcatenationEngine for concacti.

Public API
----------
ConcatenationEngine.run(config) -> ExecutionReport

Output layout (both toggles enabled)::

    <rendered directory tree>
    <blank line>
    <comment_style> <path of file A>
    <bytes of file A>
    <comment_style> <path of file B>
    <bytes of file B>

Any failure aborts the run; the partially written output stays on disk.
"""

import functools
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from concacti.core.errors import (
    EngineError,
    EngineFilterError,
    EngineIOError,
    FilterError,
    OutputCreateError,
    PathResolveError,
)
from concacti.core.interfaces import (
    ConcatEngineProtocol,
    MatcherFactoryProtocol,
    PathFilterProtocol,
    TreeRendererProtocol,
    WalkerProtocol,
)
from concacti.core.models import ConcatConfig, WalkEntry
from concacti.core.report import ExecutionReport, StageTimer
from concacti.io.output import OutputWriter
from concacti.logging.helpers import get_logger, trace_io
from concacti.matching.path_matcher import build as build_patterns


@dataclass(frozen=True)
class RunContext:
    """Everything the per-entry visit step needs for one run."""
    config: ConcatConfig
    patterns: PathFilterProtocol
    output_canonical: Path
    writer: OutputWriter
    report: ExecutionReport


class ConcatenationEngine(ConcatEngineProtocol):
    """Walks a tree, filters entries and appends accepted files to one output."""

    def __init__(
        self,
        *,
        walker: WalkerProtocol,
        tree_renderer: TreeRendererProtocol,
        matcher_factory: MatcherFactoryProtocol = build_patterns,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._walker = walker
        self._tree_renderer = tree_renderer
        self._matcher_factory = matcher_factory
        self._log = logger or get_logger('engine')

    # -------- run phases --------

    def _open_output(self, config: ConcatConfig) -> OutputWriter:
        try:
            return OutputWriter.create(config.output_path, config.buffer_size, logger=self._log)
        except OSError as exc:
            raise OutputCreateError(
                f'could not create output {config.output_path}: {exc}', path=config.output_path
            ) from exc

    @staticmethod
    def _resolve_output(output_path: Path) -> Path:
        try:
            return output_path.resolve(strict=True)
        except (OSError, RuntimeError) as exc:
            raise PathResolveError(
                f'could not resolve output path {output_path}: {exc}', path=output_path
            ) from exc

    def _build_patterns(self, patterns: Sequence[str]) -> PathFilterProtocol:
        try:
            return self._matcher_factory(patterns)
        except FilterError as exc:
            raise EngineFilterError(exc) from exc

    def _write_tree(self, ctx: RunContext) -> None:
        root = ctx.config.root_directory
        try:
            text = self._tree_renderer.render(root)
            ctx.writer.write_line(text)
        except OSError as exc:
            raise EngineIOError(f'could not render tree of {root}: {exc}', path=root) from exc

    def _visit(self, ctx: RunContext, entry: WalkEntry) -> None:
        report = ctx.report
        report.files_visited += 1
        path = entry.path

        # Metadata may have changed since the directory was listed.
        if not path.is_file():
            report.skipped_non_file += 1
            self._log.debug('not a regular file – skipped %s', path)
            return

        if path.resolve(strict=True) == ctx.output_canonical:
            report.skipped_self += 1
            self._log.debug('output file found inside the tree – skipped %s', path)
            return

        if not ctx.patterns.should_process(path):
            report.skipped_by_filter += 1
            return

        if ctx.config.write_filenames:
            ctx.writer.write_line(f'{ctx.config.comment_style} {path}')

        data = path.read_bytes()
        ctx.writer.write(data)
        ctx.writer.write(b'\n')
        report.files_written += 1
        trace_io(self._log, 'appended file', path=str(path), size=len(data), depth=entry.depth)

    def _walk(self, ctx: RunContext) -> None:
        root = ctx.config.root_directory
        try:
            self._walker.walk(root, ctx.config.max_depth, functools.partial(self._visit, ctx))
        except OSError as exc:
            failed = Path(exc.filename) if getattr(exc, 'filename', None) else root
            raise EngineIOError(f'I/O error under {root}: {exc}', path=failed) from exc

    def _close_output(self, writer: OutputWriter, report: ExecutionReport) -> None:
        try:
            writer.close()
        except OSError as exc:
            raise EngineIOError(f'could not flush output {writer.path}: {exc}', path=writer.path) from exc
        finally:
            report.bytes_written = writer.bytes_written

    def _close_after_failure(self, writer: OutputWriter, report: ExecutionReport) -> None:
        try:
            writer.close()
        except OSError as exc:
            self._log.error('⚠  could not flush output %s: %s', writer.path, exc)
        finally:
            report.bytes_written = writer.bytes_written

    def _execute(self, config: ConcatConfig, writer: OutputWriter, report: ExecutionReport) -> None:
        output_canonical = self._resolve_output(config.output_path)
        patterns = self._build_patterns(config.patterns)
        ctx = RunContext(
            config=config,
            patterns=patterns,
            output_canonical=output_canonical,
            writer=writer,
            report=report,
        )
        self._log.debug('patterns: %r', ctx.patterns)

        if config.write_tree:
            with StageTimer(report, 'tree'):
                self._write_tree(ctx)

        with StageTimer(report, 'walk'):
            self._walk(ctx)

    # -------- ConcatEngineProtocol --------

    def run(self, config: ConcatConfig) -> ExecutionReport:
        """Concatenate the files selected by *config* into its output path.

        Raises:
            ConfigError: invalid depth or buffer size.
            OutputCreateError, PathResolveError, EngineFilterError, EngineIOError:
                the run was aborted; any partial output is left in place.
        """
        config.validate()
        report = ExecutionReport(root=str(config.root_directory), output=str(config.output_path))
        self._log.info('concatenating %s → %s', config.root_directory, config.output_path)

        try:
            writer = self._open_output(config)
            try:
                self._execute(config, writer, report)
            except BaseException:
                # The run error stays the one reported.
                self._close_after_failure(writer, report)
                raise
            self._close_output(writer, report)
        except EngineError as exc:
            report.add_error(str(exc))
            report.finish()
            exc.report = report
            self._log.error('⚠  %s', exc)
            raise

        report.finish()
        self._log.info(
            '✔ %d file(s), %d byte(s) written to %s',
            report.files_written, report.bytes_written, config.output_path,
        )
        return report
