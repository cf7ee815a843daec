from __future__ import annotations

import logging
import os
import sys
from typing import NoReturn, Optional, Sequence

from concacti.core.errors import ConcactiError, EngineError
from concacti.core.report import ExecutionReport
from concacti.logging.factory import DefaultLoggerFactory
from concacti.logging.helpers import get_logger
from concacti.runtime.runner import EngineRunner


logger = get_logger('concacti')


def _configure_logging(enable_json: bool, verbose: bool = False) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    mode = (bool(enable_json), bool(verbose))
    if getattr(_configure_logging, '_configured_mode', None) == mode:
        return
    factory = DefaultLoggerFactory(json_logs=enable_json, level=logging.DEBUG if verbose else logging.INFO)
    lg = factory.get_logger('concacti')
    global logger
    logger = lg
    setattr(_configure_logging, '_configured_mode', mode)


class Concacti:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> ExecutionReport:
        """Run the tool with an argv-like sequence and return the execution report."""
        runner = EngineRunner(logger=get_logger('runner'))
        ns = runner.parse_argv(argv)
        json_logs = ns.json_logs or os.getenv('CONCACTI_JSON_LOGS') == '1'
        _configure_logging(json_logs, ns.verbose)
        return runner.run_namespace(ns)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `concacti` script and `python -m concacti`."""
    try:
        Concacti.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except EngineError:
        # Already reported by the engine.
        raise SystemExit(1)
    except ConcactiError as exc:
        logger.error('%s', exc)
        raise SystemExit(1)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
