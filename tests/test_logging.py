#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging helpers: logger namespacing, JSON formatter schema and the
CONCACTI_TRACE_IO gate.
"""
from __future__ import annotations

import io
import json
import logging
import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import concacti  # noqa: E402
from concacti.logging.factory import DefaultLoggerFactory  # noqa: E402
from concacti.logging.helpers import (  # noqa: E402
    BASE_LOGGER_NAME,
    JsonLogFormatter,
    get_logger,
    is_trace_io_enabled,
    setup_base_logger,
    trace_io,
)


def _record(msg: str, **extra) -> logging.LogRecord:
    rec = logging.LogRecord("concacti.engine", logging.INFO, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(rec, key, value)
    return rec


# --------------------------------------------------------------------------- #
#  Logger names                                                               #
# --------------------------------------------------------------------------- #
class GetLoggerTests(unittest.TestCase):
    def test_base_name(self) -> None:
        self.assertEqual(get_logger().name, BASE_LOGGER_NAME)
        self.assertEqual(get_logger("concacti").name, "concacti")

    def test_child_is_namespaced(self) -> None:
        self.assertEqual(get_logger("engine").name, "concacti.engine")

    def test_already_qualified_name_is_kept(self) -> None:
        self.assertEqual(get_logger("concacti.io.walker").name, "concacti.io.walker")


# --------------------------------------------------------------------------- #
#  JSON formatter                                                             #
# --------------------------------------------------------------------------- #
class JsonFormatterTests(unittest.TestCase):
    def test_schema(self) -> None:
        data = json.loads(JsonLogFormatter().format(_record("hello %s")))
        self.assertEqual(set(data), {"ts", "level", "module", "msg", "version"})
        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["module"], "concacti.engine")
        self.assertEqual(data["version"], concacti.__version__)
        self.assertTrue(data["ts"].endswith("Z"))

    def test_context_is_attached(self) -> None:
        rec = _record("appended", context={"path": Path("a/b.ts"), "size": 3})
        data = json.loads(JsonLogFormatter().format(rec))
        self.assertEqual(data["ctx"], {"path": str(Path("a/b.ts")), "size": 3})

    def test_empty_context_is_omitted(self) -> None:
        data = json.loads(JsonLogFormatter().format(_record("x", context={})))
        self.assertNotIn("ctx", data)


# --------------------------------------------------------------------------- #
#  Base logger setup                                                          #
# --------------------------------------------------------------------------- #
class SetupTests(unittest.TestCase):
    def tearDown(self) -> None:
        setup_base_logger(level=logging.INFO)

    def test_second_setup_replaces_handler(self) -> None:
        first, second = io.StringIO(), io.StringIO()
        setup_base_logger(stream=first)
        base = setup_base_logger(json_logs=True, stream=second)
        self.assertEqual(len(base.handlers), 1)

        get_logger("engine").info("switched")
        self.assertEqual(first.getvalue(), "")
        self.assertEqual(json.loads(second.getvalue())["msg"], "switched")

    def test_plain_format(self) -> None:
        buf = io.StringIO()
        DefaultLoggerFactory(stream=buf).get_logger("engine").warning("careful")
        self.assertEqual(buf.getvalue(), "WARNING: careful\n")


# --------------------------------------------------------------------------- #
#  IO tracing                                                                 #
# --------------------------------------------------------------------------- #
class TraceIoTests(unittest.TestCase):
    def setUp(self) -> None:
        self.log = get_logger("tests.trace")
        self.log.setLevel(logging.DEBUG)

    def tearDown(self) -> None:
        self.log.setLevel(logging.NOTSET)

    def test_disabled_by_default(self) -> None:
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("CONCACTI_TRACE_IO", None)
            self.assertFalse(is_trace_io_enabled())
            with patch.object(self.log, "debug") as dbg:
                trace_io(self.log, "appended file", path="a.ts")
            dbg.assert_not_called()

    def test_enabled_by_env(self) -> None:
        with patch.dict(os.environ, {"CONCACTI_TRACE_IO": "1"}):
            self.assertTrue(is_trace_io_enabled())
            with self.assertLogs("concacti.tests.trace", level="DEBUG") as cm:
                trace_io(self.log, "appended file", path="a.ts", size=3)
        self.assertEqual(len(cm.records), 1)
        self.assertEqual(cm.records[0].context, {"path": "a.ts", "size": 3})


if __name__ == "__main__":
    unittest.main(verbosity=2)
