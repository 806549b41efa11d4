"""
Tests for the log line formatter.
"""

from __future__ import annotations

import logging

from salon.core.logging import ContextFormatter, init_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("salon.test", logging.WARNING, __file__, 1, "Skipping appointment", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_context_keys():
    formatter = ContextFormatter("%(levelname)s:%(message)s")
    line = formatter.format(_record(appointment_id="a-1", start_time="bogus", error=""))
    assert line == "WARNING:Skipping appointment | appointment_id=a-1 start_time=bogus"


def test_formatter_without_context_keeps_plain_line():
    formatter = ContextFormatter("%(levelname)s:%(message)s")
    assert formatter.format(_record()) == "WARNING:Skipping appointment"


def test_init_logging_installs_single_handler():
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, list(root.handlers)
    try:
        init_logging("debug")
        init_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ContextFormatter)
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
