"""Unit tests for predefined report callbacks."""

from __future__ import annotations

import io
import json
import logging
from dataclasses import dataclass, field

import pytest

from envconf import handle_env_vars, load, make_json_logger, make_logging_reporter, with_environ
from envconf.constants import REPORT_MESSAGE
from envconf.reporting import render_report


@dataclass
class _LoggedConfig:
    string: str = field(default="", metadata={"env": "string"})
    integer: int = field(default=0, metadata={"env": "integer"})


def test_json_logger_writes_indented_report() -> None:
    buffer = io.StringIO()
    load(
        "TEST",
        _LoggedConfig(),
        with_environ({"TEST_INTEGER": "-3", "TEST_UNSIGNED_INTEGER": "3"}),
        handle_env_vars(make_json_logger(buffer)),
    )

    output = buffer.getvalue()
    assert output.endswith("}\n")
    assert '\n    "message"' in output
    parsed = json.loads(output)
    assert parsed == {
        "message": REPORT_MESSAGE,
        "environment-variables": {"TEST_STRING": False, "TEST_INTEGER": True},
    }


def test_render_report_is_deterministic() -> None:
    first = render_report({"B": True, "A": False})
    second = render_report({"A": False, "B": True})
    assert first == second


def test_logging_reporter_emits_structured_record(caplog: pytest.LogCaptureFixture) -> None:
    sink = logging.getLogger("tests.envconf.report")
    caplog.set_level(logging.INFO, logger="tests.envconf.report")

    load(
        "TEST",
        _LoggedConfig(),
        with_environ({"TEST_STRING": "value"}),
        handle_env_vars(make_logging_reporter(sink)),
    )

    [record] = [item for item in caplog.records if item.name == "tests.envconf.report"]
    assert record.levelno == logging.INFO
    assert record.environment_variables == {"TEST_STRING": True, "TEST_INTEGER": False}
    assert "1 unset: TEST_INTEGER" in record.getMessage()


def test_logging_reporter_respects_level(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="envconf")
    make_logging_reporter(level=logging.WARNING)({"TEST_A": True})

    [record] = [item for item in caplog.records if item.name == "envconf.reporting"]
    assert record.levelno == logging.WARNING
    assert record.getMessage().endswith("0 unset: -")
