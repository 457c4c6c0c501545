"""Predefined report callbacks for ``envconf.handle_env_vars``."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TextIO

from envconf.constants import REPORT_MESSAGE, REPORT_VARIABLES_FIELD
from envconf.options import ReportCallback

logger = logging.getLogger(__name__)


def render_report(report: Mapping[str, bool]) -> str:
    """Render the report as indented JSON with a fixed ``message`` field."""

    payload: dict[str, object] = {
        "message": REPORT_MESSAGE,
        REPORT_VARIABLES_FIELD: dict(report),
    }
    return json.dumps(payload, indent=4, sort_keys=True, ensure_ascii=False)


def make_json_logger(stream: TextIO) -> ReportCallback:
    """Return a callback writing the JSON report, one document per load, to ``stream``."""

    def _write(report: Mapping[str, bool]) -> None:
        stream.write(render_report(report) + "\n")
        stream.flush()

    return _write


def make_logging_reporter(
    target_logger: logging.Logger | None = None,
    *,
    level: int = logging.INFO,
) -> ReportCallback:
    """Return a callback emitting the report as one structured log record.

    The mapping is attached as the ``environment_variables`` extra field so
    JSON formatters can pick it up; unset keys are listed in the message.
    """

    sink = target_logger or logger

    def _emit(report: Mapping[str, bool]) -> None:
        unset = sorted(key for key, present in report.items() if not present)
        sink.log(
            level,
            "envconf: %d environment variables consulted, %d unset: %s",
            len(report),
            len(unset),
            ", ".join(unset) or "-",
            extra={"environment_variables": dict(report)},
        )

    return _emit


__all__ = ["make_json_logger", "make_logging_reporter", "render_report"]
