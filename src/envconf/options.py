"""Load options: report callback and environment source."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

ReportCallback = Callable[[Mapping[str, bool]], None]


def _discard_report(report: Mapping[str, bool]) -> None:
    return None


@dataclass(slots=True)
class LoadSettings:
    """Mutable per-call settings that options write into before the walk."""

    handle_env_vars: ReportCallback = _discard_report
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)


Option = Callable[[LoadSettings], None]


def handle_env_vars(callback: ReportCallback) -> Option:
    """Call ``callback`` once with the key -> presence report after a successful load.

    Keys are the environment variable names envconf consulted; values tell
    whether each variable was set.
    """

    def _apply(settings: LoadSettings) -> None:
        settings.handle_env_vars = callback

    return _apply


def with_environ(environ: Mapping[str, str]) -> Option:
    """Read variables from ``environ`` instead of ``os.environ``."""

    def _apply(settings: LoadSettings) -> None:
        settings.environ = environ

    return _apply


def build_settings(options: tuple[Option, ...]) -> LoadSettings:
    settings = LoadSettings()
    for option in options:
        option(settings)
    return settings


__all__ = [
    "LoadSettings",
    "Option",
    "ReportCallback",
    "build_settings",
    "handle_env_vars",
    "with_environ",
]
