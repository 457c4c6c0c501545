"""
envconf - duration strings.

File: src/envconf/durations.py
Last updated: 2026-10-17

Purpose
- Parse duration strings such as ``"10m"``, ``"1h30s"`` or ``"-1.5h"`` into
  ``datetime.timedelta`` values, and render them back in the same grammar.

Functional requirements
- Grammar: optional sign, then one or more ``<number><unit>`` components where
  ``<number>`` is ``digits[.digits]`` (at least one digit on either side of the
  dot) and ``<unit>`` is one of ``ns us µs μs ms s m h``.
- ``"0"`` (optionally signed) is valid without a unit.
- Totals are bounded by the signed 64-bit nanosecond range.

Non-functional requirements
- Integer arithmetic only; fractions truncate at nanosecond precision and the
  result truncates toward zero at microsecond precision.
"""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Final

from envconf.constants import INT64_MAX

_NANOSECOND: Final[int] = 1
_MICROSECOND: Final[int] = 1_000 * _NANOSECOND
_MILLISECOND: Final[int] = 1_000 * _MICROSECOND
_SECOND: Final[int] = 1_000 * _MILLISECOND
_MINUTE: Final[int] = 60 * _SECOND
_HOUR: Final[int] = 60 * _MINUTE

_UNITS: Final[dict[str, int]] = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND,
    "µs": _MICROSECOND,  # micro sign
    "μs": _MICROSECOND,  # greek small letter mu
    "ms": _MILLISECOND,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}

_COMPONENT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<whole>[0-9]*)(?:\.(?P<fraction>[0-9]*))?(?P<unit>[^0-9.]*)"
)


def parse_duration(text: str) -> timedelta:
    """Parse a duration string; raise ``ValueError`` when malformed."""

    return timedelta(microseconds=_truncate_to_microseconds(parse_duration_ns(text)))


def parse_duration_ns(text: str) -> int:
    """Parse a duration string into whole nanoseconds."""

    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]

    if rest == "0":
        return 0
    if not rest:
        raise ValueError(f"invalid duration {text!r}")

    total = 0
    position = 0
    while position < len(rest):
        match = _COMPONENT_PATTERN.match(rest, position)
        # The pattern can match empty input; anything that does not advance is malformed.
        if match is None or match.end() == position:
            raise ValueError(f"invalid duration {text!r}")

        whole = match.group("whole")
        fraction = match.group("fraction") or ""
        unit_name = match.group("unit")
        if not whole and not fraction:
            raise ValueError(f"invalid duration {text!r}")
        if not unit_name:
            raise ValueError(f"missing unit in duration {text!r}")
        unit = _UNITS.get(unit_name)
        if unit is None:
            raise ValueError(f"unknown unit {unit_name!r} in duration {text!r}")

        value = int(whole or "0") * unit
        if fraction:
            value += int(fraction) * unit // 10 ** len(fraction)
        total += value
        if total > INT64_MAX + 1:
            raise ValueError(f"invalid duration {text!r}: overflow")
        position = match.end()

    if negative:
        return -total
    if total > INT64_MAX:
        raise ValueError(f"invalid duration {text!r}: overflow")
    return total


def format_duration(value: timedelta) -> str:
    """Render ``value`` as ``72h3m0.5s`` / ``1.5ms`` / ``0s``."""

    micros = value // timedelta(microseconds=1)
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        millis, remainder = divmod(micros, 1_000)
        return f"{sign}{millis}{_fraction_suffix(remainder, 3)}ms"

    hours, remainder = divmod(micros, 3_600_000_000)
    minutes, remainder = divmod(remainder, 60_000_000)
    seconds, remainder = divmod(remainder, 1_000_000)
    rendered = f"{seconds}{_fraction_suffix(remainder, 6)}s"
    if hours:
        rendered = f"{hours}h{minutes}m{rendered}"
    elif minutes:
        rendered = f"{minutes}m{rendered}"
    return sign + rendered


def _fraction_suffix(remainder: int, width: int) -> str:
    if not remainder:
        return ""
    return "." + f"{remainder:0{width}d}".rstrip("0")


def _truncate_to_microseconds(nanoseconds: int) -> int:
    if nanoseconds < 0:
        return -(-nanoseconds // _MICROSECOND)
    return nanoseconds // _MICROSECOND


__all__ = ["format_duration", "parse_duration", "parse_duration_ns"]
