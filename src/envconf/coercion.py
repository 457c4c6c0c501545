"""
envconf - leaf type coercion.

File: src/envconf/coercion.py
Last updated: 2026-10-17

Purpose
- Map dataclass field annotations onto a closed set of leaf kinds.
- Convert raw environment strings into values of those kinds.

Functional requirements
- Supported annotations: ``str``, ``int`` and the fixed-width aliases from
  ``envconf.types``, ``bool``, ``datetime.timedelta`` and ``list[str]``.
- Anything else is rejected with ``UnsupportedTypeError``.
- Integers are parsed in base 10 from the whole string and range-checked.
- Booleans accept ``true``/``1`` and ``false``/``0`` in any letter case.
- Text lists split on commas, strip each piece and drop empty pieces.
"""

from __future__ import annotations

import re
import typing
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Annotated, Final

from envconf.durations import parse_duration
from envconf.errors import ParseError, UnsupportedTypeError
from envconf.types import INT64_BOUNDS, IntBounds

_BOOLEAN_TRUE: Final[frozenset[str]] = frozenset({"1", "true"})
_BOOLEAN_FALSE: Final[frozenset[str]] = frozenset({"0", "false"})

_SIGNED_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+")


class LeafKind(Enum):
    TEXT = "text"
    INT = "integer"
    UINT = "unsigned integer"
    BOOL = "boolean"
    INTERVAL = "time duration"
    TEXT_LIST = "list of text"


@dataclass(frozen=True, slots=True)
class LeafType:
    """Resolved leaf kind plus integer bounds for INT/UINT leaves."""

    kind: LeafKind
    bounds: IntBounds | None = None


def classify(annotation: object, key: str) -> LeafType:
    """Return the leaf type for ``annotation`` or raise ``UnsupportedTypeError``."""

    if typing.get_origin(annotation) is Annotated:
        base, *extras = typing.get_args(annotation)
        bounds = next((item for item in extras if isinstance(item, IntBounds)), None)
        if bounds is not None and base is int:
            return LeafType(LeafKind.UINT if bounds.unsigned else LeafKind.INT, bounds)
        return classify(base, key)

    # bool is a subclass of int, so identity checks keep them apart.
    if annotation is str:
        return LeafType(LeafKind.TEXT)
    if annotation is bool:
        return LeafType(LeafKind.BOOL)
    if annotation is int:
        return LeafType(LeafKind.INT, INT64_BOUNDS)
    if annotation is timedelta:
        return LeafType(LeafKind.INTERVAL)
    if typing.get_origin(annotation) is list and typing.get_args(annotation) == (str,):
        return LeafType(LeafKind.TEXT_LIST)

    raise UnsupportedTypeError(key, annotation)


def coerce(raw: str, leaf: LeafType, key: str) -> object:
    """Convert ``raw`` according to ``leaf``; raise ``ParseError`` naming ``key``."""

    kind = leaf.kind
    if kind is LeafKind.TEXT:
        return raw
    if kind is LeafKind.INT:
        return _parse_integer(raw, key, leaf, _SIGNED_PATTERN)
    if kind is LeafKind.UINT:
        return _parse_integer(raw, key, leaf, _UNSIGNED_PATTERN)
    if kind is LeafKind.BOOL:
        return _parse_bool(raw, key)
    if kind is LeafKind.INTERVAL:
        try:
            return parse_duration(raw)
        except ValueError as exc:
            raise ParseError(key, raw, kind.value) from exc
    if kind is LeafKind.TEXT_LIST:
        return split_list(raw)
    raise AssertionError(f"unhandled leaf kind {kind!r}")  # pragma: no cover


def split_list(raw: str) -> list[str]:
    """Split on commas, strip pieces, drop empty ones."""

    return [item for item in (piece.strip() for piece in raw.split(",")) if item]


def _parse_integer(raw: str, key: str, leaf: LeafType, pattern: re.Pattern[str]) -> int:
    if pattern.fullmatch(raw) is None:
        raise ParseError(key, raw, leaf.kind.value)
    value = int(raw, 10)
    bounds = leaf.bounds or INT64_BOUNDS
    if value not in bounds:
        raise ParseError(
            key, raw, f"{leaf.kind.value} in [{bounds.minimum}, {bounds.maximum}]"
        )
    return value


def _parse_bool(raw: str, key: str) -> bool:
    lowered = raw.lower()
    if lowered in _BOOLEAN_TRUE:
        return True
    if lowered in _BOOLEAN_FALSE:
        return False
    raise ParseError(key, raw, "boolean (true/false/1/0)")


__all__ = ["LeafKind", "LeafType", "classify", "coerce", "split_list"]
