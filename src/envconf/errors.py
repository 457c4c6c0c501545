"""
envconf - error taxonomy.

File: src/envconf/errors.py
Last updated: 2026-10-17

Purpose
- Define the fatal errors raised by ``envconf.load`` and ``envconf.describe``.

Functional requirements
- Every error names the offending canonical key when one is known.
- All errors share ``EnvconfError`` so callers can treat any of them as a
  startup-time configuration defect with a single ``except`` clause.
"""

from __future__ import annotations


class EnvconfError(ValueError):
    """Base class for every fatal envconf error."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        self.key = key
        super().__init__(message)


class DuplicateKeyError(EnvconfError):
    """Raised when two leaf fields resolve to the same canonical key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"duplicated key {key}", key=key)


class UnsupportedTypeError(EnvconfError):
    """Raised when a leaf field annotation has no coercer."""

    def __init__(self, key: str, annotation: object, *, reason: str | None = None) -> None:
        self.annotation = annotation
        self.reason = reason
        message = (
            f"field type {_describe_annotation(annotation)} of {key} is not supported by envconf"
        )
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, key=key)


class InlineUsageError(EnvconfError):
    """Raised when the ``inline`` option is applied to a non-dataclass field."""

    def __init__(self, key: str, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(
            f"option ,inline needs a dataclass-typed field: {field_name!r} under {key}",
            key=key,
        )


class TagError(EnvconfError):
    """Raised when a field's ``env`` metadata is not a tag string."""

    def __init__(self, key: str, field_name: str, tag: object) -> None:
        self.field_name = field_name
        super().__init__(
            f"env tag of field {field_name!r} under {key} must be a string, "
            f"got {type(tag).__name__}",
            key=key,
        )


class ParseError(EnvconfError):
    """Raised when a present environment variable cannot be coerced."""

    def __init__(self, key: str, raw: str, expected: str) -> None:
        self.raw = raw
        self.expected = expected
        super().__init__(f"envvar {key}={raw!r} cannot be parsed into {expected}", key=key)


class TargetError(EnvconfError):
    """Raised when the load target is not a mutable dataclass instance."""


def _describe_annotation(annotation: object) -> str:
    if isinstance(annotation, type):
        return annotation.__qualname__
    return repr(annotation)


__all__ = [
    "DuplicateKeyError",
    "EnvconfError",
    "InlineUsageError",
    "ParseError",
    "TagError",
    "TargetError",
    "UnsupportedTypeError",
]
