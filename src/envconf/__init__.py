"""
envconf package public API.

File: src/envconf/__init__.py
Last updated: 2026-10-17

Purpose
- Export the loader entrypoints, field helpers, options and error types.

Functional requirements
- Populate dataclass instances from ``PREFIX_FIELD`` style environment variables.
- Fail fast with errors naming the offending variable.

Non-functional requirements
- No side effects at import time (no environment reads, no logging setup).
"""

from envconf.coercion import LeafKind
from envconf.durations import format_duration, parse_duration
from envconf.errors import (
    DuplicateKeyError,
    EnvconfError,
    InlineUsageError,
    ParseError,
    TagError,
    TargetError,
    UnsupportedTypeError,
)
from envconf.loader import EnvBinding, describe, load
from envconf.options import Option, ReportCallback, handle_env_vars, with_environ
from envconf.registry import KeyRegistry
from envconf.reporting import make_json_logger, make_logging_reporter
from envconf.tags import env_field
from envconf.types import (
    Int8,
    Int16,
    Int32,
    Int64,
    IntBounds,
    Uint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
)

__version__ = "0.1.0"

__all__ = [
    "DuplicateKeyError",
    "EnvBinding",
    "EnvconfError",
    "InlineUsageError",
    "Int16",
    "Int32",
    "Int64",
    "Int8",
    "IntBounds",
    "KeyRegistry",
    "LeafKind",
    "Option",
    "ParseError",
    "ReportCallback",
    "TagError",
    "TargetError",
    "Uint",
    "Uint16",
    "Uint32",
    "Uint64",
    "Uint8",
    "UnsupportedTypeError",
    "describe",
    "env_field",
    "format_duration",
    "handle_env_vars",
    "load",
    "make_json_logger",
    "make_logging_reporter",
    "parse_duration",
    "with_environ",
]
