"""Stable constants shared across envconf modules."""

from __future__ import annotations

from typing import Final

# Dataclass field metadata key holding the env tag.
TAG_METADATA_KEY: Final[str] = "env"

# Tag grammar.
TAG_SEPARATOR: Final[str] = ","
TAG_SKIP: Final[str] = "-"
TAG_OPTION_INLINE: Final[str] = "inline"

# Canonical key segments are joined with this separator.
KEY_SEPARATOR: Final[str] = "_"

# Integer ranges (two's complement widths).
INT8_MIN: Final[int] = -(2**7)
INT8_MAX: Final[int] = 2**7 - 1
INT16_MIN: Final[int] = -(2**15)
INT16_MAX: Final[int] = 2**15 - 1
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
UINT8_MAX: Final[int] = 2**8 - 1
UINT16_MAX: Final[int] = 2**16 - 1
UINT32_MAX: Final[int] = 2**32 - 1
UINT64_MAX: Final[int] = 2**64 - 1

# Reference JSON report.
REPORT_MESSAGE: Final[str] = (
    "envconf: show environment variables used by configuration and whether they are set"
)
REPORT_VARIABLES_FIELD: Final[str] = "environment-variables"

__all__ = [
    "INT16_MAX",
    "INT16_MIN",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "INT8_MAX",
    "INT8_MIN",
    "KEY_SEPARATOR",
    "REPORT_MESSAGE",
    "REPORT_VARIABLES_FIELD",
    "TAG_METADATA_KEY",
    "TAG_OPTION_INLINE",
    "TAG_SEPARATOR",
    "TAG_SKIP",
    "UINT16_MAX",
    "UINT32_MAX",
    "UINT64_MAX",
    "UINT8_MAX",
]
