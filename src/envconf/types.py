"""Fixed-width integer annotations understood by the coercer.

A plain ``int`` field is a signed 64-bit integer. Narrower or unsigned fields
use the ``Annotated`` aliases below, for example::

    @dataclass
    class Config:
        replicas: Uint = 1
        port: Uint16 = 8080
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from envconf.constants import (
    INT8_MAX,
    INT8_MIN,
    INT16_MAX,
    INT16_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    UINT8_MAX,
    UINT16_MAX,
    UINT32_MAX,
    UINT64_MAX,
)


@dataclass(frozen=True, slots=True)
class IntBounds:
    """Inclusive range of an integer field."""

    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(f"invalid integer bounds [{self.minimum}, {self.maximum}]")

    @property
    def unsigned(self) -> bool:
        return self.minimum >= 0

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.minimum <= value <= self.maximum


INT64_BOUNDS = IntBounds(INT64_MIN, INT64_MAX)

Int8 = Annotated[int, IntBounds(INT8_MIN, INT8_MAX)]
Int16 = Annotated[int, IntBounds(INT16_MIN, INT16_MAX)]
Int32 = Annotated[int, IntBounds(INT32_MIN, INT32_MAX)]
Int64 = Annotated[int, INT64_BOUNDS]

Uint8 = Annotated[int, IntBounds(0, UINT8_MAX)]
Uint16 = Annotated[int, IntBounds(0, UINT16_MAX)]
Uint32 = Annotated[int, IntBounds(0, UINT32_MAX)]
Uint64 = Annotated[int, IntBounds(0, UINT64_MAX)]
Uint = Uint64

__all__ = [
    "INT64_BOUNDS",
    "Int16",
    "Int32",
    "Int64",
    "Int8",
    "IntBounds",
    "Uint",
    "Uint16",
    "Uint32",
    "Uint64",
    "Uint8",
]
