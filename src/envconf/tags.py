"""Field tag parsing and canonical key resolution."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from envconf.constants import (
    KEY_SEPARATOR,
    TAG_METADATA_KEY,
    TAG_OPTION_INLINE,
    TAG_SEPARATOR,
    TAG_SKIP,
)
from envconf.errors import TagError


@dataclass(frozen=True, slots=True)
class FieldTag:
    """Parsed ``env`` tag of one dataclass field."""

    name: str = ""
    inline: bool = False
    skip: bool = False


_SKIP_TAG = FieldTag(skip=True)


def parse_tag(raw: str | None) -> FieldTag:
    """Parse ``"name,opt,opt"``; ``"-"`` skips the field and ``None`` means untagged."""

    if raw is None:
        return FieldTag()
    if raw == TAG_SKIP:
        return _SKIP_TAG

    name, *options = raw.split(TAG_SEPARATOR)
    # Unknown option tokens are ignored.
    inline = TAG_OPTION_INLINE in options
    return FieldTag(name=name, inline=inline)


def tag_of(field: dataclasses.Field[Any], parent_key: str) -> FieldTag:
    metadata: Mapping[str, object] = field.metadata
    raw = metadata.get(TAG_METADATA_KEY)
    if raw is not None and not isinstance(raw, str):
        raise TagError(parent_key, field.name, raw)
    return parse_tag(raw)


def root_key(prefix: str) -> str:
    return prefix.upper()


def resolve_key(parent_key: str, tag: FieldTag, field_name: str) -> str | None:
    """Return the canonical key for a field, or ``None`` when the field is skipped.

    Inline fields share ``parent_key``; the caller is responsible for rejecting
    inline on leaf fields since only it knows the field type.
    """

    if tag.skip:
        return None
    if tag.inline:
        return parent_key
    segment = tag.name or field_name
    return parent_key + KEY_SEPARATOR + segment.upper()


def env_field(tag: str = "", **field_kwargs: Any) -> Any:
    """``dataclasses.field`` with ``tag`` stored under the ``env`` metadata key."""

    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[TAG_METADATA_KEY] = tag
    return dataclasses.field(metadata=metadata, **field_kwargs)


__all__ = [
    "FieldTag",
    "env_field",
    "parse_tag",
    "resolve_key",
    "root_key",
    "tag_of",
]
