"""
envconf - environment variable loader.

File: src/envconf/loader.py
Last updated: 2026-10-17

Purpose
- Populate a dataclass instance from environment variables in one pass.

What should be included in this file
- Depth-first walk over dataclass fields in declaration order.
- Canonical key mapping: upper-cased prefix, one ``_SEGMENT`` per non-inline
  nesting level.
- Duplicate key detection and the key -> presence report.

Functional requirements
- Absent variables leave fields untouched.
- Any structural or parse problem aborts the load with an ``EnvconfError``;
  fields written before the failure stay written.
- ``describe`` resolves the same keys without touching the environment.

Non-functional requirements
- No state survives between calls.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import sys
import typing
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Annotated, Any, TypeVar

from envconf.coercion import LeafKind, LeafType, classify, coerce
from envconf.errors import InlineUsageError, TargetError, UnsupportedTypeError
from envconf.options import Option, build_settings
from envconf.registry import KeyRegistry
from envconf.tags import resolve_key, root_key, tag_of

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class EnvBinding:
    """One leaf field and the environment variable it is read from."""

    key: str
    path: tuple[str, ...]
    leaf: LeafType

    @property
    def kind(self) -> LeafKind:
        return self.leaf.kind

    @property
    def attribute(self) -> str:
        return ".".join(self.path)


def load(prefix: str, target: T, *options: Option) -> T:
    """Load environment variables into the dataclass instance ``target``.

    Variable names are upper-case and start with ``prefix``. Fields tagged
    ``"-"`` and fields whose name starts with an underscore are ignored.
    Returns ``target`` for convenience.
    """

    base_key = root_key(prefix)
    schema = _mutable_dataclass_type(target, base_key)
    settings = build_settings(options)
    environ = settings.environ
    registry = KeyRegistry()

    for binding in _walk(schema, base_key, (), registry):
        owner = _owner_of(target, binding)
        raw = environ.get(binding.key)
        if raw is None:
            logger.debug("envconf: %s not set, keeping %s", binding.key, binding.attribute)
            continue
        setattr(owner, binding.path[-1], coerce(raw, binding.leaf, binding.key))
        registry.mark_present(binding.key)
        logger.debug("envconf: loaded %s into %s", binding.key, binding.attribute)

    report = registry.snapshot()
    logger.debug(
        "envconf: prefix=%s consulted=%d set=%d",
        base_key,
        len(report),
        sum(1 for present in report.values() if present),
    )
    settings.handle_env_vars(report)
    return target


def describe(prefix: str, schema: object) -> tuple[EnvBinding, ...]:
    """Resolve every leaf binding of a dataclass type or instance.

    The environment is not read. Skip, inline, duplicate and unsupported-type
    rules are applied exactly as ``load`` applies them.
    """

    base_key = root_key(prefix)
    schema_type = schema if isinstance(schema, type) else type(schema)
    if not dataclasses.is_dataclass(schema_type):
        raise TargetError(
            f"envconf needs a dataclass type or instance, got {schema_type.__qualname__}",
            key=base_key,
        )
    return tuple(_walk(schema_type, base_key, (), KeyRegistry()))


def _walk(
    schema: type[Any],
    node_key: str,
    path: tuple[str, ...],
    registry: KeyRegistry,
) -> Iterator[EnvBinding]:
    hints, unresolved = _field_annotations(schema)
    for field in dataclasses.fields(schema):
        if field.name.startswith("_"):
            continue
        tag = tag_of(field, node_key)
        key = resolve_key(node_key, tag, field.name)
        if key is None:
            continue

        annotation = hints.get(field.name, field.type)
        field_path = (*path, field.name)
        nested = _nested_schema(annotation)
        if nested is not None:
            yield from _walk(nested, key, field_path, registry)
            continue
        if tag.inline:
            raise InlineUsageError(node_key, field.name)

        registry.register(key)
        if field.name in unresolved:
            raise UnsupportedTypeError(key, annotation, reason=unresolved[field.name])
        yield EnvBinding(key=key, path=field_path, leaf=classify(annotation, key))


def _field_annotations(schema: type[Any]) -> tuple[dict[str, Any], dict[str, str]]:
    """Resolve annotations per field; return resolved hints and unresolved reasons.

    One unresolvable forward reference (for example a dataclass defined in a
    function body) must not hide the hints of its sibling fields.
    """

    try:
        return typing.get_type_hints(schema, include_extras=True), {}
    except NameError:
        pass

    hints: dict[str, Any] = {}
    unresolved: dict[str, str] = {}
    for base in reversed(schema.__mro__):
        module = sys.modules.get(base.__module__)
        globalns = dict(vars(module)) if module is not None else {}
        localns = dict(vars(base))
        for name, annotation in inspect.get_annotations(base).items():
            if not isinstance(annotation, str):
                hints[name] = annotation
                unresolved.pop(name, None)
                continue
            try:
                hints[name] = eval(annotation, globalns, localns)
            except NameError as exc:
                hints[name] = annotation
                unresolved[name] = str(exc)
            else:
                unresolved.pop(name, None)
    return hints, unresolved


def _nested_schema(annotation: object) -> type[Any] | None:
    if typing.get_origin(annotation) is Annotated:
        annotation = typing.get_args(annotation)[0]
    if isinstance(annotation, type) and dataclasses.is_dataclass(annotation):
        return annotation
    return None


def _mutable_dataclass_type(target: object, key: str, where: str = "target") -> type[Any]:
    if isinstance(target, type) or not dataclasses.is_dataclass(target):
        raise TargetError(
            f"envconf needs a dataclass instance as {where}, got {type(target).__qualname__}",
            key=key,
        )
    params = getattr(type(target), "__dataclass_params__", None)
    if params is not None and params.frozen:
        raise TargetError(
            f"envconf cannot write into frozen dataclass {type(target).__qualname__} ({where})",
            key=key,
        )
    return type(target)


def _owner_of(target: object, binding: EnvBinding) -> object:
    owner = target
    for depth, name in enumerate(binding.path[:-1], start=1):
        owner = getattr(owner, name)
        _mutable_dataclass_type(owner, binding.key, ".".join(binding.path[:depth]))
    return owner


__all__ = ["EnvBinding", "describe", "load"]
