"""Unit tests for the per-load key registry."""

from __future__ import annotations

import pytest

from envconf.errors import DuplicateKeyError
from envconf.registry import KeyRegistry


def test_first_registration_succeeds_and_repeat_fails() -> None:
    registry = KeyRegistry()
    registry.register("TEST_FOO")

    with pytest.raises(DuplicateKeyError, match="TEST_FOO") as excinfo:
        registry.register("TEST_FOO")

    assert excinfo.value.key == "TEST_FOO"
    assert len(registry) == 1


def test_mark_present_requires_registration() -> None:
    registry = KeyRegistry()
    with pytest.raises(KeyError):
        registry.mark_present("TEST_MISSING")


def test_snapshot_is_immutable_ordered_copy() -> None:
    registry = KeyRegistry()
    for key in ("TEST_B", "TEST_A", "TEST_C"):
        registry.register(key)
    registry.mark_present("TEST_A")

    snapshot = registry.snapshot()
    registry.mark_present("TEST_C")

    assert list(snapshot) == ["TEST_B", "TEST_A", "TEST_C"]
    assert dict(snapshot) == {"TEST_B": False, "TEST_A": True, "TEST_C": False}
    with pytest.raises(TypeError):
        snapshot["TEST_B"] = True  # type: ignore[index]
    assert registry.snapshot()["TEST_C"] is True
    assert "TEST_A" in registry
    assert list(registry) == ["TEST_B", "TEST_A", "TEST_C"]
