from __future__ import annotations

import dataclasses

import pytest

from envreader.lookup import NamedValue, is_set, lookup


def test_lookup_returns_env_value(monkeypatch) -> None:
    monkeypatch.setenv("ENVREADER_T_HOST", "db.internal")
    nv = lookup("ENVREADER_T_HOST", "localhost")
    assert nv == NamedValue(name="ENVREADER_T_HOST", value="db.internal")


def test_lookup_unset_uses_default(monkeypatch) -> None:
    monkeypatch.delenv("ENVREADER_T_HOST", raising=False)
    assert lookup("ENVREADER_T_HOST", "localhost").value == "localhost"


def test_lookup_empty_string_uses_default(monkeypatch) -> None:
    monkeypatch.setenv("ENVREADER_T_HOST", "")
    assert lookup("ENVREADER_T_HOST", "localhost").value == "localhost"
    assert is_set("ENVREADER_T_HOST") is False


def test_lookup_keeps_whitespace_verbatim(monkeypatch) -> None:
    monkeypatch.setenv("ENVREADER_T_HOST", "  spaced ")
    assert lookup("ENVREADER_T_HOST", "x").value == "  spaced "


def test_named_value_is_immutable() -> None:
    nv = NamedValue(name="A", value="1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        nv.value = "2"  # type: ignore[misc]
