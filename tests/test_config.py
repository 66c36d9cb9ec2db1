from __future__ import annotations

import logging

from envreader.config import env_flag, is_debug
from envreader.logging import LOGGER_NAME, logger


def test_env_flag_truthy_values(monkeypatch) -> None:
    for raw in ("1", "true", "YES", " on "):
        monkeypatch.setenv("ENVREADER_T_FLAG", raw)
        assert env_flag("ENVREADER_T_FLAG") is True
    monkeypatch.setenv("ENVREADER_T_FLAG", "off")
    assert env_flag("ENVREADER_T_FLAG") is False
    monkeypatch.delenv("ENVREADER_T_FLAG")
    assert env_flag("ENVREADER_T_FLAG", "1") is True


def test_is_debug_follows_env(monkeypatch) -> None:
    monkeypatch.setenv("ENVREADER_DEBUG", "1")
    assert is_debug() is True
    monkeypatch.setenv("ENVREADER_DEBUG", "0")
    assert is_debug() is False


def test_logger_configured_once() -> None:
    assert logger is logging.getLogger(LOGGER_NAME)
    assert len(logger.handlers) == 1
