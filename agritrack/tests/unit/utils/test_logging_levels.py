from __future__ import annotations

import logging

from agritrack.utils import logging as logging_utils


def test_parse_level_accepts_names_and_numbers() -> None:
    assert logging_utils.parse_level("warning") == logging.WARNING
    assert logging_utils.parse_level(" 15 ") == 15
    assert logging_utils.parse_level("") is None
    assert logging_utils.parse_level("chatty") is None


def test_parse_level_ignores_non_ascii_digits() -> None:
    # "²".isdigit() is True but int() rejects it.
    assert logging_utils.parse_level("²") is None


def test_env_level_beats_settings_toggle() -> None:
    env = {"AGRITRACK_LOG_LEVEL": "ERROR", "AGRITRACK_DEBUG": "1"}
    assert logging_utils.effective_level(True, env) == logging.ERROR


def test_debug_flag_and_toggle() -> None:
    assert logging_utils.effective_level(False, {"AGRITRACK_DEBUG": "yes"}) == logging.DEBUG
    assert logging_utils.effective_level(True, {}) == logging.DEBUG
    assert logging_utils.effective_level(False, {}) == logging.INFO
    assert logging_utils.env_requests_debug({"AGRITRACK_LOG_LEVEL": "10"})
    assert not logging_utils.env_requests_debug({})


def test_configure_root_survives_bad_env_level(monkeypatch) -> None:
    monkeypatch.setenv("AGRITRACK_LOG_LEVEL", "²")
    monkeypatch.delenv("AGRITRACK_DEBUG", raising=False)
    root = logging.getLogger()
    previous = root.level
    try:
        assert logging_utils.configure_root(debug_enabled=True) == logging.DEBUG
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
