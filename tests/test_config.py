# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

from focusflow.global_config import (
    Preferences,
    get_config_dir,
    get_preferences,
    save_preferences,
)
from focusflow.logging_setup import setup_logging


def test_config_dir_follows_env(isolated_home: Path) -> None:
    assert get_config_dir() == isolated_home
    assert isolated_home.is_dir()


def test_defaults_without_file() -> None:
    prefs = get_preferences()

    assert prefs == Preferences()
    assert (prefs.language, prefs.focus_minutes, prefs.log_level) == ("en", 25, "WARNING")


def test_save_and_load(isolated_home: Path) -> None:
    save_preferences(Preferences(language="zh", focus_minutes=50))

    assert (isolated_home / "config.json").exists()
    prefs = get_preferences()
    assert prefs.language == "zh"
    assert prefs.focus_minutes == 50


def test_unreadable_file_falls_back_to_defaults(isolated_home: Path, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="focusflow")
    get_config_dir()
    (isolated_home / "config.json").write_text("{broken", encoding="utf-8")

    assert get_preferences() == Preferences()
    assert "Ignoring unreadable preferences" in caplog.text


def test_invalid_values_fall_back_to_defaults(isolated_home: Path) -> None:
    get_config_dir()
    (isolated_home / "config.json").write_text('{"focus_minutes": 0}', encoding="utf-8")

    assert get_preferences().focus_minutes == 25


def test_setup_logging_replaces_handlers() -> None:
    setup_logging("debug")
    setup_logging(logging.INFO)

    logger = logging.getLogger("focusflow")
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_setup_logging_unknown_level_name_defaults_to_warning() -> None:
    setup_logging("chatty")

    assert logging.getLogger("focusflow").level == logging.WARNING
