"""User preferences for focusflow.

Stores preferences in ``config.json`` inside the config directory:
``$FOCUSFLOW_HOME`` if set, otherwise ``~/.focusflow``.
"""

import json
import logging
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

CONFIG_HOME_ENV = "FOCUSFLOW_HOME"


class Preferences(BaseModel):
    """Settings the user can change."""

    language: Literal["en", "zh"] = "en"
    focus_minutes: int = Field(default=25, ge=1)  # Default focus session length
    log_level: str = "WARNING"


def get_config_dir() -> Path:
    """Get the focusflow config directory, creating it if needed."""
    override = os.environ.get(CONFIG_HOME_ENV)
    config_dir = Path(override).expanduser() if override else Path.home() / ".focusflow"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_preferences() -> Preferences:
    """Load preferences, falling back to defaults."""
    config_file = get_config_dir() / "config.json"
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            return Preferences(**data)
        except (json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring unreadable preferences in {config_file}: {e}")
    return Preferences()  # defaults


def save_preferences(preferences: Preferences) -> None:
    """Save preferences."""
    config_file = get_config_dir() / "config.json"
    config_file.write_text(
        json.dumps(preferences.model_dump(), indent=2),
        encoding="utf-8",
    )
