"""XDG directory management and UI preferences for textsift.

Only presentation settings live here; filter rules are never persisted.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

import tomli_w
from platformdirs import user_config_dir
from pydantic import ValidationError

from textsift.models import AppConfig

CONFIG_FILE = "config.toml"


def get_config_dir() -> Path:
    """Get the textsift config directory.

    Respects TEXTSIFT_CONFIG_DIR environment variable if set.
    """
    if override := os.environ.get("TEXTSIFT_CONFIG_DIR"):
        return Path(override)
    return Path(user_config_dir("textsift"))


def get_config_path() -> Path:
    return get_config_dir() / CONFIG_FILE


def load_config() -> AppConfig:
    """Load config from disk. Missing or unreadable files yield defaults."""
    path = get_config_path()
    if not path.exists():
        return AppConfig()
    try:
        return AppConfig.model_validate(tomllib.loads(path.read_text(encoding="utf-8")))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, ValidationError):
        return AppConfig()


def save_config(config: AppConfig) -> Path:
    """Write config to disk, creating the directory if needed."""
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(tomli_w.dumps(config.model_dump()).encode())
    return path
