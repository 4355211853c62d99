"""Configuration management for Zenith."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .adapters.file_store import STATE_KEY
from .core.dashboard import UPCOMING_LIMIT
from .core.history import LOGBOOK_LIMIT
from .core.state import DEFAULT_THEME

logger = logging.getLogger(__name__)

ZENITH_HOME = Path(os.environ.get("ZENITH_HOME", Path.home() / "zenith"))
CONFIG_FILE = ZENITH_HOME / "config" / "zenith.conf"
DATA_DIR = ZENITH_HOME / "data"


@dataclass
class Config:
    """Zenith configuration."""

    data_dir: str = ""
    state_key: str = STATE_KEY
    default_theme: str = DEFAULT_THEME
    logbook_limit: int = LOGBOOK_LIMIT
    upcoming_limit: int = UPCOMING_LIMIT
    heartbeat_seconds: int = 60


def _parse_int(key: str, value: str, fallback: int) -> int:
    try:
        number = int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer {key.upper()}: {value!r}")
        return fallback
    if number < 1:
        logger.warning(f"Ignoring non-positive {key.upper()}: {number}")
        return fallback
    return number


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from zenith.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value.startswith(('"', "'")):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "data_dir":
                config.data_dir = value
            case "state_key":
                config.state_key = value or STATE_KEY
            case "default_theme":
                config.default_theme = value or DEFAULT_THEME
            case "logbook_limit":
                config.logbook_limit = _parse_int(key, value, config.logbook_limit)
            case "upcoming_limit":
                config.upcoming_limit = _parse_int(key, value, config.upcoming_limit)
            case "heartbeat_seconds":
                config.heartbeat_seconds = _parse_int(key, value, config.heartbeat_seconds)
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config
