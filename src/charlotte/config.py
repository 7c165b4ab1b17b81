"""Configuration management for Charlotte."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

CHARLOTTE_HOME = Path(os.environ.get("CHARLOTTE_HOME", Path.home() / "charlotte"))
CONFIG_FILE = CHARLOTTE_HOME / "config" / "charlotte.conf"
DATA_DIR = CHARLOTTE_HOME / "data"
DEFAULT_DATA_FILE = DATA_DIR / "charlotte.txt"


@dataclass
class Config:
    """Charlotte configuration."""

    data_file: str = ""
    log_level: str = "WARNING"
    # Telegram bot settings
    telegram_bot_token: str = ""
    telegram_allowed_users: list[int] = field(default_factory=list)

    def data_path(self) -> Path:
        """Resolve the task data file, falling back to the default location."""
        if self.data_file:
            return Path(self.data_file).expanduser()
        return DEFAULT_DATA_FILE


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from unquoted values: "value" # comment."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_user_ids(value: str) -> list[int]:
    user_ids = []
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        try:
            user_ids.append(int(entry))
        except ValueError:
            logger.warning(f"Ignoring invalid Telegram user id: {entry!r}")
    return user_ids


def load_config(path: Path | None = None) -> Config:
    """Load configuration from charlotte.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_file":
                config.data_file = value
            case "log_level":
                level = value.upper()
                if isinstance(logging.getLevelName(level), int):
                    config.log_level = level
                else:
                    logger.warning(f"Ignoring unknown LOG_LEVEL {value!r}, using {config.log_level}")
            case "telegram_bot_token":
                config.telegram_bot_token = value
            case "telegram_allowed_users":
                config.telegram_allowed_users = _parse_user_ids(value)
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config
