"""Configuration management for jot."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

JOT_HOME = Path(os.environ.get("JOT_HOME", Path.home() / "jot"))
CONFIG_FILE = JOT_HOME / "config" / "jot.conf"
DATA_DIR = JOT_HOME / "data"
DEFAULT_DATA_FILE = DATA_DIR / "tasks.jsonl"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """jot configuration."""

    data_file: str = str(DEFAULT_DATA_FILE)
    log_level: str = "WARNING"
    # Telegram bot settings
    telegram_bot_token: str = ""
    telegram_allowed_users: list[int] = field(default_factory=list)

    @property
    def data_path(self) -> Path:
        return Path(self.data_file).expanduser()

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        name = self.log_level.upper()
        return getattr(logging, name) if name in LOG_LEVELS else logging.WARNING


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_user_ids(value: str) -> list[int]:
    users = []
    for raw in value.split(","):
        raw = raw.strip()
        if not raw:
            continue
        try:
            users.append(int(raw))
        except ValueError:
            logger.warning(f"Ignoring invalid TELEGRAM_ALLOWED_USERS entry: {raw!r}")
    return users


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from jot.conf (or the given file)."""
    config = Config()
    config_file = Path(path) if path else CONFIG_FILE

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
        value = _unquote(value.strip())

        match key:
            case "data_file":
                if value:
                    config.data_file = value
            case "log_level":
                if value.upper() in LOG_LEVELS:
                    config.log_level = value.upper()
                else:
                    logger.warning(f"Ignoring unknown LOG_LEVEL: {value!r}")
            case "telegram_bot_token":
                config.telegram_bot_token = value
            case "telegram_allowed_users":
                config.telegram_allowed_users = _parse_user_ids(value)

    return config
