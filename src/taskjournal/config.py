"""Configuration management for taskjournal."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

TASKJOURNAL_HOME = Path(os.environ.get("TASKJOURNAL_HOME", Path.home() / "taskjournal"))
CONFIG_FILE = TASKJOURNAL_HOME / "config" / "taskjournal.conf"
DEFAULT_JOURNAL_FILE = TASKJOURNAL_HOME / "journal.json"


@dataclass
class Config:
    """taskjournal configuration."""

    journal_file: str = field(default_factory=lambda: str(DEFAULT_JOURNAL_FILE))
    # Empty means the system local timezone
    timezone: str = ""

    @property
    def tzinfo(self) -> ZoneInfo | None:
        return ZoneInfo(self.timezone) if self.timezone else None


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from taskjournal.conf, then apply env overrides."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if config_file.exists():
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
                case "journal_file":
                    if value:
                        config.journal_file = value
                case "timezone" if not value:
                    config.timezone = ""
                case "timezone":
                    try:
                        ZoneInfo(value)
                        config.timezone = value
                    except (ZoneInfoNotFoundError, ValueError) as e:
                        logger.warning(f"Ignoring invalid TIMEZONE {value!r}: {e}")
                case _:
                    logger.debug(f"Unknown config key: {key}")

    env_file = os.environ.get("TASKJOURNAL_FILE")
    if env_file:
        config.journal_file = env_file

    return config


def resolve_journal_path(config: Config, override: str | None = None) -> Path:
    """Resolve the journal file, letting an explicit override win."""
    return Path(override or config.journal_file).expanduser()
