"""Runtime settings.

Priority: real environment variable > project .env file > default.
The .env file holds simple KEY=VALUE lines; '#' starts a comment line.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from models import BackgroundColor, DEFAULT_BACKGROUND

logger = logging.getLogger(__name__)

ENV_FILE = Path(__file__).resolve().parent.parent / '.env'
ENV_PREFIX = 'REMINDERS_'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def read_env_file(path: Path = ENV_FILE) -> dict[str, str]:
    """Parse REMINDERS_* keys from a .env file; missing file -> {}."""
    values: dict[str, str] = {}
    if not path.exists():
        return values
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        if k.startswith(ENV_PREFIX):
            values[k] = v.strip().strip('"').strip("'")
    return values


def setting(key: str, default: Optional[str] = None, env_file: Optional[dict[str, str]] = None) -> Optional[str]:
    file_values = read_env_file() if env_file is None else env_file
    value = os.environ.get(key)
    if value:
        return value
    return file_values.get(key, default)


def truthy(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


@dataclass
class Settings:
    alt_screen: bool = True
    background: BackgroundColor = DEFAULT_BACKGROUND
    log_level: str = 'WARNING'

    @classmethod
    def load(cls, env_file: Optional[dict[str, str]] = None) -> "Settings":
        file_values = read_env_file() if env_file is None else env_file
        background = DEFAULT_BACKGROUND
        raw_bg = setting('REMINDERS_BACKGROUND', env_file=file_values)
        if raw_bg:
            parsed = BackgroundColor.from_str(raw_bg)
            if parsed is None:
                logger.warning("Unknown REMINDERS_BACKGROUND %r; using %s", raw_bg, DEFAULT_BACKGROUND.value)
            else:
                background = parsed
        log_level = str(setting('REMINDERS_LOG_LEVEL', 'WARNING', env_file=file_values)).strip().upper()
        if log_level not in LOG_LEVELS:
            logger.warning("Unknown REMINDERS_LOG_LEVEL %r; using WARNING", log_level)
            log_level = 'WARNING'
        return cls(
            alt_screen=truthy(setting('REMINDERS_ALT_SCREEN', env_file=file_values), True),
            background=background,
            log_level=log_level,
        )
