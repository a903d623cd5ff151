import logging
import os
from dataclasses import dataclass
from pathlib import Path
from .constants import DEFAULT_PURCHASES_DIR, DEFAULT_LOG_LEVEL

BUNDLED_LOCALES_DIR = Path(__file__).resolve().parent.parent / 'locales'


@dataclass
class Settings:
    purchases_dir: Path
    locales_dir: Path
    log_level: int

    @classmethod
    def from_env(cls) -> 'Settings':
        """Build settings from environment variables (call after load_dotenv)."""
        level_name = os.getenv('LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
        log_level = logging.getLevelName(level_name)
        if not isinstance(log_level, int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {level_name!r}")

        locales_dir = os.getenv('LOCALES_DIR')
        return cls(
            purchases_dir=Path(os.getenv('PURCHASES_DIR') or DEFAULT_PURCHASES_DIR),
            locales_dir=Path(locales_dir) if locales_dir else BUNDLED_LOCALES_DIR,
            log_level=log_level,
        )
