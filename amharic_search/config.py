"""
Configuration from environment variables.

Loads .env.local (local dev) or .env, then reads:
    LOG_LEVEL                     Console log level (default: INFO)
    AMHARIC_LOG_FILE              Base log file path (default: logs/amharic-search.log)
    AMHARIC_STOPWORDS_FILE        Stopword list replacing the default set
    AMHARIC_STEM_EXCLUSIONS_FILE  Words that are never stemmed
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


def load_environment(root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local first (highest priority), then .env as fallback.

    Returns:
        Path of the file loaded, or None if only system env is used
    """
    env_local = root / ".env.local"
    env_file = root / ".env"

    for candidate in (env_local, env_file):
        if candidate.exists():
            load_dotenv(candidate, override=True)
            logger.debug(f"Loaded environment from: {candidate}")
            return candidate

    logger.debug("No .env.local or .env file found - using system environment variables only")
    return None


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_file: str = "logs/amharic-search.log"
    stopwords_file: Optional[Path] = None
    stem_exclusions_file: Optional[Path] = None

    @property
    def console_level(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)


def _optional_file(var: str) -> Optional[Path]:
    value = os.getenv(var)
    if not value:
        return None
    path = Path(value)
    if not path.is_file():
        raise ValueError(f"{var} points to a missing file: {value}")
    return path


def get_settings() -> Settings:
    """
    Read settings from the current environment.

    Raises:
        ValueError: If a file variable names a file that does not exist
    """
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("AMHARIC_LOG_FILE", "logs/amharic-search.log"),
        stopwords_file=_optional_file("AMHARIC_STOPWORDS_FILE"),
        stem_exclusions_file=_optional_file("AMHARIC_STEM_EXCLUSIONS_FILE"),
    )
