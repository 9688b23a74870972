"""
Game settings - Environment-driven configuration for the shift game
"""

import os
import logging
import random
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

from shiftgame.engine.protocols import ShiftSource

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


class GameSettings(BaseModel):
    """Runtime settings for a game session.

    Attributes:
        seed: Seed for the shift generator (None for a random seed)
        reset_from_plaintext: Whether resets re-encrypt the original word
        log_dir: Directory for session log files
        text_file: Optional override of the bundled game text YAML
    """

    seed: int | None = None
    reset_from_plaintext: bool = False
    log_dir: Path = Path("logs")
    text_file: Path | None = None

    def shift_source(self) -> ShiftSource:
        """Build the shift generator described by these settings."""
        return random.Random(self.seed).randint


def _get_int(name: str) -> int | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def load_settings() -> GameSettings:
    """Read settings from the environment (and .env, if present)."""
    text_file = os.getenv("SHIFTGAME_TEXT_FILE")
    settings = GameSettings(
        seed=_get_int("SHIFTGAME_SEED"),
        reset_from_plaintext=_get_bool("SHIFTGAME_RESET_FROM_PLAINTEXT"),
        log_dir=Path(os.getenv("SHIFTGAME_LOG_DIR", "logs")),
        text_file=Path(text_file) if text_file else None,
    )
    logger.debug(f"Loaded settings: {settings}")
    return settings
