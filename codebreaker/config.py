"""
Single place to:
- Load env vars from .env (if present)
- Hold the game constants and the difficulty table
- Read runtime settings (default difficulty, seed, log level)
- Set up logging for the terminal front-end

Why: every knob lives here so the store and the CLI never read os.environ directly.
"""

import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional

from dotenv import load_dotenv

from .errors import UnknownDifficulty
from .types import Difficulty

# dev convenience; a real shell can still override anything
load_dotenv()

PEG_COUNT = 10               # peg ids 0..9
RECENT_RESULTS_LIMIT = 5     # scoreboard keeps the last 5 results
LOSS_MARKER = "lost"         # recorded in recent results for a lost game


@dataclass(frozen=True)
class Preset:
    code_length: int
    max_attempts: int


# Difficulty presets: (code length, attempts)
DIFFICULTIES: Dict[str, Preset] = {
    "easy": Preset(code_length=4, max_attempts=10),
    "hard": Preset(code_length=6, max_attempts=12),
    "impossible": Preset(code_length=8, max_attempts=15),
}


def get_preset(difficulty: Difficulty) -> Preset:
    preset = DIFFICULTIES.get(difficulty)
    if preset is None:
        raise UnknownDifficulty(difficulty)
    return preset


def get_default_difficulty() -> Difficulty:
    """Difficulty the terminal game starts on (CODEBREAKER_DIFFICULTY, default easy)."""
    raw = os.getenv("CODEBREAKER_DIFFICULTY")
    if raw is None or raw.strip() == "":
        return "easy"
    difficulty = raw.strip().lower()
    if difficulty not in DIFFICULTIES:
        raise RuntimeError(
            f"CODEBREAKER_DIFFICULTY must be one of {', '.join(DIFFICULTIES)}, got {raw!r}. "
            "Fix your environment or .env."
        )
    return difficulty


def get_seed() -> Optional[int]:
    """Seed for reproducible secrets, or None for an unseeded source."""
    raw = os.getenv("CODEBREAKER_SEED")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(
            f"CODEBREAKER_SEED must be an integer, got {raw!r}. Fix your environment or .env."
        ) from None


def configure_logging(level: Optional[str] = None) -> None:
    level_name = (level or os.getenv("CODEBREAKER_LOG_LEVEL") or "WARNING").strip().upper()
    # getLevelName maps known names to ints and anything else to a "Level ..." string
    level_value = logging.getLevelName(level_name)
    if not isinstance(level_value, int):
        raise RuntimeError(
            f"Unknown log level {level_name!r}; use DEBUG, INFO, WARNING, ERROR or CRITICAL."
        )
    logging.basicConfig(
        level=level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
