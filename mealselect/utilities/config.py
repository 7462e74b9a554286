"""Configuration management for the meal selection engine."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, '').strip()
    return int(raw) if raw else None


# Logging
LOG_LEVEL: Final[str] = os.getenv('MEALSELECT_LOG_LEVEL', 'INFO').upper()

# Plan generation defaults
RANDOM_SEED: Final[Optional[int]] = _optional_int('MEALSELECT_RANDOM_SEED')
PLAN_DAYS: Final[int] = int(os.getenv('MEALSELECT_DAYS', '7'))
MEALS_PER_DAY: Final[int] = int(os.getenv('MEALSELECT_MEALS_PER_DAY', '3'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
CATALOG_FILE: Final[Path] = Path(os.getenv('MEALSELECT_CATALOG_FILE', str(DATA_DIR / 'cultural_meals.json')))
