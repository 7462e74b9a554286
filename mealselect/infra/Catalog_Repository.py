import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from mealselect.domain.CandidateMeal import CandidateMeal
from mealselect.infra.paths import CATALOG_FILE, DATA_DIR

logger = logging.getLogger(__name__)


def _resolve(path: Optional[Union[str, Path]]) -> Path:
    """A bare file name that does not exist locally refers to a bundled catalog."""
    if path is None:
        return CATALOG_FILE
    candidate = Path(path)
    if not candidate.exists() and candidate.parent == Path('.') and (DATA_DIR / candidate).exists():
        return DATA_DIR / candidate
    return candidate


def load_candidate_meals(path: Optional[Union[str, Path]] = None) -> List[CandidateMeal]:
    """Read candidate meals from a JSON array; malformed records are logged and skipped."""
    catalog_path = _resolve(path)
    try:
        with open(catalog_path, 'r', encoding='utf-8') as f:
            records = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Catalog file not found: {catalog_path}. Returning empty list.")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in catalog file: {e}")
        return []

    if not isinstance(records, list):
        logger.error(f"Catalog file {catalog_path} must hold a JSON array, got {type(records).__name__}")
        return []

    meals: List[CandidateMeal] = []
    for position, record in enumerate(records):
        if not isinstance(record, dict):
            logger.error(f"Skipping catalog entry {position}: expected an object")
            continue
        try:
            meals.append(CandidateMeal.from_dict(record))
        except ValidationError as e:
            logger.error(f"Skipping invalid catalog entry {position} ({record.get('id', '?')}): {e}")
    return meals
