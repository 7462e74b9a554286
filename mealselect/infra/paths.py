from pathlib import Path
from mealselect.utilities.config import CATALOG_FILE as _CONFIGURED_CATALOG

# Centralized paths for data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
CATALOG_FILE = Path(_CONFIGURED_CATALOG).resolve()

__all__ = ['DATA_DIR', 'CATALOG_FILE']
