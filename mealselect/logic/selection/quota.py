"""Target number of cultural meals for a whole plan."""
import logging
import math

from mealselect.utilities.constants import (
    CULTURAL_BASELINE_SHARE, CULTURAL_WEIGHT_BONUS, CULTURAL_QUOTA_BOUNDS, CULTURAL_QUOTA_LARGE_PLAN,
)

logger = logging.getLogger(__name__)

__all__ = ["optimal_cultural_meal_count"]


def optimal_cultural_meal_count(total_meals: int, cultural_weight: float) -> int:
    """About a quarter of the plan, up to 15% more for a high cultural weight, clamped by plan size."""
    if total_meals <= 0:
        return 0
    base = total_meals * CULTURAL_BASELINE_SHARE
    count = math.ceil(base + base * cultural_weight * CULTURAL_WEIGHT_BONUS)

    low, high = CULTURAL_QUOTA_LARGE_PLAN
    for max_meals, lo, hi in CULTURAL_QUOTA_BOUNDS:
        if total_meals <= max_meals:
            low, high = lo, hi
            break
    clamped = min(max(count, low), high, total_meals)
    logger.debug(f"Optimal cultural meals: {clamped} ({clamped / total_meals * 100:.1f}% of {total_meals})")
    return clamped
