"""Catalog filtering applied before the selection engine sees the candidate pool.

A meal stays in the pool when:
  - its culture matches one of the user's cultural backgrounds (substring either way),
  - it satisfies every dietary restriction, either because the catalog lists the
    restriction in `dietary_compatibility` or because its ingredients and
    instructions mention nothing the restriction excludes,
  - it fits the optional cook time and difficulty limits.
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from mealselect.domain.CandidateMeal import CandidateMeal
from mealselect.utilities.constants import DIETARY_KEYWORDS, DIETARY_EXCLUSIONS, KETO_MAX_CARBS
from mealselect.utilities.text import contains_any, fold_text

logger = logging.getLogger(__name__)

__all__ = ["matches_cultural_background", "is_compatible_with_restriction", "filter_compatible_meals"]


def matches_cultural_background(meal: CandidateMeal, cultural_background: Iterable[str]) -> bool:
    """True when no background is given, otherwise when a background and the meal culture overlap."""
    backgrounds = [fold_text(c).strip() for c in cultural_background if c and c.strip()]
    if not backgrounds:
        return True
    culture = fold_text(meal.culture).strip()
    if not culture:
        return False
    return any(b in culture or culture in b for b in backgrounds)


def is_compatible_with_restriction(meal: CandidateMeal, restriction: str) -> bool:
    wanted = fold_text(restriction).strip()
    if not wanted:
        return True
    if any(wanted in fold_text(compat) for compat in meal.dietary_compatibility):
        return True

    if wanted == "keto":
        # Unknown carbs cannot be vouched for
        return meal.nutrition is not None and (meal.nutrition.carbs or 0) < KETO_MAX_CARBS

    categories = DIETARY_EXCLUSIONS.get(wanted)
    if categories is None:
        # Restrictions we have no keywords for are trusted to the catalog
        return True
    text = " ".join(meal.ingredients + meal.instructions)
    return not any(contains_any(text, DIETARY_KEYWORDS[category]) for category in categories)


def filter_compatible_meals(meals: Iterable[CandidateMeal], cultural_background: Iterable[str] = (),
                            dietary_restrictions: Iterable[str] = (), max_cook_time: Optional[int] = None,
                            max_difficulty: Optional[float] = None) -> List[CandidateMeal]:
    """Meals usable as cultural picks for this user, in catalog order."""
    backgrounds = list(cultural_background or ())
    restrictions = list(dietary_restrictions or ())
    all_meals = list(meals)
    compatible = []
    for meal in all_meals:
        if not matches_cultural_background(meal, backgrounds):
            continue
        failed = next((r for r in restrictions if not is_compatible_with_restriction(meal, r)), None)
        if failed is not None:
            logger.debug(f"Meal {meal.title} not compatible with {failed}")
            continue
        if max_cook_time is not None and meal.cook_time_minutes > max_cook_time:
            continue
        if max_difficulty is not None and meal.difficulty > max_difficulty:
            continue
        compatible.append(meal)
    logger.info(f"Filtered {len(all_meals)} catalog meals to {len(compatible)} compatible "
                f"(cultures: {', '.join(backgrounds) or 'any'}; diet: {', '.join(restrictions) or 'none'})")
    return compatible
