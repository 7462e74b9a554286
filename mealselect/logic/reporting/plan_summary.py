"""Plan summary: nutrition per day and cultural meal usage for a generated plan."""
from collections import Counter, defaultdict
from typing import Any, Dict, List

from mealselect.domain.MealPlan import MealPlan
from mealselect.utilities.constants import CULTURAL_SHARE_RANGE, MIN_CULTURAL_VARIETY

MACROS = ('calories', 'protein', 'carbs', 'fat')


def _empty_totals() -> Dict[str, float]:
    return {k: 0 for k in MACROS}


def cultural_variety_score(cultures: Dict[str, int]) -> float:
    """Distinct cultures per cultural meal, rounded to 2 places (1.0 means no culture repeats)."""
    used = sum(cultures.values())
    return round(len(cultures) / used, 2) if used else 0.0


def validate_cultural_insertion(cultural_meals_used: int, total_meals: int, target_count: int,
                                cultures: Dict[str, int]) -> Dict[str, Any]:
    """Check the cultural share of a plan against its target count and the 20-35% band."""
    percentage = round(cultural_meals_used / total_meals * 100, 1) if total_meals else 0.0
    variety = cultural_variety_score(cultures)
    low, high = CULTURAL_SHARE_RANGE
    recommendations: List[str] = []
    if percentage < low:
        recommendations.append('Consider increasing cultural meal frequency')
    elif percentage > high:
        recommendations.append('Consider reducing cultural meal frequency for better variety')
    if variety < MIN_CULTURAL_VARIETY:
        recommendations.append('Improve cultural variety by using different cuisine types')
    return {
        'cultural_percentage': percentage,
        'variety_score': variety,
        'is_optimal': cultural_meals_used == target_count,
        'within_range': low <= percentage <= high,
        'recommendations': recommendations,
    }


def summarize_plan(plan: MealPlan) -> Dict[str, Any]:
    """Aggregate nutrition and cultural statistics for the given plan.

    Returns structure:
    {
      'days': {
         0: {'calories': kcal, 'protein': g, 'carbs': g, 'fat': g,
             'meals': {'breakfast': {'title': str, 'cultural_source': str | None}, ...}},
         ...
      },
      'totals': {'calories': kcal, 'protein': g, 'carbs': g, 'fat': g},
      'total_meals': int,
      'cultural_meals_used': int,
      'optimal_cultural_meal_count': int,
      'cultural_ratio': float,
      'cultures': {'Japanese': 2, ...},
      'cultural_percentage': float, 'variety_score': float, 'is_optimal': bool,
      'within_range': bool, 'recommendations': [str, ...]
    }
    Meals without nutrition (e.g. generic placeholders) add nothing to the totals.
    """
    target = getattr(plan, 'optimal_cultural_meal_count', 0) if plan else 0
    if not plan or not plan.meals:
        summary = {
            'days': {}, 'totals': _empty_totals(), 'total_meals': 0, 'cultural_meals_used': 0,
            'optimal_cultural_meal_count': target, 'cultural_ratio': 0.0, 'cultures': {},
        }
        summary.update(validate_cultural_insertion(0, 0, target, {}))
        return summary

    days_result = {}
    totals = defaultdict(float)
    cultures = Counter()

    for day, meals in plan.by_day().items():
        day_totals = _empty_totals()
        meal_details = {}
        for meal in meals:
            meal_details[meal.meal_type] = {'title': meal.title, 'cultural_source': meal.cultural_source}
            if meal.cultural_source:
                cultures[meal.cultural_source] += 1
            if meal.nutrition is None:
                continue
            for key in MACROS:
                day_totals[key] += getattr(meal.nutrition, key, 0) or 0
        for key in MACROS:
            totals[key] += day_totals[key]
        days_result[day] = dict(day_totals, meals=meal_details)

    used = plan.cultural_meals_used
    summary = {
        'days': days_result,
        'totals': {k: totals[k] for k in MACROS},
        'total_meals': len(plan.meals),
        'cultural_meals_used': used,
        'optimal_cultural_meal_count': target,
        'cultural_ratio': used / len(plan.meals),
        'cultures': dict(cultures),
    }
    summary.update(validate_cultural_insertion(used, len(plan.meals), target, summary['cultures']))
    return summary

__all__ = ["summarize_plan", "validate_cultural_insertion", "cultural_variety_score"]
