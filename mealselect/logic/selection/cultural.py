"""Cultural meal selection.

Two decisions per plan slot, always taken in order:

  1. should_use_cultural_meal: a Bernoulli trial on the probability returned by
     cultural_meal_probability (quota, pacing, meal-type bias, anti-clustering).
  2. select_best_cultural_meal: score every candidate against the goal weights
     and pick uniformly among the top of the ranking.

The probability and scoring functions are pure; the two wrappers perform the
only random draws, using the `rng` passed in (defaults to the `random` module).
Nothing here mutates the progress, slot or candidates it is given.
"""
from __future__ import annotations
import logging
import random
from typing import List, Optional, Sequence, Tuple

from mealselect.domain.CandidateMeal import CandidateMeal, Nutrition
from mealselect.domain.GoalWeights import GoalWeights
from mealselect.domain.PlanProgress import PlanProgress
from mealselect.domain.SlotContext import SlotContext
from mealselect.utilities.constants import (
    QUOTA_OVERRIDE_WEIGHT, OBJECTIVE_WEIGHT_THRESHOLD, PACING_BOOST, MEAL_TYPE_BIAS,
    CLUSTER_WINDOW, CLUSTER_LIMIT, CLUSTER_PENALTY, VARIETY_WINDOW, SHORTLIST_SIZE,
    COOK_TIME_BANDS, SLOW_COOK_SCORE, CHEAP_INGREDIENTS, REPEATED_CULTURE_SCORE,
    NEW_CULTURE_SCORE, MEAL_TYPE_WEIGHT, MEAL_TYPE_KEYWORDS, MEAL_TYPE_DEFAULTS,
    UNKNOWN_MEAL_TYPE_SCORE, IDEAL_MACRO_SPLIT, CALORIE_BAND, NO_MACROS_SCORE,
)
from mealselect.utilities.text import contains_any

logger = logging.getLogger(__name__)

__all__ = [
    "InvalidArgument", "cultural_meal_probability", "should_use_cultural_meal",
    "time_score", "cost_score", "health_score", "variety_score", "meal_type_score",
    "score_breakdown", "score_candidate", "rank_candidates", "select_best_cultural_meal",
]


class InvalidArgument(ValueError):
    """Raised when the caller breaks a precondition (e.g. an empty candidate pool)."""


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


# -------------------- Decide --------------------
def cultural_meal_probability(progress: PlanProgress, slot: SlotContext, weights: GoalWeights) -> float:
    """Probability of using a cultural meal for this slot.

    Returns 0.0 for an empty pool. Once the quota is met the result is 1.0 or 0.0
    depending on whether the cultural weight exceeds the override threshold.
    """
    if progress.available_cultural_meals <= 0:
        return 0.0

    if progress.cultural_meals_used >= progress.optimal_cultural_meal_count:
        return 1.0 if weights.cultural > QUOTA_OVERRIDE_WEIGHT else 0.0

    probability = weights.cultural

    plan_progress = slot.slot_index / progress.total_meals if progress.total_meals > 0 else 0.0
    cultural_progress = progress.cultural_meals_used / progress.optimal_cultural_meal_count
    if cultural_progress < plan_progress:
        probability += PACING_BOOST

    probability += MEAL_TYPE_BIAS.get(slot.meal_type, 0.0)

    recent = slot.previous_meals[-CLUSTER_WINDOW:]
    if sum(1 for m in recent if m.cultural_source) >= CLUSTER_LIMIT:
        probability -= CLUSTER_PENALTY

    return _clamp(probability)


def should_use_cultural_meal(progress: PlanProgress, slot: SlotContext, weights: GoalWeights,
                             rng: Optional[random.Random] = None) -> bool:
    """Decide whether the slot gets a cultural meal.

    Empty pools and a met quota (without the high-weight override) are decided
    without consulting the random source.
    """
    probability = cultural_meal_probability(progress, slot, weights)
    if probability <= 0.0:
        if progress.available_cultural_meals > 0 and progress.quota_reached:
            logger.debug(f"Cultural meal quota reached: {progress.cultural_meals_used}/"
                         f"{progress.optimal_cultural_meal_count}")
        return False
    source = rng if rng is not None else random
    decision = source.random() < probability
    logger.debug(f"Cultural meal decision for slot {slot.slot_index}: {decision} (probability: {probability:.2f})")
    return decision


# -------------------- Score --------------------
def time_score(cook_time_minutes: int) -> float:
    for limit, score in COOK_TIME_BANDS:
        if cook_time_minutes <= limit:
            return score
    return SLOW_COOK_SCORE


def cost_score(ingredients: Sequence[str]) -> float:
    """Share of ingredients that are common, cheap staples."""
    if not ingredients:
        return 0.0
    cheap = sum(1 for ing in ingredients if contains_any(ing, CHEAP_INGREDIENTS))
    return cheap / len(ingredients)


def health_score(nutrition: Nutrition) -> float:
    """Macro balance against a 30/40/30 protein/carb/fat split, averaged with a calorie band check."""
    total = nutrition.total_macros()
    if total > 0:
        actual = {
            "protein": (nutrition.protein or 0) / total,
            "carbs": (nutrition.carbs or 0) / total,
            "fat": (nutrition.fat or 0) / total,
        }
        balance = sum(1 - abs(actual[m] - ideal) * 2 for m, ideal in IDEAL_MACRO_SPLIT.items())
        balance /= len(IDEAL_MACRO_SPLIT)
    else:
        balance = NO_MACROS_SCORE
    low, high = CALORIE_BAND
    calorie_term = 1.0 if low <= (nutrition.calories or 0) <= high else 0.5
    return _clamp((balance + calorie_term) / 2)


def variety_score(culture: str, slot: SlotContext) -> float:
    if culture in slot.recent_cultural_sources(VARIETY_WINDOW):
        return REPEATED_CULTURE_SCORE
    return NEW_CULTURE_SCORE


def meal_type_score(title: str, meal_type: str) -> float:
    keywords = MEAL_TYPE_KEYWORDS.get(meal_type)
    if keywords is None:
        return UNKNOWN_MEAL_TYPE_SCORE
    if contains_any(title, keywords):
        return 1.0
    return MEAL_TYPE_DEFAULTS.get(meal_type, UNKNOWN_MEAL_TYPE_SCORE)


def score_breakdown(meal: CandidateMeal, weights: GoalWeights, slot: SlotContext) -> dict:
    """Weighted contribution of each objective; objectives at or below the threshold contribute nothing."""
    parts = {"time": 0.0, "cost": 0.0, "health": 0.0, "variety": 0.0, "meal_type": 0.0}
    if weights.time > OBJECTIVE_WEIGHT_THRESHOLD:
        parts["time"] = time_score(meal.cook_time_minutes) * weights.time
    if weights.cost > OBJECTIVE_WEIGHT_THRESHOLD:
        parts["cost"] = cost_score(meal.ingredients) * weights.cost
    if weights.health > OBJECTIVE_WEIGHT_THRESHOLD and meal.nutrition is not None:
        parts["health"] = health_score(meal.nutrition) * weights.health
    if weights.variety > OBJECTIVE_WEIGHT_THRESHOLD:
        parts["variety"] = variety_score(meal.culture, slot) * weights.variety
    parts["meal_type"] = meal_type_score(meal.title, slot.meal_type) * MEAL_TYPE_WEIGHT
    return parts


def score_candidate(meal: CandidateMeal, weights: GoalWeights, slot: SlotContext) -> float:
    return sum(score_breakdown(meal, weights, slot).values())


def rank_candidates(candidates: Sequence[CandidateMeal], weights: GoalWeights,
                    slot: SlotContext) -> List[Tuple[CandidateMeal, float]]:
    """Candidates with their scores, best first; ties keep catalog order."""
    scored = [(meal, score_candidate(meal, weights, slot)) for meal in candidates]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return scored


# -------------------- Pick --------------------
def select_best_cultural_meal(candidates: Sequence[CandidateMeal], weights: GoalWeights, slot: SlotContext,
                              rng: Optional[random.Random] = None) -> CandidateMeal:
    """Pick uniformly among the top-scored candidates (at most three).

    Raises:
        InvalidArgument: if `candidates` is empty.
    """
    if not candidates:
        raise InvalidArgument("No cultural meals available to select from")
    ranked = rank_candidates(candidates, weights, slot)
    shortlist = ranked[:min(SHORTLIST_SIZE, len(ranked))]
    if len(shortlist) == 1:
        chosen = shortlist[0][0]
    else:
        source = rng if rng is not None else random
        chosen = source.choice(shortlist)[0]
    logger.debug(f"Selected '{chosen.title}' for slot {slot.slot_index} from {len(candidates)} candidates "
                 f"(shortlist: {', '.join(m.title for m, _ in shortlist)})")
    return chosen
