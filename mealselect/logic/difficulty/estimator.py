"""Recipe difficulty estimation.

Scores a free-text recipe request on a 1-5 scale in half-point steps and
derives the generation strategy: requests up to 3.0 take the lightweight
(video based) route, harder ones get a detailed AI-generated recipe with
nutrition.
"""
from __future__ import annotations
import logging
import math
from typing import Optional

from mealselect.domain.DifficultyResult import DifficultyResult
from mealselect.utilities.constants import (
    BASELINE_DIFFICULTY, MIN_DIFFICULTY, MAX_DIFFICULTY, LIGHTWEIGHT_MAX_DIFFICULTY,
    DIFFICULTY_CUES, TECHNIQUES, COMPLEX_INGREDIENTS, COMPLEX_CUISINES,
    PRECISION_RECIPE_TYPES, TIME_INDICATORS,
)
from mealselect.utilities.text import contains_any, matched_keywords

logger = logging.getLogger(__name__)

__all__ = ["estimate", "quantize_difficulty"]


def quantize_difficulty(score: float) -> float:
    """Round half-up to the nearest 0.5 and clamp to [1.0, 5.0]."""
    rounded = math.floor(score * 2 + 0.5) / 2
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, rounded))


def _technique_adjustment(description: str) -> float:
    advanced = matched_keywords(description, TECHNIQUES["advanced"])
    if advanced:
        return min(len(advanced) * 0.5, 1.5)
    if contains_any(description, TECHNIQUES["basic"]):
        return -0.5
    return 0.0


def _ingredient_adjustment(ingredients: str) -> float:
    adjustment = 0.0
    complex_found = matched_keywords(ingredients, COMPLEX_INGREDIENTS)
    if complex_found:
        adjustment += min(len(complex_found) * 0.5, 1.0)
    # Comma separated entries approximate the ingredient count
    count = len(ingredients.split(','))
    if count > 10:
        adjustment += 0.5
    elif count <= 5:
        adjustment -= 0.5
    return adjustment


def _time_adjustment(description: str) -> float:
    if not contains_any(description, TIME_INDICATORS["any"]):
        return 0.0
    if contains_any(description, TIME_INDICATORS["short"]):
        return -0.5
    if contains_any(description, TIME_INDICATORS["long"]):
        return 0.5
    return 0.0


def estimate(description: str = "", ingredients: Optional[str] = None,
             cuisine: Optional[str] = None, recipe_type: Optional[str] = None) -> DifficultyResult:
    """Estimate the difficulty of a recipe request. Never raises and never uses randomness."""
    description = description or ""
    score = BASELINE_DIFFICULTY

    if contains_any(description, DIFFICULTY_CUES["easy"]):
        score -= 1.0
    if contains_any(description, DIFFICULTY_CUES["hard"]):
        score += 1.0

    score += _technique_adjustment(description)

    if ingredients:
        score += _ingredient_adjustment(ingredients)

    if cuisine and contains_any(cuisine, COMPLEX_CUISINES):
        score += 0.5

    if recipe_type and contains_any(recipe_type, PRECISION_RECIPE_TYPES):
        score += 0.5

    score += _time_adjustment(description)

    difficulty = quantize_difficulty(score)
    result = DifficultyResult(difficulty, difficulty <= LIGHTWEIGHT_MAX_DIFFICULTY)
    logger.debug(f"Estimated difficulty {difficulty} (raw {score:.2f}) -> {result.strategy}")
    return result
