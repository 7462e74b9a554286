"""Slot-by-slot meal plan scheduler.

Walks the plan day by day and meal type by meal type, asks the cultural
selection engine whether each slot should hold a cultural meal and, if so,
which one, then folds the pick back into the rolling history.

Rules:
  - The cultural target count is computed once per plan.
  - A catalog meal appears at most once per day; the slot's pool shrinks accordingly.
  - Progress counters are updated here, after each decision, never by the engine.
"""
from __future__ import annotations
import logging
import random
from typing import Callable, Iterable, List, Optional

from mealselect.domain.CandidateMeal import CandidateMeal
from mealselect.domain.GoalWeights import GoalWeights
from mealselect.domain.MealPlan import MealPlan
from mealselect.domain.PlannedMeal import PlannedMeal
from mealselect.domain.PlanProgress import PlanProgress
from mealselect.domain.SlotContext import SlotContext
from mealselect.logic.selection.cultural import should_use_cultural_meal, select_best_cultural_meal
from mealselect.logic.selection.quota import optimal_cultural_meal_count
from mealselect.utilities.constants import MEAL_TYPES, GENERIC_MEAL_TITLE

logger = logging.getLogger(__name__)

__all__ = ["PlanScheduler", "meal_types_for", "placeholder_meal"]

GenericMealFactory = Callable[[SlotContext], PlannedMeal]


def meal_types_for(meals_per_day: int) -> tuple:
    if not 1 <= meals_per_day <= len(MEAL_TYPES):
        raise ValueError(f"meals_per_day must be between 1 and {len(MEAL_TYPES)}, got {meals_per_day}")
    return MEAL_TYPES[:meals_per_day]


def placeholder_meal(slot: SlotContext) -> PlannedMeal:
    """Empty generic slot, to be filled later by the recipe generator."""
    return PlannedMeal(slot.slot_index, slot.day, slot.meal_type, title=GENERIC_MEAL_TITLE)


class PlanScheduler:
    def __init__(self, candidates: Iterable[CandidateMeal], rng: Optional[random.Random] = None,
                 generic_meal_factory: Optional[GenericMealFactory] = None):
        self.candidates: List[CandidateMeal] = list(candidates)
        self.rng = rng if rng is not None else random.Random()
        self.generic_meal_factory = generic_meal_factory or placeholder_meal

    def _pool_for_day(self, planned_today: List[PlannedMeal]) -> List[CandidateMeal]:
        used_ids = {m.meal_id for m in planned_today if m.meal_id}
        return [c for c in self.candidates if c.id not in used_ids]

    def generate(self, num_days: int, meals_per_day: int, weights: GoalWeights) -> MealPlan:
        if num_days < 0:
            raise ValueError("num_days cannot be negative")
        meal_types = meal_types_for(meals_per_day)
        total_meals = num_days * len(meal_types)
        optimal = optimal_cultural_meal_count(total_meals, weights.cultural)
        progress = PlanProgress(total_meals, optimal)
        plan = MealPlan(num_days, meal_types, weights, optimal_cultural_meal_count=optimal)
        logger.info(f"Generating {total_meals} meals over {num_days} days "
                    f"(cultural target {optimal}, {len(self.candidates)} catalog meals)")

        slot_index = 0
        for day in range(num_days):
            planned_today: List[PlannedMeal] = []
            for meal_type in meal_types:
                slot = SlotContext(day, meal_type, slot_index, plan.meals)
                pool = self._pool_for_day(planned_today)
                progress.available_cultural_meals = len(pool)

                if should_use_cultural_meal(progress, slot, weights, rng=self.rng):
                    chosen = select_best_cultural_meal(pool, weights, slot, rng=self.rng)
                    meal = PlannedMeal.from_candidate(chosen, slot_index, day, meal_type)
                    progress.record_cultural_meal()
                else:
                    meal = self.generic_meal_factory(slot)

                logger.debug(f"Slot {slot_index + 1}/{total_meals}: {meal}")
                plan.meals.append(meal)
                planned_today.append(meal)
                slot_index += 1

        logger.info(f"Plan generated: {progress}")
        return plan
