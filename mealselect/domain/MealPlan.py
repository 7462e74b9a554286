"""MealPlan domain entity: the ordered slots produced by one plan-generation run."""
from typing import Dict, List, Optional
from mealselect.domain.GoalWeights import GoalWeights
from mealselect.domain.PlannedMeal import PlannedMeal


class MealPlan:
    def __init__(self, num_days: int, meal_types, weights: GoalWeights,
                 optimal_cultural_meal_count: int = 0, meals: Optional[List[PlannedMeal]] = None):
        self.num_days = num_days
        self.meal_types = tuple(meal_types)
        self.weights = weights
        self.optimal_cultural_meal_count = optimal_cultural_meal_count
        self.meals = meals[:] if meals else []

    @property
    def cultural_meals_used(self) -> int:
        return sum(1 for m in self.meals if m.is_cultural)

    def by_day(self) -> Dict[int, List[PlannedMeal]]:
        days: Dict[int, List[PlannedMeal]] = {d: [] for d in range(self.num_days)}
        for meal in self.meals:
            days.setdefault(meal.day, []).append(meal)
        return days

    def __str__(self) -> str:
        return "\n".join(str(m) for m in self.meals)

    def to_dict(self):
        return {
            "num_days": self.num_days,
            "meal_types": list(self.meal_types),
            "weights": self.weights.to_dict(),
            "optimal_cultural_meal_count": self.optimal_cultural_meal_count,
            "cultural_meals_used": self.cultural_meals_used,
            "meals": [m.to_dict() for m in self.meals],
        }
