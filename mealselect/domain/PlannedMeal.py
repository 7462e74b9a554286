"""PlannedMeal domain entity: a meal placed into one slot of a plan."""
from typing import Optional
from mealselect.domain.CandidateMeal import CandidateMeal, Nutrition


class PlannedMeal:
    def __init__(self, slot_index: int, day: int, meal_type: str, title: str = "-",
                 meal_id: Optional[str] = None, cultural_source: Optional[str] = None,
                 nutrition: Optional[Nutrition] = None):
        self.slot_index = slot_index
        self.day = day
        self.meal_type = meal_type
        self.title = title
        self.meal_id = meal_id
        # Culture label of the catalog pick; None for generic meals
        self.cultural_source = cultural_source
        self.nutrition = nutrition

    @property
    def is_cultural(self) -> bool:
        return bool(self.cultural_source)

    def __str__(self) -> str:
        origin = f"cultural: {self.cultural_source}" if self.is_cultural else "generic"
        return f"Day {self.day + 1} {self.meal_type}: {self.title} ({origin})"

    __repr__ = __str__

    @staticmethod
    def from_candidate(meal: CandidateMeal, slot_index: int, day: int, meal_type: str) -> "PlannedMeal":
        return PlannedMeal(slot_index, day, meal_type, title=meal.title, meal_id=meal.id,
                           cultural_source=meal.culture or "unknown", nutrition=meal.nutrition)

    def to_dict(self):
        return {
            "slot_index": self.slot_index,
            "day": self.day,
            "meal_type": self.meal_type,
            "title": self.title,
            "meal_id": self.meal_id,
            "cultural_source": self.cultural_source,
            "nutrition": self.nutrition.to_dict() if self.nutrition else None,
        }
