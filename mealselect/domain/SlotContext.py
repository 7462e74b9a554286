"""SlotContext: the scheduler's read-only view of the slot being filled."""
from typing import Sequence, Tuple
from mealselect.domain.PlannedMeal import PlannedMeal


class SlotContext:
    def __init__(self, day: int, meal_type: str, slot_index: int, previous_meals: Sequence[PlannedMeal] = ()):
        self.day = day
        self.meal_type = meal_type
        self.slot_index = slot_index
        # Snapshot so later scheduler appends never leak into this slot
        self.previous_meals: Tuple[PlannedMeal, ...] = tuple(previous_meals)

    def recent_cultural_sources(self, window: int):
        """Culture labels of the last `window` cultural picks, oldest first."""
        sources = [m.cultural_source for m in self.previous_meals if m.cultural_source]
        return sources[-window:] if window > 0 else []

    def __str__(self) -> str:
        return f"Slot {self.slot_index} (day {self.day}, {self.meal_type}, {len(self.previous_meals)} previous)"

    __repr__ = __str__
