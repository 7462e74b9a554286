"""CandidateMeal domain entity: a catalog recipe eligible for a cultural slot."""
from typing import Dict, List, Optional
from mealselect.utilities.validators import CandidateMealInput


class Nutrition:
    def __init__(self, protein: float = 0, carbs: float = 0, fat: float = 0, calories: float = 0):
        self.protein = protein
        self.carbs = carbs
        self.fat = fat
        self.calories = calories

    def total_macros(self) -> float:
        return (self.protein or 0) + (self.carbs or 0) + (self.fat or 0)

    def __str__(self) -> str:
        return f"Protein: {self.protein}g, Carbs: {self.carbs}g, Fat: {self.fat}g, Calories: {self.calories}"

    __repr__ = __str__

    def to_dict(self) -> Dict[str, float]:
        return {"protein": self.protein, "carbs": self.carbs, "fat": self.fat, "calories": self.calories}


class CandidateMeal:
    """Read-only record handed to the selection engine by the recipe catalog."""

    def __init__(self, id: str, title: str, culture: str = "", ingredients: Optional[List[str]] = None,
                 instructions: Optional[List[str]] = None, cook_time_minutes: int = 0,
                 difficulty: float = 3.0, nutrition: Optional[Nutrition] = None,
                 dietary_compatibility: Optional[List[str]] = None):
        self.id = id
        self.title = title
        self.culture = culture
        self.ingredients = tuple(ingredients) if ingredients else ()
        self.instructions = tuple(instructions) if instructions else ()
        self.cook_time_minutes = cook_time_minutes
        self.difficulty = difficulty
        self.nutrition = nutrition
        # Restrictions the catalog vouches for explicitly, e.g. "vegan"
        self.dietary_compatibility = tuple(dietary_compatibility) if dietary_compatibility else ()

    def __str__(self) -> str:
        return f"{self.title} [{self.culture or 'generic'}] - {self.cook_time_minutes} min - difficulty {self.difficulty}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data) -> "CandidateMeal":
        '''Validates a catalog record and builds the candidate. Raises pydantic.ValidationError.'''
        validated = CandidateMealInput.model_validate(dict(data))
        nutrition = None
        if validated.nutrition is not None:
            nutrition = Nutrition(**validated.nutrition.model_dump())
        return CandidateMeal(
            id=validated.id,
            title=validated.title,
            culture=validated.culture,
            ingredients=validated.ingredients,
            instructions=validated.instructions,
            cook_time_minutes=validated.cook_time_minutes,
            difficulty=validated.difficulty,
            nutrition=nutrition,
            dietary_compatibility=validated.dietary_compatibility,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "culture": self.culture,
            "ingredients": list(self.ingredients),
            "instructions": list(self.instructions),
            "cook_time_minutes": self.cook_time_minutes,
            "difficulty": self.difficulty,
            "nutrition": self.nutrition.to_dict() if self.nutrition else None,
            "dietary_compatibility": list(self.dietary_compatibility),
        }
