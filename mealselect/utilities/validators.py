"""
Input validation schemas using Pydantic for records coming from outside the engine.
"""
from pydantic import BaseModel, Field, AliasChoices, field_validator
from typing import List, Optional


class GoalWeightsInput(BaseModel):
    """Schema for the five user goal weights.

    Values are not normalized and need not sum to 1.
    """
    cost: float = Field(0.0, ge=0.0, le=1.0)
    health: float = Field(0.0, ge=0.0, le=1.0)
    cultural: float = Field(0.0, ge=0.0, le=1.0)
    variety: float = Field(0.0, ge=0.0, le=1.0)
    time: float = Field(0.0, ge=0.0, le=1.0)


class NutritionInput(BaseModel):
    """Schema for per-serving nutrition, accepting the *_g key synonyms."""
    protein: float = Field(0.0, ge=0.0, validation_alias=AliasChoices('protein', 'protein_g'))
    carbs: float = Field(0.0, ge=0.0, validation_alias=AliasChoices('carbs', 'carbs_g', 'carbohydrates'))
    fat: float = Field(0.0, ge=0.0, validation_alias=AliasChoices('fat', 'fat_g', 'fats'))
    calories: float = Field(0.0, ge=0.0)


class CandidateMealInput(BaseModel):
    """Schema for a catalog candidate meal."""
    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, validation_alias=AliasChoices('title', 'name'))
    culture: str = ""
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    cook_time_minutes: int = Field(
        ..., ge=0, validation_alias=AliasChoices('cook_time_minutes', 'cookTimeMinutes', 'cookTime')
    )
    difficulty: float = Field(3.0, ge=1.0, le=5.0)
    nutrition: Optional[NutritionInput] = None
    dietary_compatibility: List[str] = Field(default_factory=list)

    @field_validator('id', 'title', 'culture', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('ingredients', 'instructions', 'dietary_compatibility')
    @classmethod
    def drop_empty(cls, v):
        """Filter out empty entries."""
        return [item.strip() for item in v if item and item.strip()]


class DifficultyRequestInput(BaseModel):
    """Schema for a recipe generation request submitted for difficulty estimation."""
    description: str = Field("", max_length=2000)
    ingredients: Optional[str] = None
    cuisine: Optional[str] = None
    recipe_type: Optional[str] = None
