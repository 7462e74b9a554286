"""GoalWeights domain entity: the five user-weighted planning objectives."""
from typing import Dict
from mealselect.utilities.validators import GoalWeightsInput


class GoalWeights:
    FIELDS = ("cost", "health", "cultural", "variety", "time")

    def __init__(self, cost: float = 0.0, health: float = 0.0, cultural: float = 0.0,
                 variety: float = 0.0, time: float = 0.0):
        # Out-of-range values are kept as given; callers only compare against thresholds.
        self.cost = cost
        self.health = health
        self.cultural = cultural
        self.variety = variety
        self.time = time

    def __str__(self) -> str:
        parts = [f"{name}={getattr(self, name):.2f}" for name in self.FIELDS]
        return f"GoalWeights({', '.join(parts)})"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, GoalWeights):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data: Dict[str, float]) -> "GoalWeights":
        '''Validates external input (each weight in [0, 1]) and builds the weights.'''
        validated = GoalWeightsInput.model_validate(dict(data or {}))
        return GoalWeights(**validated.model_dump())

    def to_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in self.FIELDS}
