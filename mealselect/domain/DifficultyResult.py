"""DifficultyResult value object: estimated difficulty and derived generation strategy."""

LIGHTWEIGHT = "lightweight"
DETAILED = "detailed"


class DifficultyResult:
    def __init__(self, difficulty: float, use_lightweight_strategy: bool):
        self.difficulty = difficulty
        self.use_lightweight_strategy = use_lightweight_strategy

    @property
    def strategy(self) -> str:
        # lightweight: video based; detailed: full AI generation with nutrition
        return LIGHTWEIGHT if self.use_lightweight_strategy else DETAILED

    def __eq__(self, other) -> bool:
        if not isinstance(other, DifficultyResult):
            return NotImplemented
        return (self.difficulty, self.use_lightweight_strategy) == (other.difficulty, other.use_lightweight_strategy)

    def __str__(self) -> str:
        return f"Difficulty {self.difficulty:.1f}/5 - strategy: {self.strategy}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "difficulty": self.difficulty,
            "use_lightweight_strategy": self.use_lightweight_strategy,
            "strategy": self.strategy,
        }
