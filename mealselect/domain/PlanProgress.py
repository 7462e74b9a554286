"""PlanProgress: quota state owned by the scheduler and updated after every slot."""


class PlanProgress:
    def __init__(self, total_meals: int, optimal_cultural_meal_count: int,
                 cultural_meals_used: int = 0, available_cultural_meals: int = 0):
        if total_meals < 0:
            raise ValueError("total_meals cannot be negative")
        if not 0 <= cultural_meals_used <= total_meals:
            raise ValueError(f"cultural_meals_used must be within [0, {total_meals}], got {cultural_meals_used}")
        self.total_meals = total_meals
        self.optimal_cultural_meal_count = optimal_cultural_meal_count
        self.cultural_meals_used = cultural_meals_used
        self.available_cultural_meals = available_cultural_meals

    @property
    def quota_reached(self) -> bool:
        return self.cultural_meals_used >= self.optimal_cultural_meal_count

    def record_cultural_meal(self):
        '''Counts one more cultural pick; the counter never decreases.'''
        if self.cultural_meals_used >= self.total_meals:
            raise ValueError(f"All {self.total_meals} slots already hold cultural meals")
        self.cultural_meals_used += 1

    def __str__(self) -> str:
        return (f"Cultural meals {self.cultural_meals_used}/{self.optimal_cultural_meal_count} "
                f"of {self.total_meals} slots ({self.available_cultural_meals} available)")

    __repr__ = __str__
