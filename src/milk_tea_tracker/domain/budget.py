"""Domain models for the weekly calorie budget."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BudgetStatus:
    """Weekly intake compared against the configured budget."""

    weekly_budget: int
    weekly_calories: int
    usage_percentage: float
    remaining_calories: int
    status: str
    message: str

    @property
    def is_over_budget(self) -> bool:
        """Return True when intake exceeds the budget."""
        return self.status == "exceeded"
