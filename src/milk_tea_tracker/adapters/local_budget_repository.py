"""Local storage repository for weekly budgets."""

from dataclasses import dataclass

from milk_tea_tracker.adapters.local_storage import JsonFileStorage
from milk_tea_tracker.services.budget import BudgetRepository


@dataclass
class LocalBudgetRepository(BudgetRepository):
    """Stores the weekly budget as a string value per user."""

    storage: JsonFileStorage
    key_prefix: str = "weeklyCalorieBudget"

    def get_budget(self, user_id: str) -> int | None:
        """Return the stored budget, ignoring unparseable values."""
        raw = self.storage.get_item(f"{self.key_prefix}:{user_id}")
        if raw is None or not raw.strip().isdigit():
            return None
        return int(raw) or None

    def set_budget(self, user_id: str, budget: int) -> None:
        """Store the weekly budget."""
        self.storage.set_item(f"{self.key_prefix}:{user_id}", str(budget))
