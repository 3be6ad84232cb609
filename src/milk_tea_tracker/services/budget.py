"""Weekly calorie budget service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from milk_tea_tracker.domain.budget import BudgetStatus

DEFAULT_WEEKLY_BUDGET = 2000
MAX_WEEKLY_BUDGET = 10000
WARNING_THRESHOLD = 80

_STATUS_MESSAGES = {
    "exceeded": (
        "This week's milk tea calories are over budget. Consider pausing milk "
        "tea and getting back to balanced meals."
    ),
    "warning": (
        "This week's milk tea calories are close to the budget. Low-sugar or "
        "small drinks keep things balanced."
    ),
    "good": "Plenty of budget left this week. Enjoy a drink you love.",
}

_logger = logging.getLogger(__name__)


class BudgetRepository(Protocol):
    """Persistence interface for weekly budgets."""

    def get_budget(self, user_id: str) -> int | None:
        """Return the stored budget, if any."""

    def set_budget(self, user_id: str, budget: int) -> None:
        """Store the weekly budget."""


@dataclass
class BudgetService:
    """Reads, updates and evaluates weekly calorie budgets."""

    local_repository: BudgetRepository
    remote_repository: BudgetRepository | None = None
    default_budget: int = DEFAULT_WEEKLY_BUDGET

    def get_budget(self, user_id: str) -> int:
        """Return the user's budget or the default when unset."""
        if self.remote_repository is not None:
            try:
                stored = self.remote_repository.get_budget(user_id)
            except Exception as exc:
                _logger.warning("Remote budget read failed: %s", exc)
            else:
                if stored:
                    return stored
        return self.local_repository.get_budget(user_id) or self.default_budget

    def set_budget(self, user_id: str, budget: int) -> int:
        """Validate and persist a new weekly budget."""
        if budget <= 0 or budget > MAX_WEEKLY_BUDGET:
            raise ValueError(f"Weekly budget must be between 1 and {MAX_WEEKLY_BUDGET}")
        if self.remote_repository is not None:
            try:
                self.remote_repository.set_budget(user_id, budget)
            except Exception as exc:
                _logger.warning("Remote budget write failed: %s", exc)
        self.local_repository.set_budget(user_id, budget)
        return budget

    @staticmethod
    def status(budget: int, weekly_calories: int) -> BudgetStatus:
        """Compare weekly intake with the budget."""
        usage = min(weekly_calories / budget * 100, 100.0) if budget > 0 else 100.0
        if weekly_calories > budget:
            status = "exceeded"
        elif usage >= WARNING_THRESHOLD:
            status = "warning"
        else:
            status = "good"
        return BudgetStatus(
            weekly_budget=budget,
            weekly_calories=weekly_calories,
            usage_percentage=usage,
            remaining_calories=budget - weekly_calories,
            status=status,
            message=_STATUS_MESSAGES[status],
        )
