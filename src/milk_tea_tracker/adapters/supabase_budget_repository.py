"""Supabase repository for weekly budgets."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from milk_tea_tracker.services.budget import BudgetRepository


@dataclass
class SupabaseBudgetRepository(BudgetRepository):
    """Supabase implementation for weekly budgets."""

    client: Client

    def get_budget(self, user_id: str) -> int | None:
        """Return the stored weekly budget for a user."""
        response = (
            self.client.table("user_settings")
            .select("weekly_calorie_budget")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("weekly_calorie_budget")
        return int(value) if value is not None else None

    def set_budget(self, user_id: str, budget: int) -> None:
        """Create or update the user's weekly budget."""
        self.client.table("user_settings").upsert(
            {
                "user_id": user_id,
                "weekly_calorie_budget": budget,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()
