"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import Client, ClientOptions, create_client

from milk_tea_tracker.adapters.local_budget_repository import LocalBudgetRepository
from milk_tea_tracker.adapters.local_record_repository import LocalRecordRepository
from milk_tea_tracker.adapters.local_storage import JsonFileStorage
from milk_tea_tracker.adapters.supabase_budget_repository import (
    SupabaseBudgetRepository,
)
from milk_tea_tracker.adapters.supabase_product_repository import (
    SupabaseProductRepository,
)
from milk_tea_tracker.adapters.supabase_record_repository import (
    SupabaseRecordRepository,
)
from milk_tea_tracker.config import Settings
from milk_tea_tracker.domain.records import TeaRecord
from milk_tea_tracker.services.budget import BudgetService
from milk_tea_tracker.services.catalog import CatalogService
from milk_tea_tracker.services.entry import RecordEntrySession
from milk_tea_tracker.services.records import RecordService
from milk_tea_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    record_service: RecordService
    budget_service: BudgetService
    stats_service: StatsService

    def start_entry(
        self, user_id: str, existing: TeaRecord | None = None
    ) -> RecordEntrySession:
        """Open a record entry session for a user."""
        return RecordEntrySession(
            catalog=self.catalog_service,
            records=self.record_service,
            user_id=user_id,
            existing=existing,
            search_limit=self.settings.search_limit,
        )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    storage = JsonFileStorage.create(resolved_settings.local_storage_path)
    supabase_client = _create_supabase_client(resolved_settings)

    product_repository = None
    remote_records = None
    remote_budgets = None
    if supabase_client is not None:
        product_repository = SupabaseProductRepository(supabase_client)
        remote_records = SupabaseRecordRepository(supabase_client)
        remote_budgets = SupabaseBudgetRepository(supabase_client)

    catalog_service = CatalogService(repository=product_repository)
    record_service = RecordService(
        local_repository=LocalRecordRepository(storage),
        remote_repository=remote_records,
    )
    budget_service = BudgetService(
        local_repository=LocalBudgetRepository(storage),
        remote_repository=remote_budgets,
        default_budget=resolved_settings.default_weekly_budget,
    )
    stats_service = StatsService(record_service)

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        record_service=record_service,
        budget_service=budget_service,
        stats_service=stats_service,
    )


def _create_supabase_client(settings: Settings) -> Client | None:
    """Return a Supabase client, or None when running in local mode."""
    if not settings.remote_enabled:
        return None
    return create_client(
        settings.supabase_url,
        settings.supabase_service_key,
        options=ClientOptions(
            postgrest_client_timeout=settings.remote_timeout_seconds
        ),
    )
