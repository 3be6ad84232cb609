"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from milk_tea_tracker.adapters.local_budget_repository import LocalBudgetRepository
from milk_tea_tracker.adapters.local_record_repository import LocalRecordRepository
from milk_tea_tracker.adapters.local_storage import JsonFileStorage
from milk_tea_tracker.config import Settings
from milk_tea_tracker.containers import AppContainer
from milk_tea_tracker.domain.products import Product
from milk_tea_tracker.domain.records import TeaRecord
from milk_tea_tracker.services.budget import BudgetRepository, BudgetService
from milk_tea_tracker.services.catalog import (
    CatalogService,
    ProductRepository,
    match_products,
)
from milk_tea_tracker.services.records import RecordRepository, RecordService
from milk_tea_tracker.services.stats import StatsService


def make_product(  # noqa: PLR0913
    product_id: str,
    name: str = "Milk Tea",
    brand: str = "Brand",
    calories: float = 200,
    rating: float = 4.0,
    category: str = "medium",
    description: str | None = None,
    ingredients: tuple[str, ...] = (),
) -> Product:
    return Product(
        id=product_id,
        name=name,
        brand=brand,
        calories=calories,
        rating=rating,
        category=category,
        description=description,
        ingredients=ingredients,
    )


@dataclass
class InMemoryProductRepository(ProductRepository):
    """In-memory product repository for tests."""

    products: list[Product] = field(default_factory=list)
    fail: bool = False
    queries: list[str] = field(default_factory=list)

    def search_products(self, query: str, limit: int) -> list[Product]:
        self._check()
        self.queries.append(query)
        return match_products(query, self.products, limit)

    def list_products(self) -> list[Product]:
        self._check()
        return list(self.products)

    def list_by_brand(self, brand: str) -> list[Product]:
        self._check()
        return [product for product in self.products if product.brand == brand]

    def list_by_category(self, category: str) -> list[Product]:
        self._check()
        return [product for product in self.products if product.category == category]

    def _check(self) -> None:
        if self.fail:
            raise RuntimeError("catalog unavailable")


@dataclass
class InMemoryRecordRepository(RecordRepository):
    """In-memory record repository that can simulate outages."""

    records: dict[str, list[TeaRecord]] = field(default_factory=dict)
    fail: bool = False

    def save_record(self, user_id: str, record: TeaRecord) -> TeaRecord:
        self._check()
        self.records.setdefault(user_id, []).insert(0, record)
        return record

    def list_records(self, user_id: str) -> list[TeaRecord]:
        self._check()
        return list(self.records.get(user_id, []))

    def update_record(
        self, record_id: str, user_id: str, patch: dict[str, object]
    ) -> TeaRecord:
        self._check()
        rows = self.records.get(user_id, [])
        for index, record in enumerate(rows):
            if record.id == record_id:
                updated = TeaRecord.from_payload(
                    {**record.to_payload(), **patch, "id": record_id}
                )
                rows[index] = updated
                return updated
        raise RuntimeError("Failed to update tea record")

    def delete_record(self, record_id: str, user_id: str) -> None:
        self._check()
        self.records[user_id] = [
            record
            for record in self.records.get(user_id, [])
            if record.id != record_id
        ]

    def _check(self) -> None:
        if self.fail:
            raise RuntimeError("record store unavailable")


@dataclass
class InMemoryBudgetRepository(BudgetRepository):
    """In-memory budget repository for tests."""

    budgets: dict[str, int] = field(default_factory=dict)
    fail: bool = False

    def get_budget(self, user_id: str) -> int | None:
        if self.fail:
            raise RuntimeError("budget store unavailable")
        return self.budgets.get(user_id)

    def set_budget(self, user_id: str, budget: int) -> None:
        if self.fail:
            raise RuntimeError("budget store unavailable")
        self.budgets[user_id] = budget


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        supabase_url=None,
        supabase_service_key=None,
        local_storage_path=str(tmp_path / "storage.json"),
        timezone="UTC",
    )


@pytest.fixture
def storage(tmp_path: Path) -> JsonFileStorage:
    return JsonFileStorage.create(tmp_path / "storage.json")


@pytest.fixture
def products() -> list[Product]:
    return [
        make_product("1", "Pearl Milk Tea", "CoCo", calories=350, rating=4.3),
        make_product("2", "Lemon Black Tea", "Mixue", calories=140, rating=4.2),
        make_product("3", "Oolong Milk Tea", "Nayuki", calories=260, rating=4.0),
        make_product("4", "Jasmine Milk Tea", "CHAGEE", calories=210, rating=4.5),
    ]


@pytest.fixture
def remote_records() -> InMemoryRecordRepository:
    return InMemoryRecordRepository()


@pytest.fixture
def container(
    settings: Settings,
    storage: JsonFileStorage,
    products: list[Product],
    remote_records: InMemoryRecordRepository,
) -> AppContainer:
    catalog_service = CatalogService(
        repository=InMemoryProductRepository(products=products)
    )
    record_service = RecordService(
        local_repository=LocalRecordRepository(storage),
        remote_repository=remote_records,
    )
    budget_service = BudgetService(
        local_repository=LocalBudgetRepository(storage),
        remote_repository=InMemoryBudgetRepository(),
        default_budget=settings.default_weekly_budget,
    )
    return AppContainer(
        settings=settings,
        catalog_service=catalog_service,
        record_service=record_service,
        budget_service=budget_service,
        stats_service=StatsService(record_service),
    )
