"""Record entry session: search, select and submit a drink."""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import StrEnum

from milk_tea_tracker.domain.products import Product, Recommendation
from milk_tea_tracker.domain.records import RecordSaveResult, TeaRecord
from milk_tea_tracker.services.calories import (
    DEFAULT_CUSTOM_CALORIES,
    base_calories_for,
    estimate_calories,
)
from milk_tea_tracker.services.catalog import CatalogService
from milk_tea_tracker.services.recommendations import recommend
from milk_tea_tracker.services.records import RecordService, assemble_record

_logger = logging.getLogger(__name__)

_SUGAR_PERCENT_BY_LEVEL = {"none": 0, "light": 30, "half": 50, "full": 100}
_RESOLVE_LIMIT = 20


class EntryState(StrEnum):
    """States of a record entry session."""

    IDLE = "idle"
    SEARCHING = "searching"
    SELECTED = "selected"
    SUBMITTING = "submitting"
    CLOSED = "closed"


@dataclass
class RecordEntrySession:
    """Tracks one user's drink entry from search to save.

    Searches are numbered; results of a search are applied only if no newer
    search was started in the meantime.
    """

    catalog: CatalogService
    records: RecordService
    user_id: str
    existing: TeaRecord | None = None
    search_limit: int = 5
    state: EntryState = EntryState.IDLE
    query: str = ""
    results: list[Product] = field(default_factory=list)
    selected: Product | None = None
    matched: Product | None = None
    cup_size: str = "medium"
    sugar_percent: float = 50
    mood: str = ""
    notes: str = ""
    message: str | None = None
    _sequence: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.existing is not None:
            self.query = self.existing.drink_name
            self.cup_size = self.existing.cup_size
            self.sugar_percent = _SUGAR_PERCENT_BY_LEVEL.get(
                self.existing.sugar_level, self.sugar_percent
            )
            self.mood = self.existing.mood
            self.notes = self.existing.notes
            if not self.existing.is_custom:
                self.selected = self._resolve_product(self.existing)
                self.state = EntryState.SELECTED

    def _resolve_product(self, record: TeaRecord) -> Product:
        """Return the catalog product behind a record, or a stand-in for it.

        The stand-in keeps the record's brand and derives a base value from
        its stored calories, so re-sizing still scales from what was logged.
        """
        for product in self.catalog.search(record.drink_name, _RESOLVE_LIMIT):
            if product.name == record.drink_name and product.brand == record.brand:
                return product
        _logger.info("No catalog product for record %s, keeping its values", record.id)
        return Product(
            id=f"record:{record.id}",
            name=record.drink_name,
            brand=record.brand,
            calories=base_calories_for(
                record.calories, record.cup_size, self.sugar_percent
            ),
        )

    def begin_search(self, query: str) -> int:
        """Start a search for ``query`` and return its ticket."""
        self._sequence += 1
        self.query = query
        self.selected = None
        if not query.strip():
            self.results = []
            self.matched = None
            self.state = EntryState.IDLE
        else:
            self.state = EntryState.SEARCHING
        return self._sequence

    def complete_search(self, ticket: int, results: list[Product]) -> bool:
        """Apply results if ``ticket`` belongs to the latest search."""
        if ticket != self._sequence:
            _logger.debug(
                "Discarding stale search %s (latest %s)", ticket, self._sequence
            )
            return False
        if not self.query.strip():
            return False
        self.results = list(results)
        self.matched = self.results[0] if len(self.results) == 1 else None
        return True

    async def search(self, query: str) -> list[Product]:
        """Search the catalog and apply the results unless superseded."""
        ticket = self.begin_search(query)
        if not query.strip():
            return []
        results = await asyncio.to_thread(self.catalog.search, query, self.search_limit)
        self.complete_search(ticket, results)
        return self.results

    def select(self, product: Product) -> None:
        """Choose a catalog product."""
        self._sequence += 1
        self.selected = product
        self.matched = None
        self.query = product.name
        self.results = []
        self.state = EntryState.SELECTED

    @property
    def choice(self) -> Product | str:
        """Return the chosen product, the single match or the free text."""
        return self.selected or self.matched or self.query

    @property
    def recommendation(self) -> Recommendation:
        """Return recommendations for the current results."""
        return recommend(self.results)

    @property
    def estimated_calories(self) -> int:
        """Return the live calorie estimate for the current choice."""
        choice = self.choice
        if isinstance(choice, Product):
            return estimate_calories(choice.calories, self.cup_size, self.sugar_percent)
        return DEFAULT_CUSTOM_CALORIES if choice.strip() else 0

    def submit(self) -> RecordSaveResult:
        """Assemble the record and save it."""
        choice = self.choice
        if isinstance(choice, str) and not choice.strip():
            raise ValueError("Select a drink or enter a name first")
        previous = self.state
        self.state = EntryState.SUBMITTING
        try:
            record = assemble_record(
                choice,
                self.cup_size,
                self.sugar_percent,
                mood=self.mood,
                notes=self.notes,
                existing=self.existing,
            )
        except ValueError:
            self.state = previous
            raise
        result = self.records.save(
            self.user_id, record, editing=self.existing is not None
        )
        self.message = result.message
        self.state = EntryState.CLOSED if result.ok else previous
        return result

    def cancel(self) -> None:
        """Abandon the entry and reset the session."""
        self._sequence += 1
        self.state = EntryState.IDLE
        self.query = ""
        self.results = []
        self.selected = None
        self.matched = None
        self.message = None
