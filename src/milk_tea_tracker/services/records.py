"""Record assembly and persistence with a local fallback."""

import logging
from dataclasses import dataclass, fields, replace
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import uuid1
from zoneinfo import ZoneInfo

from milk_tea_tracker.domain.products import Product
from milk_tea_tracker.domain.records import (
    CUP_SIZES,
    CUSTOM_BRAND,
    MOODS,
    RecordSaveResult,
    TeaRecord,
)
from milk_tea_tracker.services.calories import (
    DEFAULT_CUSTOM_CALORIES,
    estimate_calories,
    sugar_level_label,
)

SAVE_OK_MESSAGE = "Record saved"
SAVE_FAILED_MESSAGE = "Save failed, please retry"

_IMMUTABLE_FIELDS = {"id", "date", "timestamp"}
_EDITABLE_FIELDS = {item.name for item in fields(TeaRecord)} - _IMMUTABLE_FIELDS

_logger = logging.getLogger(__name__)


class RecordRepository(Protocol):
    """Persistence interface for logged drinks."""

    def save_record(self, user_id: str, record: TeaRecord) -> TeaRecord:
        """Insert a record and return it."""

    def list_records(self, user_id: str) -> list[TeaRecord]:
        """Return a user's records, newest first."""

    def update_record(
        self, record_id: str, user_id: str, patch: dict[str, object]
    ) -> TeaRecord:
        """Apply a partial update and return the stored record."""

    def delete_record(self, record_id: str, user_id: str) -> None:
        """Delete a record; absent ids are ignored."""


def assemble_record(  # noqa: PLR0913
    selection: Product | str,
    cup_size: str,
    sugar_percent: float,
    mood: str | None = None,
    notes: str | None = None,
    existing: TeaRecord | None = None,
    now: datetime | None = None,
) -> TeaRecord:
    """Build a record from the user's selections.

    A catalog product yields an estimated calorie value, while free text is
    logged as a custom drink with a fixed default. Passing ``existing`` keeps
    its identity and creation time.
    """
    if cup_size not in CUP_SIZES:
        raise ValueError(f"Unknown cup size: {cup_size}")
    mood_value = (mood or "").strip()
    if mood_value and mood_value not in MOODS:
        raise ValueError(f"Unknown mood: {mood_value}")

    if isinstance(selection, Product):
        drink_name = selection.name
        brand = selection.brand or CUSTOM_BRAND
        calories = estimate_calories(selection.calories, cup_size, sugar_percent)
    else:
        drink_name = (selection or "").strip()
        if not drink_name:
            raise ValueError("Drink name is required")
        brand = CUSTOM_BRAND
        calories = DEFAULT_CUSTOM_CALORIES

    if existing is not None:
        record_id = existing.id
        date = existing.date
        timestamp = existing.timestamp
    else:
        created_at = now or datetime.now(tz=UTC)
        record_id = str(uuid1())
        date = created_at.date().isoformat()
        timestamp = created_at.isoformat()

    return TeaRecord(
        id=record_id,
        drink_name=drink_name,
        brand=brand,
        calories=calories,
        cup_size=cup_size,
        sugar_level=sugar_level_label(sugar_percent),
        mood=mood_value,
        notes=(notes or "").strip(),
        date=date,
        timestamp=timestamp,
    )


@dataclass
class RecordService:
    """Saves records remotely when possible and always keeps a local copy."""

    local_repository: RecordRepository
    remote_repository: RecordRepository | None = None

    def save(
        self, user_id: str, record: TeaRecord, editing: bool = False
    ) -> RecordSaveResult:
        """Persist a record through the remote then local stores."""
        remote_ok = self._save_remote(user_id, record, editing)
        local_ok = self._save_local(user_id, record)
        if remote_ok:
            return RecordSaveResult(True, record, "remote", SAVE_OK_MESSAGE)
        if local_ok:
            return RecordSaveResult(True, record, "local", SAVE_OK_MESSAGE)
        return RecordSaveResult(False, None, None, SAVE_FAILED_MESSAGE)

    def list_records(self, user_id: str) -> list[TeaRecord]:
        """Return remote records when available, otherwise the local list."""
        if self.remote_repository is not None:
            try:
                records = self.remote_repository.list_records(user_id)
            except Exception as exc:
                _logger.warning("Remote record listing failed: %s", exc)
            else:
                if records:
                    return _newest_first(records)
        try:
            return _newest_first(self.local_repository.list_records(user_id))
        except Exception:
            _logger.exception("Local record listing failed")
            return []

    def get(self, user_id: str, record_id: str) -> TeaRecord | None:
        """Return a record by id, if present."""
        for record in self.list_records(user_id):
            if record.id == record_id:
                return record
        return None

    def update(
        self, user_id: str, record_id: str, patch: dict[str, object]
    ) -> RecordSaveResult:
        """Merge a partial update into an existing record and save it."""
        current = self.get(user_id, record_id)
        if current is None:
            return RecordSaveResult(False, None, None, "Record not found")
        unknown = set(patch) - _EDITABLE_FIELDS - _IMMUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown record fields: {sorted(unknown)}")
        changes = {
            key: value
            for key, value in patch.items()
            if key in _EDITABLE_FIELDS and value is not None
        }
        updated = replace(current, **changes)
        return self.save(user_id, updated, editing=True)

    def delete(self, user_id: str, record_id: str) -> bool:
        """Delete a record everywhere; absent ids are a no-op."""
        remote_ok = False
        if self.remote_repository is not None:
            try:
                self.remote_repository.delete_record(record_id, user_id)
                remote_ok = True
            except Exception as exc:
                _logger.warning("Remote delete failed for %s: %s", record_id, exc)
        try:
            self.local_repository.delete_record(record_id, user_id)
        except Exception:
            _logger.exception("Local delete failed for %s", record_id)
            return remote_ok
        return True

    def weekly_calories(
        self, user_id: str, timezone_name: str, now: datetime | None = None
    ) -> int:
        """Return calories logged in the current Monday-based week."""
        tz = ZoneInfo(timezone_name)
        current = (now or datetime.now(tz=UTC)).astimezone(tz)
        start = (current - timedelta(days=current.weekday())).replace(
            hour=0, minute=0, second=0, microsecond=0
        )
        end = start + timedelta(days=7)
        total = 0
        for record in self.list_records(user_id):
            recorded_at = _parse_timestamp(record.timestamp)
            if recorded_at is None:
                continue
            if start <= recorded_at.astimezone(tz) < end:
                total += record.calories
        return total

    def _save_remote(self, user_id: str, record: TeaRecord, editing: bool) -> bool:
        if self.remote_repository is None:
            return False
        try:
            if editing:
                self.remote_repository.update_record(
                    record.id, user_id, _patch_from_record(record)
                )
            else:
                self.remote_repository.save_record(user_id, record)
        except Exception as exc:
            _logger.warning("Remote save failed, falling back to local: %s", exc)
            return False
        return True

    def _save_local(self, user_id: str, record: TeaRecord) -> bool:
        try:
            self.local_repository.save_record(user_id, record)
        except Exception:
            _logger.exception("Local save failed for %s", record.id)
            return False
        return True


def _patch_from_record(record: TeaRecord) -> dict[str, object]:
    payload = record.to_payload()
    return {key: value for key, value in payload.items() if key != "id"}


def _parse_timestamp(value: str) -> datetime | None:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def _newest_first(records: list[TeaRecord]) -> list[TeaRecord]:
    epoch = datetime.min.replace(tzinfo=UTC)
    return sorted(
        records,
        key=lambda record: _parse_timestamp(record.timestamp) or epoch,
        reverse=True,
    )
