"""Local storage repository for logged drinks."""

import json
import logging
from dataclasses import dataclass

from milk_tea_tracker.adapters.local_storage import JsonFileStorage
from milk_tea_tracker.domain.records import RECORD_FIELDS, TeaRecord
from milk_tea_tracker.services.records import RecordRepository

_logger = logging.getLogger(__name__)


@dataclass
class LocalRecordRepository(RecordRepository):
    """Keeps each user's records as a JSON-encoded list, newest first."""

    storage: JsonFileStorage
    key_prefix: str = "teaRecords"

    def save_record(self, user_id: str, record: TeaRecord) -> TeaRecord:
        """Replace the record with the same id, or prepend it."""
        rows = self._load(user_id)
        payload = record.to_payload()
        for index, row in enumerate(rows):
            if row.get("id") == record.id:
                rows[index] = payload
                break
        else:
            rows.insert(0, payload)
        self._store(user_id, rows)
        return record

    def list_records(self, user_id: str) -> list[TeaRecord]:
        """Return the stored records."""
        records: list[TeaRecord] = []
        for row in self._load(user_id):
            try:
                records.append(TeaRecord.from_payload(row))
            except (KeyError, TypeError, ValueError) as exc:
                _logger.warning("Skipping malformed local record: %s", exc)
        return records

    def update_record(
        self, record_id: str, user_id: str, patch: dict[str, object]
    ) -> TeaRecord:
        """Merge persisted-shape fields into a stored record."""
        rows = self._load(user_id)
        for index, row in enumerate(rows):
            if row.get("id") == record_id:
                changes = {key: patch[key] for key in RECORD_FIELDS if key in patch}
                merged = {**row, **changes, "id": record_id}
                rows[index] = merged
                self._store(user_id, rows)
                return TeaRecord.from_payload(merged)
        raise RuntimeError(f"Record {record_id} not found")

    def delete_record(self, record_id: str, user_id: str) -> None:
        """Remove a record; absent ids are ignored."""
        rows = self._load(user_id)
        remaining = [row for row in rows if row.get("id") != record_id]
        if len(remaining) != len(rows):
            self._store(user_id, remaining)

    def _key(self, user_id: str) -> str:
        return f"{self.key_prefix}:{user_id}"

    def _load(self, user_id: str) -> list[dict[str, object]]:
        raw = self.storage.get_item(self._key(user_id))
        if not raw:
            return []
        try:
            rows = json.loads(raw)
        except ValueError:
            _logger.warning("Local records for %s are unreadable, ignoring", user_id)
            return []
        if not isinstance(rows, list):
            return []
        return [row for row in rows if isinstance(row, dict) and row.get("id")]

    def _store(self, user_id: str, rows: list[dict[str, object]]) -> None:
        self.storage.set_item(self._key(user_id), json.dumps(rows, ensure_ascii=False))
