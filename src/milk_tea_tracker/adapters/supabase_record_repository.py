"""Supabase repository for logged drinks."""

from dataclasses import dataclass

from supabase import Client

from milk_tea_tracker.domain.records import TeaRecord
from milk_tea_tracker.services.records import RecordRepository


@dataclass
class SupabaseRecordRepository(RecordRepository):
    """Stores records in ``tea_records`` using the shared record keys."""

    client: Client
    limit: int = 50

    def save_record(self, user_id: str, record: TeaRecord) -> TeaRecord:
        """Insert a record and return the stored row."""
        response = (
            self.client.table("tea_records")
            .insert({"user_id": user_id, **record.to_payload()})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save tea record")
        return TeaRecord.from_payload(response.data[0])

    def list_records(self, user_id: str) -> list[TeaRecord]:
        """Return a user's most recent records."""
        response = (
            self.client.table("tea_records")
            .select("*")
            .eq("user_id", user_id)
            .order("timestamp", desc=True)
            .limit(self.limit)
            .execute()
        )
        return [TeaRecord.from_payload(row) for row in response.data or []]

    def update_record(
        self, record_id: str, user_id: str, patch: dict[str, object]
    ) -> TeaRecord:
        """Update a record owned by the user."""
        response = (
            self.client.table("tea_records")
            .update(patch)
            .eq("id", record_id)
            .eq("user_id", user_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update tea record")
        return TeaRecord.from_payload(response.data[0])

    def delete_record(self, record_id: str, user_id: str) -> None:
        """Delete a record owned by the user."""
        self.client.table("tea_records").delete().eq("id", record_id).eq(
            "user_id", user_id
        ).execute()
