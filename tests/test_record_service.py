"""Tests for record assembly and the save fallback chain."""

from datetime import UTC, datetime, timedelta

import pytest

from milk_tea_tracker.adapters.local_record_repository import LocalRecordRepository
from milk_tea_tracker.services.records import (
    SAVE_FAILED_MESSAGE,
    RecordService,
    assemble_record,
)
from tests.conftest import InMemoryRecordRepository, make_product


def test_assemble_matched_product() -> None:
    product = make_product("7", name="Pearl Milk Tea", brand="CoCo", calories=200)
    now = datetime(2026, 3, 4, 12, 30, tzinfo=UTC)

    record = assemble_record(
        product, "large", 100, mood="happy", notes=" after lunch ", now=now
    )

    assert record.drink_name == "Pearl Milk Tea"
    assert record.brand == "CoCo"
    assert record.calories == 260
    assert record.sugar_level == "full"
    assert record.notes == "after lunch"
    assert record.date == "2026-03-04"
    assert record.timestamp == now.isoformat()


def test_assemble_custom_drink_uses_default_calories() -> None:
    record = assemble_record("  Homemade taro latte ", "small", 0)

    assert record.drink_name == "Homemade taro latte"
    assert record.brand == "custom"
    assert record.calories == 200
    assert record.sugar_level == "none"
    assert record.is_custom


def test_assemble_rejects_invalid_input() -> None:
    with pytest.raises(ValueError):
        assemble_record("   ", "medium", 50)
    with pytest.raises(ValueError):
        assemble_record("Tea", "venti", 50)
    with pytest.raises(ValueError):
        assemble_record("Tea", "medium", 50, mood="angry")


def test_assemble_new_records_get_unique_ids() -> None:
    ids = {assemble_record("Tea", "medium", 50).id for _ in range(50)}

    assert len(ids) == 50


def test_assemble_edit_keeps_identity_and_creation_time() -> None:
    created = datetime(2026, 1, 1, 8, 0, tzinfo=UTC)
    original = assemble_record("Tea", "medium", 50, now=created)

    edited = assemble_record(
        make_product("1", calories=300),
        "small",
        30,
        existing=original,
        now=created + timedelta(days=3),
    )

    assert edited.id == original.id
    assert edited.date == original.date
    assert edited.timestamp == original.timestamp
    assert edited.sugar_level == "light"


def test_save_prefers_remote_and_mirrors_locally(storage) -> None:
    remote = InMemoryRecordRepository()
    local = LocalRecordRepository(storage)
    service = RecordService(local_repository=local, remote_repository=remote)
    record = assemble_record("Tea", "medium", 50)

    result = service.save("user-1", record)

    assert result.ok
    assert result.target == "remote"
    assert remote.records["user-1"] == [record]
    assert local.list_records("user-1") == [record]


def test_save_falls_back_to_local_when_remote_fails(storage) -> None:
    remote = InMemoryRecordRepository(fail=True)
    local = LocalRecordRepository(storage)
    service = RecordService(local_repository=local, remote_repository=remote)
    record = assemble_record("Tea", "medium", 50)

    result = service.save("user-1", record)

    assert result.ok
    assert result.target == "local"
    assert service.list_records("user-1") == [record]


def test_save_reports_failure_when_both_stores_fail() -> None:
    service = RecordService(
        local_repository=InMemoryRecordRepository(fail=True),
        remote_repository=InMemoryRecordRepository(fail=True),
    )

    result = service.save("user-1", assemble_record("Tea", "medium", 50))

    assert not result.ok
    assert result.record is None
    assert result.message == SAVE_FAILED_MESSAGE


def test_save_in_local_mode(storage) -> None:
    service = RecordService(local_repository=LocalRecordRepository(storage))

    result = service.save("user-1", assemble_record("Tea", "medium", 50))

    assert result.ok
    assert result.target == "local"


def test_edit_replaces_instead_of_duplicating(storage) -> None:
    local = LocalRecordRepository(storage)
    service = RecordService(
        local_repository=local, remote_repository=InMemoryRecordRepository(fail=True)
    )
    original = assemble_record("Tea", "medium", 50)
    service.save("user-1", original)

    edited = assemble_record("Green tea", "large", 0, existing=original)
    result = service.save("user-1", edited, editing=True)

    stored = local.list_records("user-1")
    assert result.ok
    assert [record.id for record in stored] == [original.id]
    assert stored[0].drink_name == "Green tea"


def test_update_merges_patch_and_keeps_identity(storage) -> None:
    remote = InMemoryRecordRepository()
    service = RecordService(
        local_repository=LocalRecordRepository(storage), remote_repository=remote
    )
    record = assemble_record("Tea", "medium", 50, mood="happy")
    service.save("user-1", record)

    result = service.update(
        "user-1", record.id, {"notes": "too sweet", "mood": "conflicted"}
    )

    assert result.ok
    assert result.target == "remote"
    assert result.record is not None
    assert result.record.id == record.id
    assert result.record.timestamp == record.timestamp
    assert remote.records["user-1"][0].notes == "too sweet"
    assert service.get("user-1", record.id).mood == "conflicted"


def test_update_unknown_record_fails(storage) -> None:
    service = RecordService(local_repository=LocalRecordRepository(storage))

    result = service.update("user-1", "missing", {"notes": "x"})

    assert not result.ok


def test_update_rejects_unknown_fields(storage) -> None:
    service = RecordService(local_repository=LocalRecordRepository(storage))
    record = assemble_record("Tea", "medium", 50)
    service.save("user-1", record)

    with pytest.raises(ValueError):
        service.update("user-1", record.id, {"colour": "green"})


def test_list_uses_local_when_remote_is_empty_or_failing(storage) -> None:
    local = LocalRecordRepository(storage)
    remote = InMemoryRecordRepository()
    service = RecordService(local_repository=local, remote_repository=remote)
    record = assemble_record("Tea", "medium", 50)
    local.save_record("user-1", record)

    assert service.list_records("user-1") == [record]
    remote.fail = True
    assert service.list_records("user-1") == [record]


def test_list_orders_newest_first(storage) -> None:
    service = RecordService(local_repository=LocalRecordRepository(storage))
    base = datetime(2026, 5, 1, tzinfo=UTC)
    older = assemble_record("Older", "medium", 50, now=base)
    newer = assemble_record("Newer", "medium", 50, now=base + timedelta(hours=2))
    service.save("user-1", newer)
    service.save("user-1", older)

    names = [record.drink_name for record in service.list_records("user-1")]

    assert names == ["Newer", "Older"]


def test_delete_removes_one_entry_and_is_idempotent(storage) -> None:
    local = LocalRecordRepository(storage)
    remote = InMemoryRecordRepository()
    service = RecordService(local_repository=local, remote_repository=remote)
    keep = assemble_record("Keep", "medium", 50)
    drop = assemble_record("Drop", "medium", 50)
    service.save("user-1", keep)
    service.save("user-1", drop)

    assert service.delete("user-1", drop.id)
    assert [record.id for record in local.list_records("user-1")] == [keep.id]
    assert [record.id for record in remote.records["user-1"]] == [keep.id]

    assert service.delete("user-1", drop.id)
    assert len(local.list_records("user-1")) == 1


def test_delete_succeeds_locally_when_remote_fails(storage) -> None:
    local = LocalRecordRepository(storage)
    service = RecordService(
        local_repository=local, remote_repository=InMemoryRecordRepository(fail=True)
    )
    record = assemble_record("Tea", "medium", 50)
    service.save("user-1", record)

    assert service.delete("user-1", record.id)
    assert local.list_records("user-1") == []


def test_weekly_calories_counts_current_week_only(storage) -> None:
    service = RecordService(local_repository=LocalRecordRepository(storage))
    now = datetime(2026, 10, 21, 15, 0, tzinfo=UTC)  # Wednesday
    this_monday = datetime(2026, 10, 19, 0, 30, tzinfo=UTC)
    last_sunday = datetime(2026, 10, 18, 23, 0, tzinfo=UTC)
    product = make_product("1", calories=200)
    service.save("user-1", assemble_record(product, "medium", 100, now=this_monday))
    service.save("user-1", assemble_record(product, "large", 100, now=now))
    service.save("user-1", assemble_record(product, "medium", 100, now=last_sunday))

    assert service.weekly_calories("user-1", "UTC", now=now) == 460
