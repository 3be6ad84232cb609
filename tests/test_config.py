"""Tests for configuration helpers."""

from milk_tea_tracker.config import Settings, parse_timezone


def test_parse_timezone() -> None:
    assert parse_timezone(None) == "UTC"
    assert parse_timezone("  ") == "UTC"
    assert parse_timezone("Asia/Shanghai") == "Asia/Shanghai"
    assert parse_timezone("Not/AZone") == "UTC"


def test_remote_enabled_requires_credentials() -> None:
    assert not Settings(supabase_url=None, supabase_service_key=None).remote_enabled
    assert not Settings(
        supabase_url="https://example.supabase.co", supabase_service_key=None
    ).remote_enabled
    assert Settings(
        supabase_url="https://example.supabase.co", supabase_service_key="key"
    ).remote_enabled
