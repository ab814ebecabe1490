"""Tests for engine lifecycle."""
from vehicle_inspection import database
from vehicle_inspection.config import settings


async def test_engine_is_bound_until_disposed(monkeypatch):
    await database.dispose_engine()
    monkeypatch.setattr(settings, "DATABASE_URL", "sqlite+aiosqlite://")

    first = database.get_engine()

    # A new URL is only picked up after the current pool is closed
    monkeypatch.setattr(settings, "DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    assert database.get_engine() is first

    await database.dispose_engine()
    second = database.get_engine()

    assert second is not first
    assert str(second.url) == "sqlite+aiosqlite:///:memory:"
    assert database.AsyncSessionLocal.kw["bind"] is second

    await database.dispose_engine()
