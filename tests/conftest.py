"""
Pytest configuration for the wine ratings API tests.

Router tests run without a database: `core.db.fetch_all` is replaced by a
recorder returning canned rows. `TestClient` is used without a `with` block
there, so the lifespan (and the asyncpg pool) never starts.
"""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

import main
from core import db


FIXTURE_WINES = [
    {
        "id": 1,
        "name": "Test Cabernet 2020",
        "region": "California",
        "variety": "Red Wine",
        "rating": 92.5,
        "notes": "Rich and bold with notes of cherry",
    },
    {
        "id": 2,
        "name": "Test Chardonnay 2021",
        "region": "California",
        "variety": "White Wine",
        "rating": 88.0,
        "notes": "Crisp and clean with citrus notes",
    },
    {
        "id": 3,
        "name": "Test Pinot Noir 2019",
        "region": "Oregon",
        "variety": "Red Wine",
        "rating": 90.0,
        "notes": "Light bodied with earthy undertones",
    },
    {
        "id": 4,
        "name": "Bourbon Barrel Aged Red",
        "region": "Texas",
        "variety": "Red Wine",
        "rating": 95.0,
        "notes": "Aged in bourbon barrels with vanilla notes",
    },
    {
        "id": 5,
        "name": "Test Sauvignon Blanc",
        "region": "Washington",
        "variety": "White Wine",
        "rating": 86.5,
        "notes": "Fresh and herbaceous",
    },
]


class FakeDB:
    """Stands in for `core.db.fetch_all`; records every call."""

    def __init__(self) -> None:
        self.rows: list[dict[str, Any]] = []
        self.error: Exception | None = None
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self.calls.append((sql, args))
        if self.error is not None:
            raise self.error
        return [dict(row) for row in self.rows]


@pytest.fixture
def fake_db(monkeypatch):
    fake = FakeDB()
    monkeypatch.setattr(db, "fetch_all", fake.fetch_all)
    return fake


@pytest.fixture
def client():
    return TestClient(main.app)
