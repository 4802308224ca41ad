"""
Wine ratings service.

Scope:
- map repository rows to API records
- turn any storage failure into a generic 500 (no query text or schema leaks)

Each operation issues exactly one statement and is never retried.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from typing import Any, Iterator

import asyncpg
from fastapi import HTTPException

from . import repository


logger = logging.getLogger(__name__)

STORAGE_ERROR_DETAIL = "Internal server error."

_STORAGE_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    asyncio.TimeoutError,
    OSError,
    RuntimeError,
    KeyError,
    TypeError,
    ValueError,
)


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except _STORAGE_ERRORS as exc:
        logger.exception("wine_query_failed operation=%s", operation)
        raise HTTPException(status_code=500, detail=STORAGE_ERROR_DETAIL) from exc


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _wine_row(row: dict[str, Any]) -> dict[str, Any]:
    rating = row["rating"]
    return {
        "id": int(row["id"]),
        "name": str(row["name"]),
        "region": _optional_str(row["region"]),
        "variety": _optional_str(row["variety"]),
        "rating": None if rating is None else float(rating),
        "notes": _optional_str(row["notes"]),
    }


async def list_wines(
    *,
    region: str | None = None,
    variety: str | None = None,
    min_rating: float | None = None,
    max_rating: float | None = None,
) -> list[dict[str, Any]]:
    with _storage_errors("list_wines"):
        rows = await repository.list_wines(
            region=region,
            variety=variety,
            min_rating=min_rating,
            max_rating=max_rating,
        )
        return [_wine_row(row) for row in rows]


async def search_wines(query_text: str) -> list[dict[str, Any]]:
    with _storage_errors("search_wines"):
        rows = await repository.search_wines(query_text)
        return [_wine_row(row) for row in rows]


async def wines_by_region(region: str) -> list[dict[str, Any]]:
    with _storage_errors("wines_by_region"):
        rows = await repository.list_wines_by_region(region)
        return [_wine_row(row) for row in rows]


async def region_counts() -> dict[str, int]:
    with _storage_errors("region_counts"):
        rows = await repository.count_by_region()
        return {str(row["region"]): int(row["count"]) for row in rows}


async def variety_stats() -> dict[str, dict[str, Any]]:
    with _storage_errors("variety_stats"):
        rows = await repository.stats_by_variety()
        return {
            str(row["variety"]): {
                "count": int(row["count"]),
                "avg_rating": float(row["avg_rating"]),
            }
            for row in rows
        }
