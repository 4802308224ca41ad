"""
Wine ratings SQL (raw, read-only).

Every query targets the single `wine_ratings` table. Substring filters use
ILIKE (case-insensitive) with the user value escaped so `%`, `_` and `\\`
match literally. User values are always bound as parameters.
"""

from __future__ import annotations

from typing import Any

from core import db


WINE_COLUMNS = "id, name, region, variety, rating, notes"
LIKE_ESCAPE = "\\"


def _like_pattern(value: str) -> str:
    """
    Wrap `value` as an unanchored ILIKE pattern: "%value%".
    """
    escaped = (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def build_wine_filters(
    *,
    region: str | None = None,
    variety: str | None = None,
    min_rating: float | None = None,
    max_rating: float | None = None,
) -> tuple[str, list[Any]]:
    """
    Build the WHERE clause for the wine listing.

    Returns (where_sql, args). `where_sql` is "" when no filter is given,
    otherwise " WHERE <p1> AND <p2> ..." with $n placeholders numbered in the
    order of `args`.
    """
    conditions: list[str] = []
    args: list[Any] = []

    def placeholder(value: Any) -> str:
        args.append(value)
        return f"${len(args)}"

    if region is not None:
        conditions.append(f"region ILIKE {placeholder(_like_pattern(region))} ESCAPE '\\'")
    if variety is not None:
        conditions.append(f"variety ILIKE {placeholder(_like_pattern(variety))} ESCAPE '\\'")
    if min_rating is not None:
        conditions.append(f"rating >= {placeholder(float(min_rating))}")
    if max_rating is not None:
        conditions.append(f"rating <= {placeholder(float(max_rating))}")

    if not conditions:
        return "", args
    return " WHERE " + " AND ".join(conditions), args


async def list_wines(
    *,
    region: str | None = None,
    variety: str | None = None,
    min_rating: float | None = None,
    max_rating: float | None = None,
) -> list[dict[str, Any]]:
    where_sql, args = build_wine_filters(
        region=region,
        variety=variety,
        min_rating=min_rating,
        max_rating=max_rating,
    )
    return await db.fetch_all(f"SELECT {WINE_COLUMNS} FROM wine_ratings{where_sql}", *args)


async def search_wines(query_text: str) -> list[dict[str, Any]]:
    """
    Substring search over `name` and `notes`.
    """
    return await db.fetch_all(
        f"""
        SELECT {WINE_COLUMNS}
        FROM wine_ratings
        WHERE name ILIKE $1 ESCAPE '\\'
           OR notes ILIKE $1 ESCAPE '\\'
        """,
        _like_pattern(query_text),
    )


async def list_wines_by_region(region: str) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {WINE_COLUMNS}
        FROM wine_ratings
        WHERE region = $1
        """,
        region,
    )


async def count_by_region() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT region, COUNT(*) AS count
        FROM wine_ratings
        WHERE region IS NOT NULL
        GROUP BY region
        """
    )


async def stats_by_variety() -> list[dict[str, Any]]:
    """
    Per-variety row count and mean rating, ignoring null varieties and ratings.
    """
    return await db.fetch_all(
        """
        SELECT variety, COUNT(*) AS count, AVG(rating)::float8 AS avg_rating
        FROM wine_ratings
        WHERE variety IS NOT NULL
          AND rating IS NOT NULL
        GROUP BY variety
        """
    )
