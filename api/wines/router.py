"""
Wine ratings API endpoints (read-only).
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from . import schemas, service

router = APIRouter()


@router.get("/wines", response_model=list[schemas.Wine])
async def list_wines(
    region: str | None = None,
    variety: str | None = None,
    min_rating: float | None = None,
    max_rating: float | None = None,
) -> list[dict]:
    return await service.list_wines(
        region=region,
        variety=variety,
        min_rating=min_rating,
        max_rating=max_rating,
    )


@router.get("/wines/search", response_model=list[schemas.Wine])
async def search_wines(q: str = Query(...)) -> list[dict]:
    return await service.search_wines(q)


@router.get("/wines/region/{region}", response_model=list[schemas.Wine])
async def wines_by_region(region: str) -> list[dict]:
    return await service.wines_by_region(region)


@router.get("/regions", response_model=dict[str, int])
async def region_counts() -> dict:
    return await service.region_counts()


@router.get("/varieties", response_model=dict[str, schemas.VarietyStats])
async def variety_stats() -> dict:
    return await service.variety_stats()
