"""
Pydantic schemas for wine endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class Wine(BaseModel):
    id: int
    name: str
    region: str | None = None
    variety: str | None = None
    rating: float | None = None
    notes: str | None = None


class VarietyStats(BaseModel):
    count: int
    avg_rating: float
