from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PathSegmentSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_id: str = Field(..., alias="from")
    to_id: str = Field(..., alias="to")
    cost: int


class PathResultSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reachable: bool
    total_cost: int = Field(0, alias="totalCost")
    path: list[str] = []
    segments: list[PathSegmentSchema] = []


class TotalCostSchema(BaseModel):
    total_cost: int


class ReachableSchema(BaseModel):
    reachable: bool


class PathTraceSchema(BaseModel):
    lines: list[str]


class CacheStatsSchema(BaseModel):
    entry_count: int
    origin_count: int
    complete: bool


class ConnectionAvailabilitySchema(BaseModel):
    available: bool


class ValidationReportSchema(BaseModel):
    issues: list[str] = []
