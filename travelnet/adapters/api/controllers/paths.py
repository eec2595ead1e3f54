from __future__ import annotations

from fastapi import APIRouter, Depends

from travelnet.adapters.api.dependencies import get_routing_service
from travelnet.adapters.api.schemas.paths import (
    PathResultSchema,
    PathSegmentSchema,
    PathTraceSchema,
    ReachableSchema,
    TotalCostSchema,
)
from travelnet.app.services.routing_service import RoutingService
from travelnet.domain.models import PathResult

router = APIRouter(prefix="/paths", tags=["paths"])


def _result_to_schema(result: PathResult) -> PathResultSchema:
    return PathResultSchema(
        reachable=result.reachable,
        total_cost=result.total_cost,
        path=list(result.path),
        segments=[
            PathSegmentSchema(from_id=seg.from_id, to_id=seg.to_id, cost=seg.cost)
            for seg in result.segments
        ],
    )


@router.get("/{origin_id}/{destination_id}", response_model=PathResultSchema)
def find_path(
    origin_id: str,
    destination_id: str,
    service: RoutingService = Depends(get_routing_service),
) -> PathResultSchema:
    return _result_to_schema(service.find_path(origin_id, destination_id))


@router.get("/{origin_id}/{destination_id}/cost", response_model=TotalCostSchema)
def total_cost(
    origin_id: str,
    destination_id: str,
    service: RoutingService = Depends(get_routing_service),
) -> TotalCostSchema:
    return TotalCostSchema(total_cost=service.get_total_cost(origin_id, destination_id))


@router.get("/{origin_id}/{destination_id}/reachable", response_model=ReachableSchema)
def can_reach(
    origin_id: str,
    destination_id: str,
    service: RoutingService = Depends(get_routing_service),
) -> ReachableSchema:
    return ReachableSchema(reachable=service.can_reach(origin_id, destination_id))


@router.get("/{origin_id}/{destination_id}/trace", response_model=PathTraceSchema)
def trace(
    origin_id: str,
    destination_id: str,
    service: RoutingService = Depends(get_routing_service),
) -> PathTraceSchema:
    return PathTraceSchema(lines=service.describe_path(origin_id, destination_id))
