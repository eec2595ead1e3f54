from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from travelnet.adapters.api.dependencies import (
    get_routing_service,
    get_travel_network_service,
)
from travelnet.adapters.api.schemas.paths import (
    CacheStatsSchema,
    ConnectionAvailabilitySchema,
    ValidationReportSchema,
)
from travelnet.app.services.routing_service import RoutingService
from travelnet.app.services.travel_network_service import TravelNetworkService
from travelnet.domain.models import CacheStats

router = APIRouter(tags=["network"])


def _stats_to_schema(stats: CacheStats) -> CacheStatsSchema:
    return CacheStatsSchema(
        entry_count=stats.entry_count,
        origin_count=stats.origin_count,
        complete=stats.complete,
    )


@router.get("/cache/stats", response_model=CacheStatsSchema)
def cache_stats(
    service: RoutingService = Depends(get_routing_service),
) -> CacheStatsSchema:
    return _stats_to_schema(service.cache_stats())


@router.post("/cache/invalidate", response_model=CacheStatsSchema)
def invalidate_cache(
    service: RoutingService = Depends(get_routing_service),
) -> CacheStatsSchema:
    service.invalidate_cache()
    return _stats_to_schema(service.cache_stats())


@router.post("/cache/rebuild", response_model=CacheStatsSchema)
def rebuild_cache(
    service: RoutingService = Depends(get_routing_service),
) -> CacheStatsSchema:
    return _stats_to_schema(service.rebuild_cache())


@router.patch("/connections/{from_id}/{to_id}", status_code=204)
def set_connection_availability(
    from_id: str,
    to_id: str,
    req: ConnectionAvailabilitySchema,
    network: TravelNetworkService = Depends(get_travel_network_service),
) -> Response:
    network.set_connection_available(from_id, to_id, req.available)
    return Response(status_code=204)


@router.get("/locations/validation", response_model=ValidationReportSchema)
def validate_locations(
    network: TravelNetworkService = Depends(get_travel_network_service),
) -> ValidationReportSchema:
    return ValidationReportSchema(issues=network.validate())
