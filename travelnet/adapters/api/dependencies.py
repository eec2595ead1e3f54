from __future__ import annotations

import logging
import os

from fastapi import Depends, Request

from travelnet.adapters.graph.networkx_location_graph import NetworkxLocationGraph
from travelnet.adapters.persistence.local_location_repository import (
    LocalLocationRepository,
)
from travelnet.app.ports.output import ILocationRepository
from travelnet.app.services.routing_service import RoutingService
from travelnet.app.services.travel_network_service import TravelNetworkService
from travelnet.domain.algorithms.dijkstra import STRATEGIES
from travelnet.domain.algorithms.validation import validate_locations

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def build_network(
    repository: ILocationRepository | None = None,
) -> tuple[RoutingService, TravelNetworkService]:
    """Compose the routing and network-editing services from env settings.

    Env vars:
      - LOCATIONS_PATH: location JSON file (see LocalLocationRepository)
      - ROUTING_STRATEGY: scan|heap (default: scan)
      - ROUTING_PREBUILD_CACHE: 1|true to precompute every path at startup
    """

    repository = repository or LocalLocationRepository()
    locations = repository.load_locations()
    for issue in validate_locations(locations):
        logger.warning("Location data issue: %s", issue)

    graph = NetworkxLocationGraph.from_locations(locations)

    strategy = (os.getenv("ROUTING_STRATEGY") or "scan").strip().lower()
    if strategy not in STRATEGIES:
        raise RuntimeError(f"Unsupported ROUTING_STRATEGY: {strategy}")

    routing = RoutingService(graph=graph, strategy=strategy)  # type: ignore[arg-type]
    network = TravelNetworkService(graph=graph, routing=routing)

    if (os.getenv("ROUTING_PREBUILD_CACHE") or "").strip().lower() in _TRUTHY:
        routing.rebuild_cache()

    logger.info("Travel network loaded: %d locations", len(locations))
    return routing, network


def get_travel_network_service(request: Request) -> TravelNetworkService:
    # The application owns one network for its whole lifetime so the path
    # cache survives between requests.
    state = request.app.state
    network = getattr(state, "travel_network", None)
    if network is None:
        _, network = build_network()
        state.travel_network = network
    return network


def get_routing_service(
    network: TravelNetworkService = Depends(get_travel_network_service),
) -> RoutingService:
    return network.routing
