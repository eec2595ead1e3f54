from __future__ import annotations

import logging
from dataclasses import dataclass

from travelnet.app.ports.output import IMutableLocationGraph
from travelnet.domain.algorithms.validation import validate_locations
from travelnet.domain.models import Connection, Location

from .routing_service import RoutingService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TravelNetworkService:
    """Use cases that change the travel graph.

    Every edit is followed by a cache invalidation on the routing service,
    so routing never serves a path computed on the old connectivity.
    """

    graph: IMutableLocationGraph
    routing: RoutingService

    def add_location(self, location: Location) -> None:
        self.graph.add_location(location)
        self._connectivity_changed(f"added location {location.id}")

    def connect(
        self,
        from_id: str,
        to_id: str,
        *,
        cost: int,
        available: bool = True,
        bidirectional: bool = False,
    ) -> None:
        connection = Connection(destination_id=to_id, cost=cost, available=available)
        self.graph.add_connection(from_id, connection, bidirectional=bidirectional)
        self._connectivity_changed(f"connected {from_id} -> {to_id} ({cost})")

    def disconnect(self, from_id: str, to_id: str) -> None:
        self.graph.remove_connection(from_id, to_id)
        self._connectivity_changed(f"disconnected {from_id} -> {to_id}")

    def set_connection_available(self, from_id: str, to_id: str, available: bool) -> None:
        self.graph.set_connection_available(from_id, to_id, available)
        state = "available" if available else "unavailable"
        self._connectivity_changed(f"{from_id} -> {to_id} now {state}")

    def validate(self) -> list[str]:
        issues = validate_locations(self.graph.list_locations())
        for issue in issues:
            logger.warning("Location data issue: %s", issue)
        return issues

    def _connectivity_changed(self, reason: str) -> None:
        logger.info("Travel graph changed: %s", reason)
        self.routing.invalidate_cache()
