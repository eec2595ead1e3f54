from __future__ import annotations

from abc import ABC, abstractmethod

from travelnet.domain.models import Connection, Location


class ILocationGraph(ABC):
    """Read-only port over the travel graph consumed by routing.

    Lookups report a missing location as None and never raise.
    """

    @abstractmethod
    def list_locations(self) -> tuple[Location, ...]:
        """Return every known location."""

    @abstractmethod
    def get_location(self, location_id: str) -> Location | None:
        """Resolve a location by id, or None when unknown."""

    @abstractmethod
    def are_connected(self, from_id: str, to_id: str) -> bool:
        """Whether a direct connection from_id -> to_id exists (available or not)."""

    @abstractmethod
    def direct_cost(self, from_id: str, to_id: str) -> int | None:
        """Cost of the direct connection from_id -> to_id, or None if not connected."""

    def has_location(self, location_id: str) -> bool:
        return self.get_location(location_id) is not None

    def connected_locations(self, location_id: str) -> tuple[Location, ...]:
        location = self.get_location(location_id)
        if location is None:
            return ()

        out: list[Location] = []
        for conn in location.connections:
            destination = self.get_location(conn.destination_id)
            if destination is not None:
                out.append(destination)
        return tuple(out)


class IMutableLocationGraph(ILocationGraph):
    """Port for the component that owns edits to the travel graph.

    Edits naming unknown locations or connections raise LocationNotFound.
    """

    @abstractmethod
    def add_location(self, location: Location) -> None:
        """Add a new location; GraphDataError on an empty or duplicate id, or
        on two connections to the same destination."""

    @abstractmethod
    def add_connection(
        self, from_id: str, connection: Connection, *, bidirectional: bool = False
    ) -> None:
        """Add or replace the connection from_id -> connection.destination_id."""

    @abstractmethod
    def remove_connection(self, from_id: str, to_id: str) -> None:
        """Remove the direct connection from_id -> to_id."""

    @abstractmethod
    def set_connection_available(
        self, from_id: str, to_id: str, available: bool
    ) -> None:
        """Open or close the direct connection from_id -> to_id."""
