from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

import networkx as nx

from travelnet.app.ports.output import IMutableLocationGraph
from travelnet.domain.exceptions import GraphDataError, LocationNotFound
from travelnet.domain.models import Connection, Location


@dataclass(slots=True)
class NetworkxLocationGraph(IMutableLocationGraph):
    """In-memory travel graph backed by a networkx DiGraph.

    Nodes are location ids carrying display metadata; edges carry `cost`,
    `available` and `requirements`. A connection to an id that is not (yet)
    a location points at a placeholder node: it stays on the source
    location's connection list but the node is not listed as a location.
    """

    _graph: nx.DiGraph = field(default_factory=nx.DiGraph)

    @classmethod
    def from_locations(cls, locations: Iterable[Location]) -> NetworkxLocationGraph:
        graph = cls()
        for location in locations:
            graph.add_location(location)
        return graph

    @property
    def digraph(self) -> nx.DiGraph:
        return self._graph

    # -- ILocationGraph ---------------------------------------------------

    def list_locations(self) -> tuple[Location, ...]:
        return tuple(
            self._to_location(node_id)
            for node_id, data in self._graph.nodes(data=True)
            if not data.get("placeholder")
        )

    def get_location(self, location_id: str) -> Location | None:
        if not self._is_location(location_id):
            return None
        return self._to_location(location_id)

    def are_connected(self, from_id: str, to_id: str) -> bool:
        return (
            self._is_location(from_id)
            and self._is_location(to_id)
            and self._graph.has_edge(from_id, to_id)
        )

    def direct_cost(self, from_id: str, to_id: str) -> int | None:
        if not self.are_connected(from_id, to_id):
            return None
        return int(self._graph.edges[from_id, to_id]["cost"])

    # -- IMutableLocationGraph --------------------------------------------

    def add_location(self, location: Location) -> None:
        if not location.id:
            raise GraphDataError("Location id must not be empty")
        if self._is_location(location.id):
            raise GraphDataError(f"Duplicate location id: '{location.id}'")

        seen: set[str] = set()
        for conn in location.connections:
            if conn.destination_id in seen:
                raise GraphDataError(
                    f"Location '{location.id}' has more than one connection "
                    f"to '{conn.destination_id}'"
                )
            seen.add(conn.destination_id)

        self._graph.add_node(
            location.id,
            placeholder=False,
            display_name=location.display_name,
            description=location.description,
        )
        for conn in location.connections:
            self._put_edge(location.id, conn)

    def add_connection(
        self, from_id: str, connection: Connection, *, bidirectional: bool = False
    ) -> None:
        self._require_location(from_id)
        if bidirectional:
            self._require_location(connection.destination_id)

        self._put_edge(from_id, connection)
        if bidirectional:
            mirrored = Connection(
                destination_id=from_id,
                cost=connection.cost,
                available=connection.available,
                requirements=connection.requirements,
            )
            self._put_edge(connection.destination_id, mirrored)

    def remove_connection(self, from_id: str, to_id: str) -> None:
        self._require_connection(from_id, to_id)
        self._graph.remove_edge(from_id, to_id)

        if self._graph.nodes[to_id].get("placeholder") and not any(
            True for _ in self._graph.predecessors(to_id)
        ):
            self._graph.remove_node(to_id)

    def set_connection_available(
        self, from_id: str, to_id: str, available: bool
    ) -> None:
        self._require_connection(from_id, to_id)
        self._graph.edges[from_id, to_id]["available"] = bool(available)

    # -- helpers ----------------------------------------------------------

    def _is_location(self, location_id: str) -> bool:
        if not location_id or location_id not in self._graph:
            return False
        return not self._graph.nodes[location_id].get("placeholder")

    def _require_location(self, location_id: str) -> None:
        if not self._is_location(location_id):
            raise LocationNotFound(f"Unknown location: '{location_id}'")

    def _require_connection(self, from_id: str, to_id: str) -> None:
        self._require_location(from_id)
        if not self._graph.has_edge(from_id, to_id):
            raise LocationNotFound(f"No connection from '{from_id}' to '{to_id}'")

    def _put_edge(self, from_id: str, conn: Connection) -> None:
        if conn.destination_id not in self._graph:
            self._graph.add_node(conn.destination_id, placeholder=True)
        # One edge per ordered pair; add_connection overwrites an existing one.
        self._graph.add_edge(
            from_id,
            conn.destination_id,
            cost=int(conn.cost),
            available=bool(conn.available),
            requirements=conn.requirements,
        )

    def _to_location(self, node_id: str) -> Location:
        data: dict[str, Any] = self._graph.nodes[node_id]
        connections = tuple(
            Connection(
                destination_id=to_id,
                cost=int(edge["cost"]),
                available=bool(edge["available"]),
                requirements=edge.get("requirements"),
            )
            for _, to_id, edge in self._graph.out_edges(node_id, data=True)
        )
        return Location(
            id=node_id,
            connections=connections,
            display_name=data.get("display_name"),
            description=data.get("description"),
        )
