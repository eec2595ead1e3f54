from __future__ import annotations

import heapq
import logging
import math
from typing import Literal, Mapping, Protocol

from travelnet.domain.models import Location, PathResult, PathSegment

logger = logging.getLogger(__name__)

Strategy = Literal["scan", "heap"]
STRATEGIES: tuple[str, ...] = ("scan", "heap")


class LocationSource(Protocol):
    """The part of a travel graph the engine reads."""

    def list_locations(self) -> tuple[Location, ...]: ...

    def get_location(self, location_id: str) -> Location | None: ...


def shortest_path(
    graph: LocationSource,
    origin_id: str,
    destination_id: str,
    *,
    strategy: Strategy = "scan",
) -> PathResult:
    """Minimum-cost path between two locations (Dijkstra).

    Connections that are unavailable or have a non-positive cost are never
    traversed. Every failure (unknown id, no path) comes back as an
    unreachable result; nothing is raised for bad queries.

    `strategy` picks how the next location is settled:
        - "scan": linear scan over unsettled locations, O(V^2). Fine for the
          tens of locations a world map has.
        - "heap": binary heap with lazy deletion, O(E log V).
    Both give the same costs; tie-breaks between equal-cost paths may differ.
    """

    if strategy not in STRATEGIES:
        raise ValueError(f"Unsupported strategy: {strategy}")

    origin = graph.get_location(origin_id) if origin_id else None
    destination = graph.get_location(destination_id) if destination_id else None
    if origin is None or destination is None:
        logger.warning(
            "Location not found: %s -> %s (origin known=%s, destination known=%s)",
            origin_id,
            destination_id,
            origin is not None,
            destination is not None,
        )
        return PathResult.unreachable()

    if origin_id == destination_id:
        return PathResult.same_location(origin_id)

    locations: dict[str, Location] = {
        loc.id: loc for loc in graph.list_locations() if loc.id
    }
    locations.setdefault(origin.id, origin)
    locations.setdefault(destination.id, destination)

    if strategy == "heap":
        found = _search_heap(locations, origin_id, destination_id)
    else:
        found = _search_scan(locations, origin_id, destination_id)

    if found is None:
        logger.debug("No path from %s to %s", origin_id, destination_id)
        return PathResult.unreachable()

    total_cost, prev = found
    result = _build_result(locations, prev, origin_id, destination_id, total_cost)
    logger.debug(
        "Path found from %s to %s (%d cost, %d segments)",
        origin_id,
        destination_id,
        result.total_cost,
        len(result.segments),
    )
    return result


def _search_scan(
    locations: Mapping[str, Location], origin_id: str, destination_id: str
) -> tuple[int, dict[str, str]] | None:
    dist: dict[str, float] = {loc_id: math.inf for loc_id in locations}
    dist[origin_id] = 0
    prev: dict[str, str] = {}
    unsettled = set(locations)

    while unsettled:
        current = min(unsettled, key=dist.__getitem__)
        if dist[current] == math.inf:
            # Everything left is disconnected from the origin.
            return None

        unsettled.remove(current)
        if current == destination_id:
            return int(dist[current]), prev

        for conn in locations[current].connections:
            if not conn.traversable:
                continue
            neighbour = conn.destination_id
            if neighbour not in unsettled:
                continue
            alt = dist[current] + conn.cost
            if alt < dist[neighbour]:
                dist[neighbour] = alt
                prev[neighbour] = current

    return None


def _search_heap(
    locations: Mapping[str, Location], origin_id: str, destination_id: str
) -> tuple[int, dict[str, str]] | None:
    dist: dict[str, int] = {origin_id: 0}
    prev: dict[str, str] = {}
    settled: set[str] = set()
    pq: list[tuple[int, str]] = [(0, origin_id)]

    while pq:
        d_u, u = heapq.heappop(pq)
        if u in settled:
            continue
        settled.add(u)
        if u == destination_id:
            return d_u, prev

        for conn in locations[u].connections:
            if not conn.traversable:
                continue
            v = conn.destination_id
            if v not in locations or v in settled:
                continue
            alt = d_u + conn.cost
            if alt < dist.get(v, math.inf):
                dist[v] = alt
                prev[v] = u
                heapq.heappush(pq, (alt, v))

    return None


def _build_result(
    locations: Mapping[str, Location],
    prev: Mapping[str, str],
    origin_id: str,
    destination_id: str,
    total_cost: int,
) -> PathResult:
    path = [destination_id]
    cur = destination_id
    while cur != origin_id:
        cur = prev[cur]
        path.append(cur)
    path.reverse()

    segments: list[PathSegment] = []
    for from_id, to_id in zip(path, path[1:]):
        conn = locations[from_id].connection_to(to_id)
        # The search only walks traversable connections, so conn is set.
        cost = conn.cost if conn is not None else 0
        segments.append(PathSegment(from_id=from_id, to_id=to_id, cost=cost))

    return PathResult(
        reachable=True,
        total_cost=int(total_cost),
        path=tuple(path),
        segments=tuple(segments),
    )
