from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace

from travelnet.app.ports.output import ILocationGraph
from travelnet.domain.algorithms.dijkstra import Strategy, shortest_path
from travelnet.domain.models import CacheStats, PathResult, PathSegment

from .path_cache import PathCache

logger = logging.getLogger(__name__)

UNREACHABLE_COST = -1


@dataclass(slots=True)
class RoutingService:
    """Application service for travel routes between map locations.

    Combines the path cache with on-demand Dijkstra over the injected graph.
    Queries never raise: bad input, unknown ids and missing paths all come
    back as an unreachable PathResult.
    """

    graph: ILocationGraph
    strategy: Strategy = "scan"
    cache: PathCache = field(default_factory=PathCache)

    # Sync FastAPI endpoints run in a thread pool; the cache is not thread-safe.
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def find_path(self, origin_id: str | None, destination_id: str | None) -> PathResult:
        if not origin_id or not destination_id:
            logger.error(
                "find_path called with an empty location id (origin=%r, destination=%r)",
                origin_id,
                destination_id,
            )
            return PathResult.unreachable()

        if origin_id == destination_id and self.graph.has_location(origin_id):
            return PathResult.same_location(origin_id)

        with self._lock:
            cached = self.cache.lookup(origin_id, destination_id)
            if cached is not None:
                logger.debug("Cached path from %s to %s", origin_id, destination_id)
                return cached

            result = shortest_path(
                self.graph, origin_id, destination_id, strategy=self.strategy
            )
            if result.reachable:
                self.cache.store(origin_id, destination_id, result)
            else:
                logger.info("No path from %s to %s", origin_id, destination_id)
            return result

    def can_reach(self, origin_id: str | None, destination_id: str | None) -> bool:
        return self.find_path(origin_id, destination_id).reachable

    def get_total_cost(self, origin_id: str | None, destination_id: str | None) -> int:
        result = self.find_path(origin_id, destination_id)
        return result.total_cost if result.reachable else UNREACHABLE_COST

    def is_direct(self, origin_id: str, destination_id: str) -> bool:
        return self.graph.are_connected(origin_id, destination_id)

    def direct_cost(self, origin_id: str, destination_id: str) -> int:
        cost = self.graph.direct_cost(origin_id, destination_id)
        return UNREACHABLE_COST if cost is None else cost

    def invalidate_cache(self) -> None:
        with self._lock:
            self.cache.invalidate_all()
        logger.info("Path cache invalidated")

    def rebuild_cache(self) -> CacheStats:
        with self._lock:
            self.cache.rebuild_all(self.graph, strategy=self.strategy)
            return self.cache.stats()

    def cache_stats(self) -> CacheStats:
        with self._lock:
            stats = self.cache.stats()
        logger.info(
            "Path cache holds %d paths across %d origins (complete=%s)",
            stats.entry_count,
            stats.origin_count,
            stats.complete,
        )
        return stats

    def resolve_segments(self, result: PathResult) -> tuple[PathSegment, ...]:
        """Segments of `result` with their location metadata filled in."""

        return tuple(
            replace(
                seg,
                from_location=self.graph.get_location(seg.from_id),
                to_location=self.graph.get_location(seg.to_id),
            )
            for seg in result.segments
        )

    def describe_path(self, origin_id: str, destination_id: str) -> list[str]:
        """Human-readable trace of the route, one line per segment."""

        result = self.find_path(origin_id, destination_id)
        if not result.reachable:
            lines = [f"No path from {origin_id} to {destination_id}"]
        else:
            lines = [f"{origin_id} → {destination_id} (total {result.total_cost})"]
            for seg in self.resolve_segments(result):
                from_name = seg.from_location.name if seg.from_location else seg.from_id
                to_name = seg.to_location.name if seg.to_location else seg.to_id
                lines.append(f"  {from_name} → {to_name} ({seg.cost})")

        for line in lines:
            logger.info("%s", line)
        return lines
