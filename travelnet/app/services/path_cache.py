from __future__ import annotations

import logging
from dataclasses import dataclass, field

from travelnet.domain.algorithms.dijkstra import LocationSource, Strategy, shortest_path
from travelnet.domain.models import CacheStats, PathResult

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PathCache:
    """Memoized shortest paths keyed by (origin id, destination id).

    Only reachable results are kept, so a query that found no path is
    recomputed next time instead of remembering "no path" forever.
    The cache knows nothing about graph edits: whoever changes connectivity
    must call `invalidate_all`.
    """

    _entries: dict[tuple[str, str], PathResult] = field(default_factory=dict)
    _complete: bool = False

    @property
    def complete(self) -> bool:
        """True once `rebuild_all` has filled every reachable pair."""

        return self._complete

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def lookup(self, origin_id: str, destination_id: str) -> PathResult | None:
        return self._entries.get((origin_id, destination_id))

    def store(self, origin_id: str, destination_id: str, result: PathResult) -> bool:
        """Insert or overwrite an entry. Returns False if the result was refused."""

        if not result.reachable:
            return False
        self._entries[(origin_id, destination_id)] = result
        return True

    def invalidate_all(self) -> None:
        self._entries.clear()
        self._complete = False

    def rebuild_all(self, graph: LocationSource, *, strategy: Strategy = "scan") -> int:
        """Precompute every reachable ordered pair of distinct locations.

        Runs V^2 searches synchronously; meant for startup or after a bulk
        edit. Returns the number of entries stored.
        """

        self.invalidate_all()

        ids = [loc.id for loc in graph.list_locations() if loc.id]
        logger.info("Rebuilding path cache for %d locations", len(ids))

        for origin_id in ids:
            for destination_id in ids:
                if origin_id == destination_id:
                    continue
                result = shortest_path(
                    graph, origin_id, destination_id, strategy=strategy
                )
                self.store(origin_id, destination_id, result)

        self._complete = True
        logger.info("Path cache rebuilt with %d entries", len(self._entries))
        return len(self._entries)

    def stats(self) -> CacheStats:
        origins = {origin_id for origin_id, _ in self._entries}
        return CacheStats(
            entry_count=len(self._entries),
            origin_count=len(origins),
            complete=self._complete,
        )
