from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .location import Location


@dataclass(frozen=True, slots=True)
class PathSegment:
    from_id: str
    to_id: str
    cost: int
    # Display metadata; filled in by callers, never by the engine.
    from_location: Location | None = None
    to_location: Location | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"from": self.from_id, "to": self.to_id, "cost": self.cost}


@dataclass(frozen=True, slots=True)
class PathResult:
    """Answer to a shortest-path query.

    `total_cost`, `path` and `segments` are only meaningful when `reachable`
    is true. A reachable result always lists at least the origin in `path`.
    """

    reachable: bool
    total_cost: int = 0
    path: tuple[str, ...] = field(default_factory=tuple)
    segments: tuple[PathSegment, ...] = field(default_factory=tuple)

    @classmethod
    def unreachable(cls) -> PathResult:
        return cls(reachable=False)

    @classmethod
    def same_location(cls, location_id: str) -> PathResult:
        return cls(reachable=True, total_cost=0, path=(location_id,), segments=())

    @property
    def origin_id(self) -> str | None:
        return self.path[0] if self.path else None

    @property
    def destination_id(self) -> str | None:
        return self.path[-1] if self.path else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "reachable": self.reachable,
            "totalCost": self.total_cost,
            "path": list(self.path),
            "segments": [s.to_dict() for s in self.segments],
        }


@dataclass(frozen=True, slots=True)
class CacheStats:
    entry_count: int
    origin_count: int
    complete: bool
