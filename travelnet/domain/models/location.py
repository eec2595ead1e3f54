from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Connection:
    """A directed travel edge from the owning location to `destination_id`.

    Only connections that are available and have a positive cost can be
    travelled; the rest stay in the data for display and validation.
    """

    destination_id: str
    cost: int
    available: bool = True
    requirements: str | None = None

    @property
    def traversable(self) -> bool:
        return self.available and self.cost > 0


@dataclass(frozen=True, slots=True)
class Location:
    id: str
    connections: tuple[Connection, ...] = field(default_factory=tuple)
    display_name: str | None = None
    description: str | None = None

    @property
    def name(self) -> str:
        if self.display_name:
            return self.display_name
        return self.id.replace("_", " ")

    def connection_to(self, destination_id: str) -> Connection | None:
        """Cheapest traversable connection to `destination_id`, if any."""

        best: Connection | None = None
        for conn in self.connections:
            if conn.destination_id != destination_id or not conn.traversable:
                continue
            if best is None or conn.cost < best.cost:
                best = conn
        return best
