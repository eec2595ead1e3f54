from __future__ import annotations

from abc import ABC, abstractmethod

from travelnet.domain.models import Location


class ILocationRepository(ABC):
    """Port for loading location definitions into memory."""

    @abstractmethod
    def load_locations(self) -> tuple[Location, ...]:
        """Load every location definition from the backing store."""
