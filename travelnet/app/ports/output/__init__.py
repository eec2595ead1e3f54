from .location_graph import ILocationGraph, IMutableLocationGraph
from .location_repository import ILocationRepository

__all__ = [
    "ILocationGraph",
    "ILocationRepository",
    "IMutableLocationGraph",
]
