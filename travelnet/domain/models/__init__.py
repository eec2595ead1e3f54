from .location import Connection, Location
from .path import CacheStats, PathResult, PathSegment

__all__ = [
    "CacheStats",
    "Connection",
    "Location",
    "PathResult",
    "PathSegment",
]
