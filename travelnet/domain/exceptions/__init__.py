from .routing import GraphDataError, LocationNotFound, RoutingError

__all__ = [
    "GraphDataError",
    "LocationNotFound",
    "RoutingError",
]
