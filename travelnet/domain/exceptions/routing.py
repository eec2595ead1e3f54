class RoutingError(Exception):
    """Base exception for the travel network."""


class GraphDataError(RoutingError):
    """Raised when location data cannot be turned into a travel graph."""


class LocationNotFound(RoutingError):
    """Raised when a graph edit names a location or connection that does not exist."""
