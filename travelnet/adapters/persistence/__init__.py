from .local_location_repository import LocalLocationRepository

__all__ = [
    "LocalLocationRepository",
]
