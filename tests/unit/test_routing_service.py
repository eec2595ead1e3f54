from __future__ import annotations

import logging

import pytest

from travelnet.adapters.graph.networkx_location_graph import NetworkxLocationGraph
from travelnet.app.services.routing_service import UNREACHABLE_COST, RoutingService
from travelnet.domain.algorithms.dijkstra import shortest_path
from travelnet.domain.models import Connection, Location, PathResult


def _world() -> NetworkxLocationGraph:
    return NetworkxLocationGraph.from_locations(
        [
            Location(
                id="village",
                display_name="Quiet Village",
                connections=(Connection("forest", 5), Connection("castle", 20, False)),
            ),
            Location(
                id="forest",
                connections=(Connection("village", 5), Connection("castle", 3)),
            ),
            Location(
                id="castle",
                display_name="Old Castle",
                connections=(Connection("forest", 3), Connection("village", 20, False)),
            ),
            Location(id="island"),
        ]
    )


@pytest.fixture
def service() -> RoutingService:
    return RoutingService(graph=_world())


def test_find_path_computes_and_caches(service: RoutingService) -> None:
    result = service.find_path("village", "castle")

    assert result.reachable
    assert result.total_cost == 8
    assert result.path == ("village", "forest", "castle")
    assert service.cache.lookup("village", "castle") == result
    # Second query is served from the cache.
    assert service.find_path("village", "castle") is service.cache.lookup(
        "village", "castle"
    )


def test_find_path_same_location(service: RoutingService) -> None:
    assert service.find_path("forest", "forest") == PathResult.same_location("forest")


@pytest.mark.parametrize(
    "origin,destination", [("", "castle"), ("village", ""), (None, "castle")]
)
def test_empty_ids_are_usage_errors(
    service: RoutingService,
    origin: str | None,
    destination: str | None,
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.ERROR):
        result = service.find_path(origin, destination)

    assert not result.reachable
    assert any(rec.levelno == logging.ERROR for rec in caplog.records)


def test_unreachable_queries_are_not_cached(service: RoutingService) -> None:
    assert not service.find_path("village", "island").reachable
    assert not service.find_path("village", "nowhere").reachable
    assert service.cache_stats().entry_count == 0


def test_can_reach_and_total_cost(service: RoutingService) -> None:
    assert service.can_reach("castle", "village")
    assert not service.can_reach("island", "village")
    assert service.get_total_cost("castle", "village") == 8
    assert service.get_total_cost("village", "island") == UNREACHABLE_COST
    assert service.get_total_cost("village", "village") == 0


def test_direct_connection_fast_path(service: RoutingService) -> None:
    assert service.is_direct("village", "castle")
    assert service.direct_cost("village", "castle") == 20
    assert not service.is_direct("village", "island")
    assert service.direct_cost("village", "island") == UNREACHABLE_COST


def test_rebuild_cache_matches_fresh_computation(service: RoutingService) -> None:
    stats = service.rebuild_cache()

    assert stats.complete
    ids = ["village", "forest", "castle", "island"]
    for origin in ids:
        for destination in ids:
            if origin == destination:
                continue
            fresh = shortest_path(service.graph, origin, destination)
            assert service.find_path(origin, destination) == fresh


def test_invalidate_cache_forces_recomputation() -> None:
    graph = _world()
    service = RoutingService(graph=graph)
    service.rebuild_cache()
    assert service.get_total_cost("village", "castle") == 8

    graph.set_connection_available("village", "castle", True)
    # Stale until someone invalidates.
    assert service.get_total_cost("village", "castle") == 8

    service.invalidate_cache()
    stats = service.cache_stats()
    assert stats.entry_count == 0
    assert not stats.complete

    result = service.find_path("village", "castle")
    assert result.total_cost == 8
    assert result.path == ("village", "forest", "castle")

    graph.remove_connection("village", "forest")
    service.invalidate_cache()
    result = service.find_path("village", "castle")
    assert result.total_cost == 20
    assert result.path == ("village", "castle")


def test_heap_strategy_gives_same_costs() -> None:
    scan = RoutingService(graph=_world(), strategy="scan")
    heap = RoutingService(graph=_world(), strategy="heap")

    for origin, destination in [("village", "castle"), ("castle", "village")]:
        assert scan.get_total_cost(origin, destination) == heap.get_total_cost(
            origin, destination
        )


def test_describe_path_uses_display_names(service: RoutingService) -> None:
    lines = service.describe_path("village", "castle")

    assert lines == [
        "village → castle (total 8)",
        "  Quiet Village → forest (5)",
        "  forest → Old Castle (3)",
    ]


def test_describe_path_when_unreachable(service: RoutingService) -> None:
    assert service.describe_path("village", "island") == [
        "No path from village to island"
    ]


def test_resolve_segments_fills_metadata(service: RoutingService) -> None:
    result = service.find_path("village", "castle")

    segments = service.resolve_segments(result)

    assert segments[0].from_location is not None
    assert segments[0].from_location.name == "Quiet Village"
    assert segments[-1].to_location is not None
    assert segments[-1].to_location.id == "castle"
    # The cached result itself stays without metadata.
    assert result.segments[0].from_location is None
