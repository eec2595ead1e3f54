from __future__ import annotations

import json
from pathlib import Path

import pytest

from travelnet.adapters.persistence import LocalLocationRepository
from travelnet.domain.exceptions import GraphDataError
from travelnet.domain.models import Connection


def _write(tmp_path: Path, document: object) -> Path:
    path = tmp_path / "locations.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_loads_locations_and_connections(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        {
            "locations": [
                {
                    "id": "village",
                    "display_name": "Village",
                    "connections": [
                        {"destination_id": "forest", "cost": 100},
                        {"destinationId": "mine", "cost": 40, "available": False},
                    ],
                },
                {"id": "forest"},
                {"id": "mine", "description": "Abandoned"},
            ]
        },
    )

    locations = LocalLocationRepository(base_path=path).load_locations()

    assert [loc.id for loc in locations] == ["village", "forest", "mine"]
    assert locations[0].display_name == "Village"
    assert locations[0].connections == (
        Connection("forest", 100, True),
        Connection("mine", 40, False),
    )
    assert locations[1].connections == ()
    assert locations[2].description == "Abandoned"


def test_bidirectional_connection_is_mirrored(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        {
            "locations": [
                {
                    "id": "A",
                    "connections": [
                        {"destination_id": "B", "cost": 5, "bidirectional": True},
                        {"destination_id": "C", "cost": 7, "bidirectional": True},
                    ],
                },
                {"id": "B"},
                # C declares its own way back, which wins.
                {"id": "C", "connections": [{"destination_id": "A", "cost": 9}]},
            ]
        },
    )

    locations = {loc.id: loc for loc in LocalLocationRepository(path).load_locations()}

    assert locations["B"].connections == (Connection("A", 5),)
    assert locations["C"].connections == (Connection("A", 9),)


def test_reads_path_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path, {"locations": [{"id": "solo"}]})
    monkeypatch.setenv("LOCATIONS_PATH", str(path))

    locations = LocalLocationRepository().load_locations()

    assert [loc.id for loc in locations] == ["solo"]


@pytest.mark.parametrize(
    "document",
    [
        [],
        {"locations": {}},
        {"locations": [{"display_name": "no id"}]},
        {"locations": [{"id": "A", "connections": [{"cost": 1}]}]},
        {"locations": [{"id": "A", "connections": [{"destination_id": "B", "cost": "5"}]}]},
        {"locations": [{"id": "A", "connections": [{"destination_id": "B", "cost": True}]}]},
        {"locations": [{"id": "A", "connections": [{"destination_id": "B", "cost": 5, "available": "false"}]}]},
        {"locations": [{"id": "A", "connections": [{"destination_id": "B", "cost": 5, "available": 0}]}]},
    ],
)
def test_malformed_documents_raise(tmp_path: Path, document: object) -> None:
    path = _write(tmp_path, document)

    with pytest.raises(GraphDataError):
        LocalLocationRepository(base_path=path).load_locations()


def test_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "locations.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(GraphDataError):
        LocalLocationRepository(base_path=path).load_locations()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        LocalLocationRepository(base_path=tmp_path / "missing.json").load_locations()
