from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from travelnet.app.ports.output import ILocationRepository
from travelnet.domain.exceptions import GraphDataError
from travelnet.domain.models import Connection, Location


def _parse_cost(raw: Any, *, location_id: str) -> int:
    # bool is an int subclass; "cost": true is an authoring error.
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise GraphDataError(
            f"Location '{location_id}': connection cost must be an integer, got {raw!r}"
        )
    return raw


def _parse_available(raw: Any, *, location_id: str) -> bool:
    if raw is None:
        return True
    if not isinstance(raw, bool):
        raise GraphDataError(
            f"Location '{location_id}': connection available must be true or false, got {raw!r}"
        )
    return raw


def _parse_connection(raw: Any, *, location_id: str) -> tuple[Connection, bool]:
    if not isinstance(raw, Mapping):
        raise GraphDataError(f"Location '{location_id}': connection must be an object")

    destination_id = raw.get("destination_id", raw.get("destinationId"))
    if not isinstance(destination_id, str):
        raise GraphDataError(
            f"Location '{location_id}': connection is missing destination_id"
        )

    connection = Connection(
        destination_id=destination_id.strip(),
        cost=_parse_cost(raw.get("cost"), location_id=location_id),
        available=_parse_available(raw.get("available"), location_id=location_id),
        requirements=(str(raw.get("requirements") or "").strip() or None),
    )
    return connection, bool(raw.get("bidirectional", False))


@dataclass(slots=True)
class LocalLocationRepository(ILocationRepository):
    """Loads location definitions from a JSON file.

    Format:
        {"locations": [{"id": "village", "display_name": "Village",
                        "connections": [{"destination_id": "forest", "cost": 100,
                                         "available": true, "bidirectional": true}]}]}

    `destinationId` is accepted for `destination_id`. A bidirectional
    connection also adds the mirrored connection on its destination unless
    that location declares its own.

    Env vars:
      - LOCATIONS_PATH: path to the JSON file (default: data/locations.json)
    """

    base_path: str | Path | None = None

    def _path(self) -> Path:
        value = self.base_path or os.getenv("LOCATIONS_PATH") or "data/locations.json"
        return Path(value)

    def load_locations(self) -> tuple[Location, ...]:
        path = self._path()
        with path.open("r", encoding="utf-8") as fp:
            try:
                document = json.load(fp)
            except json.JSONDecodeError as exc:
                raise GraphDataError(f"Invalid JSON in {path}: {exc}") from exc

        records = document.get("locations") if isinstance(document, Mapping) else None
        if not isinstance(records, list):
            raise GraphDataError(f"{path}: expected an object with a 'locations' list")

        parsed: list[tuple[str, dict[str, Any], list[Connection]]] = []
        mirrored: dict[str, list[Connection]] = {}

        for index, record in enumerate(records):
            if not isinstance(record, Mapping):
                raise GraphDataError(f"{path}: location #{index} must be an object")

            location_id = str(record.get("id") or "").strip()
            if not location_id:
                raise GraphDataError(f"{path}: location #{index} has no id")

            connections: list[Connection] = []
            for raw_conn in record.get("connections") or ():
                conn, bidirectional = _parse_connection(raw_conn, location_id=location_id)
                connections.append(conn)
                if bidirectional:
                    mirrored.setdefault(conn.destination_id, []).append(
                        Connection(
                            destination_id=location_id,
                            cost=conn.cost,
                            available=conn.available,
                            requirements=conn.requirements,
                        )
                    )

            meta = {
                "display_name": (str(record.get("display_name") or "").strip() or None),
                "description": (str(record.get("description") or "").strip() or None),
            }
            parsed.append((location_id, meta, connections))

        locations: list[Location] = []
        for location_id, meta, connections in parsed:
            declared = {c.destination_id for c in connections}
            for extra in mirrored.get(location_id, ()):
                if extra.destination_id not in declared:
                    connections.append(extra)
                    declared.add(extra.destination_id)

            locations.append(
                Location(id=location_id, connections=tuple(connections), **meta)
            )

        return tuple(locations)
