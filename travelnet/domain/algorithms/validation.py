from __future__ import annotations

from collections import Counter
from typing import Iterable

from travelnet.domain.models import Location


def validate_locations(locations: Iterable[Location]) -> list[str]:
    """Integrity issues in a set of location definitions.

    Returns human-readable messages; an empty list means the data is usable
    as-is. Problems found here do not stop routing (bad connections are
    simply never traversed) but usually point at an authoring mistake.
    """

    items = list(locations)
    issues: list[str] = []

    counts = Counter(loc.id for loc in items if loc.id)
    for loc_id, n in sorted(counts.items()):
        if n > 1:
            issues.append(f"Duplicate location id: '{loc_id}' ({n} definitions)")

    for loc in items:
        if not loc.id:
            issues.append(f"Location '{loc.name or '?'}' has an empty id")

    known = set(counts)
    for loc in items:
        if not loc.id:
            continue
        for conn in loc.connections:
            if not conn.destination_id:
                issues.append(f"'{loc.id}' has a connection with an empty destination")
            elif conn.destination_id not in known:
                issues.append(
                    f"'{loc.id}' connects to missing location '{conn.destination_id}'"
                )

            if conn.cost <= 0:
                issues.append(
                    f"'{loc.id}' has invalid cost ({conn.cost}) to '{conn.destination_id}'"
                )

        per_destination = Counter(
            c.destination_id for c in loc.connections if c.destination_id
        )
        for destination_id, n in sorted(per_destination.items()):
            if n > 1:
                issues.append(f"'{loc.id}' has {n} connections to '{destination_id}'")

    return issues
