"""Mini README: Airspace rules applied to every candidate move.

Structure:
    * GeofencePolicy - holds the central area and no-fly zones and answers
      whether a move is legal.

A move is illegal if it touches any no-fly zone edge, or if it leaves the
central area after the drone has already entered it.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..geometry import Coordinate, NamedRegion, contains_point, segments_intersect


def crosses_no_fly_zone(start: Coordinate, end: Coordinate, zones: Iterable[NamedRegion]) -> bool:
    """Return True if the segment ``start -> end`` meets an edge of any zone."""

    for zone in zones:
        if not zone.may_touch(start, end):
            continue
        for vertex_a, vertex_b in zone.edges():
            if segments_intersect(start, end, vertex_a, vertex_b):
                return True
    return False


def exits_central_area_illegally(start: Coordinate, end: Coordinate, central_area: NamedRegion) -> bool:
    """Return True if the move starts inside the central area and ends outside it."""

    return contains_point(central_area, start) and not contains_point(central_area, end)


class GeofencePolicy:
    """Legality checks for moves through the city airspace."""

    def __init__(
        self,
        central_area: NamedRegion,
        no_fly_zones: Optional[Sequence[NamedRegion]] = None,
    ) -> None:
        self.central_area = central_area
        self.no_fly_zones = tuple(no_fly_zones or ())

    def is_legal_move(self, start: Coordinate, end: Coordinate) -> bool:
        return not (
            crosses_no_fly_zone(start, end, self.no_fly_zones)
            or exits_central_area_illegally(start, end, self.central_area)
        )
