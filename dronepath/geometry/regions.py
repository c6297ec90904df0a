"""Mini README: Named polygon regions and the segment tests built on them.

Structure:
    * RegionConfigurationError - raised for polygons that cannot form a ring.
    * NamedRegion - a named, implicitly closed ring of vertices.
    * point_on_segment / segments_intersect - exact orientation based tests.
    * contains_point - point-in-polygon that counts the boundary as inside.

Boundary inclusion is the chosen semantic for every region: a coordinate on
an edge or vertex of a no-fly zone is inside it, and a move that touches an
edge crosses it. The routines never raise for degenerate input; zero-length
segments and repeated vertices fall out of the orientation arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple

from .coordinates import Coordinate


class RegionConfigurationError(ValueError):
    """Raised when a region is built from too few vertices."""


@dataclass(frozen=True, slots=True)
class NamedRegion:
    """Polygon with a display name. The last vertex joins back to the first."""

    name: str
    vertices: Tuple[Coordinate, ...]
    bounds: Tuple[float, float, float, float] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        if len(vertices) < 3:
            raise RegionConfigurationError(
                f"Region '{self.name}' needs at least 3 vertices, got {len(vertices)}"
            )
        object.__setattr__(self, "vertices", vertices)
        lngs = [vertex.lng for vertex in vertices]
        lats = [vertex.lat for vertex in vertices]
        object.__setattr__(self, "bounds", (min(lngs), min(lats), max(lngs), max(lats)))

    def edges(self) -> Iterator[Tuple[Coordinate, Coordinate]]:
        """Yield each edge of the ring, including the closing edge."""

        count = len(self.vertices)
        for index in range(count):
            yield self.vertices[index], self.vertices[(index + 1) % count]

    def may_touch(self, start: Coordinate, end: Coordinate) -> bool:
        """Cheap bounding-box overlap test for the segment ``start -> end``."""

        lng_min, lat_min, lng_max, lat_max = self.bounds
        return not (
            max(start.lng, end.lng) < lng_min
            or min(start.lng, end.lng) > lng_max
            or max(start.lat, end.lat) < lat_min
            or min(start.lat, end.lat) > lat_max
        )


def _orientation(a: Coordinate, b: Coordinate, c: Coordinate) -> int:
    """Sign of the turn a -> b -> c: 1 counter-clockwise, -1 clockwise, 0 collinear."""

    cross = (b.lng - a.lng) * (c.lat - a.lat) - (b.lat - a.lat) * (c.lng - a.lng)
    if cross > 0:
        return 1
    if cross < 0:
        return -1
    return 0


def _within_box(a: Coordinate, b: Coordinate, point: Coordinate) -> bool:
    return (
        min(a.lng, b.lng) <= point.lng <= max(a.lng, b.lng)
        and min(a.lat, b.lat) <= point.lat <= max(a.lat, b.lat)
    )


def point_on_segment(point: Coordinate, a: Coordinate, b: Coordinate) -> bool:
    """Return True if ``point`` lies on the closed segment ``a -> b``."""

    return _orientation(a, b, point) == 0 and _within_box(a, b, point)


def segments_intersect(p1: Coordinate, p2: Coordinate, p3: Coordinate, p4: Coordinate) -> bool:
    """Return True if segment ``p1 -> p2`` meets segment ``p3 -> p4``.

    Touching endpoints and collinear overlap both count as intersecting, as do
    zero-length segments that sit on the other segment.
    """

    d1 = _orientation(p3, p4, p1)
    d2 = _orientation(p3, p4, p2)
    d3 = _orientation(p1, p2, p3)
    d4 = _orientation(p1, p2, p4)

    if d1 * d2 < 0 and d3 * d4 < 0:
        return True

    if d1 == 0 and _within_box(p3, p4, p1):
        return True
    if d2 == 0 and _within_box(p3, p4, p2):
        return True
    if d3 == 0 and _within_box(p1, p2, p3):
        return True
    if d4 == 0 and _within_box(p1, p2, p4):
        return True
    return False


def contains_point(region: NamedRegion, point: Coordinate) -> bool:
    """Return True if ``point`` is inside ``region`` or on its boundary."""

    lng_min, lat_min, lng_max, lat_max = region.bounds
    if not (lng_min <= point.lng <= lng_max and lat_min <= point.lat <= lat_max):
        return False

    inside = False
    for start, end in region.edges():
        if point_on_segment(point, start, end):
            return True
        # Crossing number: count edges straddling the horizontal ray to the east.
        if (start.lat > point.lat) != (end.lat > point.lat):
            crossing_lng = start.lng + (point.lat - start.lat) * (end.lng - start.lng) / (end.lat - start.lat)
            if point.lng < crossing_lng:
                inside = not inside
    return inside

