"""Mini README: Coordinates, headings and stepping for the delivery drone.

Structure:
    * Coordinate - immutable (longitude, latitude) pair hashed by exact value.
    * Travel / Hover - the two kinds of move a flight path node can record.
    * distance, is_close, step - pure helpers the route search is built on.

All positions live in a flat longitude/latitude plane; distances are plain
Euclidean norms in degrees. ``step`` must stay deterministic because the
route cache and the search's visited bookkeeping key on its exact output.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

DRONE_MOVE_DISTANCE = 0.00015
DRONE_IS_CLOSE_DISTANCE = 0.00015
HOVER_WIRE_ANGLE = 999.0
# Decimal places kept by step(); positions reached by the same moves in a
# different order must land on the same key.
COORDINATE_PRECISION = 12


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A position expressed as longitude and latitude in degrees."""

    lng: float
    lat: float

    def as_pair(self) -> list[float]:
        """Return ``[lng, lat]`` in GeoJSON axis order."""

        return [self.lng, self.lat]


@dataclass(frozen=True, slots=True)
class Travel:
    """Move a fixed distance at a compass heading (0 = east, counter-clockwise)."""

    degrees: float

    def reversed(self) -> "Travel":
        return Travel((self.degrees + 180.0) % 360.0)

    @property
    def wire_angle(self) -> float:
        return self.degrees


@dataclass(frozen=True, slots=True)
class Hover:
    """Hold position for one move."""

    def reversed(self) -> "Hover":
        return self

    @property
    def wire_angle(self) -> float:
        return HOVER_WIRE_ANGLE


HOVER = Hover()
Move = Union[Travel, Hover]


def distance(start: Coordinate, end: Coordinate) -> float:
    """Euclidean distance between two coordinates."""

    return math.hypot(end.lng - start.lng, end.lat - start.lat)


def is_close(start: Coordinate, other: Coordinate) -> bool:
    """Return True when the drone at ``start`` counts as having reached ``other``."""

    return distance(start, other) <= DRONE_IS_CLOSE_DISTANCE


def step(start: Coordinate, move: Move) -> Coordinate:
    """Return the coordinate reached by applying ``move`` at ``start``."""

    if isinstance(move, Hover):
        return start
    radians = math.radians(move.degrees)
    return Coordinate(
        round(start.lng + math.cos(radians) * DRONE_MOVE_DISTANCE, COORDINATE_PRECISION),
        round(start.lat + math.sin(radians) * DRONE_MOVE_DISTANCE, COORDINATE_PRECISION),
    )
