"""Mini README: Planar geometry primitives for drone route planning.

Re-exports the coordinate model, the move variants and the polygon tests so
planning modules can import everything from ``dronepath.geometry``.
"""

from .coordinates import (
    DRONE_IS_CLOSE_DISTANCE,
    DRONE_MOVE_DISTANCE,
    HOVER,
    HOVER_WIRE_ANGLE,
    Coordinate,
    Hover,
    Move,
    Travel,
    distance,
    is_close,
    step,
)
from .regions import (
    NamedRegion,
    RegionConfigurationError,
    contains_point,
    point_on_segment,
    segments_intersect,
)

__all__ = [
    "Coordinate",
    "DRONE_IS_CLOSE_DISTANCE",
    "DRONE_MOVE_DISTANCE",
    "HOVER",
    "HOVER_WIRE_ANGLE",
    "Hover",
    "Move",
    "NamedRegion",
    "RegionConfigurationError",
    "Travel",
    "contains_point",
    "distance",
    "is_close",
    "point_on_segment",
    "segments_intersect",
    "step",
]
