"""Mini README: Route planning subsystem for delivery missions.

Exports the geofence policy, the A* pathfinder and the mission assembler
that turns validated orders into a single flight path. Callers usually only
need ``MissionAssembler``; the lower layers are exposed for testing and for
planning individual legs.
"""

from .assembler import (
    APPLETON_TOWER,
    DeliveryRecord,
    MissionAssembler,
    MissionPlan,
    RestaurantResolutionError,
    resolve_restaurant,
    reverse_path,
)
from .geofence import GeofencePolicy, crosses_no_fly_zone, exits_central_area_illegally
from .nodes import FlightPathNode, ticks_since_start
from .pathfinder import BRANCHING_LADDER, Pathfinder, SearchAttempt, SearchOutcome

__all__ = [
    "APPLETON_TOWER",
    "BRANCHING_LADDER",
    "DeliveryRecord",
    "FlightPathNode",
    "GeofencePolicy",
    "MissionAssembler",
    "MissionPlan",
    "Pathfinder",
    "RestaurantResolutionError",
    "SearchAttempt",
    "SearchOutcome",
    "crosses_no_fly_zone",
    "exits_central_area_illegally",
    "resolve_restaurant",
    "reverse_path",
    "ticks_since_start",
]
