"""Mini README: Mission input helpers for Dronepath.

Convenience exports for reading planning inputs from a directory of JSON
files or from a single request payload.
"""

from .mission_loader import (
    MissionData,
    MissionDataError,
    MissionPayload,
    load_mission_directory,
    mission_from_payload,
)

__all__ = [
    "MissionData",
    "MissionDataError",
    "MissionPayload",
    "load_mission_directory",
    "mission_from_payload",
]
