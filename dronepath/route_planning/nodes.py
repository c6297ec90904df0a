"""Mini README: Flight path node records.

Structure:
    * ticks_since_start - nanosecond counter relative to module import.
    * FlightPathNode - immutable record of one drone move.

Nodes are never mutated. Re-using a cached route for another order, or
turning a route around for the return leg, produces fresh copies carrying a
new tick. The tick is excluded from equality so two nodes describing the
same move compare equal regardless of when they were produced.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from typing import Optional

from ..geometry import HOVER, Coordinate, Hover, Move

_PROCESS_START_NS = time.perf_counter_ns()


def ticks_since_start() -> int:
    """Nanoseconds elapsed since the planner was first imported."""

    return time.perf_counter_ns() - _PROCESS_START_NS


@dataclass(frozen=True, slots=True)
class FlightPathNode:
    """One move of the drone from ``from_coordinate`` to ``to_coordinate``."""

    order_no: Optional[str]
    from_coordinate: Coordinate
    move: Move
    to_coordinate: Coordinate
    tick: int = field(default_factory=ticks_since_start, compare=False)

    @classmethod
    def hover(cls, order_no: Optional[str], position: Coordinate) -> "FlightPathNode":
        """Build a zero-displacement node holding ``position``."""

        return cls(order_no, position, HOVER, position)

    @property
    def is_hover(self) -> bool:
        return isinstance(self.move, Hover)

    def for_order(self, order_no: str) -> "FlightPathNode":
        """Copy of this node bound to ``order_no`` with a fresh tick."""

        return replace(self, order_no=order_no, tick=ticks_since_start())

    def reversed(self) -> "FlightPathNode":
        """The same move flown backwards: endpoints swapped, heading turned 180 degrees."""

        return FlightPathNode(
            self.order_no,
            self.to_coordinate,
            self.move.reversed(),
            self.from_coordinate,
        )
