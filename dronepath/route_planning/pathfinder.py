"""Mini README: A* route search over fixed-length drone moves.

Structure:
    * BRANCHING_LADDER - heading resolutions tried in order (16, 8, 4).
    * SearchOutcome / SearchAttempt - bookkeeping for each search attempt.
    * Pathfinder - finds a shortest sequence of legal moves from a start to
      within ``DRONE_IS_CLOSE_DISTANCE`` of a goal.

The graph is implicit: every coordinate has ``k`` neighbours, one per
heading ``i * 360 / k``, each ``DRONE_MOVE_DISTANCE`` away. Moves rejected by
the ``GeofencePolicy`` are dropped. The heuristic is the straight-line
distance to the goal, which never overestimates because every edge costs
exactly its own length.

Each attempt runs against the same wall-clock budget. When an attempt runs
out of time the search restarts with the next, coarser heading resolution.
Once the ladder is exhausted the search gives up and returns an empty path.
An attempt that empties its frontier has proven the goal unreachable and
returns an empty path straight away. Frontier ties are broken by insertion
order so results are reproducible.
"""

from __future__ import annotations

import heapq
import itertools
import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Sequence, Tuple

from ..geometry import Coordinate, Travel, distance, is_close, step
from ..logging_utils import get_logger
from .geofence import GeofencePolicy
from .nodes import FlightPathNode

LOGGER = get_logger(__name__)

BRANCHING_LADDER: Tuple[int, ...] = (16, 8, 4)


class SearchOutcome(str, Enum):
    """How a single search attempt ended."""

    FOUND = "found"
    EXHAUSTED = "exhausted"
    TIMED_OUT = "timed_out"


@dataclass(slots=True)
class SearchAttempt:
    """Summary of one attempt at a given heading resolution."""

    branching_factor: int
    outcome: SearchOutcome
    expansions: int


class Pathfinder:
    """A* search constrained by a geofence and a per-attempt time budget."""

    def __init__(
        self,
        policy: GeofencePolicy,
        *,
        time_budget_seconds: float,
        ladder: Sequence[int] = BRANCHING_LADDER,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not ladder:
            raise ValueError("At least one branching factor is required")
        self.policy = policy
        self.time_budget_seconds = time_budget_seconds
        self.ladder = tuple(ladder)
        self._clock = clock
        self.attempts: List[SearchAttempt] = []
        LOGGER.debug(
            "Initialised Pathfinder with budget=%.3fs ladder=%s",
            time_budget_seconds,
            self.ladder,
        )

    def search(self, start: Coordinate, goal: Coordinate) -> List[FlightPathNode]:
        """Return the moves from ``start`` to near ``goal``, or ``[]`` if none were found."""

        self.attempts = []
        if is_close(start, goal):
            LOGGER.debug("Start %s is already close to goal %s", start, goal)
            return [FlightPathNode.hover(None, start)]

        for branching_factor in self.ladder:
            path, attempt = self._attempt(start, goal, branching_factor)
            self.attempts.append(attempt)
            LOGGER.debug(
                "Search with k=%s ended %s after %s expansions",
                branching_factor,
                attempt.outcome.value,
                attempt.expansions,
            )
            if attempt.outcome is SearchOutcome.FOUND:
                return path
            if attempt.outcome is SearchOutcome.EXHAUSTED:
                LOGGER.warning("No route exists from %s to %s", start, goal)
                return []
            LOGGER.warning(
                "Search with k=%s exceeded %.3fs; degrading heading resolution",
                branching_factor,
                self.time_budget_seconds,
            )

        LOGGER.warning("Gave up routing %s to %s after %s attempts", start, goal, len(self.attempts))
        return []

    def _attempt(
        self, start: Coordinate, goal: Coordinate, branching_factor: int
    ) -> Tuple[List[FlightPathNode], SearchAttempt]:
        started = self._clock()
        came_from: Dict[Coordinate, FlightPathNode] = {}
        g_score: Dict[Coordinate, float] = {start: 0.0}
        f_score: Dict[Coordinate, float] = {start: distance(start, goal)}
        order = itertools.count()
        frontier = [(f_score[start], next(order), start)]
        moves = [Travel(index * 360.0 / branching_factor) for index in range(branching_factor)]
        expansions = 0

        while frontier:
            if self._clock() - started > self.time_budget_seconds:
                return [], SearchAttempt(branching_factor, SearchOutcome.TIMED_OUT, expansions)

            estimate, _, current = heapq.heappop(frontier)
            if estimate > f_score[current]:
                continue  # stale entry
            if is_close(current, goal):
                path = _reconstruct_path(came_from, current)
                return path, SearchAttempt(branching_factor, SearchOutcome.FOUND, expansions)

            expansions += 1
            current_g = g_score[current]
            for move in moves:
                neighbour = step(current, move)
                if not self.policy.is_legal_move(current, neighbour):
                    continue
                tentative = current_g + distance(current, neighbour)
                if tentative < g_score.get(neighbour, math.inf):
                    came_from[neighbour] = FlightPathNode(None, current, move, neighbour)
                    g_score[neighbour] = tentative
                    f_score[neighbour] = tentative + distance(neighbour, goal)
                    heapq.heappush(frontier, (f_score[neighbour], next(order), neighbour))

        return [], SearchAttempt(branching_factor, SearchOutcome.EXHAUSTED, expansions)


def _reconstruct_path(came_from: Dict[Coordinate, FlightPathNode], current: Coordinate) -> List[FlightPathNode]:
    """Walk predecessor links back to the start and return them in flying order."""

    path: List[FlightPathNode] = []
    node = came_from.get(current)
    while node is not None:
        path.append(node)
        node = came_from.get(node.from_coordinate)
    path.reverse()
    return path
