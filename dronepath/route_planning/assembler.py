"""Mini README: Assemble per-order round trips into one mission path.

Structure:
    * APPLETON_TOWER - the base every drone returns to.
    * RestaurantResolutionError - raised when an order maps to no restaurant.
    * resolve_restaurant - find the restaurant serving an order.
    * reverse_path - turn an outbound route into its return leg.
    * DeliveryRecord / MissionPlan - explicit planning results per order.
    * MissionAssembler - caches one route per restaurant and stitches the
      round trips together.

Every order flies base -> restaurant, hovers, flies restaurant -> base and
hovers again. Only the restaurant -> base leg is searched; the outbound
trip from base is that leg reversed. Routes are cached per restaurant for
the lifetime of the assembler, and cached nodes are copied, never changed,
when replayed for another order.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..deliveries import DeliveryOutcome, Order, Restaurant
from ..geometry import Coordinate, NamedRegion
from ..logging_utils import get_logger
from .geofence import GeofencePolicy
from .nodes import FlightPathNode
from .pathfinder import BRANCHING_LADDER, Pathfinder

LOGGER = get_logger(__name__)

APPLETON_TOWER = Coordinate(-3.186874, 55.944494)
DEFAULT_PLANNING_BUDGET_MS = 20_000


class RestaurantResolutionError(LookupError):
    """Raised when an order cannot be matched to a restaurant."""


def resolve_restaurant(order: Order, restaurants: Iterable[Restaurant]) -> Restaurant:
    """Return the first restaurant whose menu lists the order's first pizza."""

    if not order.pizzas:
        raise RestaurantResolutionError(f"Order {order.order_no} contains no pizzas")
    pizza_name = order.pizzas[0].name
    for restaurant in restaurants:
        if restaurant.serves(pizza_name):
            return restaurant
    raise RestaurantResolutionError(
        f"No restaurant serves '{pizza_name}' for order {order.order_no}"
    )


def reverse_path(path: Sequence[FlightPathNode]) -> List[FlightPathNode]:
    """Return the path flown backwards with fresh ticks."""

    return [node.reversed() for node in reversed(path)]


@dataclass(slots=True)
class DeliveryRecord:
    """Planning result for a single order."""

    order: Order
    outcome: DeliveryOutcome
    path: List[FlightPathNode] = field(default_factory=list)


@dataclass(slots=True)
class MissionPlan:
    """All delivery records plus the concatenated mission path."""

    deliveries: List[DeliveryRecord]
    flight_path: List[FlightPathNode]

    @property
    def delivered(self) -> List[Order]:
        return [record.order for record in self.deliveries if record.outcome is DeliveryOutcome.DELIVERED]

    @property
    def undelivered(self) -> List[Order]:
        return [
            record.order
            for record in self.deliveries
            if record.outcome is DeliveryOutcome.VALID_BUT_NOT_DELIVERED
        ]


class MissionAssembler:
    """Plan round trips for validated orders, searching each restaurant once."""

    def __init__(
        self,
        central_area: NamedRegion,
        no_fly_zones: Sequence[NamedRegion],
        restaurants: Sequence[Restaurant],
        *,
        base: Coordinate = APPLETON_TOWER,
        planning_budget_ms: float = DEFAULT_PLANNING_BUDGET_MS,
        ladder: Sequence[int] = BRANCHING_LADDER,
        clock: Callable[[], float] = time.monotonic,
        pathfinder: Optional[Pathfinder] = None,
    ) -> None:
        if not restaurants:
            raise ValueError("At least one restaurant is required to plan deliveries")
        self.restaurants = tuple(restaurants)
        self.base = base
        time_budget_seconds = planning_budget_ms / len(self.restaurants) / 1000.0
        self.pathfinder = pathfinder or Pathfinder(
            GeofencePolicy(central_area, no_fly_zones),
            time_budget_seconds=time_budget_seconds,
            ladder=ladder,
            clock=clock,
        )
        self._cache: Dict[Restaurant, List[FlightPathNode]] = {}
        LOGGER.debug(
            "Initialised MissionAssembler for %s restaurants with %.3fs per search",
            len(self.restaurants),
            time_budget_seconds,
        )

    def route_for(self, order: Order) -> List[FlightPathNode]:
        """Return the restaurant -> base route bound to ``order``."""

        restaurant = resolve_restaurant(order, self.restaurants)
        cached = self._cache.get(restaurant)
        if cached is None:
            LOGGER.debug("Cache miss for restaurant '%s'; searching", restaurant.name)
            cached = self.pathfinder.search(restaurant.location, self.base)
            self._cache[restaurant] = cached
        else:
            LOGGER.debug("Cache hit for restaurant '%s'", restaurant.name)
        return [node.for_order(order.order_no) for node in cached]

    def full_round_trip(self, order: Order) -> List[FlightPathNode]:
        """Base -> restaurant, hover, restaurant -> base, hover. Empty if unreachable."""

        to_base = self.route_for(order)
        if not to_base:
            return []
        to_restaurant = reverse_path(to_base)
        at_restaurant = FlightPathNode.hover(order.order_no, to_base[0].from_coordinate)
        # Re-stamped so ticks follow path order.
        home = [node.for_order(order.order_no) for node in to_base]
        return [
            *to_restaurant,
            at_restaurant,
            *home,
            FlightPathNode.hover(order.order_no, to_base[-1].to_coordinate),
        ]

    def generate_full_path(self, orders: Iterable[Order]) -> MissionPlan:
        """Plan every order in sequence and concatenate the delivered round trips."""

        deliveries: List[DeliveryRecord] = []
        flight_path: List[FlightPathNode] = []
        for order in orders:
            round_trip = self.full_round_trip(order)
            if round_trip:
                deliveries.append(DeliveryRecord(order, DeliveryOutcome.DELIVERED, round_trip))
                flight_path.extend(round_trip)
            else:
                LOGGER.warning("Order %s could not be routed; leaving undelivered", order.order_no)
                deliveries.append(DeliveryRecord(order, DeliveryOutcome.VALID_BUT_NOT_DELIVERED))
        LOGGER.info(
            "Generated flight path for %s of %s orders (%s nodes)",
            sum(1 for record in deliveries if record.outcome is DeliveryOutcome.DELIVERED),
            len(deliveries),
            len(flight_path),
        )
        return MissionPlan(deliveries=deliveries, flight_path=flight_path)
