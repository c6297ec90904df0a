"""Mini README: Delivery domain records consumed by the mission planner.

Structure:
    * Pizza - menu entry with a price in pence.
    * Restaurant - pickup location and the menu used to match orders to it.
    * OrderStatus - lifecycle labels shared with the external validator.
    * DeliveryOutcome - what planning decided for a valid order.
    * Order - an order as handed over by the validator.

Orders arrive already validated and are treated as read-only. Planning
reports whether each one was delivered through ``DeliveryOutcome`` instead
of rewriting the order.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Tuple

from ..geometry import Coordinate


class OrderStatus(str, Enum):
    """Order lifecycle labels as used by the order feed."""

    UNDEFINED = "UNDEFINED"
    INVALID = "INVALID"
    VALID_BUT_NOT_DELIVERED = "VALID_BUT_NOT_DELIVERED"
    DELIVERED = "DELIVERED"


class DeliveryOutcome(str, Enum):
    """Result of planning a valid order."""

    DELIVERED = "DELIVERED"
    VALID_BUT_NOT_DELIVERED = "VALID_BUT_NOT_DELIVERED"

    @property
    def order_status(self) -> OrderStatus:
        return OrderStatus(self.value)


@dataclass(frozen=True, slots=True)
class Pizza:
    name: str
    price_in_pence: int = 0


@dataclass(frozen=True, slots=True)
class Restaurant:
    """A restaurant drones collect from."""

    name: str
    location: Coordinate
    menu: Tuple[Pizza, ...] = ()
    opening_days: Tuple[str, ...] = ()

    def serves(self, pizza_name: str) -> bool:
        return any(pizza.name == pizza_name for pizza in self.menu)


@dataclass(frozen=True, slots=True)
class Order:
    """A customer order. Only validated orders are routed."""

    order_no: str
    pizzas: Tuple[Pizza, ...]
    order_date: Optional[date] = None
    status: OrderStatus = OrderStatus.VALID_BUT_NOT_DELIVERED
    validation_code: str = "NO_ERROR"
    price_total_in_pence: int = 0

    @property
    def is_valid(self) -> bool:
        return self.status is OrderStatus.VALID_BUT_NOT_DELIVERED
