"""Mini README: Load mission inputs from JSON files or request payloads.

Structure:
    * MissionDataError - raised for unreadable or malformed mission input.
    * *Schema models - Pydantic models mirroring the order feed's JSON.
    * MissionData - the domain objects a planning run needs.
    * mission_from_payload / load_mission_directory - entry points.

A mission directory holds ``centralArea.json``, ``noFlyZones.json``,
``restaurants.json`` and ``orders.json`` in the shapes served by the order
feed. Regions are converted eagerly so a polygon with fewer than three
vertices fails here rather than deep inside the route search.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from ..deliveries import Order, OrderStatus, Pizza, Restaurant
from ..geometry import Coordinate, NamedRegion
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MISSION_FILES = {
    "centralArea": "centralArea.json",
    "noFlyZones": "noFlyZones.json",
    "restaurants": "restaurants.json",
    "orders": "orders.json",
}


class MissionDataError(ValueError):
    """Raised when mission input cannot be read or parsed."""


class LngLatSchema(BaseModel):
    lng: float
    lat: float

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.lng, self.lat)


class NamedRegionSchema(BaseModel):
    name: str
    vertices: List[LngLatSchema]

    def to_region(self) -> NamedRegion:
        return NamedRegion(self.name, tuple(vertex.to_coordinate() for vertex in self.vertices))


class PizzaSchema(BaseModel):
    name: str
    price_in_pence: int = Field(0, alias="priceInPence")

    class Config:
        populate_by_name = True

    def to_pizza(self) -> Pizza:
        return Pizza(self.name, self.price_in_pence)


class RestaurantSchema(BaseModel):
    name: str
    location: LngLatSchema
    opening_days: List[str] = Field(default_factory=list, alias="openingDays")
    menu: List[PizzaSchema] = Field(default_factory=list)

    class Config:
        populate_by_name = True

    def to_restaurant(self) -> Restaurant:
        return Restaurant(
            name=self.name,
            location=self.location.to_coordinate(),
            menu=tuple(pizza.to_pizza() for pizza in self.menu),
            opening_days=tuple(self.opening_days),
        )


class OrderSchema(BaseModel):
    order_no: str = Field(..., alias="orderNo")
    order_date: Optional[date] = Field(None, alias="orderDate")
    order_status: OrderStatus = Field(OrderStatus.VALID_BUT_NOT_DELIVERED, alias="orderStatus")
    order_validation_code: str = Field("NO_ERROR", alias="orderValidationCode")
    price_total_in_pence: int = Field(0, alias="priceTotalInPence")
    pizzas_in_order: List[PizzaSchema] = Field(default_factory=list, alias="pizzasInOrder")

    class Config:
        populate_by_name = True

    def to_order(self) -> Order:
        return Order(
            order_no=self.order_no,
            pizzas=tuple(pizza.to_pizza() for pizza in self.pizzas_in_order),
            order_date=self.order_date,
            status=self.order_status,
            validation_code=self.order_validation_code,
            price_total_in_pence=self.price_total_in_pence,
        )


class MissionPayload(BaseModel):
    """Complete planning input as a single JSON document."""

    central_area: NamedRegionSchema = Field(..., alias="centralArea")
    no_fly_zones: List[NamedRegionSchema] = Field(default_factory=list, alias="noFlyZones")
    restaurants: List[RestaurantSchema]
    orders: List[OrderSchema] = Field(default_factory=list)

    class Config:
        populate_by_name = True


@dataclass(slots=True)
class MissionData:
    """Domain objects for one planning run."""

    central_area: NamedRegion
    no_fly_zones: List[NamedRegion]
    restaurants: List[Restaurant]
    orders: List[Order]

    @property
    def routable_orders(self) -> List[Order]:
        """Orders the external validator accepted."""

        return [order for order in self.orders if order.is_valid]


def mission_from_payload(payload: MissionPayload) -> MissionData:
    """Convert a validated payload into domain objects."""

    mission = MissionData(
        central_area=payload.central_area.to_region(),
        no_fly_zones=[zone.to_region() for zone in payload.no_fly_zones],
        restaurants=[restaurant.to_restaurant() for restaurant in payload.restaurants],
        orders=[order.to_order() for order in payload.orders],
    )
    LOGGER.info(
        "Loaded mission with %s no-fly zones, %s restaurants and %s orders (%s routable)",
        len(mission.no_fly_zones),
        len(mission.restaurants),
        len(mission.orders),
        len(mission.routable_orders),
    )
    return mission


def load_mission_directory(directory: Path) -> MissionData:
    """Read the four mission files from ``directory``."""

    raw = {}
    for key, filename in MISSION_FILES.items():
        path = directory / filename
        try:
            raw[key] = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as error:
            raise MissionDataError(f"Mission file is missing: {path}") from error
        except json.JSONDecodeError as error:
            raise MissionDataError(f"Mission file {path} is invalid JSON") from error
    LOGGER.debug("Read mission files from %s", directory)

    try:
        payload = MissionPayload.model_validate(raw)
    except ValidationError as error:
        raise MissionDataError(f"Mission data in {directory} is malformed: {error}") from error
    return mission_from_payload(payload)
