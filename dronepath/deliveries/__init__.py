"""Mini README: Delivery domain package.

Exports the restaurant, pizza and order records along with the status
enumerations shared by the loader, planner and exporters.
"""

from .models import DeliveryOutcome, Order, OrderStatus, Pizza, Restaurant

__all__ = ["DeliveryOutcome", "Order", "OrderStatus", "Pizza", "Restaurant"]
