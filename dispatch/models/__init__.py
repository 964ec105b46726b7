"""Data models for the Order Dispatch system."""

from dispatch.models.menu import MenuItem
from dispatch.models.order import Order
from dispatch.models.restaurant import Restaurant
from dispatch.models.status import OrderStatus, OrderSummary, RestaurantStatus

__all__ = [
    "MenuItem",
    "Order",
    "OrderStatus",
    "OrderSummary",
    "Restaurant",
    "RestaurantStatus",
]
