"""Order data model and its status transitions."""

import logging
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from dispatch.exceptions import StateError, ValidationError
from dispatch.models.status import OrderStatus, OrderSummary

if TYPE_CHECKING:
    from dispatch.models.restaurant import Restaurant

logger = logging.getLogger(__name__)


class Order:
    """A customer's request for items, and what became of it.

    Status moves ``PENDING -> ACCEPTED | REJECTED`` and then, for accepted
    orders only, ``ACCEPTED -> COMPLETED``. The requested items are copied
    at construction and never change afterwards.
    """

    def __init__(self, order_id: int, customer: str, items: Mapping[str, int]) -> None:
        if not isinstance(customer, str) or not customer.strip():
            raise ValidationError("Customer name cannot be empty")
        if not isinstance(items, Mapping) or not items:
            raise ValidationError("Order items cannot be empty")
        for name, quantity in items.items():
            if not isinstance(name, str) or not name.strip():
                raise ValidationError("Order item name cannot be empty")
            if isinstance(quantity, bool) or not isinstance(quantity, int):
                raise ValidationError(f"Quantity for {name} must be an integer")
            if quantity <= 0:
                raise ValidationError("Item quantities must be positive")

        self._order_id = order_id
        self._customer = customer
        self._items = dict(items)
        self._status = OrderStatus.PENDING
        self._assigned_restaurant: "Restaurant | None" = None
        self._total_cost: Decimal | None = None
        self.created_at = datetime.now()
        self.updated_at = self.created_at

    @property
    def order_id(self) -> int:
        return self._order_id

    @property
    def customer(self) -> str:
        return self._customer

    @property
    def items(self) -> dict[str, int]:
        """Copy of the requested items."""
        return dict(self._items)

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def assigned_restaurant(self) -> "Restaurant | None":
        return self._assigned_restaurant

    @property
    def total_cost(self) -> Decimal | None:
        return self._total_cost

    def assign_to_restaurant(self, restaurant: "Restaurant") -> None:
        """Accept this order at the given restaurant.

        Capacity is claimed before anything on the order changes, so a
        ``CapacityError`` leaves the order pending with no total or restaurant.

        Args:
            restaurant: Restaurant that carries every requested item

        Raises:
            StateError: If the order is not pending
            CapacityError: If the restaurant is full
        """
        if self._status is not OrderStatus.PENDING:
            raise StateError(
                f"Order {self._order_id} cannot be assigned while {self._status.value}"
            )

        total_cost = restaurant.calculate_total_cost(self._items)
        restaurant.accept_order()

        self._assigned_restaurant = restaurant
        self._total_cost = total_cost
        self._set_status(OrderStatus.ACCEPTED)

    def mark_completed(self) -> None:
        """Complete an accepted order and free its restaurant slot.

        Raises:
            StateError: If the order is not accepted
        """
        if self._status is not OrderStatus.ACCEPTED:
            raise StateError("Only accepted orders can be completed")

        if self._assigned_restaurant is not None:
            self._assigned_restaurant.complete_order()
        self._set_status(OrderStatus.COMPLETED)

    def mark_rejected(self) -> None:
        self._set_status(OrderStatus.REJECTED)

    def summary(self) -> OrderSummary:
        """Build a read-only snapshot of this order."""
        return OrderSummary(
            order_id=self._order_id,
            customer=self._customer,
            items=dict(self._items),
            status=self._status,
            restaurant_name=(
                self._assigned_restaurant.name if self._assigned_restaurant else None
            ),
            total_cost=self._total_cost,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def _set_status(self, status: OrderStatus) -> None:
        self._status = status
        self.updated_at = datetime.now()
        logger.debug(f"Order {self._order_id} status updated to {status.value}")

    def __repr__(self) -> str:
        return (
            f"Order(order_id={self._order_id}, customer={self._customer!r}, "
            f"status={self._status.value})"
        )
