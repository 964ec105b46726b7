"""Errors raised by the dispatch engine."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dispatch.models.order import Order


class DispatchError(Exception):
    """Base class for all dispatch errors."""


class ValidationError(DispatchError, ValueError):
    """Invalid argument passed to a constructor or update."""


class DuplicateError(DispatchError, ValueError):
    """A restaurant with the same name is already onboarded."""


class NotFoundError(DispatchError, LookupError):
    """Unknown restaurant, order or menu item."""


class CapacityError(DispatchError):
    """Restaurant is already holding its maximum number of orders."""


class StateError(DispatchError):
    """Illegal order status transition or capacity release."""


class OrderPlacementError(DispatchError):
    """An order could not be assigned to any restaurant.

    The order has already been recorded as rejected and is available
    on ``order`` for inspection.
    """

    def __init__(self, message: str, order: "Order") -> None:
        super().__init__(message)
        self.order = order


class NoEligibleRestaurantError(OrderPlacementError):
    """No restaurant carries every item and has spare capacity."""


class StrategySelectionError(OrderPlacementError):
    """The selection strategy declined every eligible restaurant."""
