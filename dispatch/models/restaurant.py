"""Restaurant data model with menu and order capacity."""

import logging
from collections.abc import Mapping
from decimal import Decimal

from dispatch.exceptions import CapacityError, NotFoundError, StateError, ValidationError
from dispatch.models.menu import MenuItem
from dispatch.models.status import RestaurantStatus

logger = logging.getLogger(__name__)


class Restaurant:
    """A restaurant that owns its menu and tracks how many orders it is holding.

    The order counter never exceeds ``max_orders``. Callers only ever see
    copies of the menu, so the restaurant's state can only change through
    its own methods.
    """

    def __init__(self, name: str, max_orders: int, rating: float) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Restaurant name cannot be empty")
        if isinstance(max_orders, bool) or not isinstance(max_orders, int):
            raise ValidationError("Max orders must be an integer")
        if max_orders <= 0:
            raise ValidationError("Max orders must be positive")
        if (
            isinstance(rating, bool)
            or not isinstance(rating, (int, float))
            or not 0 <= rating <= 5
        ):
            raise ValidationError("Rating must be between 0 and 5")

        self._name = name
        self._max_orders = max_orders
        self._rating = float(rating)
        self._menu: dict[str, MenuItem] = {}
        self._current_order_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def max_orders(self) -> int:
        return self._max_orders

    @property
    def rating(self) -> float:
        return self._rating

    @property
    def current_order_count(self) -> int:
        return self._current_order_count

    @property
    def available_capacity(self) -> int:
        return self._max_orders - self._current_order_count

    @property
    def menu(self) -> dict[str, MenuItem]:
        """Copy of the menu. Changes to it do not affect the restaurant."""
        return {name: MenuItem(name, item.price) for name, item in self._menu.items()}

    def add_menu_item(self, name: str, price: Decimal | int | str | float) -> None:
        """Add an item to the menu, replacing any item with the same name.

        Args:
            name: Item name
            price: Item price, strictly positive

        Raises:
            ValidationError: If the name is empty or the price is not positive
        """
        self._menu[name] = MenuItem(name, price)

    def update_menu_item_price(
        self, name: str, price: Decimal | int | str | float
    ) -> None:
        """Change the price of an existing menu item.

        Raises:
            NotFoundError: If the item is not on the menu
            ValidationError: If the price is not positive
        """
        item = self._menu.get(name)
        if item is None:
            raise NotFoundError(f"Menu item not found: {name}")
        item.set_price(price)

    def has_all_items(self, order_items: Mapping[str, int]) -> bool:
        """Check whether every requested item is on the menu."""
        return all(name in self._menu for name in order_items)

    def calculate_total_cost(self, order_items: Mapping[str, int]) -> Decimal:
        """Sum price times quantity over the requested items.

        Callers must check ``has_all_items`` first. An item that is not on
        the menu is a programming error and raises ``KeyError``.
        """
        total = Decimal("0")
        for name, quantity in order_items.items():
            item = self._menu.get(name)
            if item is None:
                raise KeyError(f"{name!r} is not on the menu of {self._name}")
            total += item.price * quantity
        return total

    def can_accept_order(self) -> bool:
        return self._current_order_count < self._max_orders

    def accept_order(self) -> None:
        """Claim one unit of capacity.

        Raises:
            CapacityError: If the restaurant is already full
        """
        if not self.can_accept_order():
            raise CapacityError(
                f"Restaurant {self._name} has reached maximum order capacity "
                f"({self._max_orders})"
            )
        self._current_order_count += 1
        logger.debug(
            f"{self._name} accepted order "
            f"({self._current_order_count}/{self._max_orders})"
        )

    def complete_order(self) -> None:
        """Release one unit of capacity.

        Raises:
            StateError: If the restaurant holds no orders
        """
        if self._current_order_count <= 0:
            raise StateError(f"Restaurant {self._name} has no orders to complete")
        self._current_order_count -= 1
        logger.debug(
            f"{self._name} completed order "
            f"({self._current_order_count}/{self._max_orders})"
        )

    def status(self) -> RestaurantStatus:
        """Build a read-only snapshot of this restaurant."""
        return RestaurantStatus(
            name=self._name,
            max_orders=self._max_orders,
            current_order_count=self._current_order_count,
            rating=self._rating,
            menu={name: item.price for name, item in self._menu.items()},
        )

    def __repr__(self) -> str:
        return (
            f"Restaurant(name={self._name!r}, "
            f"orders={self._current_order_count}/{self._max_orders}, "
            f"rating={self._rating})"
        )
