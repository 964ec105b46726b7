"""Order placement and restaurant management."""

import logging
from collections.abc import Mapping
from decimal import Decimal

from dispatch.config import Config, get_config
from dispatch.exceptions import (
    DuplicateError,
    NoEligibleRestaurantError,
    NotFoundError,
    StrategySelectionError,
    ValidationError,
)
from dispatch.models import Order, OrderSummary, Restaurant, RestaurantStatus
from dispatch.services.selection import SelectionStrategy, get_strategy

logger = logging.getLogger(__name__)


class OrderingSystem:
    """Owns all restaurants and orders and assigns each order to a restaurant.

    State lives in memory for the lifetime of the instance. Orders are never
    removed, rejected ones included, so ``orders`` doubles as an audit trail.
    Order ids start at 1 for every instance.

    Not thread-safe: checking eligibility and claiming capacity are separate
    steps and need a lock per restaurant if callers run concurrently.
    """

    def __init__(
        self,
        strategy: SelectionStrategy | None = None,
        config: Config | None = None,
    ) -> None:
        """Initialize the ordering system.

        Args:
            strategy: Default selection strategy (taken from config if not provided)
            config: Configuration (global config if not provided)
        """
        self.config = config or get_config()
        self._strategy = (
            strategy
            if strategy is not None
            else get_strategy(self.config.default_strategy)
        )
        self._restaurants: dict[str, Restaurant] = {}
        self._orders: dict[int, Order] = {}
        self._next_order_id = 1
        logger.info(f"Initialized ordering system with {self._strategy.name} strategy")

    @property
    def selection_strategy(self) -> SelectionStrategy:
        return self._strategy

    def set_selection_strategy(self, strategy: SelectionStrategy | None) -> None:
        """Replace the default selection strategy.

        Raises:
            ValidationError: If no strategy is given
        """
        if strategy is None:
            raise ValidationError("Selection strategy cannot be empty")
        self._strategy = strategy
        logger.info(f"Selection strategy set to {strategy.name}")

    # Restaurant management

    def onboard_restaurant(self, name: str, max_orders: int, rating: float) -> Restaurant:
        """Register a new restaurant.

        Args:
            name: Unique restaurant name
            max_orders: Maximum number of orders held at once
            rating: Rating between 0 and 5

        Returns:
            The new restaurant

        Raises:
            DuplicateError: If a restaurant with this name exists
            ValidationError: If any argument is invalid
        """
        if name in self._restaurants:
            raise DuplicateError(f"Restaurant already exists: {name}")

        restaurant = Restaurant(name, max_orders, rating)
        self._restaurants[name] = restaurant
        logger.info(f"Restaurant onboarded: {name}")
        return restaurant

    def add_menu_item_to_restaurant(
        self, restaurant_name: str, item_name: str, price: Decimal | int | str
    ) -> None:
        """Add or replace a menu item at a restaurant.

        Raises:
            NotFoundError: If the restaurant is unknown
            ValidationError: If the item name or price is invalid
        """
        restaurant = self.get_restaurant(restaurant_name)
        restaurant.add_menu_item(item_name, price)
        logger.info(f"Menu item added to {restaurant_name}: {item_name} - {price}")

    def update_menu_item_price(
        self, restaurant_name: str, item_name: str, price: Decimal | int | str
    ) -> None:
        """Change the price of an item on a restaurant's menu.

        Raises:
            NotFoundError: If the restaurant or the item is unknown
            ValidationError: If the price is invalid
        """
        restaurant = self.get_restaurant(restaurant_name)
        restaurant.update_menu_item_price(item_name, price)
        logger.info(f"Menu item updated in {restaurant_name}: {item_name} - {price}")

    def get_restaurant(self, name: str) -> Restaurant:
        restaurant = self._restaurants.get(name)
        if restaurant is None:
            raise NotFoundError(f"Restaurant not found: {name}")
        return restaurant

    # Order management

    def eligible_restaurants(self, items: Mapping[str, int]) -> list[Restaurant]:
        """Restaurants that carry every item and have spare capacity.

        Returned in onboarding order.
        """
        return [
            r
            for r in self._restaurants.values()
            if r.has_all_items(items) and r.can_accept_order()
        ]

    def place_order(
        self,
        customer: str,
        items: Mapping[str, int],
        strategy: SelectionStrategy | None = None,
    ) -> Order:
        """Create an order and assign it to a restaurant.

        Every order that passes validation is recorded, whether it is
        accepted or rejected.

        Args:
            customer: Name of the customer
            items: Item name to quantity
            strategy: Strategy for this order only (default strategy if not provided)

        Returns:
            The accepted order

        Raises:
            ValidationError: If the customer or items are invalid
            NoEligibleRestaurantError: If no restaurant can take the order
            StrategySelectionError: If the strategy picks no restaurant
            CapacityError: If the chosen restaurant filled up before acceptance

        Any other error from the strategy or the assignment step is
        re-raised after the order has been recorded as rejected.
        """
        order = Order(self._next_order_id, customer, items)
        self._next_order_id += 1

        strategy_to_use = strategy if strategy is not None else self._strategy
        eligible = self.eligible_restaurants(items)

        if not eligible:
            self._reject(order, "no eligible restaurants found")
            raise NoEligibleRestaurantError(
                "Cannot assign the order - no eligible restaurants found", order=order
            )

        try:
            selected = strategy_to_use.select(eligible, order.items)
            if selected is not None:
                order.assign_to_restaurant(selected)
        except Exception as e:
            self._reject(order, f"assignment failed: {e!r}")
            raise

        if selected is None:
            self._reject(order, f"{strategy_to_use.name} strategy selected nothing")
            raise StrategySelectionError(
                "Cannot assign the order - strategy failed to select restaurant",
                order=order,
            )

        self._orders[order.order_id] = order
        logger.info(
            f"Order {order.order_id} assigned to {selected.name} "
            f"(Total: {order.total_cost})"
        )
        return order

    def mark_order_completed(self, order_id: int) -> Order:
        """Complete an accepted order.

        Raises:
            NotFoundError: If the order is unknown
            StateError: If the order is not accepted
        """
        order = self.get_order(order_id)
        order.mark_completed()
        logger.info(f"Order {order_id} marked as completed")
        return order

    def get_order(self, order_id: int) -> Order:
        order = self._orders.get(order_id)
        if order is None:
            raise NotFoundError(f"Order not found: {order_id}")
        return order

    def _reject(self, order: Order, reason: str) -> None:
        order.mark_rejected()
        self._orders[order.order_id] = order
        logger.warning(f"Order {order.order_id} rejected: {reason}")

    # Status

    def restaurant_status(self) -> list[RestaurantStatus]:
        """Snapshots of all restaurants in onboarding order."""
        return [r.status() for r in self._restaurants.values()]

    def order_status(self) -> list[OrderSummary]:
        """Snapshots of all orders in creation order."""
        return [o.summary() for o in self._orders.values()]
