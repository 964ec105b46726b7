"""Command-line demo for Order Dispatch - replays a sample day of orders."""

import argparse
import logging
import sys
from decimal import Decimal

from dispatch.config import get_config, setup_logging
from dispatch.exceptions import DispatchError, OrderPlacementError
from dispatch.services import (
    HighestRatingStrategy,
    LowestCostStrategy,
    OrderingSystem,
    StrategyName,
    get_strategy,
)

logger = logging.getLogger(__name__)


class DispatchDemo:
    """Drives an OrderingSystem through sample restaurants and orders."""

    def __init__(self, strategy_name: str | None = None) -> None:
        """Initialize the demo.

        Args:
            strategy_name: Default selection strategy (config value if not provided)
        """
        self.config = get_config()
        setup_logging(self.config)

        strategy = get_strategy(strategy_name or self.config.default_strategy)
        self.system = OrderingSystem(strategy=strategy, config=self.config)

    def run(self) -> None:
        """Run every demo step in order."""
        self._banner("ORDER DISPATCH - Restaurant Order Assignment Demo")
        print(f"default strategy: {self.system.selection_strategy.name}")

        self._onboard_restaurants()
        self._update_menus()
        self._place_orders()
        self._print_status()
        self._complete_and_reorder()
        self._order_unavailable_item()
        self._print_status()
        self._check_validations()

    def _onboard_restaurants(self) -> None:
        self._section("Onboarding Restaurants")
        self.system.onboard_restaurant("R1", 5, 4.5)
        self.system.add_menu_item_to_restaurant("R1", "Veg Biryani", Decimal("100"))
        self.system.add_menu_item_to_restaurant("R1", "Chicken Biryani", Decimal("150"))

        self.system.onboard_restaurant("R2", 5, 4.0)
        self.system.add_menu_item_to_restaurant("R2", "Idli", Decimal("10"))
        self.system.add_menu_item_to_restaurant("R2", "Dosa", Decimal("50"))
        self.system.add_menu_item_to_restaurant("R2", "Veg Biryani", Decimal("80"))
        self.system.add_menu_item_to_restaurant("R2", "Chicken Biryani", Decimal("175"))

        self.system.onboard_restaurant("R3", 1, 4.9)
        self.system.add_menu_item_to_restaurant("R3", "Idli", Decimal("15"))
        self.system.add_menu_item_to_restaurant("R3", "Dosa", Decimal("30"))
        self.system.add_menu_item_to_restaurant("R3", "Gobi Manchurian", Decimal("150"))
        self.system.add_menu_item_to_restaurant("R3", "Chicken Biryani", Decimal("175"))
        print(f"Onboarded {len(self.system.restaurant_status())} restaurants")

    def _update_menus(self) -> None:
        self._section("Updating Menus")
        self.system.add_menu_item_to_restaurant("R1", "Chicken65", Decimal("250"))
        self.system.update_menu_item_price("R2", "Chicken Biryani", Decimal("150"))
        print("Added Chicken65 to R1, repriced Chicken Biryani at R2")

    def _place_orders(self) -> None:
        self._section("Placing Orders")
        self._place("Ashwin", {"Idli": 3, "Dosa": 1}, LowestCostStrategy())
        # R3 is full now, so this one goes to R2
        self._place("Harish", {"Idli": 3, "Dosa": 1}, LowestCostStrategy())
        self._place("Shruthi", {"Veg Biryani": 3, "Dosa": 1}, HighestRatingStrategy())

    def _complete_and_reorder(self) -> None:
        self._section("Completing Order and Placing New Order")
        self.system.mark_order_completed(1)
        print("Order 1 marked as completed")
        self._place("Harish", {"Idli": 3, "Dosa": 1}, LowestCostStrategy())

    def _order_unavailable_item(self) -> None:
        self._section("Testing Order with Unavailable Item")
        self._place("Diya", {"Idli": 3, "Paneer Tikka": 1}, LowestCostStrategy())

    def _check_validations(self) -> None:
        self._section("Testing Validations")
        for name, max_orders, rating in [
            ("", 5, 4.0),
            ("TestRestaurant", -1, 4.0),
            ("TestRestaurant", 5, 6.0),
        ]:
            try:
                self.system.onboard_restaurant(name, max_orders, rating)
            except DispatchError as e:
                print(f"✓ Validation passed: {e}")

    def _place(self, customer: str, items: dict[str, int], strategy) -> None:
        try:
            order = self.system.place_order(customer, items, strategy)
        except OrderPlacementError as e:
            print(f"⚠ Order {e.order.order_id} for {customer} rejected: {e}")
            return
        print(
            f"✓ Order {order.order_id} for {customer} assigned to "
            f"{order.assigned_restaurant.name} (Total: {order.total_cost}, "
            f"strategy: {strategy.name})"
        )

    def _print_status(self) -> None:
        self._section("Restaurant Status")
        for status in self.system.restaurant_status():
            print(
                f"{status.name} - Orders: {status.occupancy}, Rating: {status.rating}"
            )

        self._section("Order Status")
        for summary in self.system.order_status():
            line = (
                f"Order {summary.order_id} - {summary.customer} - "
                f"Status: {summary.status.value.upper()}"
            )
            if summary.restaurant_name:
                line += f" - Restaurant: {summary.restaurant_name}"
            print(line)

    @staticmethod
    def _banner(title: str) -> None:
        print("\n" + "=" * 60)
        print(title)
        print("=" * 60)

    @staticmethod
    def _section(title: str) -> None:
        print(f"\n=== {title} ===")


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the demo."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in StrategyName],
        help="default selection strategy (overrides DEFAULT_STRATEGY)",
    )
    args = parser.parse_args(argv)

    try:
        demo = DispatchDemo(strategy_name=args.strategy)
    except Exception as e:
        print(f"Configuration error: {e}")
        print("\nCheck DEFAULT_STRATEGY and LOG_LEVEL in your environment or .env")
        sys.exit(1)

    try:
        demo.run()
    except DispatchError as e:
        logger.error(f"Demo failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
