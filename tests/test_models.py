"""Tests for data models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from dispatch.exceptions import (
    CapacityError,
    NotFoundError,
    StateError,
    ValidationError,
)
from dispatch.models import (
    MenuItem,
    Order,
    OrderStatus,
    Restaurant,
)


class TestMenuItem:
    """Tests for the MenuItem model."""

    def test_create_menu_item(self):
        """Test creating a menu item."""
        item = MenuItem("Idli", Decimal("10.50"))

        assert item.name == "Idli"
        assert item.price == Decimal("10.50")

    def test_price_coerced_to_decimal(self):
        """Test that int, str and float prices become Decimals."""
        assert MenuItem("A", 10).price == Decimal("10")
        assert MenuItem("B", "12.25").price == Decimal("12.25")
        assert MenuItem("C", 0.1).price == Decimal("0.1")

    @pytest.mark.parametrize("name", ["", "   ", None, 42])
    def test_empty_name_rejected(self, name):
        """Test that an empty or blank name raises."""
        with pytest.raises(ValidationError, match="name cannot be empty"):
            MenuItem(name, Decimal("10"))

    @pytest.mark.parametrize("price", [0, -1, Decimal("-0.01"), None, "abc", "NaN"])
    def test_invalid_price_rejected(self, price):
        """Test that non-positive or non-numeric prices raise."""
        with pytest.raises(ValidationError):
            MenuItem("Idli", price)

    def test_set_price(self):
        """Test updating the price."""
        item = MenuItem("Dosa", Decimal("50"))
        item.set_price(Decimal("45"))
        assert item.price == Decimal("45")

    def test_set_invalid_price_keeps_old_price(self):
        """Test that a failed price update leaves the item unchanged."""
        item = MenuItem("Dosa", Decimal("50"))

        with pytest.raises(ValidationError, match="must be positive"):
            item.set_price(0)

        assert item.price == Decimal("50")

    def test_equality_by_name(self):
        """Test that items with the same name are equal regardless of price."""
        assert MenuItem("Idli", 10) == MenuItem("Idli", 15)
        assert MenuItem("Idli", 10) != MenuItem("Dosa", 10)
        assert len({MenuItem("Idli", 10), MenuItem("Idli", 20)}) == 1

    def test_validation_error_is_value_error(self):
        """Test that validation errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            MenuItem("", 10)


class TestRestaurant:
    """Tests for the Restaurant model."""

    @pytest.fixture
    def restaurant(self):
        """Create a restaurant with a small menu."""
        restaurant = Restaurant("R2", max_orders=2, rating=4.0)
        restaurant.add_menu_item("Idli", Decimal("10"))
        restaurant.add_menu_item("Dosa", Decimal("50"))
        return restaurant

    def test_create_restaurant(self):
        """Test creating a restaurant."""
        restaurant = Restaurant("R1", 5, 4.5)

        assert restaurant.name == "R1"
        assert restaurant.max_orders == 5
        assert restaurant.rating == 4.5
        assert restaurant.current_order_count == 0
        assert restaurant.menu == {}

    @pytest.mark.parametrize(
        "name,max_orders,rating,message",
        [
            ("", 5, 4.0, "name cannot be empty"),
            ("R", 0, 4.0, "Max orders must be positive"),
            ("R", -1, 4.0, "Max orders must be positive"),
            ("R", 5, 6.0, "Rating must be between 0 and 5"),
            ("R", 5, -0.1, "Rating must be between 0 and 5"),
            (None, 5, 4.0, "name cannot be empty"),
            (42, 5, 4.0, "name cannot be empty"),
        ],
    )
    def test_invalid_restaurant(self, name, max_orders, rating, message):
        """Test constructor validation."""
        with pytest.raises(ValidationError, match=message):
            Restaurant(name, max_orders, rating)

    def test_rating_bounds_inclusive(self):
        """Test that ratings of exactly 0 and 5 are allowed."""
        assert Restaurant("Low", 1, 0).rating == 0
        assert Restaurant("High", 1, 5).rating == 5

    def test_add_menu_item_overwrites(self, restaurant):
        """Test that adding an existing item replaces it."""
        restaurant.add_menu_item("Idli", Decimal("12"))

        assert restaurant.menu["Idli"].price == Decimal("12")
        assert len(restaurant.menu) == 2

    def test_update_menu_item_price(self, restaurant):
        """Test updating an existing item's price."""
        restaurant.update_menu_item_price("Dosa", Decimal("40"))
        assert restaurant.menu["Dosa"].price == Decimal("40")

    def test_update_missing_item(self, restaurant):
        """Test updating an item that is not on the menu."""
        with pytest.raises(NotFoundError, match="Menu item not found: Vada"):
            restaurant.update_menu_item_price("Vada", Decimal("20"))

    def test_menu_is_a_copy(self, restaurant):
        """Test that changing the returned menu does not touch the restaurant."""
        menu = restaurant.menu
        menu["Idli"].set_price(Decimal("999"))
        menu.pop("Dosa")

        assert restaurant.menu["Idli"].price == Decimal("10")
        assert "Dosa" in restaurant.menu

    def test_has_all_items(self, restaurant):
        """Test the item availability check ignores quantities."""
        assert restaurant.has_all_items({"Idli": 3, "Dosa": 1})
        assert restaurant.has_all_items({"Idli": 100})
        assert not restaurant.has_all_items({"Idli": 1, "Vada": 1})

    def test_calculate_total_cost(self, restaurant):
        """Test that cost is price times quantity summed over items."""
        assert restaurant.calculate_total_cost({"Idli": 2}) == Decimal("20")
        assert restaurant.calculate_total_cost({"Idli": 1, "Dosa": 1}) == Decimal("60")
        assert restaurant.calculate_total_cost({"Idli": 3, "Dosa": 1}) == Decimal("80")

    def test_calculate_total_cost_missing_item(self, restaurant):
        """Test that costing an unknown item is a contract violation."""
        with pytest.raises(KeyError):
            restaurant.calculate_total_cost({"Vada": 1})

    def test_accept_and_complete(self, restaurant):
        """Test capacity bookkeeping."""
        restaurant.accept_order()
        assert restaurant.current_order_count == 1
        assert restaurant.available_capacity == 1

        restaurant.complete_order()
        assert restaurant.current_order_count == 0

    def test_accept_when_full(self, restaurant):
        """Test that a full restaurant refuses orders and keeps its count."""
        restaurant.accept_order()
        restaurant.accept_order()
        assert not restaurant.can_accept_order()

        with pytest.raises(CapacityError, match="maximum order capacity"):
            restaurant.accept_order()

        assert restaurant.current_order_count == 2

    def test_complete_when_idle(self, restaurant):
        """Test that completing with no orders raises."""
        with pytest.raises(StateError, match="no orders to complete"):
            restaurant.complete_order()

        assert restaurant.current_order_count == 0

    def test_status_snapshot(self, restaurant):
        """Test the read-only restaurant snapshot."""
        restaurant.accept_order()
        status = restaurant.status()

        assert status.name == "R2"
        assert status.occupancy == "1/2"
        assert status.rating == 4.0
        assert status.menu == {"Idli": Decimal("10"), "Dosa": Decimal("50")}

        with pytest.raises((PydanticValidationError, AttributeError)):
            status.current_order_count = 0


class TestOrder:
    """Tests for the Order model."""

    @pytest.fixture
    def restaurant(self):
        """Create a restaurant with one slot."""
        restaurant = Restaurant("R3", max_orders=1, rating=4.9)
        restaurant.add_menu_item("Idli", Decimal("15"))
        restaurant.add_menu_item("Dosa", Decimal("30"))
        return restaurant

    @pytest.fixture
    def order(self):
        """Create a pending order."""
        return Order(1, "Ashwin", {"Idli": 3, "Dosa": 1})

    def test_create_order(self, order):
        """Test creating an order."""
        assert order.order_id == 1
        assert order.customer == "Ashwin"
        assert order.items == {"Idli": 3, "Dosa": 1}
        assert order.status == OrderStatus.PENDING
        assert order.assigned_restaurant is None
        assert order.total_cost is None
        assert order.created_at is not None

    @pytest.mark.parametrize(
        "customer,items,message",
        [
            ("", {"Idli": 1}, "Customer name cannot be empty"),
            ("  ", {"Idli": 1}, "Customer name cannot be empty"),
            ("Diya", {}, "items cannot be empty"),
            ("Diya", None, "items cannot be empty"),
            ("Diya", {"Idli": 0}, "quantities must be positive"),
            ("Diya", {"Idli": 2, "Dosa": -1}, "quantities must be positive"),
            (None, {"Idli": 1}, "Customer name cannot be empty"),
            (7, {"Idli": 1}, "Customer name cannot be empty"),
            ("Diya", {5: 1}, "item name cannot be empty"),
            ("Diya", ["Idli"], "items cannot be empty"),
        ],
    )
    def test_invalid_order(self, customer, items, message):
        """Test constructor validation."""
        with pytest.raises(ValidationError, match=message):
            Order(1, customer, items)

    def test_items_copied(self):
        """Test that the order keeps its own copy of the items."""
        items = {"Idli": 1}
        order = Order(1, "Harish", items)

        items["Idli"] = 50
        order.items["Dosa"] = 2

        assert order.items == {"Idli": 1}

    def test_assign_to_restaurant(self, order, restaurant):
        """Test accepting an order at a restaurant."""
        order.assign_to_restaurant(restaurant)

        assert order.status == OrderStatus.ACCEPTED
        assert order.assigned_restaurant is restaurant
        assert order.total_cost == Decimal("75")
        assert restaurant.current_order_count == 1

    def test_assign_to_full_restaurant_leaves_order_pending(self, order, restaurant):
        """Test that a capacity failure does not change the order."""
        restaurant.accept_order()

        with pytest.raises(CapacityError):
            order.assign_to_restaurant(restaurant)

        assert order.status == OrderStatus.PENDING
        assert order.assigned_restaurant is None
        assert order.total_cost is None
        assert restaurant.current_order_count == 1

    def test_assign_twice(self, order, restaurant):
        """Test that only pending orders can be assigned."""
        order.assign_to_restaurant(restaurant)

        with pytest.raises(StateError, match="cannot be assigned"):
            order.assign_to_restaurant(restaurant)

    def test_mark_completed(self, order, restaurant):
        """Test completing an accepted order frees the restaurant slot."""
        order.assign_to_restaurant(restaurant)
        order.mark_completed()

        assert order.status == OrderStatus.COMPLETED
        assert restaurant.current_order_count == 0
        assert restaurant.can_accept_order()

    def test_complete_pending_order(self, order):
        """Test that a pending order cannot be completed."""
        with pytest.raises(StateError, match="Only accepted orders"):
            order.mark_completed()

        assert order.status == OrderStatus.PENDING

    def test_complete_twice(self, order, restaurant):
        """Test that completing a completed order fails and changes nothing."""
        order.assign_to_restaurant(restaurant)
        order.mark_completed()

        with pytest.raises(StateError):
            order.mark_completed()

        assert order.status == OrderStatus.COMPLETED
        assert restaurant.current_order_count == 0

    def test_mark_rejected_idempotent(self, order):
        """Test that rejecting twice leaves the order rejected."""
        order.mark_rejected()
        order.mark_rejected()

        assert order.status == OrderStatus.REJECTED

    def test_status_change_updates_timestamp(self, order):
        """Test that a transition refreshes updated_at in the summary."""
        pending = order.summary()
        assert pending.updated_at == pending.created_at

        order.mark_rejected()
        rejected = order.summary()

        assert rejected.updated_at == order.updated_at
        assert rejected.updated_at >= rejected.created_at

    def test_complete_rejected_order(self, order):
        """Test that a rejected order cannot be completed."""
        order.mark_rejected()

        with pytest.raises(StateError):
            order.mark_completed()

    def test_summary(self, order, restaurant):
        """Test the read-only order snapshot."""
        order.assign_to_restaurant(restaurant)
        summary = order.summary()

        assert summary.order_id == 1
        assert summary.customer == "Ashwin"
        assert summary.status == OrderStatus.ACCEPTED
        assert summary.restaurant_name == "R3"
        assert summary.total_cost == Decimal("75")
        assert summary.updated_at >= summary.created_at

        with pytest.raises((PydanticValidationError, AttributeError)):
            summary.status = OrderStatus.COMPLETED


class TestOrderStatus:
    """Tests for the OrderStatus enum."""

    def test_status_values(self):
        """Test that all expected status values exist."""
        assert OrderStatus.PENDING == "pending"
        assert OrderStatus.ACCEPTED == "accepted"
        assert OrderStatus.COMPLETED == "completed"
        assert OrderStatus.REJECTED == "rejected"
