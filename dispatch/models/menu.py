"""Menu item data model."""

from decimal import Decimal, InvalidOperation

from dispatch.exceptions import ValidationError


def parse_price(price: Decimal | int | str | float) -> Decimal:
    """Convert a price to a strictly positive Decimal.

    Args:
        price: Price as a Decimal, int, numeric string or float

    Returns:
        The price as a Decimal

    Raises:
        ValidationError: If the price is missing, not numeric or not positive
    """
    if price is None or isinstance(price, bool):
        raise ValidationError("Menu item price must be positive")

    try:
        value = price if isinstance(price, Decimal) else Decimal(str(price))
    except InvalidOperation as e:
        raise ValidationError(f"Invalid menu item price: {price!r}") from e

    if not value.is_finite() or value <= 0:
        raise ValidationError("Menu item price must be positive")
    return value


class MenuItem:
    """A named dish with a price. Two items are equal when their names match."""

    def __init__(self, name: str, price: Decimal | int | str | float) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Menu item name cannot be empty")

        self._name = name
        self._price = parse_price(price)

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Decimal:
        return self._price

    def set_price(self, price: Decimal | int | str | float) -> None:
        """Replace the price of this item.

        Raises:
            ValidationError: If the new price is not strictly positive
        """
        self._price = parse_price(price)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MenuItem):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"MenuItem(name={self._name!r}, price={self._price})"
