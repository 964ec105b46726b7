"""Strategies for choosing one restaurant among the eligible candidates."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import ClassVar

from dispatch.config import StrategyName
from dispatch.exceptions import ValidationError
from dispatch.models import Restaurant

logger = logging.getLogger(__name__)


class SelectionStrategy(ABC):
    """Policy that picks a restaurant for an order.

    Candidates have already been filtered to restaurants that carry every
    item and have spare capacity. Implementations must not modify them.
    """

    name: ClassVar[str]

    @abstractmethod
    def select(
        self, candidates: Sequence[Restaurant], order_items: Mapping[str, int]
    ) -> Restaurant | None:
        """Pick a restaurant, or None if no candidate is acceptable."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class LowestCostStrategy(SelectionStrategy):
    """Pick the restaurant with the cheapest total for the order.

    Ties go to the candidate that comes first.
    """

    name = StrategyName.LOWEST_COST.value

    def select(
        self, candidates: Sequence[Restaurant], order_items: Mapping[str, int]
    ) -> Restaurant | None:
        if not candidates:
            return None
        return min(candidates, key=lambda r: r.calculate_total_cost(order_items))


class HighestRatingStrategy(SelectionStrategy):
    """Pick the best rated restaurant, regardless of price.

    Ties go to the candidate that comes first.
    """

    name = StrategyName.HIGHEST_RATING.value

    def select(
        self, candidates: Sequence[Restaurant], order_items: Mapping[str, int]
    ) -> Restaurant | None:
        if not candidates:
            return None
        return max(candidates, key=lambda r: r.rating)


_STRATEGIES: dict[StrategyName, type[SelectionStrategy]] = {
    StrategyName.LOWEST_COST: LowestCostStrategy,
    StrategyName.HIGHEST_RATING: HighestRatingStrategy,
}


def get_strategy(name: str | StrategyName) -> SelectionStrategy:
    """Create a built-in strategy from its name.

    Args:
        name: Strategy name, e.g. "lowest_cost" or "highest_rating"

    Returns:
        A new strategy instance

    Raises:
        ValidationError: If the name is unknown
    """
    try:
        key = StrategyName(name.lower() if isinstance(name, str) else name)
    except ValueError as e:
        known = ", ".join(s.value for s in StrategyName)
        raise ValidationError(
            f"Unknown selection strategy: {name} (expected one of {known})"
        ) from e

    logger.debug(f"Using selection strategy {key.value}")
    return _STRATEGIES[key]()
