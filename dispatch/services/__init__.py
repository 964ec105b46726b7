"""Services for the Order Dispatch system."""

from dispatch.services.ordering_system import OrderingSystem
from dispatch.services.selection import (
    HighestRatingStrategy,
    LowestCostStrategy,
    SelectionStrategy,
    StrategyName,
    get_strategy,
)

__all__ = [
    "HighestRatingStrategy",
    "LowestCostStrategy",
    "OrderingSystem",
    "SelectionStrategy",
    "StrategyName",
    "get_strategy",
]
