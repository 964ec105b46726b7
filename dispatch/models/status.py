"""Read-only status projections of restaurants and orders."""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    """Lifecycle state of an order."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    COMPLETED = "completed"
    REJECTED = "rejected"


class RestaurantStatus(BaseModel):
    """Snapshot of a restaurant's occupancy, rating and menu."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Restaurant name")
    max_orders: int = Field(..., gt=0, description="Maximum concurrent orders")
    current_order_count: int = Field(..., ge=0, description="Orders in progress")
    rating: float = Field(..., ge=0, le=5, description="Restaurant rating")
    menu: dict[str, Decimal] = Field(
        default_factory=dict, description="Item name to price"
    )

    @property
    def occupancy(self) -> str:
        """Occupancy formatted as ``current/max``."""
        return f"{self.current_order_count}/{self.max_orders}"


class OrderSummary(BaseModel):
    """Snapshot of an order's request, status and assignment."""

    model_config = ConfigDict(frozen=True)

    order_id: int = Field(..., gt=0, description="Order identifier")
    customer: str = Field(..., description="Customer who placed the order")
    items: dict[str, int] = Field(..., description="Item name to quantity")
    status: OrderStatus = Field(..., description="Order status")
    restaurant_name: str | None = Field(
        None, description="Assigned restaurant, if accepted"
    )
    total_cost: Decimal | None = Field(None, description="Total cost, if accepted")
    created_at: datetime = Field(..., description="When the order was created")
    updated_at: datetime = Field(..., description="When the status last changed")
