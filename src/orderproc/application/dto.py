"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderproc.domain.exceptions import InvalidTransitionError
from orderproc.domain.model.order import OrderStatus


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: which product the customer asked for and how many."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of a requested status change.

    ``old_status`` is the status the order had when the request arrived;
    on failure it is also the status the order still has.
    """

    success: bool
    old_status: OrderStatus
    new_status: OrderStatus
    error: InvalidTransitionError | None = None


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "INR 500.00"
    line_total: str


@dataclass(frozen=True)
class StatusChangeDTO:
    """Output: one entry of the status history."""

    changed_at: str
    old_status: str
    new_status: str


@dataclass(frozen=True)
class OrderReportDTO:
    """Output: a read-only snapshot of an order for reporting."""

    id: int
    customer_name: str
    status: str
    items: list[OrderLineItemDTO]
    total: str
    history: list[StatusChangeDTO]
