"""Order aggregate: the core of the domain.

The Order owns its line items and its status history. The status is only
ever changed through ``change_status``, which checks the requested move
against ``LEGAL_TRANSITIONS`` before touching anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from orderproc.domain.exceptions import InvalidTransitionError, ValidationError
from orderproc.domain.model.customer import Customer
from orderproc.domain.model.product import Product
from orderproc.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity


class OrderStatus(Enum):
    CREATED = "Created"
    PAID = "Paid"
    PACKED = "Packed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @property
    def is_terminal(self) -> bool:
        return not allowed_targets(self)


# ---------------------------------------------------------------------------
# Transition table
# ---------------------------------------------------------------------------
# Nothing leads into CANCELLED; it is kept as a terminal, unreachable state.
LEGAL_TRANSITIONS: frozenset[tuple[OrderStatus, OrderStatus]] = frozenset(
    {
        (OrderStatus.CREATED, OrderStatus.PAID),
        (OrderStatus.PAID, OrderStatus.PACKED),
        (OrderStatus.PACKED, OrderStatus.SHIPPED),
        (OrderStatus.SHIPPED, OrderStatus.DELIVERED),
    }
)

INITIAL_STATUS = OrderStatus.CREATED


def is_legal_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return (current, target) in LEGAL_TRANSITIONS


def allowed_targets(status: OrderStatus) -> list[OrderStatus]:
    """Statuses reachable from *status* in one step, in declaration order."""
    return [target for target in OrderStatus if (status, target) in LEGAL_TRANSITIONS]


@dataclass(frozen=True)
class StatusChange:
    """One accepted transition. History entries are never modified."""

    old_status: OrderStatus
    new_status: OrderStatus
    changed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class OrderLineItem:
    """A product reference plus a quantity.

    The product is shared with the catalog, not copied, so the line total
    always reflects the product's price.
    """

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use ``Order.create()`` for new orders. Items may be added while the
    order is being assembled; an order with no items is legal.
    """

    id: int
    customer: Customer
    currency: str = DEFAULT_CURRENCY
    # Caller discipline, not enforced: only change_status should move it.
    status: OrderStatus = INITIAL_STATUS
    items: list[OrderLineItem] = field(default_factory=list)
    history: list[StatusChange] = field(default_factory=list)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        order_id: int, customer: Customer, currency: str = DEFAULT_CURRENCY
    ) -> Order:
        """Start a new order in the initial state with no items."""
        return Order(id=order_id, customer=customer, currency=currency)

    # --- Items ----------------------------------------------------------------

    def add_item(self, product: Product, quantity: int) -> OrderLineItem:
        """Append a line item.

        Quantity and currency are validated before the list is touched.
        Repeated products are not merged.
        """
        if product.price.currency != self.currency:
            raise ValidationError(
                f"Product {product.name!r} is priced in {product.price.currency}, "
                f"order #{self.id} is in {self.currency}"
            )
        item = OrderLineItem(product=product, quantity=Quantity(quantity))
        self.items.append(item)
        return item

    # --- State transitions ----------------------------------------------------

    def change_status(self, target: OrderStatus, at: datetime | None = None) -> StatusChange:
        """Move to *target*, recording the change in the history.

        Raises ``InvalidTransitionError`` and leaves the order untouched
        when ``(status, target)`` is not a legal pair.
        """
        if not is_legal_transition(self.status, target):
            raise InvalidTransitionError(self.status, target)

        change = StatusChange(
            old_status=self.status,
            new_status=target,
            changed_at=at or datetime.now(timezone.utc),
        )
        self.status = target
        self.history.append(change)
        return change

    def next_status(self) -> OrderStatus | None:
        """The single legal successor of the current status, if any."""
        targets = allowed_targets(self.status)
        return targets[0] if targets else None

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero(self.currency)
        for item in self.items:
            result = result + item.line_total
        return result

    def calculate_total(self) -> Money:
        return self.total
