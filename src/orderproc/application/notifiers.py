"""Stock subscribers for the notification dispatcher.

Each notifier writes one line through an ``emit`` callable. By default
that is the module logger; the CLI swaps in ``click.echo``.
"""

from __future__ import annotations

import logging
from typing import Callable

from orderproc.domain.model.order import Order, OrderStatus

logger = logging.getLogger(__name__)

Emit = Callable[[str], None]


class CustomerNotifier:
    """Tells the customer about every status change."""

    def __init__(self, emit: Emit | None = None) -> None:
        self._emit = emit or logger.info

    def __call__(self, order: Order, old_status: OrderStatus, new_status: OrderStatus) -> None:
        self._emit(
            f"Email to {order.customer.email}: Order {order.id} changed "
            f"from {old_status.value} to {new_status.value}"
        )


class LogisticsNotifier:
    """Hands the order to logistics once it has shipped."""

    def __init__(self, emit: Emit | None = None) -> None:
        self._emit = emit or logger.info

    def __call__(self, order: Order, old_status: OrderStatus, new_status: OrderStatus) -> None:
        if new_status is OrderStatus.SHIPPED:
            self._emit(f"Logistics notified: Order {order.id} ready for delivery")
