"""Test doubles and builders shared across the test suite.

The in-memory repositories are the real thing, so only subscribers need
faking here.
"""

from __future__ import annotations

from orderproc.domain.model.customer import Customer
from orderproc.domain.model.order import Order, OrderStatus
from orderproc.domain.model.product import Product
from orderproc.domain.model.value_objects import Money
from orderproc.infrastructure.persistence.in_memory_repositories import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
)

LAPTOP = Product(id=1, name="Laptop", price=Money.of("60000"), category="Electronics")
MOUSE = Product(id=2, name="Mouse", price=Money.of("500"), category="Electronics")
INDRA = Customer(id=1, name="Indra", email="indra@mail.com")


def make_order(order_id: int = 101, customer: Customer = INDRA) -> Order:
    return Order.create(order_id, customer)


def make_repos() -> tuple[InMemoryOrderRepository, InMemoryCustomerRepository, InMemoryProductRepository]:
    return (
        InMemoryOrderRepository(),
        InMemoryCustomerRepository([INDRA]),
        InMemoryProductRepository([LAPTOP, MOUSE]),
    )


class RecordingSubscriber:
    """Records every call, optionally into a shared log with a label."""

    def __init__(self, label: str = "", log: list | None = None) -> None:
        self.label = label
        self.calls: list[tuple[Order, OrderStatus, OrderStatus]] = []
        self.statuses_seen: list[OrderStatus] = []
        self._log = log

    def __call__(self, order: Order, old_status: OrderStatus, new_status: OrderStatus) -> None:
        self.calls.append((order, old_status, new_status))
        self.statuses_seen.append(order.status)
        if self._log is not None:
            self._log.append(self.label)


class FailingSubscriber:

    def __init__(self, message: str = "mail server down") -> None:
        self.message = message
        self.calls = 0

    def __call__(self, order: Order, old_status: OrderStatus, new_status: OrderStatus) -> None:
        self.calls += 1
        raise RuntimeError(self.message)
