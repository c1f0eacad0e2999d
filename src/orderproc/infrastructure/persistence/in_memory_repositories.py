"""Dict-backed implementations of the domain repositories.

Nothing is written to disk; a store lives exactly as long as the
process that built it. Dicts keep insertion order, which is also the
listing order.
"""

from __future__ import annotations

from orderproc.domain.exceptions import ValidationError
from orderproc.domain.model.customer import Customer
from orderproc.domain.model.order import Order
from orderproc.domain.model.product import Product
from orderproc.domain.repository.customer_repository import CustomerRepository
from orderproc.domain.repository.order_repository import OrderRepository
from orderproc.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self.add(p)

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def add(self, product: Product) -> None:
        if product.id in self._store:
            raise ValidationError(f"Product #{product.id} already exists")
        self._store[product.id] = product


class InMemoryCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._store: dict[int, Customer] = {}
        for c in customers or []:
            self.add(c)

    def get_by_id(self, customer_id: int) -> Customer | None:
        return self._store.get(customer_id)

    def list_all(self) -> list[Customer]:
        return list(self._store.values())

    def add(self, customer: Customer) -> None:
        if customer.id in self._store:
            raise ValidationError(f"Customer #{customer.id} already exists")
        self._store[customer.id] = customer


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def add(self, order: Order) -> None:
        if order.id in self._store:
            raise ValidationError(f"Order #{order.id} already exists")
        self._store[order.id] = order
