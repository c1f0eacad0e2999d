"""Application service: Create Order use case.

Resolves the customer (and, optionally, the initial products) through
the catalog, then lets the Order aggregate start its lifecycle.
"""

from __future__ import annotations

import logging

from orderproc.application.dto import OrderItemSpec
from orderproc.domain.exceptions import EntityNotFoundError
from orderproc.domain.model.order import Order
from orderproc.domain.model.value_objects import DEFAULT_CURRENCY
from orderproc.domain.repository.customer_repository import CustomerRepository
from orderproc.domain.repository.order_repository import OrderRepository
from orderproc.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._product_repo = product_repo
        self._currency = currency

    def handle(
        self,
        order_id: int,
        customer_id: int,
        item_specs: list[OrderItemSpec] | None = None,
    ) -> Order:
        """Create a new order in the Created state.

        Every product in *item_specs* is resolved before the order is
        built, so an unknown product leaves nothing behind.
        """
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer #{customer_id} not found")

        products = []
        for spec in item_specs or []:
            product = self._product_repo.get_by_id(spec.product_id)
            if product is None:
                raise EntityNotFoundError(f"Product #{spec.product_id} not found")
            products.append((product, spec.quantity))

        order = Order.create(order_id, customer, self._currency)
        for product, quantity in products:
            order.add_item(product, quantity)

        self._order_repo.add(order)
        logger.info(
            "Created order #%s for %s with %d item(s)",
            order.id, customer.name, len(order.items),
        )
        return order
