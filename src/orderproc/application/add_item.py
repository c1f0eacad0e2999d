"""Application service: Add Item use case."""

from __future__ import annotations

from orderproc.domain.exceptions import EntityNotFoundError
from orderproc.domain.model.order import OrderLineItem
from orderproc.domain.repository.order_repository import OrderRepository
from orderproc.domain.repository.product_repository import ProductRepository


class AddItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: int, product_id: int, quantity: int) -> OrderLineItem:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        return order.add_item(product, quantity)
