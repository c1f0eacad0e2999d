"""Application service: walk an order forward through its lifecycle."""

from __future__ import annotations

from orderproc.application.dto import TransitionResult
from orderproc.application.request_transition import RequestTransitionHandler
from orderproc.domain.exceptions import EntityNotFoundError, InvalidTransitionError
from orderproc.domain.model.order import Order, OrderStatus, allowed_targets
from orderproc.domain.repository.order_repository import OrderRepository


class ProcessOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        transition_handler: RequestTransitionHandler,
    ) -> None:
        self._order_repo = order_repo
        self._transition_handler = transition_handler

    def handle(
        self, order_id: int, through: OrderStatus = OrderStatus.SHIPPED
    ) -> list[TransitionResult]:
        """Request each successive transition until the order reaches *through*.

        The whole path is checked before the first step, so an unreachable
        target leaves the order untouched.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        path = self._path_to(order, through)

        results: list[TransitionResult] = []
        for target in path:
            result = self._transition_handler.handle(order_id, target)
            results.append(result)
            if not result.success:
                break
        return results

    @staticmethod
    def _path_to(order: Order, through: OrderStatus) -> list[OrderStatus]:
        path: list[OrderStatus] = []
        current = order.status
        while current != through:
            following = allowed_targets(current)
            if not following:
                raise InvalidTransitionError(order.status, through)
            current = following[0]
            path.append(current)
        if not path:
            raise InvalidTransitionError(order.status, through)
        return path
