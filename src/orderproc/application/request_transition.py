"""Application service: Request Transition use case.

Applies a status change to an order and, once the change is committed,
hands it to the notification dispatcher. A rejected pair is reported in
the result instead of raised; a failing subscriber is raised, because
by then the transition has already happened.
"""

from __future__ import annotations

import logging

from orderproc.application.dto import TransitionResult
from orderproc.domain.exceptions import EntityNotFoundError, InvalidTransitionError
from orderproc.domain.model.order import OrderStatus
from orderproc.domain.notifications import NotificationDispatcher
from orderproc.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class RequestTransitionHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self._order_repo = order_repo
        self._dispatcher = dispatcher

    def handle(self, order_id: int, target: OrderStatus) -> TransitionResult:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        old_status = order.status
        try:
            order.change_status(target)
        except InvalidTransitionError as exc:
            logger.warning("Order #%s: %s", order.id, exc)
            return TransitionResult(
                success=False, old_status=old_status, new_status=target, error=exc
            )

        logger.info(
            "Order #%s moved %s -> %s", order.id, old_status.value, target.value
        )
        self._dispatcher.dispatch(order, old_status, target)
        return TransitionResult(success=True, old_status=old_status, new_status=target)
