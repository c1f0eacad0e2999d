"""Integration tests for the RequestTransition and ProcessOrder use cases."""

import logging

import pytest

from orderproc.application.create_order import CreateOrderHandler
from orderproc.application.process_order import ProcessOrderHandler
from orderproc.application.request_transition import RequestTransitionHandler
from orderproc.domain.exceptions import (
    EntityNotFoundError,
    InvalidTransitionError,
    SubscriberFailureError,
)
from orderproc.domain.model.order import OrderStatus
from orderproc.domain.notifications import NotificationDispatcher
from tests.fakes import FailingSubscriber, RecordingSubscriber, make_repos


def _setup():
    order_repo, customer_repo, product_repo = make_repos()
    dispatcher = NotificationDispatcher()
    transition = RequestTransitionHandler(order_repo, dispatcher)
    process = ProcessOrderHandler(order_repo, transition)
    order = CreateOrderHandler(order_repo, customer_repo, product_repo).handle(101, 1)
    return order, dispatcher, transition, process


class TestRequestTransition:

    def test_success_reports_old_status_and_notifies(self):
        order, dispatcher, transition, _ = _setup()
        first, second = RecordingSubscriber(), RecordingSubscriber()
        dispatcher.subscribe(first)
        dispatcher.subscribe(second)

        result = transition.handle(order.id, OrderStatus.PAID)

        assert result.success is True
        assert result.old_status == OrderStatus.CREATED
        assert result.error is None
        assert first.calls == [(order, OrderStatus.CREATED, OrderStatus.PAID)]
        assert second.calls == [(order, OrderStatus.CREATED, OrderStatus.PAID)]

    def test_subscriber_sees_committed_status(self):
        order, dispatcher, transition, _ = _setup()
        sub = RecordingSubscriber()
        dispatcher.subscribe(sub)

        transition.handle(order.id, OrderStatus.PAID)

        assert sub.statuses_seen == [OrderStatus.PAID]

    def test_invalid_pair_reported_not_raised(self, caplog):
        order, dispatcher, transition, _ = _setup()
        sub = RecordingSubscriber()
        dispatcher.subscribe(sub)

        with caplog.at_level(logging.WARNING):
            result = transition.handle(order.id, OrderStatus.SHIPPED)

        assert result.success is False
        assert result.old_status == OrderStatus.CREATED
        assert isinstance(result.error, InvalidTransitionError)
        assert order.status == OrderStatus.CREATED
        assert order.history == []
        assert sub.calls == []
        assert "Created -> Shipped" in caplog.text

    def test_cancellation_is_rejected(self):
        order, _, transition, _ = _setup()
        result = transition.handle(order.id, OrderStatus.CANCELLED)
        assert result.success is False
        assert order.status == OrderStatus.CREATED

    def test_subscriber_failure_keeps_transition_committed(self):
        order, dispatcher, transition, _ = _setup()
        after = RecordingSubscriber()
        dispatcher.subscribe(FailingSubscriber())
        dispatcher.subscribe(after)

        with pytest.raises(SubscriberFailureError, match="Created -> Paid"):
            transition.handle(order.id, OrderStatus.PAID)

        assert order.status == OrderStatus.PAID
        assert len(order.history) == 1
        assert after.calls == []

    def test_unknown_order(self):
        _, _, transition, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            transition.handle(999, OrderStatus.PAID)


class TestProcessOrder:

    def test_walks_to_shipped_by_default(self):
        order, dispatcher, _, process = _setup()
        sub = RecordingSubscriber()
        dispatcher.subscribe(sub)

        results = process.handle(order.id)

        assert all(r.success for r in results)
        assert order.status == OrderStatus.SHIPPED
        assert [(old, new) for _, old, new in sub.calls] == [
            (OrderStatus.CREATED, OrderStatus.PAID),
            (OrderStatus.PAID, OrderStatus.PACKED),
            (OrderStatus.PACKED, OrderStatus.SHIPPED),
        ]

    def test_walks_to_delivered(self):
        order, _, _, process = _setup()
        process.handle(order.id, through=OrderStatus.DELIVERED)
        assert order.status == OrderStatus.DELIVERED
        assert len(order.history) == 4

    @pytest.mark.parametrize("target", [OrderStatus.CANCELLED, OrderStatus.CREATED])
    def test_unreachable_target_rejected_before_any_move(self, target):
        order, _, _, process = _setup()
        with pytest.raises(InvalidTransitionError):
            process.handle(order.id, through=target)
        assert order.history == []

    def test_continues_from_current_status(self):
        order, _, transition, process = _setup()
        transition.handle(order.id, OrderStatus.PAID)

        results = process.handle(order.id, through=OrderStatus.PACKED)

        assert [r.old_status for r in results] == [OrderStatus.PAID]
        assert order.status == OrderStatus.PACKED
