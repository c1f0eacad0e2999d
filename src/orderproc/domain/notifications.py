"""Fan-out of accepted order transitions to registered subscribers.

The dispatcher knows nothing about the state machine; it is handed a
transition after the order has already moved.
"""

from __future__ import annotations

from typing import Callable

from orderproc.domain.exceptions import SubscriberFailureError
from orderproc.domain.model.order import Order, OrderStatus

Subscriber = Callable[[Order, OrderStatus, OrderStatus], None]


class NotificationDispatcher:
    """Ordered list of subscriber callbacks.

    Subscribers run synchronously, in registration order, on the caller's
    thread. Registering the same callback twice means it runs twice.

    Dispatch is fail-fast: the first subscriber that raises stops the
    fan-out and the error surfaces as ``SubscriberFailureError``.
    Subscribers after the failing one are not called for that transition.
    """

    def __init__(self, subscribers: list[Subscriber] | None = None) -> None:
        self._subscribers: list[Subscriber] = list(subscribers or [])

    def subscribe(self, callback: Subscriber) -> None:
        if not callable(callback):
            raise TypeError(f"Subscriber must be callable, got {type(callback).__name__}")
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> bool:
        """Remove the first registration of *callback*. False if absent."""
        try:
            self._subscribers.remove(callback)
        except ValueError:
            return False
        return True

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        return tuple(self._subscribers)

    def __len__(self) -> int:
        return len(self._subscribers)

    def dispatch(self, order: Order, old_status: OrderStatus, new_status: OrderStatus) -> None:
        # Snapshot so a subscriber that (un)subscribes doesn't affect this round.
        for subscriber in tuple(self._subscribers):
            try:
                subscriber(order, old_status, new_status)
            except Exception as exc:
                raise SubscriberFailureError(
                    subscriber, order.id, old_status, new_status
                ) from exc
