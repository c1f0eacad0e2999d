"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from orderproc.domain.model.order import OrderStatus


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """A line item quantity was zero, negative or not an integer."""


class InvalidTransitionError(ValidationError):
    """The requested ``(current, target)`` status pair is not a legal move."""

    def __init__(self, current: OrderStatus, target: OrderStatus) -> None:
        self.current = current
        self.target = target
        super().__init__(
            f"Invalid transition: {current.value} -> {target.value}"
        )


class CatalogFormatError(ValidationError):
    """A catalog file could not be parsed into products and customers."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class SubscriberFailureError(DomainException):
    """A notification subscriber raised while a transition was dispatched.

    The transition itself has already been committed when this is raised.
    """

    def __init__(
        self,
        subscriber: Any,
        order_id: int,
        old_status: OrderStatus,
        new_status: OrderStatus,
    ) -> None:
        self.subscriber = subscriber
        self.order_id = order_id
        self.old_status = old_status
        self.new_status = new_status
        name = getattr(subscriber, "__qualname__", type(subscriber).__name__)
        super().__init__(
            f"Subscriber {name} failed on order #{order_id} "
            f"({old_status.value} -> {new_status.value})"
        )
