"""Abstract repository for Customer records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderproc.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer, in insertion order."""

    @abstractmethod
    def add(self, customer: Customer) -> None:
        """Store a new customer. Duplicate IDs are rejected."""
