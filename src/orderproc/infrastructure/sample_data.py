"""Built-in catalog used when no catalog file is configured."""

from __future__ import annotations

from orderproc.application.dto import OrderItemSpec
from orderproc.domain.model.customer import Customer
from orderproc.domain.model.product import Product
from orderproc.domain.model.value_objects import DEFAULT_CURRENCY, Money
from orderproc.infrastructure.persistence.json_catalog import CatalogSeed, OrderSeed


def sample_catalog(currency: str = DEFAULT_CURRENCY) -> CatalogSeed:
    return CatalogSeed(
        products=[
            Product(1, "Laptop", Money.of("60000", currency), "Electronics"),
            Product(2, "Mouse", Money.of("500", currency), "Electronics"),
            Product(3, "Keyboard", Money.of("1500", currency), "Electronics"),
            Product(4, "BackPack", Money.of("600", currency), "Accessories"),
            Product(5, "Mobile", Money.of("35000", currency), "Electronics"),
        ],
        customers=[
            Customer(1, "Indra", "indra@mail.com"),
            Customer(2, "Viswa", "viswa@gmail.com"),
        ],
        orders=[
            OrderSeed(101, 1, [OrderItemSpec(1, 1), OrderItemSpec(2, 2)]),
            OrderSeed(102, 1, [OrderItemSpec(3, 1)]),
            OrderSeed(201, 2, [OrderItemSpec(5, 1), OrderItemSpec(4, 1)]),
        ],
    )
