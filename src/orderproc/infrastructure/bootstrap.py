"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Nothing here is
global: each call to ``build_app`` returns fresh, independent stores.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from orderproc.application.add_item import AddItemHandler
from orderproc.application.create_order import CreateOrderHandler
from orderproc.application.generate_report import GenerateReportHandler
from orderproc.application.process_order import ProcessOrderHandler
from orderproc.application.request_transition import RequestTransitionHandler
from orderproc.domain.model.order import Order
from orderproc.domain.model.value_objects import DEFAULT_CURRENCY
from orderproc.domain.notifications import NotificationDispatcher
from orderproc.infrastructure.persistence.in_memory_repositories import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
)
from orderproc.infrastructure.persistence.json_catalog import CatalogSeed, load_catalog
from orderproc.infrastructure.sample_data import sample_catalog
from orderproc.infrastructure.settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class App:
    products: InMemoryProductRepository
    customers: InMemoryCustomerRepository
    orders: InMemoryOrderRepository
    dispatcher: NotificationDispatcher
    create_order: CreateOrderHandler
    add_item: AddItemHandler
    request_transition: RequestTransitionHandler
    process_order: ProcessOrderHandler
    generate_report: GenerateReportHandler

    def load_orders(self, seed: CatalogSeed) -> list[Order]:
        """Create every order listed in *seed*, in file order."""
        return [
            self.create_order.handle(o.id, o.customer_id, o.items)
            for o in seed.orders
        ]


def read_catalog(settings: Settings) -> CatalogSeed:
    if settings.catalog_path is None:
        logger.info("No catalog configured, using built-in sample data")
        return sample_catalog(settings.currency)
    logger.info("Loading catalog from %s", settings.catalog_path)
    return load_catalog(settings.catalog_path, settings.currency)


def build_app(seed: CatalogSeed, currency: str = DEFAULT_CURRENCY) -> App:
    products = InMemoryProductRepository(seed.products)
    customers = InMemoryCustomerRepository(seed.customers)
    orders = InMemoryOrderRepository()
    dispatcher = NotificationDispatcher()
    request_transition = RequestTransitionHandler(orders, dispatcher)

    return App(
        products=products,
        customers=customers,
        orders=orders,
        dispatcher=dispatcher,
        create_order=CreateOrderHandler(orders, customers, products, currency),
        add_item=AddItemHandler(orders, products),
        request_transition=request_transition,
        process_order=ProcessOrderHandler(orders, request_transition),
        generate_report=GenerateReportHandler(orders),
    )
