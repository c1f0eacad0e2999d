"""Read-only JSON loader for the product/customer catalog.

The file is parsed once into a ``CatalogSeed``; nothing is ever written
back. Expected shape::

    {
      "products":  [{"id": 1, "name": "Laptop", "price": "60000", "category": "Electronics"}],
      "customers": [{"id": 1, "name": "Indra", "email": "indra@mail.com"}],
      "orders":    [{"id": 101, "customer_id": 1,
                     "items": [{"product_id": 1, "quantity": 1}]}]
    }

``orders`` is optional. Ids and quantities must be JSON integers, and
every price is read in the one configured currency.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from orderproc.application.dto import OrderItemSpec
from orderproc.domain.exceptions import CatalogFormatError, ValidationError
from orderproc.domain.model.customer import Customer
from orderproc.domain.model.product import Product
from orderproc.domain.model.value_objects import DEFAULT_CURRENCY, Money


@dataclass(frozen=True)
class OrderSeed:
    id: int
    customer_id: int
    items: list[OrderItemSpec] = field(default_factory=list)


@dataclass(frozen=True)
class CatalogSeed:
    products: list[Product] = field(default_factory=list)
    customers: list[Customer] = field(default_factory=list)
    orders: list[OrderSeed] = field(default_factory=list)


def load_catalog(file_path: Path, currency: str = DEFAULT_CURRENCY) -> CatalogSeed:
    try:
        raw = json.loads(Path(file_path).read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogFormatError(f"Catalog file not found: {file_path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogFormatError(f"Catalog file {file_path} is not valid JSON: {exc}") from exc
    return parse_catalog(raw, currency)


def parse_catalog(raw: Any, currency: str = DEFAULT_CURRENCY) -> CatalogSeed:
    if not isinstance(raw, dict):
        raise CatalogFormatError("Catalog must be a JSON object")

    try:
        products = [
            Product(
                id=_integer(item, "id"),
                name=item["name"],
                price=Money.of(item["price"], currency),
                category=item.get("category", ""),
            )
            for item in raw.get("products", [])
        ]
        customers = [
            Customer(id=_integer(item, "id"), name=item["name"], email=item.get("email", ""))
            for item in raw.get("customers", [])
        ]
        orders = [
            OrderSeed(
                id=_integer(item, "id"),
                customer_id=_integer(item, "customer_id"),
                items=[
                    OrderItemSpec(
                        product_id=_integer(line, "product_id"),
                        quantity=_integer(line, "quantity"),
                    )
                    for line in item.get("items", [])
                ],
            )
            for item in raw.get("orders", [])
        ]
    except CatalogFormatError:
        raise
    except KeyError as exc:
        raise CatalogFormatError(f"Catalog entry is missing field {exc}") from exc
    except (TypeError, ValueError, AttributeError) as exc:
        raise CatalogFormatError(f"Catalog entry is malformed: {exc}") from exc
    except ValidationError as exc:
        raise CatalogFormatError(f"Catalog entry is invalid: {exc}") from exc

    return CatalogSeed(products=products, customers=customers, orders=orders)


def _integer(entry: dict[str, Any], key: str) -> int:
    value = entry[key]
    # bool is an int subclass; JSON true/false is never an id or a quantity
    if isinstance(value, bool) or not isinstance(value, int):
        raise CatalogFormatError(
            f"Catalog field '{key}' must be an integer, got {value!r}"
        )
    return value
