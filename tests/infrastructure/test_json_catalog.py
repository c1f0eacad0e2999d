"""Tests for the JSON catalog loader and the built-in sample data."""

import json
from decimal import Decimal

import pytest

from orderproc.domain.exceptions import CatalogFormatError
from orderproc.infrastructure.persistence.json_catalog import load_catalog, parse_catalog
from orderproc.infrastructure.sample_data import sample_catalog

CATALOG = {
    "products": [
        {"id": 1, "name": "Laptop", "price": "60000", "category": "Electronics"},
        {"id": 2, "name": "Mouse", "price": "500", "category": "Electronics"},
    ],
    "customers": [{"id": 1, "name": "Indra", "email": "indra@mail.com"}],
    "orders": [
        {
            "id": 101,
            "customer_id": 1,
            "items": [{"product_id": 1, "quantity": 1}, {"product_id": 2, "quantity": 2}],
        }
    ],
}


def _write(tmp_path, data):
    path = tmp_path / "catalog.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return path


class TestLoadCatalog:

    def test_loads_products_customers_and_orders(self, tmp_path):
        seed = load_catalog(_write(tmp_path, CATALOG))

        assert [p.name for p in seed.products] == ["Laptop", "Mouse"]
        assert seed.products[0].price.amount == Decimal("60000")
        assert seed.products[0].category == "Electronics"
        assert seed.customers[0].email == "indra@mail.com"
        assert seed.orders[0].id == 101
        assert [(i.product_id, i.quantity) for i in seed.orders[0].items] == [(1, 1), (2, 2)]

    def test_currency_applied(self, tmp_path):
        seed = load_catalog(_write(tmp_path, CATALOG), currency="USD")
        assert seed.products[0].price.currency == "USD"

    def test_orders_optional(self):
        seed = parse_catalog({"products": [], "customers": []})
        assert seed.orders == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogFormatError, match="not found"):
            load_catalog(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        with pytest.raises(CatalogFormatError, match="not valid JSON"):
            load_catalog(_write(tmp_path, "{not json"))

    def test_not_an_object(self):
        with pytest.raises(CatalogFormatError, match="JSON object"):
            parse_catalog([])

    def test_missing_field(self):
        with pytest.raises(CatalogFormatError, match="missing field 'price'"):
            parse_catalog({"products": [{"id": 1, "name": "Laptop"}]})

    def test_negative_price(self):
        with pytest.raises(CatalogFormatError, match="invalid"):
            parse_catalog({"products": [{"id": 1, "name": "Laptop", "price": "-5"}]})

    def test_non_numeric_id(self):
        with pytest.raises(CatalogFormatError, match="'id' must be an integer"):
            parse_catalog({"customers": [{"id": "abc", "name": "Indra"}]})

    @pytest.mark.parametrize("quantity", [1.9, "2", True])
    def test_quantity_must_be_a_json_integer(self, quantity):
        catalog = {
            "orders": [
                {"id": 1, "customer_id": 1, "items": [{"product_id": 1, "quantity": quantity}]}
            ]
        }
        with pytest.raises(CatalogFormatError, match="'quantity' must be an integer"):
            parse_catalog(catalog)

    @pytest.mark.parametrize("field", ["id", "customer_id"])
    def test_order_ids_must_be_json_integers(self, field):
        order = {"id": 1, "customer_id": 1, "items": []}
        order[field] = 1.5
        with pytest.raises(CatalogFormatError, match=f"'{field}' must be an integer"):
            parse_catalog({"orders": [order]})

    def test_per_product_currency_is_ignored(self):
        seed = parse_catalog(
            {"products": [{"id": 1, "name": "Pen", "price": "10", "currency": "USD"}]},
            currency="INR",
        )
        assert seed.products[0].price.currency == "INR"


class TestSampleCatalog:

    def test_contents(self):
        seed = sample_catalog()
        assert len(seed.products) == 5
        assert [c.name for c in seed.customers] == ["Indra", "Viswa"]
        assert [o.id for o in seed.orders] == [101, 102, 201]
