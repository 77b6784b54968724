import logging

from shopsearch.domain.models.product import Product
from shopsearch.domain.services.catalog import load_catalog


def test_load_catalog_defaults_loose_records():
    records = [
        {"id": 1, "name": "Custom Mug", "price": "250", "stock": "5", "is_featured": True, "category": "mugs"},
        {"id": 2, "name": "T-Shirt", "price": "abc", "stock": None, "description": None},
    ]
    products = load_catalog(records)
    assert [p.id for p in products] == ["1", "2"]
    assert products[0].price == 250.0 and products[0].featured
    assert products[1].price == 0.0 and products[1].stock == 0 and products[1].description == ""


def test_load_catalog_skips_unusable_records(caplog):
    records = [{"id": "1", "name": "Mug"}, {"name": "no id"}, "not a record", {"id": "2"}]
    with caplog.at_level(logging.WARNING):
        products = load_catalog(records)
    assert [p.id for p in products] == ["1"]
    assert sum("skipped record" in r.getMessage() for r in caplog.records) == 3


def test_load_catalog_passes_products_through():
    p = Product(id="1", name="Mug")
    assert load_catalog([p])[0] is p
    assert load_catalog([]) == []
