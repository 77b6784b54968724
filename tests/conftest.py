from datetime import datetime, timezone

import pytest

from shopsearch.domain.models.product import Product


def _ts(y, m, d):
    return datetime(y, m, d, tzinfo=timezone.utc)


@pytest.fixture
def scenario_catalog():
    return [
        Product(id="mug", name="Custom Mug", category="mugs", price=250, stock=5, featured=True),
        Product(id="tee", name="T-Shirt", category="clothing", price=500, stock=0),
    ]


@pytest.fixture
def catalog():
    return [
        Product(id="1", name="Custom Mug", category="mugs", price=250, stock=5,
                featured=True, created_at=_ts(2024, 3, 1)),
        Product(id="2", name="T-Shirt", category="clothing", price=500, stock=0,
                latest=True, created_at=_ts(2024, 5, 1)),
        Product(id="3", name="Photo Frame", category="frames", price=800, stock=12,
                best_selling=True, description="Wooden frame for a custom photo",
                created_at=_ts(2024, 1, 15)),
        Product(id="4", name="Birthday Gift Box", category="gifts", price=1500, stock=3,
                featured=True, latest=True, description="A present for any occasion"),
        Product(id="5", name="Keychain", category="accessories", price=300, stock=40,
                created_at=_ts(2023, 12, 1)),
        Product(id="6", name="Magic Mug", category="mugs", price=300, stock=7,
                best_selling=True, created_at=_ts(2024, 2, 1)),
    ]
