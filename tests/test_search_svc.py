import pytest

from shopsearch.core.config import EngineConfig
from shopsearch.domain.models.product import Product
from shopsearch.domain.models.search import FilterSpec, SortKey
from shopsearch.domain.services.scoring import score_product
from shopsearch.domain.services.search_svc import record_search, search_products, suggest_queries


def _ids(result):
    return [p.id for p in result.products]


def test_scenario_text_search(scenario_catalog):
    res = search_products(scenario_catalog, "mug")
    assert [p.name for p in res.products] == ["Custom Mug"]
    assert res.items[0].score >= 95
    assert res.count == 1


def test_scenario_empty_query(scenario_catalog):
    res = search_products(scenario_catalog, "", sort=SortKey.RELEVANCE)
    assert [p.name for p in res.products] == ["Custom Mug", "T-Shirt"]
    assert all(item.score == 0 for item in res.items)


def test_scenario_in_stock_filter(scenario_catalog):
    res = search_products(scenario_catalog, "", FilterSpec(in_stock_only=True))
    assert [p.name for p in res.products] == ["Custom Mug"]


def test_relevance_order_and_scores(catalog):
    res = search_products(catalog, "mug")
    assert [(i.product.id, i.score) for i in res.items] == [("6", 137), ("1", 135)]


def test_zero_scores_are_excluded(catalog):
    for q in ("mug", "gift", "custom", "frame", "zzz"):
        res = search_products(catalog, q)
        kept = set(_ids(res))
        for p in catalog:
            assert (p.id in kept) == (score_product(p, q) > 0)


def test_field_sorts_gate_on_containment_not_score():
    catalog = [
        Product(id="box", name="উপহার বাক্স", category="boxes"),
        Product(id="card", name="Gift Card", category="cards"),
    ]
    # the box only matches "gift" through its keyword group
    assert score_product(catalog[0], "gift") == 40
    assert _ids(search_products(catalog, "gift")) == ["card", "box"]
    res = search_products(catalog, "gift", sort="name")
    assert _ids(res) == ["card"]
    assert res.items[0].score == score_product(catalog[1], "gift")


def test_field_sorts_keep_scores_of_contained_products(catalog):
    res = search_products(catalog, "mug", sort="price_low")
    assert [(i.product.id, i.score) for i in res.items] == [("1", 135), ("6", 137)]


def test_filters_and_query_combine(catalog):
    res = search_products(catalog, "mug", FilterSpec(featured_only=True))
    assert _ids(res) == ["1"]


def test_text_scoring_disabled(catalog):
    config = EngineConfig(enable_text_scoring=False)
    res = search_products(catalog, "custom", config=config)
    # field containment gate, popularity order, no scores
    assert _ids(res) == ["1", "3"]
    assert all(i.score == 0 for i in res.items)


def test_deterministic(catalog):
    spec = FilterSpec(min_price=250)
    for key in SortKey:
        first = search_products(catalog, "mug", spec, key)
        assert search_products(catalog, "mug", spec, key) == first


def test_inputs_untouched(catalog):
    before = [p.model_dump() for p in catalog]
    order = [p.id for p in catalog]
    search_products(catalog, "gift", FilterSpec(in_stock_only=True), SortKey.NEWEST)
    assert [p.id for p in catalog] == order
    assert [p.model_dump() for p in catalog] == before


def test_empty_catalog_and_none_query():
    res = search_products([], None)
    assert res.items == [] and res.count == 0
    assert res.query == ""


def test_unknown_sort_raises_before_work(catalog):
    with pytest.raises(ValueError, match="Unknown sort key"):
        search_products(catalog, "mug", sort="best")


def test_suggest_queries_uses_config_caps(catalog):
    config = EngineConfig.model_validate({"suggestion_caps": {"recent": 0, "trending": 1, "auto_complete": 1}})
    out = suggest_queries("mug", catalog, ["mug"], config)
    assert [s.text for s in out] == ["Custom Mug", "mug গিফট"]


def test_record_search_caps_history_from_config():
    history = [f"q{i}" for i in range(12)]
    assert record_search(history, "mug") == ["mug"] + history[:9]
    config = EngineConfig(history_limit=2)
    assert record_search(["frame", "mug"], "gift", config) == ["gift", "frame"]
    assert record_search(["frame", "mug"], "mug", config) == ["mug", "frame"]
