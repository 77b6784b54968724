import logging
import time
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from shopsearch.domain.models.product import Product, ScoredProduct
from shopsearch.domain.services.constants import (
    POPULARITY_BEST_SELLING,
    POPULARITY_FEATURED,
    POPULARITY_LATEST,
    PREFERRED_PRICE_BAND,
    SCORE_BEST_SELLING,
    SCORE_CATEGORY_CONTAINS,
    SCORE_DESCRIPTION_CONTAINS,
    SCORE_EXACT_NAME,
    SCORE_FEATURED,
    SCORE_KEYWORD_GROUP,
    SCORE_LATEST,
    SCORE_NAME_CONTAINS,
    SCORE_PRICE_BAND,
)
from shopsearch.domain.services.matcher import MatchedField, field_texts, match_fields
from shopsearch.domain.services.text import keyword_groups, normalize

logger = logging.getLogger(__name__)


def score_breakdown(
    product: Product,
    query: str,
    synonym_table: Optional[Mapping[str, Iterable[str]]] = None,
    price_band: Tuple[float, float] = PREFERRED_PRICE_BAND,
) -> Dict[str, int]:
    """
    Points earned by `product` for `query`, per signal.

    Text signals:
      - exact_name:    normalized name == normalized query (+100)
      - name:          name contains query (+50)
      - description:   description contains query (+20)
      - category:      category contains query (+30)
      - keyword_group: +40 for each synonym group hit by both the query and the name

    Boosts (featured +15, latest +10, best_selling +12, price band +5) are only
    added when at least one text signal fired, so a product unrelated to the
    query always scores 0. An empty query yields an empty breakdown.
    """
    q = normalize(query)
    if not q:
        return {}

    points: Dict[str, int] = {}
    texts = field_texts(product)
    matched = match_fields(product, q)

    if texts[MatchedField.NAME] == q:
        points["exact_name"] = SCORE_EXACT_NAME
    if MatchedField.NAME in matched:
        points["name"] = SCORE_NAME_CONTAINS
    if MatchedField.DESCRIPTION in matched:
        points["description"] = SCORE_DESCRIPTION_CONTAINS
    if MatchedField.CATEGORY in matched:
        points["category"] = SCORE_CATEGORY_CONTAINS

    # Once per group, however many of its terms appear
    name = texts[MatchedField.NAME]
    groups_hit = sum(
        1
        for group in keyword_groups(synonym_table)
        if any(t in q for t in group) and any(t in name for t in group)
    )
    if groups_hit:
        points["keyword_group"] = SCORE_KEYWORD_GROUP * groups_hit

    if not points:
        return {}

    if product.featured:
        points["featured"] = SCORE_FEATURED
    if product.latest:
        points["latest"] = SCORE_LATEST
    if product.best_selling:
        points["best_selling"] = SCORE_BEST_SELLING
    low, high = price_band
    if low <= product.price <= high:
        points["price_band"] = SCORE_PRICE_BAND

    return points


def score_product(
    product: Product,
    query: str,
    synonym_table: Optional[Mapping[str, Iterable[str]]] = None,
    price_band: Tuple[float, float] = PREFERRED_PRICE_BAND,
) -> int:
    return sum(score_breakdown(product, query, synonym_table, price_band).values())


def popularity_score(product: Product) -> int:
    """Flag heuristic used to rank when there is no query to score against."""
    return (
        (POPULARITY_FEATURED if product.featured else 0)
        + (POPULARITY_LATEST if product.latest else 0)
        + (POPULARITY_BEST_SELLING if product.best_selling else 0)
    )


def score_catalog(
    products: Sequence[Product],
    query: str,
    synonym_table: Optional[Mapping[str, Iterable[str]]] = None,
    price_band: Tuple[float, float] = PREFERRED_PRICE_BAND,
) -> List[ScoredProduct]:
    """Pair every product with its score, preserving catalog order."""
    t0 = time.perf_counter()
    scored = [
        ScoredProduct(product=p, score=score_product(p, query, synonym_table, price_band))
        for p in products
    ]
    logger.debug(
        "score_catalog query=%r products=%s matched=%s time=%.4fs",
        query, len(scored), sum(1 for s in scored if s.score > 0), time.perf_counter() - t0,
    )
    return scored
