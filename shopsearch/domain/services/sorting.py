import logging
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from shopsearch.domain.models.product import Product, ScoredProduct
from shopsearch.domain.models.search import SortKey, parse_sort_key
from shopsearch.domain.services.scoring import popularity_score, score_catalog
from shopsearch.domain.services.text import normalize

logger = logging.getLogger(__name__)

# Missing timestamps sort as the oldest possible value
_NO_TIMESTAMP = float("-inf")


def _timestamp(p: Product) -> float:
    return p.created_at.timestamp() if isinstance(p.created_at, datetime) else _NO_TIMESTAMP


def _name_key(p: Product) -> str:
    return p.name.casefold()


# Every key is total over validated products. sorted() is stable, so
# ties left unresolved here keep their input order.
_SORT_KEYS: Dict[SortKey, Callable[[ScoredProduct], object]] = {
    SortKey.NAME: lambda s: _name_key(s.product),
    SortKey.PRICE_ASC: lambda s: s.product.price,
    SortKey.PRICE_DESC: lambda s: -s.product.price,
    SortKey.NEWEST: lambda s: -_timestamp(s.product),
    SortKey.OLDEST: lambda s: _timestamp(s.product),
    SortKey.POPULARITY: lambda s: not s.product.best_selling,
    SortKey.FEATURED: lambda s: not s.product.featured,
}


def _by_score(s: ScoredProduct):
    return -s.score, _name_key(s.product)


def _by_popularity(s: ScoredProduct):
    return -popularity_score(s.product), _name_key(s.product)


def sort_scored(
    items: Sequence[ScoredProduct],
    sort_key: Union[SortKey, str, None] = SortKey.RELEVANCE,
    query: str = "",
    enable_text_scoring: bool = True,
) -> List[ScoredProduct]:
    """
    Order scored products for display.

    Relevance sorts by score (desc) then name when there is a query to score
    against; otherwise it falls back to the popularity heuristic
    (3 x featured + 2 x latest + 2 x best_selling, desc) then name.
    Other keys sort on product fields only.
    """
    key = parse_sort_key(sort_key)
    if key is SortKey.RELEVANCE:
        use_score = enable_text_scoring and bool(normalize(query))
        fn = _by_score if use_score else _by_popularity
        logger.debug("sort_scored key=%s strategy=%s", key.value, "score" if use_score else "popularity")
    else:
        fn = _SORT_KEYS[key]
        logger.debug("sort_scored key=%s", key.value)
    return sorted(items, key=fn)


def sort_products(
    products: Sequence[Product],
    sort_key: Union[SortKey, str, None] = SortKey.RELEVANCE,
    query: str = "",
    synonym_table: Optional[Mapping[str, Iterable[str]]] = None,
) -> List[Product]:
    """Sort bare products, scoring them first when relevance needs it."""
    key = parse_sort_key(sort_key)
    if key is SortKey.RELEVANCE and normalize(query):
        items = score_catalog(products, query, synonym_table)
    else:
        items = [ScoredProduct(product=p, score=0) for p in products]
    return [s.product for s in sort_scored(items, key, query)]
