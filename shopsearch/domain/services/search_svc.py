import logging
import time
from typing import List, Optional, Sequence, Union

from shopsearch.core.config import EngineConfig
from shopsearch.domain.models.product import Product, ScoredProduct
from shopsearch.domain.models.search import (
    FilterSpec,
    SearchResult,
    SearchSuggestion,
    SortKey,
    parse_sort_key,
)
from shopsearch.domain.services.filters import apply_filters, catalog_price_bounds
from shopsearch.domain.services.matcher import matches_any_field
from shopsearch.domain.services.scoring import score_catalog
from shopsearch.domain.services.sorting import sort_scored
from shopsearch.domain.services.suggestions import remember_search, suggest
from shopsearch.domain.services.text import normalize

logger = logging.getLogger(__name__)


def search_products(
    catalog: Sequence[Product],
    query: str = "",
    filters: Optional[FilterSpec] = None,
    sort: Union[SortKey, str, None] = SortKey.RELEVANCE,
    config: Optional[EngineConfig] = None,
) -> SearchResult:
    """
    Rank a catalog snapshot against a free-text query and structured filters.

    High-level flow:
      1) Resolve the sort key (unknown keys raise ValueError before any work).
      2) Apply the filter pipeline; unset price bounds default to the
         catalog-wide min/max so they never narrow.
      3) Text step, skipped for an empty query (every score is 0):
           - relevance sort: score every candidate, keep score > 0
           - other sort keys: keep candidates with a field containing the query,
             scores still attached when text scoring is on
           - text scoring off: field containment, score 0
      4) Sort with the selected strategy (stable; ties keep catalog order).

    Notes:
      - Inputs are never mutated; scores live on fresh ScoredProduct pairs.
      - Filtering runs before scoring; both are per-product and conjunctive.
    """
    t0 = time.perf_counter()
    key = parse_sort_key(sort)
    query = query or ""
    config = config or EngineConfig()
    q = normalize(query)
    logger.info(
        "search start query=%r sort=%s products=%s text_scoring=%s",
        query, key.value, len(catalog), config.enable_text_scoring,
    )

    # ---- 2) Filter pipeline -------------------------------------------------
    candidates = apply_filters(catalog, filters, catalog_price_bounds(catalog))
    logger.debug("search filtered candidates=%s", len(candidates))

    # ---- 3) Text step --------------------------------------------------------
    items: List[ScoredProduct]
    if not q:
        items = [ScoredProduct(product=p, score=0) for p in candidates]
    elif not config.enable_text_scoring:
        items = [ScoredProduct(product=p, score=0) for p in candidates if matches_any_field(p, q)]
    else:
        scored = score_catalog(candidates, query, config.synonym_table, config.preferred_price_band)
        if key is SortKey.RELEVANCE:
            items = [s for s in scored if s.score > 0]
        else:
            # Scores stay attached for display; only containment gates
            items = [s for s in scored if matches_any_field(s.product, q)]
    logger.debug("search text_matched=%s", len(items))

    # ---- 4) Sort -------------------------------------------------------------
    ordered = sort_scored(items, key, query, enable_text_scoring=config.enable_text_scoring)

    logger.info("search done items=%s total_time=%.4fs", len(ordered), time.perf_counter() - t0)
    return SearchResult(query=query, sort=key, items=ordered, count=len(ordered))


def suggest_queries(
    query: str,
    catalog: Sequence[Product],
    recent_history: Optional[Sequence[str]] = None,
    config: Optional[EngineConfig] = None,
) -> List[SearchSuggestion]:
    """Suggestions for a (possibly partial) query; advisory only, never fed back into ranking."""
    t0 = time.perf_counter()
    config = config or EngineConfig()
    out = suggest(
        query,
        catalog,
        recent_history,
        caps=config.suggestion_caps,
        suffixes=config.autocomplete_suffixes,
    )
    logger.info("suggest done query=%r items=%s time=%.4fs", query, len(out), time.perf_counter() - t0)
    return out


def record_search(
    history: Sequence[str],
    query: str,
    config: Optional[EngineConfig] = None,
) -> List[str]:
    """Push a submitted query onto the recent-search list, capped at config.history_limit."""
    config = config or EngineConfig()
    out = remember_search(history, query, limit=config.history_limit)
    logger.debug("record_search query=%r history=%s", query, len(out))
    return out
