import logging
from typing import List, Optional, Sequence, Tuple

from shopsearch.domain.models.product import Product
from shopsearch.domain.models.search import FilterSpec
from shopsearch.domain.services.constants import CATEGORY_ALL
from shopsearch.domain.services.text import normalize

logger = logging.getLogger(__name__)

def _normalize_category(c) -> Optional[str]:
    """
    Normalize a category constraint.
    Returns None when it does not constrain anything ('all' or empty).
    """
    s = normalize(c)
    if not s or s == CATEGORY_ALL:
        return None
    return s

def catalog_price_bounds(products: Sequence[Product]) -> Tuple[float, float]:
    """Lowest and highest price in the catalog; (0, 0) when it is empty."""
    if not products:
        return 0.0, 0.0
    prices = [p.price for p in products]
    return min(prices), max(prices)

def available_categories(products: Sequence[Product]) -> List[str]:
    """Distinct non-empty categories, sorted."""
    return sorted({p.category for p in products if p.category})

def effective_price_range(spec: FilterSpec, bounds: Tuple[float, float]) -> Tuple[float, float]:
    """Fill unset price bounds with the catalog-wide ones so an unset range never narrows."""
    low = spec.min_price if spec.min_price is not None else bounds[0]
    high = spec.max_price if spec.max_price is not None else bounds[1]
    return low, high

def apply_filters(
    products: Sequence[Product],
    spec: Optional[FilterSpec] = None,
    bounds: Optional[Tuple[float, float]] = None,
) -> List[Product]:
    """
    Keep the products satisfying every constraint of `spec` (logical AND),
    in input order. `bounds` defaults to the price bounds of `products`.
    """
    if spec is None:
        return list(products)
    if bounds is None:
        bounds = catalog_price_bounds(products)

    category = _normalize_category(spec.category)
    low, high = effective_price_range(spec, bounds)
    logger.debug(
        "apply_filters category=%s price=[%s, %s] in_stock=%s featured=%s latest=%s best_selling=%s",
        category, low, high, spec.in_stock_only, spec.featured_only, spec.latest_only, spec.best_selling_only,
    )

    out = []
    for p in products:
        if category is not None and normalize(p.category) != category:
            continue
        if not (low <= p.price <= high):
            continue
        if spec.in_stock_only and p.stock <= 0:
            continue
        if spec.featured_only and not p.featured:
            continue
        if spec.latest_only and not p.latest:
            continue
        if spec.best_selling_only and not p.best_selling:
            continue
        out.append(p)
    return out

def active_filter_count(spec: FilterSpec, bounds: Tuple[float, float]) -> int:
    """
    Number of constraints in `spec` that can narrow a catalog with these price bounds.
    A price range counts once, and only when it is tighter than the bounds.
    """
    count = 0
    if _normalize_category(spec.category) is not None:
        count += 1
    low, high = effective_price_range(spec, bounds)
    if low > bounds[0] or high < bounds[1]:
        count += 1
    count += sum([spec.in_stock_only, spec.featured_only, spec.latest_only, spec.best_selling_only])
    return count
