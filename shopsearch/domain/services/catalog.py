import json
import logging
import time
from typing import Any, Iterable, List

from pydantic import ValidationError

from shopsearch.domain.models.product import Product

logger = logging.getLogger(__name__)


def _json_preview(obj: Any, limit: int = 1000) -> str:
    """Minify and truncate JSON for debug logs."""
    try:
        s = json.dumps(obj, separators=(",", ":"), ensure_ascii=False, default=str)
        return s if len(s) <= limit else s[:limit] + "…[truncated]"
    except (TypeError, ValueError):
        return "<unserializable>"


def load_catalog(records: Iterable[Any]) -> List[Product]:
    """
    Validate a fetched catalog snapshot into Products.

    Loosely-typed fields are defaulted by the Product validators (bad price or
    stock -> 0, missing text -> ""). Records that cannot form a Product at all
    (no id or name, not a mapping) are skipped with a warning; this never raises.
    """
    t0 = time.perf_counter()
    products: List[Product] = []
    skipped = 0
    for i, rec in enumerate(records):
        if isinstance(rec, Product):
            products.append(rec)
            continue
        try:
            products.append(Product.model_validate(rec))
        except ValidationError as e:
            skipped += 1
            logger.warning("load_catalog skipped record #%s: %s error(s)", i, e.error_count())
            logger.debug("load_catalog bad record=%s", _json_preview(rec))
    logger.info(
        "load_catalog done products=%s skipped=%s time=%.4fs",
        len(products), skipped, time.perf_counter() - t0,
    )
    return products
