from enum import Enum
from typing import List, Optional, Union
from pydantic import BaseModel, Field, field_validator

from shopsearch.domain.models.product import Product, ScoredProduct


class SortKey(str, Enum):
    RELEVANCE = "relevance"
    NAME = "name"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    NEWEST = "newest"
    POPULARITY = "popularity"
    OLDEST = "oldest"
    FEATURED = "featured"


# Spellings used by the storefront UI and query strings
_SORT_ALIASES = {
    "ai_score": SortKey.RELEVANCE,
    "name_asc": SortKey.NAME,
    "price_low": SortKey.PRICE_ASC,
    "price-low": SortKey.PRICE_ASC,
    "price_high": SortKey.PRICE_DESC,
    "price-high": SortKey.PRICE_DESC,
    "popular": SortKey.POPULARITY,
}


def parse_sort_key(value: Union[str, SortKey, None]) -> SortKey:
    """
    Resolve a sort key from an enum member, its value or a known alias.
    None means the default (relevance). Anything else is a programming
    mistake in the caller and raises ValueError.
    """
    if value is None:
        return SortKey.RELEVANCE
    if isinstance(value, SortKey):
        return value
    s = str(value).strip().lower()
    if s in _SORT_ALIASES:
        return _SORT_ALIASES[s]
    try:
        return SortKey(s)
    except ValueError:
        raise ValueError(f"Unknown sort key: {value!r}") from None


class FilterSpec(BaseModel):
    """
    Structured constraints, all optional. Unset fields never exclude anything.
    Price bounds default to the catalog-wide min/max at apply time.
    """
    category: str = "all"
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    in_stock_only: bool = False
    featured_only: bool = False
    latest_only: bool = False
    best_selling_only: bool = False

    model_config = {"frozen": True}

    @field_validator("category", mode="before")
    @classmethod
    def _category_or_all(cls, v):
        s = "" if v is None else str(v).strip()
        return s or "all"

    @field_validator("min_price", "max_price", mode="before")
    @classmethod
    def _parse_bound(cls, v):
        # Unparseable bounds read as unset
        if v is None or isinstance(v, bool) or v == "":
            return None
        try:
            n = float(str(v).replace(",", "").strip())
        except (TypeError, ValueError):
            return None
        return None if n != n else n  # NaN


class SuggestionOrigin(str, Enum):
    RECENT = "recent"
    TRENDING = "trending"
    AUTOCOMPLETE = "autocomplete"


class SearchSuggestion(BaseModel):
    text: str
    origin: SuggestionOrigin
    count: Optional[int] = None
    model_config = {"frozen": True}


class SearchResult(BaseModel):
    query: str
    sort: SortKey
    items: List[ScoredProduct] = Field(default_factory=list)
    count: int = 0
    model_config = {"frozen": True} # immuable = safe

    @field_validator("sort", mode="before")
    @classmethod
    def _parse_sort(cls, v):
        return parse_sort_key(v)

    @property
    def products(self) -> List[Product]:
        return [item.product for item in self.items]
