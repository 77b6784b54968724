from pydantic import AliasChoices, BaseModel, Field, field_validator
from typing import Any, Optional
from datetime import datetime, timezone
import math

_TRUTHY = {"1", "true", "yes", "on"}


def _as_number(value: Any, cast):
    """Parse a loosely-typed catalog number; anything unparseable or negative is 0."""
    if value is None or isinstance(value, bool):
        return cast(0)
    try:
        n = cast(float(str(value).replace(",", "").strip()))
    except (TypeError, ValueError, OverflowError):
        return cast(0)
    if not math.isfinite(n) or n < 0:
        return cast(0)
    return n


class Product(BaseModel):
    """
    One catalog entry, validated once at the catalog boundary.
    Read-only for the engine: scores live on ScoredProduct, never here.
    """
    id: str
    name: str
    description: str = ""
    category: str = ""
    price: float = 0.0
    stock: int = 0
    featured: bool = Field(default=False, validation_alias=AliasChoices("featured", "is_featured"))
    latest: bool = Field(default=False, validation_alias=AliasChoices("latest", "is_latest"))
    best_selling: bool = Field(
        default=False,
        validation_alias=AliasChoices("best_selling", "bestSelling", "is_best_selling"),
    )
    created_at: Optional[datetime] = None

    model_config = {"frozen": True, "populate_by_name": True}  # immuable = safe

    @field_validator("id", "name", mode="before")
    @classmethod
    def _as_str(cls, v):
        return v if v is None else str(v)

    @field_validator("description", "category", mode="before")
    @classmethod
    def _text_or_empty(cls, v):
        return "" if v is None else str(v)

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, v):
        return _as_number(v, float)

    @field_validator("stock", mode="before")
    @classmethod
    def _parse_stock(cls, v):
        return _as_number(v, int)

    @field_validator("featured", "latest", "best_selling", mode="before")
    @classmethod
    def _parse_flag(cls, v):
        if isinstance(v, str):
            return v.strip().lower() in _TRUTHY
        return bool(v)

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_created_at(cls, v):
        if v is None or v == "":
            return None
        if isinstance(v, datetime):
            dt = v
        else:
            try:
                dt = datetime.fromisoformat(str(v).strip().replace("Z", "+00:00"))
            except ValueError:
                return None
        # Naive timestamps are stored as UTC
        return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)

    @property
    def in_stock(self) -> bool:
        return self.stock > 0


class ScoredProduct(BaseModel):
    product: Product
    score: int = Field(ge=0)
    model_config = {"frozen": True} # immuable = safe
