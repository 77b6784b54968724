from enum import Enum
from typing import Set

from shopsearch.domain.models.product import Product
from shopsearch.domain.services.text import normalize


class MatchedField(str, Enum):
    NAME = "name"
    DESCRIPTION = "description"
    CATEGORY = "category"


def field_texts(product: Product) -> dict:
    return {
        MatchedField.NAME: normalize(product.name),
        MatchedField.DESCRIPTION: normalize(product.description),
        MatchedField.CATEGORY: normalize(product.category),
    }


def match_fields(product: Product, term: str) -> Set[MatchedField]:
    """
    Fields of `product` whose normalized text contains the normalized `term`.
    Plain substring containment: "mug" also matches "mugshot".
    An empty term matches nothing.
    """
    t = normalize(term)
    if not t:
        return set()
    return {field for field, text in field_texts(product).items() if t in text}


def matches_any_field(product: Product, term: str) -> bool:
    return bool(match_fields(product, term))
