from typing import FrozenSet, Iterable, List, Mapping, Optional, Set

from shopsearch.domain.services.synonyms import DEFAULT_SYNONYM_TABLE


def normalize(text: Optional[str]) -> str:
    """Lowercase and trim. None reads as the empty string."""
    if text is None:
        return ""
    return str(text).strip().lower()


def tokenize(text: Optional[str]) -> List[str]:
    """Split normalized text on whitespace; no stemming, no diacritic folding."""
    return normalize(text).split()


def keyword_groups(table: Optional[Mapping[str, Iterable[str]]] = None) -> List[FrozenSet[str]]:
    """
    One normalized term set per table entry (canonical term + its equivalents),
    in table order.
    """
    if table is None:
        table = DEFAULT_SYNONYM_TABLE
    groups = []
    for canonical, equivalents in table.items():
        terms = {normalize(canonical)} | {normalize(t) for t in equivalents or ()}
        terms.discard("")
        if terms:
            groups.append(frozenset(terms))
    return groups


def expand_bilingual_synonyms(term: str, table: Optional[Mapping[str, Iterable[str]]] = None) -> Set[str]:
    """
    Return every form of `term` across the keyword groups it belongs to.
    A term outside the table expands to itself only.
    """
    t = normalize(term)
    expanded: Set[str] = set()
    for group in keyword_groups(table):
        if t in group:
            expanded |= group
    return expanded or {t}
