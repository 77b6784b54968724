from typing import List, Optional, Sequence

from shopsearch.core.config import SuggestionCaps
from shopsearch.domain.models.product import Product
from shopsearch.domain.models.search import SearchSuggestion, SuggestionOrigin
from shopsearch.domain.services.constants import AUTOCOMPLETE_SUFFIXES, RECENT_HISTORY_LIMIT
from shopsearch.domain.services.matcher import MatchedField, match_fields
from shopsearch.domain.services.text import normalize

_TRENDING_FIELDS = {MatchedField.NAME, MatchedField.CATEGORY}


def suggest(
    query: str,
    catalog: Sequence[Product],
    recent_history: Optional[Sequence[str]] = None,
    caps: Optional[SuggestionCaps] = None,
    suffixes: Sequence[str] = AUTOCOMPLETE_SUFFIXES,
) -> List[SearchSuggestion]:
    """
    Query suggestions in fixed priority order:
      1) recent searches containing the query,
      2) catalog products whose name or category contains it (count = stock),
      3) the query followed by a suffix word.
    Within a group, history/catalog/suffix order is kept. Nothing is scored.
    An empty query yields only the (capped) recent searches.
    """
    caps = caps or SuggestionCaps()
    history = [h for h in (recent_history or []) if h and h.strip()]
    q = normalize(query)
    out: List[SearchSuggestion] = []

    recent = [h for h in history if q in normalize(h)]
    out += [SearchSuggestion(text=h, origin=SuggestionOrigin.RECENT) for h in recent[:caps.recent]]
    if not q:
        return out

    trending = [p for p in catalog if match_fields(p, q) & _TRENDING_FIELDS]
    out += [
        SearchSuggestion(text=p.name, origin=SuggestionOrigin.TRENDING, count=p.stock)
        for p in trending[:caps.trending]
    ]

    completions = [f"{query.strip()} {s}" for s in suffixes[:caps.auto_complete]]
    out += [SearchSuggestion(text=c, origin=SuggestionOrigin.AUTOCOMPLETE) for c in completions]
    return out


def remember_search(history: Sequence[str], query: str, limit: int = RECENT_HISTORY_LIMIT) -> List[str]:
    """
    New recent-search list with `query` moved to the front, de-duplicated and capped.
    The caller owns the list; the input is never modified.
    """
    q = (query or "").strip()
    if not q:
        return list(history)
    return ([q] + [h for h in history if h != q])[:limit]
