
# Point values of the relevance scorer. These are a contract: tests assert on them.
SCORE_EXACT_NAME = 100      # normalized name == normalized query
SCORE_NAME_CONTAINS = 50
SCORE_DESCRIPTION_CONTAINS = 20
SCORE_CATEGORY_CONTAINS = 30
SCORE_KEYWORD_GROUP = 40    # per synonym group matched by both query and name

# Boosts, only applied on top of a text match
SCORE_FEATURED = 15
SCORE_LATEST = 10
SCORE_BEST_SELLING = 12
SCORE_PRICE_BAND = 5
PREFERRED_PRICE_BAND = (300.0, 2000.0)  # inclusive

# Popularity heuristic weights (relevance sort without a usable query)
POPULARITY_FEATURED = 3
POPULARITY_LATEST = 2
POPULARITY_BEST_SELLING = 2

# Suggestion caps, in priority order
MAX_RECENT_SUGGESTIONS = 3
MAX_TRENDING_SUGGESTIONS = 4
MAX_AUTOCOMPLETE_SUGGESTIONS = 2

# Suffix words appended to the query for auto-completions (gift, custom, personal, special, handmade)
AUTOCOMPLETE_SUFFIXES = ("গিফট", "কাস্টম", "ব্যক্তিগত", "বিশেষ", "হ্যান্ডমেড")

# How many past queries a host keeps in its recent-search list
RECENT_HISTORY_LIMIT = 10

# Category value meaning "no category constraint"
CATEGORY_ALL = "all"
