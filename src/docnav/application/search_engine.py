"""
Faceted substring search over the documentation index.
"""

from __future__ import annotations

from collections.abc import Sequence

from docnav.domain.types import FacetedResultSet, SearchCategory, SearchIndexEntry
from docnav.logger import get_logger

logger = get_logger("search.engine")

MIN_QUERY_LENGTH = 2
"""Shortest query the autocomplete controller will evaluate."""

MAX_RESULTS_PER_CATEGORY = 5
MAX_TOTAL_RESULTS = 30


class SearchQueryEngine:
    """Filters a search index by case-insensitive substring.

    An entry matches when the query occurs in its name, qualified name or
    signature. Matches are bucketed by category, at most
    ``MAX_RESULTS_PER_CATEGORY`` per bucket, and the scan stops as soon as
    ``MAX_TOTAL_RESULTS`` entries have been collected. Results keep index
    order; nothing is ranked.

    The index is shared read-only, so one engine can serve any number of
    controllers.
    """

    def __init__(self, search_index: Sequence[SearchIndexEntry]) -> None:
        self._index = search_index

    def filter(self, query: str) -> FacetedResultSet:
        buckets: dict[SearchCategory, list[SearchIndexEntry]] = {category: [] for category in SearchCategory}
        if not query:
            return FacetedResultSet(buckets)

        needle = query.lower()
        total = 0
        scanned = 0
        for entry in self._index:
            scanned += 1
            if not any(needle in value.lower() for value in entry.searchable_fields()):
                continue
            bucket = buckets.get(entry.category)
            if bucket is None or len(bucket) >= MAX_RESULTS_PER_CATEGORY:
                continue
            bucket.append(entry)
            total += 1
            if total >= MAX_TOTAL_RESULTS:
                break

        logger.debug(f"Query {query!r} matched {total} entries after scanning {scanned}/{len(self._index)}")
        return FacetedResultSet(buckets)
