"""Application layer - search, autocomplete and type linking.

These modules depend only on the domain layer; registries, schedulers and
event consumers are passed in.
"""

from docnav.application.autocomplete import DEBOUNCE_DELAY, AutocompleteController, AutocompleteState
from docnav.application.search_engine import (
    MAX_RESULTS_PER_CATEGORY,
    MAX_TOTAL_RESULTS,
    MIN_QUERY_LENGTH,
    SearchQueryEngine,
)
from docnav.application.type_expression import TypeExpressionResolver, render_html, render_plain, tokenize

__all__ = [
    "AutocompleteController",
    "AutocompleteState",
    "DEBOUNCE_DELAY",
    "SearchQueryEngine",
    "MIN_QUERY_LENGTH",
    "MAX_RESULTS_PER_CATEGORY",
    "MAX_TOTAL_RESULTS",
    "TypeExpressionResolver",
    "tokenize",
    "render_html",
    "render_plain",
]
