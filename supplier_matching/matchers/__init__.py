"""Compatibility scoring and ranking of suppliers against a request."""
from supplier_matching.matchers.compatibility_scorer import score_supplier, tag_matches
from supplier_matching.matchers.ranking import (
    filter_by_minimum_score,
    filter_by_text,
    has_search_criteria,
    match_suppliers,
)

__all__ = [
    "score_supplier",
    "tag_matches",
    "match_suppliers",
    "has_search_criteria",
    "filter_by_minimum_score",
    "filter_by_text",
]
