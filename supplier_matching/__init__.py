"""Supplier-request compatibility matching engine."""
from supplier_matching.models import MatchDetails, MatchResult, RequestCriteria, SupplierProfile
from supplier_matching.matchers import match_suppliers, score_supplier
from supplier_matching.presentation import compatibility_color, compatibility_level, match_summary

__all__ = [
    "RequestCriteria",
    "SupplierProfile",
    "MatchDetails",
    "MatchResult",
    "score_supplier",
    "match_suppliers",
    "compatibility_level",
    "compatibility_color",
    "match_summary",
]
