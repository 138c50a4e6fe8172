# supplier_matching/matchers/ranking.py

from typing import List, Sequence
from loguru import logger

from supplier_matching.config import DEFAULT_MINIMUM_SCORE
from supplier_matching.models import SUPPLIER_ROLE, MatchResult, RequestCriteria, SupplierProfile
from supplier_matching.matchers.compatibility_scorer import clean_values, is_set, score_supplier


def has_search_criteria(request: RequestCriteria) -> bool:
    """
    Whether the request sets a business type, categories or tags.

    A request without them still ranks (every supplier earns the neutral
    credits), but the supplier search only runs matching when this is True.
    Industry alone does not trigger a search.
    """
    tags = list(request.required_tags or []) + list(request.custom_required_tags or [])
    return bool(
        is_set(request.required_business_type)
        or clean_values(request.required_categories)
        or clean_values(tags)
    )


def _sort_key(match: MatchResult):
    # Raw score desc, reputation desc (missing last), supplier id asc.
    reputation = match.supplier.score
    return (
        -match.raw_score,
        reputation is None,
        -(reputation or 0.0),
        match.supplier.id or "",
    )


def match_suppliers(
    request: RequestCriteria,
    suppliers: Sequence[SupplierProfile],
    minimum_score: float = DEFAULT_MINIMUM_SCORE,
) -> List[MatchResult]:
    """
    Score every supplier against a request and return the ranked matches.

    Args:
        request (RequestCriteria): Request criteria.
        suppliers (Sequence[SupplierProfile]): Candidate pool; profiles whose role
            is not "supplier" are skipped without being scored.
        minimum_score (float): Matches with a raw score below this are dropped.

    Returns:
        List[MatchResult]: Matches sorted by raw score, highest first. Ties are
        broken by reputation score, then supplier id, then input order.
    """
    eligible = [s for s in suppliers if s.role == SUPPLIER_ROLE]
    matches = [score_supplier(request, supplier) for supplier in eligible]
    kept = [m for m in matches if m.raw_score >= minimum_score]
    kept.sort(key=_sort_key)

    logger.debug(
        f"Request {request.id or '<unsaved>'}: {len(suppliers)} candidates, "
        f"{len(eligible)} suppliers scored, {len(kept)} at or above {minimum_score}"
    )
    return kept


def filter_by_minimum_score(matches: Sequence[MatchResult], minimum_score: float) -> List[MatchResult]:
    """
    Re-apply a threshold to already ranked matches without rescoring them.
    Order is preserved.
    """
    return [m for m in matches if m.raw_score >= minimum_score]


def filter_by_text(matches: Sequence[MatchResult], text: str) -> List[MatchResult]:
    """
    Keep matches whose supplier name, location, email or any tag contains
    the given text (case-insensitive). Blank text keeps everything.
    """
    if not text or not text.strip():
        return list(matches)

    needle = text.strip().lower()

    def hit(supplier: SupplierProfile) -> bool:
        fields = [supplier.name, supplier.location, supplier.email]
        if any(f and needle in f.lower() for f in fields):
            return True
        return any(needle in tag.lower() for tag in supplier.tag_pool() if tag)

    return [m for m in matches if hit(m.supplier)]
