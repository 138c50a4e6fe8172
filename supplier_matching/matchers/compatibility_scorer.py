import math
from typing import Iterable, List, Optional

from supplier_matching.config import (
    BUSINESS_TYPE_NEUTRAL,
    BUSINESS_TYPE_WEIGHT,
    CATEGORY_NEUTRAL,
    CATEGORY_WEIGHT,
    INDUSTRY_NEUTRAL,
    INDUSTRY_WEIGHT,
    REPUTATION_BONUS,
    REPUTATION_BONUS_THRESHOLD,
    TAG_NEUTRAL,
    TAG_WEIGHT,
)
from supplier_matching.models import (
    ANY_BUSINESS_TYPE,
    MatchDetails,
    MatchResult,
    RequestCriteria,
    SupplierProfile,
)


def clean_values(values: Optional[Iterable[str]]) -> List[str]:
    """Drop blank entries and duplicates, keeping first occurrence order."""
    if not values:
        return []
    cleaned = [str(v).strip() for v in values if v is not None and str(v).strip()]
    return list(dict.fromkeys(cleaned))


def is_set(value: Optional[str]) -> bool:
    return bool(value and str(value).strip())


def tag_matches(request_tags: Iterable[str], supplier_tags: Iterable[str]) -> List[str]:
    """
    Return the request tags that match at least one supplier tag.

    A pair matches when either string is a case-insensitive substring of the
    other, so "tornillo" matches "Tornillos M8" and "Acero Inoxidable"
    matches "acero".

    Args:
        request_tags (Iterable[str]): Tags the request asks for.
        supplier_tags (Iterable[str]): The supplier's tag pool.

    Returns:
        List[str]: Matched request tags, in request order.
    """
    pool = [tag.lower() for tag in clean_values(supplier_tags)]
    matched = []
    for tag in clean_values(request_tags):
        needle = tag.lower()
        if any(needle in candidate or candidate in needle for candidate in pool):
            matched.append(tag)
    return matched


def _proportional(weight: float, matched: int, required: int) -> float:
    assert required > 0, "proportional credit needs at least one required item"
    return weight * matched / required


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_supplier(request: RequestCriteria, supplier: SupplierProfile) -> MatchResult:
    """
    Compute how compatible a supplier is with a request's search criteria.

    Five additive criteria: business type (25), categories (20), tags (40),
    industry (10) and a reputation bonus (5). A criterion the request leaves
    unset earns a fixed neutral credit instead, so under-specified requests
    still rank suppliers. Empty collections count as unset.

    Args:
        request (RequestCriteria): Request criteria.
        supplier (SupplierProfile): Supplier to evaluate.

    Returns:
        MatchResult: Raw score (0-105), rounded percentage and match details.
    """
    details = MatchDetails()
    score = 0.0

    # Business type
    if is_set(request.required_business_type):
        required_type = request.required_business_type.strip()
        if required_type == ANY_BUSINESS_TYPE or required_type == supplier.business_type:
            score += BUSINESS_TYPE_WEIGHT
            details.business_type_match = True
    else:
        score += BUSINESS_TYPE_NEUTRAL

    # Categories, proportional to overlap
    required_categories = clean_values(request.required_categories)
    if required_categories:
        supplier_categories = set(clean_values(supplier.product_categories))
        details.category_matches = [c for c in required_categories if c in supplier_categories]
        score += _proportional(CATEGORY_WEIGHT, len(details.category_matches), len(required_categories))
    else:
        score += CATEGORY_NEUTRAL

    # Tags, the dominant criterion
    request_tags = clean_values(list(request.required_tags or []) + list(request.custom_required_tags or []))
    if request_tags:
        details.tag_matches = tag_matches(request_tags, supplier.tag_pool())
        score += _proportional(TAG_WEIGHT, len(details.tag_matches), len(request_tags))
    else:
        score += TAG_NEUTRAL

    # Industry
    if is_set(request.industry):
        if request.industry.strip() in clean_values(supplier.industries):
            score += INDUSTRY_WEIGHT
            details.industry_match = True
    else:
        score += INDUSTRY_NEUTRAL

    # Reputation bonus, never neutral
    if supplier.score is not None and supplier.score >= REPUTATION_BONUS_THRESHOLD:
        score += REPUTATION_BONUS

    return MatchResult(
        supplier=supplier,
        raw_score=score,
        match_details=details,
        compatibility_percentage=round_half_up(score),
    )
