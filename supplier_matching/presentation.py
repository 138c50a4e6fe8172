"""
Display helpers derived from a compatibility score.
"""
from typing import List, Tuple

from supplier_matching.models import MatchDetails

# (lower bound, level, badge color), highest first
LEVELS: List[Tuple[float, str, str]] = [
    (80, "very high", "#10B981"),  # green
    (60, "high", "#3B82F6"),  # blue
    (40, "medium", "#F59E0B"),  # amber
    (20, "low", "#EF4444"),  # red
]
LOWEST_LEVEL = ("very low", "#9CA3AF")  # gray

NO_MATCHES_SUMMARY = "General supplier with no specific matches"
SUMMARY_SEPARATOR = " • "


def _band(score: float) -> Tuple[str, str]:
    for lower, level, color in LEVELS:
        if score >= lower:
            return level, color
    return LOWEST_LEVEL


def compatibility_level(score: float) -> str:
    """Compatibility level label for a score: very high, high, medium, low or very low."""
    return _band(score)[0]


def compatibility_color(score: float) -> str:
    """Hex color of the compatibility badge for a score."""
    return _band(score)[1]


def match_summary(details: MatchDetails) -> str:
    """
    One-line explanation of what matched, in a fixed order:
    business type, categories, tags, industry.
    """
    parts = []
    if details.business_type_match:
        parts.append("Business type matched")
    if details.category_matches:
        parts.append(f"{len(details.category_matches)} category(ies) matched")
    if details.tag_matches:
        parts.append(f"{len(details.tag_matches)} product/service tag(s) matched")
    if details.industry_match:
        parts.append("Industry matched")

    if not parts:
        return NO_MATCHES_SUMMARY
    return SUMMARY_SEPARATOR.join(parts)
