import pytest

from supplier_matching.models import MatchDetails
from supplier_matching.presentation import (
    NO_MATCHES_SUMMARY,
    compatibility_color,
    compatibility_level,
    match_summary,
)


@pytest.mark.parametrize(
    "score, level, color",
    [
        (105, "very high", "#10B981"),
        (80, "very high", "#10B981"),
        (79.9, "high", "#3B82F6"),
        (60, "high", "#3B82F6"),
        (40, "medium", "#F59E0B"),
        (20, "low", "#EF4444"),
        (19.99, "very low", "#9CA3AF"),
        (0, "very low", "#9CA3AF"),
    ],
)
def test_level_and_color_share_thresholds(score, level, color):
    assert compatibility_level(score) == level
    assert compatibility_color(score) == color


def test_summary_lists_matched_criteria_in_fixed_order():
    details = MatchDetails(
        business_type_match=True,
        category_matches=["materia_prima", "componentes"],
        tag_matches=["acero"],
        industry_match=True,
    )
    assert match_summary(details) == (
        "Business type matched • 2 category(ies) matched • "
        "1 product/service tag(s) matched • Industry matched"
    )


def test_summary_skips_unmatched_criteria():
    details = MatchDetails(tag_matches=["acero", "cobre", "pvc"], industry_match=True)
    assert match_summary(details) == "3 product/service tag(s) matched • Industry matched"


def test_summary_without_matches():
    assert match_summary(MatchDetails()) == NO_MATCHES_SUMMARY
