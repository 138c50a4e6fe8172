import os
import csv
import sys
from typing import List
from loguru import logger

from supplier_matching.models import MatchResult, RequestCriteria, SupplierProfile
from supplier_matching.loaders import load_requests_from_csv, load_suppliers_from_csv
from supplier_matching.matchers import has_search_criteria, match_suppliers
from supplier_matching.presentation import compatibility_level, match_summary
from supplier_matching.catalog import business_type_label, category_label
from supplier_matching.config import (
    REQUESTS_CSV,
    SUPPLIERS_CSV,
    OUTPUT_CSV,
    MIN_MATCH_SCORE,
    LOG_LEVEL,
)

OUTPUT_HEADER = [
    "Request",
    "Supplier",
    "Supplier name",
    "rawScore",
    "compatibilityPercentage",
    "compatibilityLevel",
    "summary",
    "matchedCategories",
    "supplierBusinessType",
]


def process_request(
    request: RequestCriteria,
    suppliers: List[SupplierProfile],
    minimum_score: float = MIN_MATCH_SCORE,
) -> List[MatchResult]:
    """
    Rank the supplier pool for a single request.

    Requests without any search criteria are skipped (empty result), the
    same way the supplier search screen only runs matching when the request
    carries criteria.

    Args:
        request (RequestCriteria): Request to match.
        suppliers (List[SupplierProfile]): Full user snapshot.
        minimum_score (float): Minimum raw score to keep.

    Returns:
        List[MatchResult]: Ranked matches for this request.
    """
    if not has_search_criteria(request):
        logger.info(f"Request {request.id}: no search criteria, skipping")
        return []

    matches = match_suppliers(request, suppliers, minimum_score)
    if not matches:
        logger.info(f"Request {request.id}: no suppliers at or above {minimum_score}")
    return matches


def result_row(request: RequestCriteria, match: MatchResult) -> list:
    return [
        request.id,
        match.supplier.id,
        match.supplier.name,
        round(match.raw_score, 2),
        match.compatibility_percentage,
        compatibility_level(match.raw_score),
        match_summary(match.match_details),
        ", ".join(category_label(c) for c in match.match_details.category_matches),
        business_type_label(match.supplier.business_type) if match.supplier.business_type else "",
    ]


def main():
    """
    Run the matching engine over every stored request.

    - Loads requests and the user snapshot from CSV exports.
    - Ranks suppliers for each request that has search criteria.
    - Writes one row per kept match to the output CSV.
    """
    # Initialize logs
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=LOG_LEVEL, format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>")

    requests = load_requests_from_csv(REQUESTS_CSV)
    suppliers = load_suppliers_from_csv(SUPPLIERS_CSV)

    output_path = OUTPUT_CSV
    if os.path.exists(output_path):
        os.remove(output_path)

    total = 0
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(OUTPUT_HEADER)
        for request in requests:
            matches = process_request(request, suppliers, MIN_MATCH_SCORE)
            for match in matches:
                writer.writerow(result_row(request, match))
            total += len(matches)

    logger.info(f"Wrote {total} matches for {len(requests)} requests to {output_path}")


if __name__ == "__main__":
    main()
