"""
Build engine inputs from stored records.

Records use the document store's field names (camelCase, e.g.
"requiredBusinessType", "customServiceTags"). CSV exports use the same names
as column headers, with multi-valued cells separated by LIST_SEPARATOR.
"""
import math
from typing import Any, Dict, List, Optional

import pandas as pd
from loguru import logger

from supplier_matching.catalog import normalize_business_type, normalize_role
from supplier_matching.config import LIST_SEPARATOR
from supplier_matching.models import RequestCriteria, SupplierProfile


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return False


def _as_text(value: Any) -> Optional[str]:
    if _is_missing(value):
        return None
    text = str(value).strip()
    return text or None


def _as_list(value: Any) -> List[str]:
    """Accept a list or a LIST_SEPARATOR-joined string; blanks are dropped."""
    if _is_missing(value):
        return []
    if isinstance(value, (list, tuple, set)):
        items = value
    else:
        items = str(value).split(LIST_SEPARATOR)
    return [str(item).strip() for item in items if not _is_missing(item) and str(item).strip()]


def _as_score(value: Any, record_id: Optional[str]) -> Optional[float]:
    if _is_missing(value) or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Supplier {record_id or '<no id>'}: score must be numeric, got {value!r}")


def request_from_record(record: Dict[str, Any]) -> RequestCriteria:
    """Convert a stored request document into RequestCriteria."""
    return RequestCriteria(
        required_business_type=normalize_business_type(_as_text(record.get("requiredBusinessType"))),
        required_categories=_as_list(record.get("requiredCategories")),
        required_tags=_as_list(record.get("requiredTags")),
        custom_required_tags=_as_list(record.get("customRequiredTags")),
        industry=_as_text(record.get("industry")),
        id=_as_text(record.get("id")),
        title=_as_text(record.get("title")),
    )


def supplier_from_record(record: Dict[str, Any]) -> SupplierProfile:
    """
    Convert a stored user document into a SupplierProfile.

    Raises:
        ValueError: If the reputation score is present but not numeric.
    """
    record_id = _as_text(record.get("id"))
    role = normalize_role(_as_text(record.get("role")))
    if role is None:
        logger.debug(f"Record {record_id or '<no id>'} has no role; it will not be matched")

    return SupplierProfile(
        role=role or "",
        business_type=normalize_business_type(_as_text(record.get("businessType"))),
        product_categories=_as_list(record.get("productCategories")),
        product_tags=_as_list(record.get("productTags")),
        service_tags=_as_list(record.get("serviceTags")),
        custom_product_tags=_as_list(record.get("customProductTags")),
        custom_service_tags=_as_list(record.get("customServiceTags")),
        industries=_as_list(record.get("industries")),
        score=_as_score(record.get("score"), record_id),
        id=record_id,
        name=_as_text(record.get("companyName")) or _as_text(record.get("name")),
        email=_as_text(record.get("email")),
        location=_as_text(record.get("location")),
    )


def _read_records(file_path: str, nrows: Optional[int] = None) -> List[Dict[str, Any]]:
    df = pd.read_csv(file_path, nrows=nrows, dtype=str, keep_default_na=True)
    # NaN cells become None so converters see a single "missing" value
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")


def load_suppliers_from_csv(file_path: str, nrows: Optional[int] = None) -> List[SupplierProfile]:
    """Load supplier profiles from a CSV export of the user store."""
    suppliers = [supplier_from_record(record) for record in _read_records(file_path, nrows)]
    logger.info(f"Loaded {len(suppliers)} user records from {file_path}")
    return suppliers


def load_requests_from_csv(file_path: str, nrows: Optional[int] = None) -> List[RequestCriteria]:
    """Load request criteria from a CSV export of the request store."""
    requests = [request_from_record(record) for record in _read_records(file_path, nrows)]
    logger.info(f"Loaded {len(requests)} requests from {file_path}")
    return requests
