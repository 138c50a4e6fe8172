"""
Typed data models for the supplier matching engine.
All data structures used throughout the codebase should be defined here.
"""
from dataclasses import dataclass, field
from typing import List, Optional

SUPPLIER_ROLE = "supplier"
ANY_BUSINESS_TYPE = "any"


@dataclass
class RequestCriteria:
    """Search criteria of a procurement request."""
    required_business_type: Optional[str] = None  # manufacturer | distributor | service | any
    required_categories: List[str] = field(default_factory=list)
    required_tags: List[str] = field(default_factory=list)
    custom_required_tags: List[str] = field(default_factory=list)
    industry: Optional[str] = None
    id: Optional[str] = None
    title: Optional[str] = None


@dataclass
class SupplierProfile:
    """Supplier record as loaded from the user store."""
    role: str = SUPPLIER_ROLE
    business_type: Optional[str] = None  # manufacturer | distributor | service | mixed
    product_categories: List[str] = field(default_factory=list)
    product_tags: List[str] = field(default_factory=list)
    service_tags: List[str] = field(default_factory=list)
    custom_product_tags: List[str] = field(default_factory=list)
    custom_service_tags: List[str] = field(default_factory=list)
    industries: List[str] = field(default_factory=list)
    score: Optional[float] = None  # Reputation (EPI audit) score, 0-100
    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    location: Optional[str] = None

    def tag_pool(self) -> List[str]:
        """Union of all four tag sets, first occurrence order."""
        tags = []
        for group in (self.product_tags, self.service_tags, self.custom_product_tags, self.custom_service_tags):
            tags.extend(group or [])
        return list(dict.fromkeys(tags))


@dataclass
class MatchDetails:
    """Which sub-criteria matched; used for explanations, not for scoring."""
    business_type_match: bool = False
    category_matches: List[str] = field(default_factory=list)
    tag_matches: List[str] = field(default_factory=list)
    industry_match: bool = False


@dataclass
class MatchResult:
    """Scored supplier for one request."""
    supplier: SupplierProfile
    raw_score: float
    match_details: MatchDetails
    compatibility_percentage: int
