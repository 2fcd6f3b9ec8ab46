# core/catalog_engine/params.py
"""
Search parameters for catalog queries.

Query strings arrive untyped. Values that do not parse are treated as absent
and fall back to defaults, so a malformed filter never fails a request.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Mapping, Optional

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 12
MAX_LIMIT = 50


class Category(Enum):
    DESIGNER = "designer"
    NICHE = "niche"
    FRESH = "fresh"
    ORIENTAL = "oriental"


class Gender(Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    UNISEX = "unisex"


class SortKey(Enum):
    NAME = "name"
    BRAND = "brand"
    PRICE = "price"
    CREATED_AT = "createdAt"


class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SearchParams:
    """Per-request catalog query, built fresh from the query string"""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search: Optional[str] = None
    brand: Optional[str] = None
    category: Optional[Category] = None
    gender: Optional[Gender] = None
    price_min: Optional[Decimal] = None
    price_max: Optional[Decimal] = None
    in_stock: Optional[bool] = None
    sort_by: Optional[SortKey] = None
    sort_order: SortOrder = SortOrder.DESC

    @classmethod
    def from_query(cls, query: Mapping[str, Optional[str]]) -> "SearchParams":
        """
        Build params from raw query-string values keyed by their public names
        (page, limit, search, brand, category, gender, priceMin, priceMax,
        inStock, sortBy, sortOrder).
        """
        return cls(
            page=parse_positive_int(query.get("page"), DEFAULT_PAGE),
            limit=clamp_limit(parse_positive_int(query.get("limit"), DEFAULT_LIMIT)),
            search=_clean_text(query.get("search")),
            brand=_clean_text(query.get("brand")),
            category=parse_enum(Category, query.get("category")),
            gender=parse_enum(Gender, query.get("gender")),
            price_min=parse_price(query.get("priceMin")),
            price_max=parse_price(query.get("priceMax")),
            in_stock=parse_flag(query.get("inStock")),
            sort_by=parse_sort_key(query.get("sortBy")),
            sort_order=parse_enum(SortOrder, query.get("sortOrder")) or SortOrder.DESC,
        )


def _clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_positive_int(value: Optional[str], default: int) -> int:
    """Parse a positive integer, falling back to default on anything else"""
    if value is None:
        return default
    try:
        number = int(value.strip())
    except ValueError:
        return default
    return number if number >= 1 else default


def clamp_limit(limit: int) -> int:
    return min(limit, MAX_LIMIT)


def parse_price(value: Optional[str]) -> Optional[Decimal]:
    """Parse a non-negative finite price; unparseable input means no bound"""
    text = _clean_text(value)
    if text is None:
        return None
    try:
        price = Decimal(text)
    except InvalidOperation:
        return None
    if not price.is_finite() or price < 0:
        return None
    return price


def parse_flag(value: Optional[str]) -> Optional[bool]:
    # Only an explicit "true" constrains; anything else leaves stock unconstrained
    text = _clean_text(value)
    if text is not None and text.lower() == "true":
        return True
    return None


def parse_enum(enum_cls, value: Optional[str]):
    text = _clean_text(value)
    if text is None:
        return None
    try:
        return enum_cls(text.lower())
    except ValueError:
        return None


def parse_sort_key(value: Optional[str]) -> Optional[SortKey]:
    text = _clean_text(value)
    if text is None:
        return None
    if text in ("created_at", "createdAt"):
        return SortKey.CREATED_AT
    try:
        return SortKey(text.lower())
    except ValueError:
        return None
