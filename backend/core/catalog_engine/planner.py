# core/catalog_engine/planner.py
"""
Sort/paginate planner - ordering and offset/limit for a catalog query
"""
import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from sqlalchemy.sql.elements import ColumnElement

from models.db_models import Product
from .params import DEFAULT_LIMIT, MAX_LIMIT, SearchParams, SortKey, SortOrder

# SQL OFFSET is bound as a signed 64-bit integer
MAX_OFFSET = 2**63 - 1

SORT_FIELDS = {
    SortKey.NAME: "name",
    SortKey.BRAND: "brand",
    SortKey.PRICE: "price_2ml",  # 2ml tier only, not the cheapest offered size
    SortKey.CREATED_AT: "created_at",
}


@dataclass(frozen=True)
class SortPlan:
    key: SortKey = SortKey.CREATED_AT
    descending: bool = True

    @property
    def field(self) -> str:
        return SORT_FIELDS[self.key]

    def order_by(self) -> List[ColumnElement]:
        column = getattr(Product, self.field)
        primary = column.desc() if self.descending else column.asc()
        if self.key == SortKey.PRICE:
            primary = primary.nulls_last()
        tiebreak = Product.id.desc() if self.descending else Product.id.asc()
        return [primary, tiebreak]

    def sort(self, products: Sequence[Any]) -> List[Any]:
        """Order products in memory exactly as order_by() orders rows"""
        ordered = sorted(products, key=lambda p: p.id, reverse=self.descending)
        present = [p for p in ordered if getattr(p, self.field) is not None]
        missing = [p for p in ordered if getattr(p, self.field) is None]
        # sorted() is stable, so equal keys keep the id order established above
        present = sorted(present, key=lambda p: getattr(p, self.field), reverse=self.descending)
        return present + missing


@dataclass(frozen=True)
class PagePlan:
    page: int = 1
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.limit)

    def has_more(self, total: int) -> bool:
        return self.page < self.total_pages(total)

    def slice(self, products: Sequence[Any]) -> List[Any]:
        return list(products[self.offset:self.offset + self.limit])


@dataclass(frozen=True)
class QueryPlan:
    sort: SortPlan
    page: PagePlan


def plan_sort(sort_by: Optional[SortKey], sort_order: SortOrder) -> SortPlan:
    """
    Map the requested sort onto a SortPlan.
    Without a recognised key the catalog shows newest first, ignoring sort_order.
    """
    if sort_by is None:
        return SortPlan(key=SortKey.CREATED_AT, descending=True)
    return SortPlan(key=sort_by, descending=sort_order == SortOrder.DESC)


def plan_page(page: int, limit: int) -> PagePlan:
    """Clamp page and limit; pages past MAX_OFFSET collapse onto the last addressable page"""
    limit = min(max(limit, 1), MAX_LIMIT)
    last_page = MAX_OFFSET // limit + 1
    return PagePlan(page=min(max(page, 1), last_page), limit=limit)


def plan_query(params: SearchParams) -> QueryPlan:
    return QueryPlan(
        sort=plan_sort(params.sort_by, params.sort_order),
        page=plan_page(params.page, params.limit),
    )
