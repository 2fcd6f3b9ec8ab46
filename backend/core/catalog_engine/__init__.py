"""
Catalog Engine - filter, sort and paginate the product catalog

Compiles storefront query parameters into a product predicate and a query plan,
runs them against a product store, and shapes results into response envelopes.
"""
from .params import SearchParams, Category, Gender, SortKey, SortOrder, DEFAULT_LIMIT, MAX_LIMIT
from .filters import ProductPredicate, compile_filters
from .planner import MAX_OFFSET, SortPlan, PagePlan, QueryPlan, plan_query, plan_sort, plan_page
from .assembler import FETCH_PRODUCTS_ERROR, build_product_page, build_fetch_error
from .store import ProductStore, SqlProductStore, InMemoryProductStore, get_async_session_context

__all__ = [
    "SearchParams",
    "Category",
    "Gender",
    "SortKey",
    "SortOrder",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "ProductPredicate",
    "compile_filters",
    "MAX_OFFSET",
    "SortPlan",
    "PagePlan",
    "QueryPlan",
    "plan_query",
    "plan_sort",
    "plan_page",
    "FETCH_PRODUCTS_ERROR",
    "build_product_page",
    "build_fetch_error",
    "ProductStore",
    "SqlProductStore",
    "InMemoryProductStore",
    "get_async_session_context"
]
