# services/product_service.py - Catalog queries for the API and storefront pages
import asyncio
from dataclasses import dataclass, field
from typing import List

from core.catalog_engine import (
    PagePlan,
    ProductPredicate,
    ProductStore,
    QueryPlan,
    SearchParams,
    SortPlan,
    build_fetch_error,
    build_product_page,
    compile_filters,
    plan_query,
)
from core.logger import get_logger
from models.product_models import ProductListResponse, ProductResponse

logger = get_logger(__name__)

FEATURED_PRODUCTS_LIMIT = 6

@dataclass
class CatalogPage:
    """What the listing page renders; empty when the store is unavailable"""
    products: List[ProductResponse] = field(default_factory=list)
    total_count: int = 0
    total_pages: int = 0
    current_page: int = 1
    brands: List[str] = field(default_factory=list)

async def _fetch_page(
    store: ProductStore,
    predicate: ProductPredicate,
    plan: QueryPlan
) -> tuple[List[ProductResponse], int]:
    """
    Fetch one page of products and the total match count.
    Page and count are independent queries and run concurrently.
    """
    products, total = await asyncio.gather(
        store.find_products(predicate, plan),
        store.count_products(predicate),
    )
    review_counts = await store.count_published_reviews([p.id for p in products])
    items = [ProductResponse.from_product(p, review_counts.get(p.id, 0)) for p in products]
    return items, total

async def list_products(store: ProductStore, params: SearchParams) -> ProductListResponse:
    """
    Run a catalog query for the JSON API.
    Store failures come back as a FETCH_PRODUCTS_ERROR envelope rather than raising.
    """
    predicate = compile_filters(params)
    plan = plan_query(params)

    try:
        items, total = await _fetch_page(store, predicate, plan)
    except Exception as e:
        logger.error(f"Error fetching products: {e}")
        return build_fetch_error(e)

    logger.info(
        f"Listed {len(items)} of {total} products",
        extra={"context": {"page": plan.page.page, "limit": plan.page.limit, "total": total}},
    )
    return build_product_page(items, total, plan.page)

async def get_catalog_page(store: ProductStore, params: SearchParams) -> CatalogPage:
    """
    Load the storefront listing page: in-stock products only, plus the brand selector.
    Never raises; a failing store yields an empty page.
    """
    predicate = compile_filters(params, force_in_stock=True)
    plan = plan_query(params)
    page = CatalogPage(current_page=plan.page.page)

    try:
        page.products, page.total_count = await _fetch_page(store, predicate, plan)
        page.total_pages = plan.page.total_pages(page.total_count)
    except Exception as e:
        logger.error(f"Error fetching products: {e}")
        page = CatalogPage()

    page.brands = await get_brands(store)
    return page

async def get_brands(store: ProductStore) -> List[str]:
    """Distinct brands with at least one in-stock product, alphabetical."""
    try:
        return await store.list_brands(ProductPredicate(in_stock=True))
    except Exception as e:
        logger.error(f"Error fetching brands: {e}")
        return []

async def get_featured_products(store: ProductStore, limit: int = FEATURED_PRODUCTS_LIMIT) -> List[ProductResponse]:
    """Newest in-stock products for the home page; empty on failure."""
    plan = QueryPlan(sort=SortPlan(), page=PagePlan(page=1, limit=limit))
    try:
        products = await store.find_products(ProductPredicate(in_stock=True), plan)
    except Exception as e:
        logger.error(f"Error fetching featured products: {e}")
        return []
    return [ProductResponse.from_product(p) for p in products]
