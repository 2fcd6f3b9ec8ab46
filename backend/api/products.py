# api/products.py - Product catalog API endpoints
"""
Read-only catalog API: filtered, sorted, paginated product listing.
"""
# Standard library imports
from typing import Optional

# Third-party imports
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

# Local imports
from core.catalog_engine import ProductStore, SearchParams
from core.db import get_product_store
from core.logger import get_logger
from models.product_models import ProductListResponse
from services.product_service import list_products

router = APIRouter()
logger = get_logger(__name__)

# Numeric and enum parameters are taken as raw strings; values that do not
# parse fall back to defaults instead of failing the request with a 422.
@router.get("/products", response_model=ProductListResponse)
async def list_products_api(
    search: Optional[str] = Query(None, description="Case-insensitive match on name, brand or description"),
    brand: Optional[str] = Query(None, description="Exact brand, case-insensitive"),
    category: Optional[str] = Query(None, description="designer, niche, fresh or oriental"),
    gender: Optional[str] = Query(None, description="masculine, feminine or unisex"),
    price_min: Optional[str] = Query(None, alias="priceMin", description="Some size costs at least this"),
    price_max: Optional[str] = Query(None, alias="priceMax", description="Some size costs at most this"),
    in_stock: Optional[str] = Query(None, alias="inStock", description="'true' for in-stock products only"),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="name, brand, price or createdAt"),
    sort_order: Optional[str] = Query(None, alias="sortOrder", description="asc or desc"),
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Page size (default 12, max 50)"),
    store: ProductStore = Depends(get_product_store)
):
    """
    List products matching every given filter.

    - **priceMin / priceMax**: at least one size (2ml, 5ml, 10ml) must fall in the range
    - **sortBy=price**: orders by the 2ml price
    - without **sortBy** products are returned newest first
    """
    params = SearchParams.from_query({
        "search": search,
        "brand": brand,
        "category": category,
        "gender": gender,
        "priceMin": price_min,
        "priceMax": price_max,
        "inStock": in_stock,
        "sortBy": sort_by,
        "sortOrder": sort_order,
        "page": page,
        "limit": limit,
    })
    response = await list_products(store, params)
    status_code = 200 if response.success else 500
    return JSONResponse(status_code=status_code, content=response.to_payload())
