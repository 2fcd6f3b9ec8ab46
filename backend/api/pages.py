# api/pages.py - Server-rendered storefront pages
from pathlib import Path
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from core.catalog_engine import Category, Gender, ProductStore, SearchParams
from core.db import get_product_store
from core.utils import format_price
from services.product_service import get_catalog_page, get_featured_products

router = APIRouter()

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["format_price"] = format_price

CATEGORY_LABELS = {
    Category.DESIGNER: "Designer",
    Category.NICHE: "Niche",
    Category.FRESH: "Fresh",
    Category.ORIENTAL: "Oriental",
}
GENDER_LABELS = {
    Gender.MASCULINE: "Men",
    Gender.FEMININE: "Women",
    Gender.UNISEX: "Unisex",
}

def page_url(filters: dict, page: int) -> str:
    """Listing URL for another page, keeping the active filters"""
    return f"/products?{urlencode({**filters, 'page': page})}"

@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home_page(
    request: Request,
    store: ProductStore = Depends(get_product_store)
):
    products = await get_featured_products(store)
    return templates.TemplateResponse(request, "index.html", {"products": products})

@router.get("/products", response_class=HTMLResponse, include_in_schema=False)
async def products_page(
    request: Request,
    store: ProductStore = Depends(get_product_store)
):
    """Product listing; accepts the same query parameters as GET /api/products."""
    query = dict(request.query_params)
    params = SearchParams.from_query(query)
    catalog = await get_catalog_page(store, params)

    filters = {key: value for key, value in query.items() if key != "page" and value}
    previous_url: Optional[str] = None
    next_url: Optional[str] = None
    if catalog.current_page > 1:
        previous_url = page_url(filters, catalog.current_page - 1)
    if catalog.current_page < catalog.total_pages:
        next_url = page_url(filters, catalog.current_page + 1)

    return templates.TemplateResponse(
        request,
        "products.html",
        {
            "catalog": catalog,
            "params": params,
            "categories": CATEGORY_LABELS,
            "genders": GENDER_LABELS,
            "previous_url": previous_url,
            "next_url": next_url,
        },
    )
