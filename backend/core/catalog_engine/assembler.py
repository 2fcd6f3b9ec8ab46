# core/catalog_engine/assembler.py
from typing import Optional, Sequence

from models.product_models import ApiError, PaginationMeta, ProductListResponse, ProductResponse
from .planner import PagePlan

FETCH_PRODUCTS_ERROR = "FETCH_PRODUCTS_ERROR"


def build_product_page(
    products: Sequence[ProductResponse],
    total: int,
    page: PagePlan
) -> ProductListResponse:
    """Wrap one page of products and the total match count in a success envelope."""
    return ProductListResponse(
        success=True,
        data=list(products),
        meta=PaginationMeta(
            total=total,
            page=page.page,
            limit=page.limit,
            has_more=page.has_more(total),
        ),
    )


def build_fetch_error(exc: Optional[BaseException]) -> ProductListResponse:
    """Failure envelope for a catalog query the data store could not answer."""
    details = str(exc) if exc is not None and str(exc) else "Unknown error"
    return ProductListResponse(
        success=False,
        error=ApiError(
            code=FETCH_PRODUCTS_ERROR,
            message="Failed to fetch products",
            details=details,
        ),
    )
