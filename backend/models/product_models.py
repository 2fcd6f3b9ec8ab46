# models/product_models.py - Catalog API request/response models
"""
Pydantic models for the catalog and health endpoints.
Public JSON uses camelCase keys (priceMin, hasMore, reviewCount, ...).
"""
# Standard library imports
from datetime import datetime
from typing import Any, List, Literal, Optional

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        """JSON-ready dict with camelCase keys and unset top-level optionals dropped"""
        payload = self.model_dump(mode="json", by_alias=True)
        return {key: value for key, value in payload.items() if value is not None}


# ===== PRODUCT MODELS =====

class InventoryResponse(CamelModel):
    bottle_size_ml: int
    total_volume: float
    used_volume: float
    low_stock_alert: bool

    @classmethod
    def from_inventory(cls, inventory):
        """Convert Inventory DB model to response format"""
        return cls(
            bottle_size_ml=inventory.bottle_size_ml,
            total_volume=float(inventory.total_volume),
            used_volume=float(inventory.used_volume),
            low_stock_alert=inventory.low_stock_alert,
        )


class ProductResponse(CamelModel):
    id: int
    name: str
    slug: str
    brand: str
    description: Optional[str] = None
    category: Optional[str] = None
    gender: Optional[str] = None
    in_stock: bool
    # to_camel would render these as price2Ml
    price_2ml: Optional[float] = Field(None, alias="price2ml")
    price_5ml: Optional[float] = Field(None, alias="price5ml")
    price_10ml: Optional[float] = Field(None, alias="price10ml")
    top_notes: List[str] = Field(default_factory=list)
    middle_notes: List[str] = Field(default_factory=list)
    base_notes: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    created_at: datetime
    inventory: List[InventoryResponse] = Field(default_factory=list)
    review_count: int = 0

    @property
    def low_stock(self) -> Optional[bool]:
        """Low-stock signal from the first tracked bottle, None when nothing is tracked"""
        if not self.inventory:
            return None
        return self.inventory[0].low_stock_alert

    @classmethod
    def from_product(cls, product, review_count: int = 0):
        """Convert Product DB model to response format"""
        return cls(
            id=product.id,
            name=product.name,
            slug=product.slug,
            brand=product.brand,
            description=product.description,
            category=product.category,
            gender=product.gender,
            in_stock=product.in_stock,
            price_2ml=_to_float(product.price_2ml),
            price_5ml=_to_float(product.price_5ml),
            price_10ml=_to_float(product.price_10ml),
            top_notes=list(product.top_notes or []),
            middle_notes=list(product.middle_notes or []),
            base_notes=list(product.base_notes or []),
            image_url=product.image_url,
            created_at=product.created_at,
            inventory=[InventoryResponse.from_inventory(i) for i in product.inventory or []],
            review_count=review_count,
        )


def _to_float(value) -> Optional[float]:
    return float(value) if value is not None else None


# ===== ENVELOPE MODELS =====

class ApiError(CamelModel):
    code: str
    message: str
    details: Optional[Any] = None


class PaginationMeta(CamelModel):
    total: int
    page: int
    limit: int
    has_more: bool


class ApiResponse(CamelModel):
    """Uniform success/error wrapper returned by the JSON API"""
    success: bool
    data: Optional[Any] = None
    error: Optional[ApiError] = None
    meta: Optional[PaginationMeta] = None


class ProductListResponse(ApiResponse):
    data: Optional[List[ProductResponse]] = None


# ===== HEALTH MODELS =====

class HealthResponse(CamelModel):
    status: Literal["healthy", "unhealthy"]
    timestamp: datetime
    database: Literal["connected", "disconnected"]
    environment: str
    error: Optional[str] = None
