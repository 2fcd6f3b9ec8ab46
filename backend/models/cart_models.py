# models/cart_models.py - Cart, checkout and back-office payloads
"""
Pydantic models for cart and checkout data exchanged with the storefront,
plus the inventory and order-status updates used by the back office.
"""
# Standard library imports
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Literal, Optional

# Third-party imports
from pydantic import Field, field_validator

# Local imports
from models.product_models import CamelModel

SampleSize = Literal[2, 5, 10]


class CartItem(CamelModel):
    product_id: int
    size_ml: SampleSize
    quantity: int = Field(..., ge=1)
    unit_price: Decimal = Field(..., ge=0)
    product_name: str
    product_brand: str
    product_slug: str

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class Cart(CamelModel):
    items: List[CartItem] = Field(default_factory=list)
    total: Decimal = Decimal("0.00")
    item_count: int = 0

    @classmethod
    def from_items(cls, items: List[CartItem]):
        """Build a cart with its total and item count derived from the lines"""
        total = sum((item.line_total for item in items), Decimal("0"))
        return cls(
            items=items,
            total=total.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP),
            item_count=sum(item.quantity for item in items),
        )


class ShippingAddress(CamelModel):
    line1: str = Field(..., min_length=1)
    line2: Optional[str] = None
    city: str = Field(..., min_length=1)
    postal_code: Optional[str] = None
    country: str = Field(..., min_length=2)


class CheckoutData(CamelModel):
    customer_email: str
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    shipping_address: ShippingAddress
    delivery_type: Literal["standard", "same_day"]
    payment_method: Literal["stripe", "cash_on_delivery"]
    items: List[CartItem] = Field(..., min_length=1)
    notes: Optional[str] = Field(None, max_length=500)

    @field_validator('customer_email')
    @classmethod
    def validate_customer_email(cls, v):
        local, _, domain = v.partition("@")
        if not local or "." not in domain:
            raise ValueError("customer_email must be a valid email address")
        return v

    def to_cart(self) -> Cart:
        return Cart.from_items(self.items)


class InventoryUpdate(CamelModel):
    product_id: int
    bottle_size_ml: int = Field(..., gt=0)
    total_volume: Decimal = Field(..., ge=0)
    cost_per_ml: Optional[Decimal] = Field(None, ge=0)
    supplier: Optional[str] = None
    notes: Optional[str] = None


class OrderStatusUpdate(CamelModel):
    order_id: str
    status: Literal["pending", "processing", "shipped", "delivered", "cancelled"]
    tracking_number: Optional[str] = None
    notes: Optional[str] = None
