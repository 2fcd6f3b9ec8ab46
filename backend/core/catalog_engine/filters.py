# core/catalog_engine/filters.py
"""
Filter compiler - turns search parameters into a product predicate.

The same predicate renders to SQLAlchemy clauses for the relational store and
evaluates directly against in-memory products, with identical semantics.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Optional

from sqlalchemy import and_, func, or_
from sqlalchemy.sql.elements import ColumnElement

from models.db_models import Product
from .params import Category, Gender, SearchParams

PRICE_TIERS = ("price_2ml", "price_5ml", "price_10ml")
SEARCH_FIELDS = ("name", "brand", "description")


@dataclass(frozen=True)
class ProductPredicate:
    """Conjunction of the constraints a product must satisfy; None means unconstrained"""
    search: Optional[str] = None
    brand: Optional[str] = None
    category: Optional[Category] = None
    gender: Optional[Gender] = None
    in_stock: Optional[bool] = None
    price_min: Optional[Decimal] = None
    price_max: Optional[Decimal] = None

    @property
    def has_price_range(self) -> bool:
        return self.price_min is not None or self.price_max is not None

    def clauses(self) -> List[ColumnElement]:
        """SQL clauses to AND together in a WHERE"""
        clauses: List[ColumnElement] = []

        if self.search:
            term = self.search.lower()
            clauses.append(or_(*(
                func.lower(getattr(Product, field)).contains(term, autoescape=True)
                for field in SEARCH_FIELDS
            )))

        if self.brand:
            clauses.append(func.lower(Product.brand) == self.brand.lower())

        if self.category is not None:
            clauses.append(Product.category == self.category.value)

        if self.gender is not None:
            clauses.append(Product.gender == self.gender.value)

        if self.in_stock is not None:
            clauses.append(Product.in_stock == self.in_stock)

        if self.has_price_range:
            clauses.append(or_(*(self._tier_in_range(getattr(Product, tier)) for tier in PRICE_TIERS)))

        return clauses

    def _tier_in_range(self, column) -> ColumnElement:
        bounds = [column.is_not(None)]
        if self.price_min is not None:
            bounds.append(column >= self.price_min)
        if self.price_max is not None:
            bounds.append(column <= self.price_max)
        return and_(*bounds)

    def matches(self, product: Any) -> bool:
        """Evaluate the predicate against a single product object"""
        if self.search:
            term = self.search.lower()
            if not any(term in (getattr(product, field) or "").lower() for field in SEARCH_FIELDS):
                return False

        if self.brand and (product.brand or "").lower() != self.brand.lower():
            return False

        if self.category is not None and product.category != self.category.value:
            return False

        if self.gender is not None and product.gender != self.gender.value:
            return False

        if self.in_stock is not None and product.in_stock != self.in_stock:
            return False

        if self.has_price_range:
            tiers = [getattr(product, tier) for tier in PRICE_TIERS]
            if not any(self._price_in_range(price) for price in tiers):
                return False

        return True

    def _price_in_range(self, price: Optional[Decimal]) -> bool:
        if price is None:
            return False
        if self.price_min is not None and price < self.price_min:
            return False
        if self.price_max is not None and price > self.price_max:
            return False
        return True


def compile_filters(params: SearchParams, force_in_stock: bool = False) -> ProductPredicate:
    """
    Compile search parameters into a ProductPredicate.

    A product matches the price range when at least one offered size lies
    inside [price_min, price_max]; a single bound reduces to "any size at or
    above the minimum" or "any size at or below the maximum".

    force_in_stock pins the stock constraint regardless of the request, which
    is how the public listing page hides sold-out products.
    """
    return ProductPredicate(
        search=params.search,
        brand=params.brand,
        category=params.category,
        gender=params.gender,
        in_stock=True if force_in_stock else params.in_stock,
        price_min=params.price_min,
        price_max=params.price_max,
    )
