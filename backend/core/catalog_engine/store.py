# core/catalog_engine/store.py
"""
Product store capability interface and its two implementations.

SqlProductStore runs the compiled predicate and plan against the relational
database through SQLModel's async session. InMemoryProductStore evaluates the
same predicate and plan over a fixed collection of Product objects.
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Iterable, List, Protocol, Sequence

from sqlalchemy import func, text
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from core.logger import get_logger
from models.db_models import Product, Review
from .filters import ProductPredicate
from .planner import QueryPlan

logger = get_logger(__name__)


@asynccontextmanager
async def get_async_session_context(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Context manager for async database operations"""
    async with AsyncSession(engine) as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()



class ProductStore(Protocol):
    async def find_products(self, predicate: ProductPredicate, plan: QueryPlan) -> List[Product]: ...

    async def count_products(self, predicate: ProductPredicate) -> int: ...

    async def count_published_reviews(self, product_ids: Sequence[int]) -> Dict[int, int]: ...

    async def list_brands(self, predicate: ProductPredicate) -> List[str]: ...

    async def ping(self) -> None: ...


class SqlProductStore:
    """Each call opens its own session so page and count queries can run concurrently"""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def find_products(self, predicate: ProductPredicate, plan: QueryPlan) -> List[Product]:
        statement = select(Product).options(selectinload(Product.inventory))
        for clause in predicate.clauses():
            statement = statement.where(clause)
        statement = (
            statement
            .order_by(*plan.sort.order_by())
            .offset(plan.page.offset)
            .limit(plan.page.limit)
        )
        logger.debug(f"find_products predicate={predicate} plan={plan}")

        async with get_async_session_context(self.engine) as session:
            result = await session.exec(statement)
            return list(result.all())

    async def count_products(self, predicate: ProductPredicate) -> int:
        statement = select(func.count()).select_from(Product)
        for clause in predicate.clauses():
            statement = statement.where(clause)

        async with get_async_session_context(self.engine) as session:
            result = await session.exec(statement)
            return result.one()

    async def count_published_reviews(self, product_ids: Sequence[int]) -> Dict[int, int]:
        if not product_ids:
            return {}
        statement = (
            select(Review.product_id, func.count(Review.id))
            .where(Review.product_id.in_(list(product_ids)))
            .where(Review.is_published.is_(True))
            .group_by(Review.product_id)
        )

        async with get_async_session_context(self.engine) as session:
            result = await session.exec(statement)
            return {product_id: count for product_id, count in result.all()}

    async def list_brands(self, predicate: ProductPredicate) -> List[str]:
        statement = select(Product.brand).distinct()
        for clause in predicate.clauses():
            statement = statement.where(clause)
        statement = statement.order_by(Product.brand.asc())

        async with get_async_session_context(self.engine) as session:
            result = await session.exec(statement)
            return list(result.all())

    async def ping(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))


class InMemoryProductStore:
    """Store over a fixed product collection; products need ids for stable ordering"""

    def __init__(self, products: Iterable[Product] = ()):
        self.products: List[Product] = list(products)

    def _matching(self, predicate: ProductPredicate) -> List[Product]:
        return [p for p in self.products if predicate.matches(p)]

    async def find_products(self, predicate: ProductPredicate, plan: QueryPlan) -> List[Product]:
        return plan.page.slice(plan.sort.sort(self._matching(predicate)))

    async def count_products(self, predicate: ProductPredicate) -> int:
        return len(self._matching(predicate))

    async def count_published_reviews(self, product_ids: Sequence[int]) -> Dict[int, int]:
        wanted = set(product_ids)
        counts = {}
        for product in self.products:
            if product.id not in wanted:
                continue
            published = sum(1 for review in product.reviews if review.is_published)
            if published:
                counts[product.id] = published
        return counts

    async def list_brands(self, predicate: ProductPredicate) -> List[str]:
        return sorted({p.brand for p in self._matching(predicate)})

    async def ping(self) -> None:
        return None
