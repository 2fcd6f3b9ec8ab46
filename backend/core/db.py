# core/db.py
from typing import Generator

from sqlalchemy.pool import StaticPool
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel, Session, create_engine
from contextlib import contextmanager

from core.catalog_engine.store import ProductStore, SqlProductStore
from core.settings import Settings, settings

# export environment variables
DATABASE_URL = settings.DATABASE_URL

def to_async_url(database_url: str) -> str:
    """Map a sync SQLite URL onto its aiosqlite driver; other URLs pass through."""
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url

def create_async_engine_from_settings(config: Settings) -> AsyncEngine:
    # Page and count queries run on separate connections, so the async side
    # keeps the driver's default pool instead of a single static connection.
    return create_async_engine(
        to_async_url(config.DATABASE_URL),
        echo=False,
        pool_pre_ping=True,
        pool_recycle=300,
    )

# === Storefront SQLModel DB ===

# Sync Engine - used for table creation and seeding at start-up
engine = create_engine(
    DATABASE_URL,
    echo=False,
    pool_pre_ping=True,  # Verify connections before use
    pool_recycle=300,  # Recycle connections every 5 minutes
    poolclass=StaticPool,  # Use static pool for SQLite
    connect_args={
        "check_same_thread": False,  # Allow multi-threading
        "timeout": 20,  # 20s timeout for database locks
    },
)

# Async Engine - serves request-time reads
async_engine = create_async_engine_from_settings(settings)

def init_db():
    """Initialize database tables (sync)"""
    SQLModel.metadata.create_all(engine)

# Sync session management
@contextmanager
def get_sync_session() -> Generator[Session, None, None]:
    """Context manager for sync database operations"""
    with Session(engine) as session:
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

# Store dependency
def get_product_store() -> ProductStore:
    """Dependency for FastAPI endpoints"""
    return SqlProductStore(async_engine)
