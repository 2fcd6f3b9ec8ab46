# services/health_service.py
from datetime import datetime, UTC

from core.catalog_engine import ProductStore
from core.logger import get_logger
from core.settings import Settings
from models.product_models import HealthResponse

logger = get_logger(__name__)

async def check_health(store: ProductStore, config: Settings) -> HealthResponse:
    """Probe the database with SELECT 1 and report the outcome."""
    try:
        await store.ping()
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return HealthResponse(
            status="unhealthy",
            timestamp=datetime.now(UTC),
            database="disconnected",
            environment=config.ENVIRONMENT,
            error=str(e) or "Unknown error",
        )

    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC),
        database="connected",
        environment=config.ENVIRONMENT,
    )
