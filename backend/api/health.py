# api/health.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.catalog_engine import ProductStore
from core.db import get_product_store
from core.settings import Settings, get_settings
from models.product_models import HealthResponse
from services.health_service import check_health

router = APIRouter()

@router.get("/health", response_model=HealthResponse)
async def health(
    store: ProductStore = Depends(get_product_store),
    config: Settings = Depends(get_settings)
):
    """Database connectivity check: 200 when reachable, 503 otherwise."""
    result = await check_health(store, config)
    status_code = 200 if result.database == "connected" else 503
    return JSONResponse(status_code=status_code, content=result.to_payload())
