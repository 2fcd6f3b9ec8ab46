# main.py
# Standard library imports
import uuid

# Third-party imports
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.requests import Request

# Local imports
from api import health, pages, products
from core.exceptions import (
    StorefrontError,
    storefront_exception_handler,
    unhandled_exception_handler,
)
from core.init import run_all
from core.logger import get_logger, request_id_ctx_var
from core.settings import settings

# export environment variables
ENVIRONMENT = settings.ENVIRONMENT
FRONTEND_ORIGIN = settings.FRONTEND_ORIGIN

logger = get_logger(__name__)

run_all()

app = FastAPI(
    title="Perfume Samples Storefront",
    description="Catalog browsing for fragrance decants: 2ml, 5ml and 10ml samples.",
)

# Mount routers first
app.include_router(products.router, prefix="/api", tags=["Product APIs"])
app.include_router(health.router, prefix="/api", tags=["Health APIs"])
app.include_router(pages.router, tags=["Storefront Pages"])

app.add_exception_handler(StorefrontError, storefront_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

@app.middleware("http")
async def add_request_id(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    request_id_ctx_var.set(request_id)
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response

# Enable CORS outside production
if ENVIRONMENT != "production":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[FRONTEND_ORIGIN],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

logger.info(f"Storefront started in {ENVIRONMENT} mode")
