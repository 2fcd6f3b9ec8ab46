# core/exceptions.py
from typing import Any, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from core.logger import get_logger
from models.product_models import ApiError, ApiResponse

logger = get_logger(__name__)


class StorefrontError(Exception):
    """
    Application error carrying a stable code and the HTTP status to answer with.

    Extension point for routes that answer with a failure envelope, such as
    product detail or checkout. The catalog and health endpoints build their failure
    envelopes directly and never raise it.
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 500,
        details: Optional[Any] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details

    def to_response(self) -> ApiResponse:
        return ApiResponse(
            success=False,
            error=ApiError(code=self.code, message=self.message, details=self.details),
        )


async def storefront_exception_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    logger.error(f"{exc.code} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_response().to_payload())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error on {request.url.path}: {exc}")
    response = ApiResponse(
        success=False,
        error=ApiError(code="INTERNAL_ERROR", message="Internal Server Error"),
    )
    return JSONResponse(status_code=500, content=response.to_payload())
