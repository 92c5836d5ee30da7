"""HTTP mapping of Ordering domain errors.

    ValidationError      → 400
    ObjectNotFoundError  → 404
    StoreError           → 503
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from ordering.order.store import StoreError
from ordering.utils.logging import get_logger

logger = get_logger(__name__)


async def store_error_handler(request: Request, exc: StoreError):
    logger.error("store_unavailable", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=503, content={"status": 503, "error": str(exc)})


def register_order_exception_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(StoreError, store_error_handler)
