"""Order Service FastAPI application.

Serves the v1 Order API synchronously over HTTP. Each request under the
order prefix runs inside the Ordering domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8080
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the config overlay from ordering/domain.toml:
#   - unset / "test" → in-memory provider
#   - "production"   → PostgreSQL at DATABASE_URL
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ordering.api.errors import register_order_exception_handlers
from ordering.api.routes import order_router
from ordering.domain import ordering
from ordering.order.service import OrderService
from ordering.order.store import OrderStore
from ordering.utils.logging import bind_request_context, clear_request_context

ordering.init()

_DOMAIN_PREFIX = "/v1/order"

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Order Service API",
    description="Accepts customer orders, returns their line items and revises them in place.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.order_service = OrderService(OrderStore(ordering))


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the Ordering domain context for order requests."""
    if not request.url.path.startswith(_DOMAIN_PREFIX):
        # Health check, docs, etc.
        return await call_next(request)

    bind_request_context(method=request.method, path=request.url.path)
    try:
        with ordering.domain_context():
            response = await call_next(request)
    finally:
        clear_request_context()
    return response


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------
register_order_exception_handlers(app)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(order_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domains": {"ordering": {"name": ordering.name}}})
