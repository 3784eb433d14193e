"""Marketplace FastAPI application.

Single-domain web server that processes commands synchronously via HTTP.
Every request runs inside the marketplace domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the config overlay from marketplace/domain.toml.
# Event processing is sync in every environment: the payment for an order is
# opened before the create-order request returns.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from marketplace.domain import marketplace
from marketplace.utils.logging import add_context, clear_context, configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)

marketplace.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Marketplace API",
    description="Users, shops, orders and payments",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the marketplace domain context for each request."""
    add_context(method=request.method, path=request.url.path)
    try:
        with marketplace.domain_context():
            response = await call_next(request)
    finally:
        clear_context()
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from marketplace.api import order_router, payment_router, shop_router, user_router  # noqa: E402

app.include_router(user_router)
app.include_router(shop_router)
app.include_router(order_router)
app.include_router(payment_router)

logger.info("Marketplace API ready", domain=marketplace.name)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domain": marketplace.name,
        }
    )
