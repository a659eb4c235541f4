"""Storefront FastAPI application.

Serves the catalogue, checkout and the order admin views over HTTP. Every
request works against the database configured by ``STOREFRONT_DATABASE_URI``.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import uuid

from catalogue.api import product_router
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ordering.api.routes import order_router
from shared.config import get_settings
from shared.http import register_exception_handlers
from shared.logging import add_context, clear_context, configure_logging

configure_logging()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Catalogue, checkout and order administration",
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
async def bind_request_context(request: Request, call_next):
    clear_context()
    add_context(
        request_id=request.headers.get("x-request-id") or uuid.uuid4().hex[:12],
        method=request.method,
        path=request.url.path,
    )
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(product_router)
app.include_router(order_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "environment": get_settings().env,
        }
    )
