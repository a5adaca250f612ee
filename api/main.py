"""Quantum Bookstore API: FastAPI entry point.

Registers the error handlers, the bookstore router and lifecycle hooks.
Each process serves one in-memory inventory seeded with the demo catalog.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from core.observability.logging_setup import setup_logging
from patterns.domain_config import BookstoreConfig
from verticals.bookstore.catalog import seed_inventory
from verticals.bookstore.exceptions import (
    BookNotFoundError,
    BookstoreError,
    InsufficientStockError,
    InvalidQuantityError,
    NotForSaleError,
    StockNotTrackedError,
)
from verticals.bookstore.inventory import Inventory
from verticals.bookstore.router import router as bookstore_router

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------

STATUS_BY_ERROR: dict[type[BookstoreError], int] = {
    BookNotFoundError: 404,
    InsufficientStockError: 409,
    NotForSaleError: 409,
    StockNotTrackedError: 409,
    InvalidQuantityError: 422,
}


async def bookstore_error_handler(request: Request, exc: BookstoreError) -> JSONResponse:
    status = STATUS_BY_ERROR.get(type(exc), 400)
    return JSONResponse(status_code=status, content=jsonable_encoder(exc.to_dict()))


async def validation_error_handler(
    request: Request, exc: RequestValidationError | ValidationError
) -> JSONResponse:
    """Request bodies and models that fail validation share one 422 shape."""
    errors = exc.errors() if isinstance(exc, RequestValidationError) else exc.errors(include_url=False)
    return JSONResponse(
        status_code=422,
        content={"error": "validation_error", "detail": jsonable_encoder(errors)},
    )


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown hooks."""
    logger.info("Bookstore API started with %d books", len(app.state.inventory))
    yield
    logger.info("Bookstore API shutting down")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

def create_app(
    config: Optional[BookstoreConfig] = None,
    inventory: Optional[Inventory] = None,
) -> FastAPI:
    """Build the API around one inventory (the demo catalog by default)."""
    config = config or BookstoreConfig.from_env()
    setup_logging(config)

    app = FastAPI(
        title="Quantum Bookstore",
        description="In-memory bookstore inventory with paper, digital and demo books",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.inventory = inventory if inventory is not None else seed_inventory()

    app.add_exception_handler(BookstoreError, bookstore_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)

    # -----------------------------------------------------------------------
    # Routers
    # -----------------------------------------------------------------------

    app.include_router(bookstore_router, prefix="/api/bookstore", tags=["Bookstore"])

    # -----------------------------------------------------------------------
    # Health & root
    # -----------------------------------------------------------------------

    @app.get("/health")
    async def health():
        return {"status": "healthy", "version": VERSION}

    @app.get("/")
    async def root():
        return {
            "name": "Quantum Bookstore",
            "version": VERSION,
            "docs": "/docs",
            "store": config.store_name,
        }

    return app


app = create_app()
