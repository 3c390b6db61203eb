"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from kitchenpos.api import health, menu_groups, menus, order_tables, orders, products
from kitchenpos.core.config import settings
from kitchenpos.core.exceptions import KitchenPosError
from kitchenpos.core.logging import setup_logging
from kitchenpos.db.database import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    await init_db()
    yield
    # Shutdown
    pass


app = FastAPI(
    title="kitchenpos",
    description="Point-of-sale backend for products, menus, tables and orders",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(KitchenPosError)
async def kitchenpos_error_handler(request: Request, exc: KitchenPosError):
    """Translate domain errors into JSON error responses."""
    logger.warning(
        f"[ERROR] {request.method} {request.url.path} failed - "
        f"{type(exc).__name__}: {exc.message}"
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    """Log unexpected errors with their traceback."""
    logger.error(
        f"[ERROR] {request.method} {request.url.path} failed - "
        f"{type(exc).__name__}: {str(exc)}",
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(health.router, tags=["health"])
app.include_router(products.router, tags=["products"])
app.include_router(menu_groups.router, tags=["menu-groups"])
app.include_router(menus.router, tags=["menus"])
app.include_router(order_tables.router, tags=["order-tables"])
app.include_router(orders.router, tags=["orders"])


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
