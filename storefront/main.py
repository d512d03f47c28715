# storefront/main.py
from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.core.config import get_settings
from storefront.core.errors import ShopError
from storefront.database import create_db_and_tables, engine
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.health import HealthStatus
from storefront.services.product_service import ProductService

# Import models so SQLModel metadata is populated before create_all()
from storefront.models import product as _product_models  # noqa: F401
from storefront.models import cart as _cart_models  # noqa: F401

# Routers
from storefront.routers.products import router as products_router
from storefront.routers.cart import router as cart_router
from storefront.routers.checkout import router as checkout_router

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Create tables.
      - Seed the demo catalog when the products table is empty.

    Shutdown:
      - Dispose the engine's connection pool.
    """
    logger.info("🔄 Startup: Connecting to %s ...", engine.url.render_as_string(hide_password=True))
    try:
        create_db_and_tables()
        logger.info("✅ Startup: DB connection OK, tables verified.")
        if settings.SEED_ON_STARTUP:
            with Session(engine) as session:
                inserted = ProductService(ProductRepository()).seed_catalog(session)
            if inserted:
                logger.info("✅ Startup: %d mock products inserted.", inserted)
    except Exception as e:
        logger.error(f"❌ Startup: DB initialisation FAILED: {e}")
        raise
    yield
    engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


# --- CORS configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error rendering: {"error": ..., "code": ...} ---


@app.exception_handler(ShopError)
async def shop_error_handler(request: Request, exc: ShopError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "code": exc.code},
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{field}: {first.get('msg')}" if field else "Invalid request body"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message, "code": "invalid_input"},
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "Route not found", "code": "not_found"},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail), "code": "http_error"},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Server error: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "code": "internal_error"},
    )


app.include_router(products_router, prefix=settings.API_PREFIX)
app.include_router(cart_router, prefix=settings.API_PREFIX)
app.include_router(checkout_router, prefix=settings.API_PREFIX)


@app.get(f"{settings.API_PREFIX}/health", response_model=HealthStatus)
def health():
    """Health check endpoint."""
    return HealthStatus(status="OK", message="Server is running")


if __name__ == "__main__":
    uvicorn.run("storefront.main:app", host=settings.HOST, port=settings.PORT)
