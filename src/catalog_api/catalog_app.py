from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from src.auth import auth_router
from src.catalog_api import catalog_api_logger as logger
from src.catalog_api.api import product_router, category_router, catalog_router
from src.catalog_api.error_handlers import register_exception_handlers
from src.config import (
    BOOTSTRAP_ADMIN_USERNAME,
    BOOTSTRAP_ADMIN_PASSWORD,
    BOOTSTRAP_USER_USERNAME,
    BOOTSTRAP_USER_PASSWORD,
)
from src.utils.logger import set_app_context, AppLogger


class AppContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set app logger context for all requests."""

    async def dispatch(self, request, call_next):
        with set_app_context(AppLogger.CATALOG_API):
            response = await call_next(request)
        return response


@asynccontextmanager
async def lifespan(_: FastAPI):
    from src.auth.service import ensure_user
    from src.data.postgres.connection import db_connection
    from src.data.redis.connection import redis_connection

    with set_app_context(AppLogger.CATALOG_API):
        logger.info("Product catalog service starting")
        await db_connection.create_tables()
        await ensure_user(BOOTSTRAP_ADMIN_USERNAME, BOOTSTRAP_ADMIN_PASSWORD)
        await ensure_user(BOOTSTRAP_USER_USERNAME, BOOTSTRAP_USER_PASSWORD)

    yield

    with set_app_context(AppLogger.CATALOG_API):
        logger.info("Product catalog service shutting down...")
        await redis_connection.close()
        await db_connection.close()


app = FastAPI(
    title="Product Catalog API",
    description="API for managing products, categories and catalogs",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(AppContextMiddleware)
register_exception_handlers(app)

app.include_router(auth_router, prefix="/api/v1/auth")
app.include_router(product_router)
app.include_router(category_router)
app.include_router(catalog_router)


@app.get("/health", tags=["Health"])
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    from src.config import SERVER_HOST, SERVER_PORT
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
