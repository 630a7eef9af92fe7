import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from inventory.api import diagnostics, products
from inventory.api.deps import get_repository
from inventory.bootstrap import bootstrap_schema
from inventory.config import Settings
from inventory.database import create_engine_from_settings
from inventory.exceptions import FatalBootstrapError, InventoryError, PersistenceError
from inventory.exceptions import ValidationError as PayloadValidationError
from inventory.repository import ProductRepository
from inventory.schemas import HealthResponse

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    engine = create_engine_from_settings(settings)
    app.state.engine = engine
    app.state.repository = ProductRepository(engine, timeout=settings.db_statement_timeout)
    logger.info("Connection pool ready (size=%s)", settings.db_pool_size)
    try:
        yield
    finally:
        await engine.dispose()
        logger.info("Connection pool closed")


def _field_errors(errors) -> list:
    details = []
    for err in errors:
        # Drop the leading "body" / "path" segment
        loc = err.get("loc", ())
        field = ".".join(str(part) for part in (loc[1:] or loc))
        details.append({"field": field, "message": err.get("msg", "invalid value")})
    return details


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. Schema bootstrap is not run here."""
    settings = settings or Settings()

    app = FastAPI(
        title=settings.api_title,
        description="API for recording inventory products",
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Include routers
    app.include_router(products.router)
    app.include_router(diagnostics.router)

    @app.get("/health", response_model=HealthResponse)
    async def health_check(repository: ProductRepository = Depends(get_repository)):
        try:
            await repository.count()
        except PersistenceError:
            return JSONResponse(status_code=503, content={"status": "unhealthy"})
        return HealthResponse(status="healthy")

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        error = PayloadValidationError(details=_field_errors(exc.errors()))
        return JSONResponse(
            status_code=error.status_code,
            content={"error": error.message, "details": error.details},
        )

    @app.exception_handler(InventoryError)
    async def inventory_error_handler(request: Request, exc: InventoryError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return app


def main() -> None:
    settings = Settings()
    configure_logging(settings.log_level)

    # Bootstrap must finish before the listener binds
    try:
        asyncio.run(bootstrap_schema(settings))
    except FatalBootstrapError:
        logger.exception("Refusing to start without a schema")
        sys.exit(1)

    logger.info("Starting server on %s:%s", settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
