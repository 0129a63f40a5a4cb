import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from moto_specs.entrypoints.http.dependencies import get_dataset_store, get_motorcycle_source
from moto_specs.entrypoints.http.exception_handlers import register_exception_handlers
from moto_specs.entrypoints.http.routes.health import router as health_router
from moto_specs.entrypoints.http.routes.motorcycles import router as motorcycles_router
from moto_specs.use_cases.refresh_motorcycle_catalog import RefreshMotorcycleCatalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the catalog once at startup; a failed load leaves the app serving 503s."""
    use_case = RefreshMotorcycleCatalog(
        dataset_store=get_dataset_store(),
        source=get_motorcycle_source(),
    )
    result = await run_in_threadpool(use_case.execute)
    logger.info(
        "Initial catalog load finished",
        extra={"loaded": result.loaded, "count": result.count},
    )
    yield


def build_app() -> FastAPI:
    app = FastAPI(
        title="Motorcycle Specs API",
        description="""
        Motorcycle catalog API for searching, filtering and sorting specs.

        ## Features
        - Free-text search over name and brand
        - Brand and type filters with option lists
        - Sorting by any field, ascending or descending
        - On-demand re-fetch from the upstream data source

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(motorcycles_router, prefix="/v1")

    return app


app = build_app()
