from fastapi import FastAPI

from afterschool_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from afterschool_catalog.entrypoints.http.routes.health import router as health_router
from afterschool_catalog.entrypoints.http.routes.programs import router as programs_router
from afterschool_catalog.infra.config import load_settings
from afterschool_catalog.infra.logging_config import configure_logging


def build_app() -> FastAPI:
    configure_logging(load_settings().log_level)

    app = FastAPI(
        title="Afterschool Catalog API",
        description="""
        Program discovery API for browsing and searching afterschool programs.

        ## Features
        - Search programs by title word prefix
        - Categorical filters: available, by age, by price
        - Incremental "load more" pagination
        - Get program details

        ## Shareable state
        `q` and `filter` are the only URL state. Invalid values never fail:
        unknown filters fall back to "all" and long search text is truncated.

        ## Error Handling
        Listing requests never fail because of the catalog: they answer with an
        error result and a user-facing flash message. Detail lookups return
        structured JSON errors with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(programs_router, prefix="/v1")

    return app


app = build_app()
