from fastapi import FastAPI

from dealer_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from dealer_catalog.entrypoints.http.routes.admin import router as admin_router
from dealer_catalog.entrypoints.http.routes.health import router as health_router
from dealer_catalog.entrypoints.http.routes.vehicles import router as vehicles_router
from dealer_catalog.infra.logging_config import configure_logging


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Dealer Catalog API",
        description="""
        Dealership catalogue: public vehicle browsing and an admin back-office.

        ## Features
        - Browse active vehicles by category (scooter, motorcycle, ev) and channel
        - Vehicle detail pages by slug
        - Admin catalogue management: create, update, show/hide, soft delete

        ## Authentication
        Admin routes require `Authorization: Bearer <token>` from `POST /v1/admin/login`.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        Validation errors (400) carry one message per offending field.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "Proprietary",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(admin_router, prefix="/v1")
    app.include_router(vehicles_router, prefix="/v1")

    return app


app = build_app()
