"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import BoothdeskError
from shared.logging_config import configure_logging

from .models.errors import ERROR_RESPONSES, ErrorResponse
from .routes import health, users
from modules.access.routes import router as access_router
from modules.checklists.routes import event_router as checklist_event_router
from modules.checklists.routes import item_router as checklist_item_router
from modules.checklists.routes import template_router as checklist_template_router
from modules.content.routes import router as content_router
from modules.events.routes import router as events_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


async def handle_boothdesk_error(request: Request, exc: BoothdeskError) -> JSONResponse:
    """Render module exceptions as {"error", "message", "details"} with their status."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    body = ErrorResponse(**exc.to_dict())
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(mode="json"))


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Event checklists, entitlements and AI content for event-service businesses",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(BoothdeskError, handle_boothdesk_error)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(
        access_router, prefix="/api/access", tags=["access"], responses=ERROR_RESPONSES
    )
    app.include_router(
        events_router, prefix="/api/events", tags=["events"], responses=ERROR_RESPONSES
    )
    app.include_router(
        checklist_event_router,
        prefix="/api/events",
        tags=["checklists"],
        responses=ERROR_RESPONSES,
    )
    app.include_router(
        checklist_item_router,
        prefix="/api/checklist-items",
        tags=["checklists"],
        responses=ERROR_RESPONSES,
    )
    app.include_router(
        checklist_template_router, prefix="/api/checklist-templates", tags=["checklists"]
    )
    app.include_router(
        content_router, prefix="/api/content", tags=["content"], responses=ERROR_RESPONSES
    )

    return app


# Application instance for uvicorn
app = create_app()
