import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pixelgallery.api.v1.arts import arts_router
from pixelgallery.api.v1.debug import debug_router
from pixelgallery.api.v1.galleries import galleries_router
from pixelgallery.api.v1.users import users_router
from pixelgallery.core.config import Settings, settings as default_settings
from pixelgallery.core.exceptions import PATH_NOT_FOUND_MESSAGES, GalleryAPIError, NotFoundError
from pixelgallery.db.session import Database
from pixelgallery.middleware.negotiation import JSONNegotiationMiddleware


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Creates the database tables on startup and releases the connection
    pool on shutdown.
    """
    database: Database = app.state.database
    await database.create_all()
    yield
    await database.dispose()


def _register_exception_handlers(app: FastAPI) -> None:
    """
    Register custom exception handlers.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(GalleryAPIError)
    async def gallery_error_handler(request: Request, exc: GalleryAPIError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """
        A path id that cannot name a row (not an integer, or out of range)
        is a 404 for that resource. Bad query parameters are plain 400s.
        """
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")

        for error in exc.errors():
            loc = error.get("loc", ())
            if len(loc) > 1 and loc[0] == "path" and loc[1] in PATH_NOT_FOUND_MESSAGES:
                not_found = NotFoundError(PATH_NOT_FOUND_MESSAGES[loc[1]])
                return JSONResponse(status_code=not_found.status_code, content=not_found.to_payload())

        return JSONResponse(status_code=400, content={"Error": "BadRequest"})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Unknown routes and methods keep the {"Error": ...} shape."""
        return JSONResponse(status_code=exc.status_code, content={"Error": exc.detail})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=500, content={"Error": "InternalServerError"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Sets up the storage handle, JSON negotiation and CORS middleware,
    exception handlers, health checks, and routing for users, arts and
    galleries.

    Args:
        settings: Optional settings override; the module-level settings are
            used when omitted.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Pixel Gallery API",
        description="Users, pixel arts and galleries with per-user ownership",
        version="1.0.0",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.database = Database(settings.database_url)

    app.add_middleware(JSONNegotiationMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    # Include routers
    app.include_router(users_router, prefix="/users", tags=["users"])
    app.include_router(arts_router, prefix="/arts", tags=["arts"])
    app.include_router(galleries_router, prefix="/galleries", tags=["galleries"])

    if settings.enable_debug_routes:
        logger.warning("Debug routes are enabled")
        app.include_router(debug_router, prefix="/debug", tags=["debug"])

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """
        Health check endpoint for load balancers and monitoring.

        Returns:
            dict: Health status response.
        """
        return {"status": "healthy"}

    # Root endpoint
    @app.get("/")
    async def root():
        """
        Root endpoint providing basic API information.

        Returns:
            dict: Welcome message.
        """
        return {"message": "Pixel Gallery API"}

    return app
