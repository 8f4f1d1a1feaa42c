import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.routes.health import router as health_router
from app.api.v1.routes.shops import router as shops_router
from app.api.v1.routes.users import router as users_router
from app.config import settings
from app.core.database_init import initialize_database
from app.core.logging_config import setup_logging
from app.domain.exceptions import (
    AlreadyExistsError,
    DomainError,
    InvalidArgumentError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

# Domain error kind -> (HTTP status, title)
ERROR_STATUS = (
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST, "Bad Request"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "Not Found"),
    (AlreadyExistsError, status.HTTP_409_CONFLICT, "Conflict"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info("Starting up application...")

    if settings.USE_DB_REPOS and not initialize_database():
        logger.error("Database initialization failed; DB-backed endpoints will error")

    yield

    logger.info("Shutting down application...")


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map a domain error to its HTTP status and error body."""
    code, title = status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
    for error_type, error_status, error_title in ERROR_STATUS:
        if isinstance(exc, error_type):
            code, title = error_status, error_title
            break

    logger.warning(f"{request.method} {request.url.path} -> {code}: {exc.message}")
    return JSONResponse(
        status_code=code,
        content={
            "title": title,
            "detail": exc.message,
            "error_code": exc.error_code,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


def create_app() -> FastAPI:
    """Create FastAPI application and include routers."""
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(DomainError, domain_error_handler)

    app.include_router(shops_router, prefix="/api/v1")
    app.include_router(users_router, prefix="/api/v1")
    app.include_router(health_router, prefix="/api/v1")
    return app


app = create_app()
