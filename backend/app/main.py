"""FastAPI application entry point"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import IntegrityError

from backend.app.core.config import settings
from backend.app.core.logging import setup_logging, get_logger
from backend.app.core.middleware import (
    RequestIDMiddleware,
    LoggingMiddleware,
    RateLimitMiddleware
)
from backend.app.core.exceptions import SkillMatchException
from backend.app.api import match, assignments, search, skills, personnel, projects, analytics

# Setup logging
setup_logging()
logger = get_logger(__name__)


DESCRIPTION = """
## SkillMatch Agency - Staffing and Skill Matching

Match agency personnel to client projects by skill proficiency and track who
is assigned where.

### Features

* **Matching**: Rank personnel who meet every skill requirement of a project
* **Assignments**: Time-boxed allocations with an Active/Completed lifecycle
* **Search**: Filter personnel by experience tier and skill level
* **Catalog**: Skills, personnel and projects with their requirements
* **Analytics**: Dashboard counts and distributions

### Proficiency scale

Beginner < Intermediate < Advanced < Expert

### Rate Limiting

API requests are rate-limited to {rate_limit} requests per minute per IP address.
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown tasks"""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug mode: {settings.DEBUG}")
    yield
    logger.info("Shutting down application")


def register_exception_handlers(app: FastAPI) -> None:
    """Translate errors into ``{error, details, request_id}`` JSON bodies"""

    @app.exception_handler(SkillMatchException)
    async def skillmatch_exception_handler(request: Request, exc: SkillMatchException):
        """Handle custom SkillMatch exceptions"""
        request_id = getattr(request.state, "request_id", "unknown")

        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"SkillMatch exception: {exc.message}",
            extra={
                "request_id": request_id,
                "status_code": exc.status_code,
                "details": exc.details,
            }
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.message,
                "details": exc.details,
                "request_id": request_id,
            }
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle Pydantic validation errors"""
        request_id = getattr(request.state, "request_id", "unknown")

        logger.warning(
            f"Validation error: {exc.errors()}",
            extra={"request_id": request_id}
        )

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": "Validation error",
                "details": jsonable_encoder(exc.errors()),
                "request_id": request_id,
            }
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        """Handle database integrity errors"""
        request_id = getattr(request.state, "request_id", "unknown")

        logger.error(
            f"Database integrity error: {str(exc)}",
            extra={"request_id": request_id},
            exc_info=True
        )

        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={
                "error": "Database constraint violation",
                "details": {"message": "The operation violates a database constraint"},
                "request_id": request_id,
            }
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other exceptions"""
        request_id = getattr(request.state, "request_id", "unknown")

        logger.error(
            f"Unhandled exception: {str(exc)}",
            extra={"request_id": request_id},
            exc_info=True
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "details": {"message": "An unexpected error occurred"},
                "request_id": request_id,
            }
        )


def create_app(rate_limit_per_minute: Optional[int] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        rate_limit_per_minute: Per-IP request limit; defaults to the configured
            value, zero disables limiting

    Returns:
        Configured application
    """
    if rate_limit_per_minute is None:
        rate_limit_per_minute = settings.RATE_LIMIT_PER_MINUTE

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=DESCRIPTION.format(rate_limit=rate_limit_per_minute),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Matching", "description": "Rank personnel against project requirements"},
            {"name": "Assignments", "description": "Personnel allocations to projects"},
            {"name": "Search", "description": "Personnel search by experience and skill"},
            {"name": "Skills", "description": "Skill catalog management"},
            {"name": "Personnel", "description": "Personnel records and their skills"},
            {"name": "Projects", "description": "Projects and their skill requirements"},
            {"name": "Analytics", "description": "Dashboard summary"},
        ],
    )

    # Add custom middleware (order matters - last added is outermost)
    app.add_middleware(RateLimitMiddleware, requests_per_minute=rate_limit_per_minute)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    prefix = settings.API_V1_PREFIX
    app.include_router(match.router, prefix=f"{prefix}/match", tags=["Matching"])
    app.include_router(assignments.router, prefix=f"{prefix}/assignments", tags=["Assignments"])
    app.include_router(search.router, prefix=f"{prefix}/search", tags=["Search"])
    app.include_router(skills.router, prefix=f"{prefix}/skills", tags=["Skills"])
    app.include_router(personnel.router, prefix=f"{prefix}/personnel", tags=["Personnel"])
    app.include_router(projects.router, prefix=f"{prefix}/projects", tags=["Projects"])
    app.include_router(analytics.router, prefix=f"{prefix}/analytics", tags=["Analytics"])

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "running",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    return app


app = create_app()
