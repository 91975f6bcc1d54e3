"""
HealthGuard API application.

Builds the FastAPI app: middleware, domain error handlers, startup tasks
(tables, error logging) and the versioned API router.

Run locally with:
    uvicorn healthguard.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from healthguard import __version__
from healthguard.api.v1.router import api_router
from healthguard.core.config import settings
from healthguard.db.session import SessionLocal, engine
from healthguard.middleware.cors import setup_cors
from healthguard.middleware.error_handler import ErrorHandlerMiddleware, register_exception_handlers
from healthguard.models import Base
from healthguard.services.error_logging import configure_error_logging

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    description="""
    HealthGuard API - personal health tracking REST API.

    - JWT authentication and onboarding profile
    - Vitals and daily habit logging
    - Heuristic risk assessment and disease impact insights
    - Medical report upload with canned analysis
    - Rule-based health assistant chat
    - State health alerts, article search, English/Hindi UI strings

    Scores and advice are informational heuristics, not medical diagnoses.
    """
)

# Browser frontend on another origin
setup_cors(app)

# Unhandled exceptions -> error log + generic 500
app.add_middleware(ErrorHandlerMiddleware)

# Profile missing, not enough data... -> 4xx
register_exception_handlers(app)


@app.on_event("startup")
async def startup_event():
    """
    Create missing tables and hook the error logger to the database.

    create_all only adds missing tables, schema changes need a migration.
    """
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    configure_error_logging(SessionLocal, logs_dir=settings.LOGS_DIR)
    logger.info(f"{settings.PROJECT_NAME} {__version__} started")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown complete")


@app.get("/health", tags=["Health"], summary="Liveness probe")
async def health_check():
    """
    Used by container orchestrators and uptime checks.

    Response:
        {"status": "ok", "version": "1.0.0", "api": "HealthGuard API"}
    """
    return JSONResponse(
        status_code=200,
        content={"status": "ok", "version": __version__, "api": settings.PROJECT_NAME},
    )


@app.get("/", tags=["Root"], summary="API information")
async def root():
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


app.include_router(api_router, prefix=f"/api/{settings.API_VERSION}")
