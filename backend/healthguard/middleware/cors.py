"""
CORS Middleware Configuration
Enables Cross-Origin Resource Sharing for frontend-backend communication.

CORS is required when the web frontend (Next.js on port 3000) calls the
backend API (FastAPI on port 8000) from the browser.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from healthguard.core.config import settings


def setup_cors(app: FastAPI) -> None:
    """
    Configure CORS middleware for the FastAPI application.

    Allowed origins come from settings.CORS_ORIGINS so each deployment
    lists its own frontend domain without a code change.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,  # List of allowed origins
        allow_credentials=True,  # Allow cookies and auth headers
        allow_methods=["*"],  # Allow all HTTP methods
        allow_headers=["*"],  # Allow all headers (Content-Type, Authorization, Accept-Language...)
    )
