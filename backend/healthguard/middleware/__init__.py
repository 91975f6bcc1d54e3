"""
Middleware Module
Contains FastAPI middleware for cross-cutting concerns.

Middleware processes requests before they reach endpoints
and responses before they're sent to clients.
"""

from healthguard.middleware.cors import setup_cors
from healthguard.middleware.error_handler import ErrorHandlerMiddleware, register_exception_handlers

__all__ = [
    "setup_cors",
    "ErrorHandlerMiddleware",
    "register_exception_handlers",
]
