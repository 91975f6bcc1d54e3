"""
Error Handling

- ErrorHandlerMiddleware catches all unhandled exceptions and logs them
  using the error logging service
- register_exception_handlers maps domain errors (HealthGuardError) to
  JSON responses
"""

import logging
from typing import Callable

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from healthguard.core.exceptions import HealthGuardError
from healthguard.services.error_logging import error_logger

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware that catches all unhandled exceptions and logs them.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            response = await call_next(request)
            return response

        except HTTPException as http_exc:
            # Server errors are logged, client errors are not (too noisy)
            if http_exc.status_code >= 500:
                error_logger.log_error(
                    http_exc,
                    request=request,
                    user_id=getattr(request.state, 'user_id', None),
                    user_email=getattr(request.state, 'user_email', None),
                    severity="error",
                    context={"status_code": http_exc.status_code, "detail": http_exc.detail}
                )

            return JSONResponse(
                status_code=http_exc.status_code,
                content={"detail": http_exc.detail}
            )

        except Exception as exc:
            # Unhandled exceptions - log as critical
            error_id = error_logger.log_error(
                exc,
                request=request,
                user_id=getattr(request.state, 'user_id', None),
                user_email=getattr(request.state, 'user_email', None),
                severity="critical",
                context={"unhandled": True}
            )

            # Return generic error response with error ID for reference
            return JSONResponse(
                status_code=500,
                content={
                    "detail": "An internal error occurred. Please contact support.",
                    "error_id": str(error_id) if error_id else None
                }
            )


async def health_guard_error_handler(request: Request, exc: HealthGuardError) -> JSONResponse:
    """Expected service errors: 4xx with the error's detail message."""
    logger.info(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HealthGuardError, health_guard_error_handler)
