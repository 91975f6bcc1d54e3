"""
Error Logging Service

Error logging system that:
- Writes to rotating log files under settings.LOGS_DIR (when writable)
- Stores errors in the error_logs table for later inspection
- Captures request and user context plus the traceback
- Sanitizes sensitive data (passwords, tokens) before storing it

Usage:
    from healthguard.services.error_logging import error_logger

    try:
        # some code
    except Exception as e:
        error_logger.log_error(e, request=request, user=current_user)
"""

import logging
import sys
import traceback
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import UUID

from healthguard.models.error_log import ErrorLog


logger = logging.getLogger("error_logging")
logger.setLevel(logging.DEBUG)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DETAILED_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Sensitive fields to sanitize
SENSITIVE_FIELDS = {'password', 'password_hash', 'token', 'access_token', 'refresh_token',
                    'authorization', 'api_key', 'secret', 'credential'}

SEVERITY_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
}


def sanitize_data(data: Any, depth: int = 0) -> Any:
    """
    Sanitize sensitive data from dictionaries and strings.
    Replaces sensitive field values with '[REDACTED]'.
    """
    if depth > 10:  # Prevent infinite recursion
        return "[MAX_DEPTH]"

    if isinstance(data, dict):
        sanitized = {}
        for key, value in data.items():
            key_lower = str(key).lower()
            if any(sensitive in key_lower for sensitive in SENSITIVE_FIELDS):
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = sanitize_data(value, depth + 1)
        return sanitized
    elif isinstance(data, list):
        return [sanitize_data(item, depth + 1) for item in data]
    elif isinstance(data, str):
        if len(data) > 20 and data.startswith("eyJ"):  # JWT token pattern
            return "[REDACTED_TOKEN]"
        return data
    else:
        return data


def truncate_string(s: str, max_length: int = 10000) -> str:
    """Truncate string to max length."""
    if len(s) > max_length:
        return s[:max_length] + f"... [TRUNCATED, total {len(s)} chars]"
    return s


def setup_file_logging(logs_dir: str) -> bool:
    """
    Attach rotating file handlers to the root logger.

    errors.log receives ERROR and above, app_detailed.log everything.
    If the directory cannot be created or written, file logging stays off
    and the application logs to the console only.

    Returns:
        True if file handlers were installed
    """
    path = Path(logs_dir)
    try:
        path.mkdir(parents=True, exist_ok=True)
        # Test if we can write to the directory
        test_file = path / ".write_test"
        test_file.touch()
        test_file.unlink()
    except OSError as e:
        logger.warning(f"Cannot write to logs directory {path}: {e}. File logging disabled.")
        return False

    root_logger = logging.getLogger()
    installed = {getattr(h, "baseFilename", None) for h in root_logger.handlers}

    error_file = path / "errors.log"
    if str(error_file.resolve()) not in installed:
        file_handler = RotatingFileHandler(
            error_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=10,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.ERROR)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)

    detailed_file = path / "app_detailed.log"
    if str(detailed_file.resolve()) not in installed:
        detailed_handler = RotatingFileHandler(
            detailed_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8"
        )
        detailed_handler.setLevel(logging.DEBUG)
        detailed_handler.setFormatter(logging.Formatter(DETAILED_LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(detailed_handler)

    return True


class ErrorLogger:
    """
    Error logging service that writes to both log files and database.
    """

    def __init__(self):
        self.db_session_factory = None

    def set_db_session_factory(self, factory):
        """Set the database session factory for DB logging."""
        self.db_session_factory = factory

    def log_error(
        self,
        error: Exception,
        request: Optional[Any] = None,
        user: Optional[Any] = None,
        user_id: Optional[UUID] = None,
        user_email: Optional[str] = None,
        severity: str = "error",
        context: Optional[Dict] = None,
        save_to_db: bool = True
    ) -> Optional[UUID]:
        """
        Log an error with full context.

        Args:
            error: The exception that occurred
            request: FastAPI Request object (optional)
            user: Current user object (optional), must still be bound to a session
            user_id, user_email: Plain identity values, used when the ORM user
                may already be detached (middleware)
            severity: info, warning, error, critical
            context: Additional context data
            save_to_db: Whether to save to database

        Returns:
            UUID of the error log entry if saved to DB, None otherwise
        """
        timestamp = datetime.now(timezone.utc)

        error_type = type(error).__name__
        error_message = str(error)

        # Location of the failure, from the active traceback if any
        module = function = line_number = None
        exc_tb = error.__traceback__ or sys.exc_info()[2]
        if exc_tb:
            stack_trace = "".join(traceback.format_exception(type(error), error, exc_tb))
            tb_info = traceback.extract_tb(exc_tb)
            if tb_info:
                last_frame = tb_info[-1]
                module = last_frame.filename
                function = last_frame.name
                line_number = str(last_frame.lineno)
        else:
            stack_trace = None

        # Extract request info
        request_method = request_path = request_query = None
        client_ip = user_agent = None
        if request is not None:
            request_method = request.method
            request_path = str(request.url.path)
            request_query = str(request.url.query) if request.url.query else None
            client_ip = request.client.host if request.client else None
            user_agent = request.headers.get("user-agent")

        # Extract user info
        if user is not None:
            user_id = user_id or user.id
            user_email = user_email or user.email

        log_message = (
            f"{error_type}: {error_message} | User: {user_email or 'anonymous'} "
            f"| Path: {request_path or 'N/A'}"
        )
        logger.log(SEVERITY_LEVELS.get(severity, logging.INFO), log_message)

        if stack_trace:
            logger.debug(stack_trace)

        if not (save_to_db and self.db_session_factory):
            return None

        # Save to database; a failing error store must not mask the original error
        try:
            db = self.db_session_factory()
            try:
                status_code = getattr(error, "status_code", None)
                error_log = ErrorLog(
                    timestamp=timestamp,
                    error_type=error_type,
                    error_code=str(status_code) if status_code is not None else None,
                    severity=severity,
                    module=module,
                    function=function,
                    line_number=line_number,
                    user_id=user_id,
                    user_email=user_email,
                    request_method=request_method,
                    request_path=request_path,
                    request_query=request_query,
                    client_ip=client_ip,
                    user_agent=truncate_string(user_agent, 500) if user_agent else None,
                    message=truncate_string(error_message or error_type, 1000),
                    stack_trace=truncate_string(stack_trace, 20000) if stack_trace else None,
                    context_data=sanitize_data(context) if context else None,
                )
                db.add(error_log)
                db.commit()
                db.refresh(error_log)
                logger.debug(f"Error logged to DB with ID: {error_log.id}")
                return error_log.id
            finally:
                db.close()
        except Exception as db_err:
            logger.error(f"Failed to save error to database: {db_err}")
            return None


# Singleton instance
error_logger = ErrorLogger()


def configure_error_logging(db_session_factory, logs_dir: Optional[str] = None):
    """
    Configure the error logging system.
    Call this during app startup.

    Args:
        db_session_factory: Session factory used to persist ErrorLog rows
        logs_dir: Directory for rotating log files, None for console only
    """
    if logs_dir:
        setup_file_logging(logs_dir)
    error_logger.set_db_session_factory(db_session_factory)
    logger.info("Error logging system configured")
