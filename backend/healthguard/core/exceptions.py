"""
Domain Exceptions
Errors raised by the service layer and translated to HTTP responses.

Services never raise HTTPException directly: they raise one of these
and the handler registered in main.py maps `status_code` and `detail`
onto a JSON response.
"""

from fastapi import status


class HealthGuardError(Exception):
    """Base class for expected, user-facing service errors."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ProfileNotFoundError(HealthGuardError):
    """The user has not completed onboarding yet."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, detail: str = "Profile not found"):
        super().__init__(detail)


class ProfileAlreadyExistsError(HealthGuardError):
    """Onboarding was submitted twice."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, detail: str = "Profile already exists"):
        super().__init__(detail)


class InsufficientDataError(HealthGuardError):
    """Not enough logged data to run an engine."""

    status_code = status.HTTP_400_BAD_REQUEST
