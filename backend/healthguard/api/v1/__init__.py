"""
API v1 Module
Contains all version 1 API endpoints.
"""

# Expose routers for easy import
from healthguard.api.v1 import (
    alerts,
    articles,
    auth,
    chat,
    dashboard,
    health,
    i18n,
    insights,
    profile,
    reports,
    risk,
)

__all__ = [
    "alerts",
    "articles",
    "auth",
    "chat",
    "dashboard",
    "health",
    "i18n",
    "insights",
    "profile",
    "reports",
    "risk",
]
