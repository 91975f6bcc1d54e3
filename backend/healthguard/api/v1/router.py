"""
API v1 Main Router
Aggregates all v1 API endpoints into a single router.

This file combines all individual routers into a single APIRouter that is
included in the main FastAPI application with prefix /api/v1.

Structure:
- /auth/* - Authentication (register, login, refresh, me)
- /profile - Onboarding profile
- /health-records, /daily-logs - Vitals and daily habits
- /risk-assessments/* - Risk scoring engine
- /insights/disease-impact/* - Disease impact insight engine
- /reports/* - Medical report upload and canned analysis
- /chat/* - Rule-based health assistant
- /dashboard/* - Aggregated views
- /alerts/* - Static state health alerts
- /articles/* - Wikipedia article search
- /i18n/* - UI translations
"""

from fastapi import APIRouter

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


# Create main v1 router
# This router will be included in main.py with prefix /api/v1
api_router = APIRouter()


# Include authentication endpoints
# Endpoints: POST /auth/register, /auth/login, /auth/refresh, GET /auth/me
# No authentication required except for /me
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
)


# Include profile endpoints
# Endpoints: POST/GET/PUT /profile
api_router.include_router(
    profile.router,
    # prefix is already defined in profile.router (/profile)
    tags=["Profile"],
)


# Include health tracking endpoints
# Endpoints: POST/GET /health-records, GET /health-records/{id}, PUT/GET /daily-logs
api_router.include_router(
    health.router,
    # No prefix needed, endpoints define their own paths
    tags=["Health"],
)


# Include engine endpoints
api_router.include_router(risk.router, tags=["Risk Assessment"])
api_router.include_router(insights.router, tags=["Insights"])
api_router.include_router(reports.router, tags=["Reports"])
api_router.include_router(chat.router, tags=["Chat"])


# Include aggregated and reference endpoints
api_router.include_router(dashboard.router, tags=["Dashboard"])
api_router.include_router(alerts.router, tags=["Health Alerts"])
api_router.include_router(articles.router, tags=["Articles"])

# No authentication required for translations
api_router.include_router(i18n.router, tags=["i18n"])
