"""
Health Alerts API Endpoints
Static public health advisories by Indian state.

Endpoints:
    - GET /alerts/states - States with alerts, alphabetical
    - GET /alerts/{state} - Alerts of one state (empty list if unknown)
"""

from fastapi import APIRouter, Depends

from healthguard.api.v1.deps import get_current_user
from healthguard.models.user import User
from healthguard.schemas.reference import HealthAlertListResponse, StatesResponse
from healthguard.services import health_alerts

router = APIRouter(prefix="/alerts")


@router.get("/states", response_model=StatesResponse)
def list_states(current_user: User = Depends(get_current_user)):
    return StatesResponse(states=health_alerts.get_states())


@router.get("/{state}", response_model=HealthAlertListResponse)
def get_state_alerts(state: str, current_user: User = Depends(get_current_user)):
    """
    Example:
        GET /api/v1/alerts/Kerala
        -> Nipah virus surveillance, leptospirosis warning
    """
    return HealthAlertListResponse(state=state, alerts=health_alerts.get_alerts_for_state(state))
