"""
Pydantic Schemas Module
Contains request/response schemas for API validation and serialization.

Pydantic schemas are used for:
- Validating incoming request data
- Serializing database models to JSON responses
- Auto-generating OpenAPI documentation
"""

from healthguard.schemas.user import (
    UserCreate,
    UserResponse,
    LoginRequest,
    Token,
    RefreshTokenRequest,
    TokenPayload,
)
from healthguard.schemas.profile import (
    ProfileCreate,
    ProfileUpdate,
    ProfileResponse,
)
from healthguard.schemas.health import (
    HealthRecordCreate,
    HealthRecordResponse,
    HealthRecordListResponse,
    DailyHealthLogUpsert,
    DailyHealthLogResponse,
    DailyHealthLogListResponse,
)
from healthguard.schemas.risk import (
    RiskAssessmentResponse,
    RiskAssessmentListResponse,
)
from healthguard.schemas.insight import (
    DiseaseImpactResponse,
    DiseaseImpactListResponse,
)
from healthguard.schemas.report import (
    MedicalReportResponse,
    MedicalReportListResponse,
    ReportTypesResponse,
)
from healthguard.schemas.chat import (
    ChatMessageCreate,
    ChatMessageResponse,
    ChatExchangeResponse,
    ChatHistoryResponse,
)
from healthguard.schemas.dashboard import (
    DashboardResponse,
    ProgressResponse,
)

__all__ = [
    # User schemas
    "UserCreate",
    "UserResponse",
    "LoginRequest",
    "Token",
    "RefreshTokenRequest",
    "TokenPayload",
    # Profile schemas
    "ProfileCreate",
    "ProfileUpdate",
    "ProfileResponse",
    # Health schemas
    "HealthRecordCreate",
    "HealthRecordResponse",
    "HealthRecordListResponse",
    "DailyHealthLogUpsert",
    "DailyHealthLogResponse",
    "DailyHealthLogListResponse",
    # Engine output schemas
    "RiskAssessmentResponse",
    "RiskAssessmentListResponse",
    "DiseaseImpactResponse",
    "DiseaseImpactListResponse",
    "MedicalReportResponse",
    "MedicalReportListResponse",
    "ReportTypesResponse",
    # Chat schemas
    "ChatMessageCreate",
    "ChatMessageResponse",
    "ChatExchangeResponse",
    "ChatHistoryResponse",
    # Dashboard schemas
    "DashboardResponse",
    "ProgressResponse",
]
