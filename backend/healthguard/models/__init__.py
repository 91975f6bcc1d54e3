"""
Database Models Module
Contains SQLAlchemy ORM models for all database tables.

All models must be imported here to be registered with SQLAlchemy
and created during Base.metadata.create_all().
"""

from healthguard.db.base import Base
from healthguard.models.base import BaseModel
from healthguard.models.user import User
from healthguard.models.profile import Profile
from healthguard.models.health_record import HealthRecord
from healthguard.models.daily_health_log import DailyHealthLog
from healthguard.models.risk_assessment import RiskAssessment
from healthguard.models.disease_impact import DiseaseImpactAnalysis
from healthguard.models.medical_report import MedicalReport
from healthguard.models.chat_message import ChatMessage
from healthguard.models.error_log import ErrorLog

__all__ = [
    "Base",
    "BaseModel",
    "User",
    "Profile",
    "HealthRecord",
    "DailyHealthLog",
    "RiskAssessment",
    "DiseaseImpactAnalysis",
    "MedicalReport",
    "ChatMessage",
    "ErrorLog",
]
