"""
MedicalReport Model
Metadata and canned analysis of an uploaded medical document.

The file itself is not stored: file_url is a placeholder path built from
the original file name. findings / risk_factors / recommendations come
from the report classifier and never change after upload.
"""

from sqlalchemy import Column, Date, ForeignKey, JSON, String, Uuid

from healthguard.models.base import BaseModel


class MedicalReport(BaseModel):
    """Uploaded report with its classifier bundle."""

    __tablename__ = "medical_reports"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    report_type = Column(String(100), nullable=False, index=True)  # e.g. "Blood Test"
    report_date = Column(Date, nullable=False)

    file_name = Column(String(255), nullable=False)
    file_url = Column(String(500), nullable=False)

    # Full bundle as returned by the classifier, kept alongside the split lists
    ai_analysis = Column(JSON, default=dict, nullable=False)
    findings = Column(JSON, default=list, nullable=False)
    risk_factors = Column(JSON, default=list, nullable=False)
    recommendations = Column(JSON, default=list, nullable=False)

    def __repr__(self):
        return f"<MedicalReport(type='{self.report_type}', file='{self.file_name}')>"
