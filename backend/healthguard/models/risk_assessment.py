"""
RiskAssessment Model
Output of the risk scoring engine.

Rows are never updated: every "Generate Risk Assessment" action inserts a
new one and the latest by assessment_date (then created_at) is shown.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, JSON, Uuid

from healthguard.models.base import BaseModel


class RiskAssessment(BaseModel):
    """
    Heuristic risk scores on a 0-100 scale.

    risk_factors JSON snapshot captured at computation time:
        {"age": 70, "bmi": 32.1, "conditions": ["Asthma", "Diabetes"]}

    recommendations JSON array of display strings, in display order.
    """

    __tablename__ = "risk_assessments"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    assessment_date = Column(Date, nullable=False, index=True)

    overall_risk_score = Column(Integer, nullable=False)
    cardiovascular_risk = Column(Integer, nullable=True)
    diabetes_risk = Column(Integer, nullable=True)
    respiratory_risk = Column(Integer, nullable=True)
    cancer_risk = Column(Integer, nullable=True)

    risk_factors = Column(JSON, default=dict, nullable=False)
    recommendations = Column(JSON, default=list, nullable=False)

    def __repr__(self):
        return (
            f"<RiskAssessment(user_id={self.user_id}, date={self.assessment_date}, "
            f"overall={self.overall_risk_score})>"
        )
