"""
DiseaseImpactAnalysis Model
Output of the disease impact insight engine.

Each generation inserts one row per analysed disease, all sharing the same
analysis_date. Older generations are kept as history; readers order by
analysis_date descending so the newest generation wins.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String, Uuid

from healthguard.models.base import BaseModel, utcnow


class DiseaseImpactAnalysis(BaseModel):
    """
    Per-disease risk level, trend and advice.

    contributing_factors: {"exercise": "...", "stress": "...", ...}
        fixed key set per disease, values are explanation strings
    preventive_actions / precautions / lifestyle_remedies: string arrays
    """

    __tablename__ = "disease_impact_analysis"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    disease_name = Column(String(100), nullable=False)
    current_risk_level = Column(Integer, nullable=False)
    risk_trend = Column(String(20), nullable=False)  # improving | worsening | stable

    contributing_factors = Column(JSON, default=dict, nullable=False)
    preventive_actions = Column(JSON, default=list, nullable=False)
    precautions = Column(JSON, default=list, nullable=False)
    lifestyle_remedies = Column(JSON, default=list, nullable=False)

    analysis_date = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    def __repr__(self):
        return (
            f"<DiseaseImpactAnalysis(disease='{self.disease_name}', "
            f"risk={self.current_risk_level}, trend={self.risk_trend})>"
        )
