"""
Report Classifier
Canned analysis for uploaded medical reports, keyed by report type.

The uploaded file is never read. Known types get a fixed bundle of
findings, risk factors and recommendations; every other type (including
types the upload form does not offer) gets the manual review bundle.
"""

from dataclasses import asdict, dataclass, field


@dataclass
class ReportAnalysis:
    findings: list[str] = field(default_factory=list)
    risk_factors: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


ANALYSIS_BY_TYPE = {
    "Blood Test": {
        "findings": (
            "Hemoglobin levels within normal range",
            "Glucose levels slightly elevated",
            "Cholesterol levels borderline high",
        ),
        "risk_factors": (
            "Elevated glucose may indicate prediabetes",
            "High cholesterol increases cardiovascular risk",
        ),
        "recommendations": (
            "Consult with your doctor about glucose management",
            "Consider dietary modifications to reduce cholesterol",
            "Increase physical activity to 150 minutes per week",
        ),
    },
    "X-Ray": {
        "findings": (
            "Clear lung fields",
            "No evidence of fractures",
            "Normal cardiac silhouette",
        ),
        "risk_factors": (),
        "recommendations": (
            "Continue regular health monitoring",
            "Maintain good respiratory hygiene",
        ),
    },
    "ECG": {
        "findings": (
            "Normal sinus rhythm",
            "Heart rate: 72 bpm",
            "No ST segment changes",
        ),
        "risk_factors": (),
        "recommendations": (
            "Heart function appears normal",
            "Continue healthy lifestyle habits",
            "Monitor blood pressure regularly",
        ),
    },
}

DEFAULT_ANALYSIS = {
    "findings": (
        "Report uploaded successfully",
        "Manual review recommended",
    ),
    "risk_factors": (
        "Consult with healthcare provider for detailed interpretation",
    ),
    "recommendations": (
        "Discuss findings with your doctor",
        "Keep records organized for future reference",
    ),
}


def classify(report_type: str) -> ReportAnalysis:
    """
    Return the analysis bundle for a report type.

    Matching is exact ("blood test" is not "Blood Test"). Each call
    returns new lists, so callers may mutate the result freely.
    """
    table = ANALYSIS_BY_TYPE.get(report_type, DEFAULT_ANALYSIS)
    return ReportAnalysis(
        findings=list(table["findings"]),
        risk_factors=list(table["risk_factors"]),
        recommendations=list(table["recommendations"]),
    )
