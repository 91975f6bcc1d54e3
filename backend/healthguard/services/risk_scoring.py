"""
Risk Scoring Engine
Heuristic 0-100 health risk score from the profile and recent vitals.

This is not a medical model. The score is built additively:

    overall = 20                                     (base)
            + 20 / 15 / 10   age > 65 / > 50 / > 40
            + 15 / 10        BMI > 30 / > 25
            + 5 per listed medical condition
            + 15 / 10        average systolic > 140 / > 130
    overall = min(overall, 100)

Category scores are the overall score shifted by a random offset:

    cardiovascular = overall + randint(0, 9)  - 5
    diabetes       = overall + randint(0, 14) - 10
    respiratory    = overall + randint(0, 9)  - 15
    cancer         = overall + randint(0, 9)  - 20

each clamped to [0, 100]. The random source is injectable so callers (and
tests) can make the result reproducible.

Example:
    result = compute_risk_assessment(
        profile=ProfileSnapshot(date_of_birth=date(1950, 1, 1),
                                height_cm=170, weight_kg=95,
                                medical_conditions=["Asthma", "Diabetes"]),
        recent_records=[],
        rng=random.Random(42),
    )
    result.overall_risk_score  # 65
"""

import math
import random
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from healthguard.services.snapshots import ProfileSnapshot, VitalsSnapshot


BASE_RISK = 20
MAX_RISK = 100

# (exclusive lower bound, points), checked in order, first match wins
AGE_POINTS = ((65, 20), (50, 15), (40, 10))
BMI_POINTS = ((30, 15), (25, 10))
SYSTOLIC_POINTS = ((140, 15), (130, 10))
POINTS_PER_CONDITION = 5

# category -> (randint upper bound, fixed offset)
CATEGORY_JITTER = {
    "cardiovascular": (9, -5),
    "diabetes": (14, -10),
    "respiratory": (9, -15),
    "cancer": (9, -20),
}

REC_CHECKUP = "Schedule a comprehensive health check-up with your physician"
REC_CARDIO = "Monitor your blood pressure regularly and consult a cardiologist"
REC_DIABETES = "Consider a glucose tolerance test and dietary modifications"
REC_WEIGHT = "Maintain a healthy weight through balanced diet and regular exercise"
REC_SLEEP = "Stay hydrated and get at least 7-8 hours of sleep daily"
REC_STRESS = "Consider stress management techniques such as meditation or yoga"


@dataclass
class RiskComputation:
    """Engine output, ready to be stored as a RiskAssessment row."""
    overall_risk_score: int
    cardiovascular_risk: int
    diabetes_risk: int
    respiratory_risk: int
    cancer_risk: int
    risk_factors: dict = field(default_factory=dict)
    recommendations: list[str] = field(default_factory=list)


def age_in_years(date_of_birth: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """Whole years elapsed, using 365.25-day years. None without a birth date."""
    if date_of_birth is None:
        return None
    today = today or date.today()
    return math.floor((today - date_of_birth).days / 365.25)


def body_mass_index(height_cm: Optional[float], weight_kg: Optional[float]) -> Optional[float]:
    """BMI, or None unless both height and weight are present and non-zero."""
    if not height_cm or not weight_kg:
        return None
    return weight_kg / (height_cm / 100) ** 2


def average_systolic(records: Sequence[VitalsSnapshot]) -> Optional[float]:
    """Mean systolic over records that carry one, None if none do."""
    readings = [r.blood_pressure_systolic for r in records if r.blood_pressure_systolic]
    if not readings:
        return None
    return sum(readings) / len(readings)


def _points(value: Optional[float], table) -> int:
    if value is None:
        return 0
    for threshold, points in table:
        if value > threshold:
            return points
    return 0


def _clamp(value: int) -> int:
    return max(0, min(value, MAX_RISK))


def compute_risk_assessment(
    profile: ProfileSnapshot,
    recent_records: Sequence[VitalsSnapshot],
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> RiskComputation:
    """
    Score a profile and its most recent health records.

    Args:
        profile: Profile snapshot (age, height, weight, conditions)
        recent_records: Up to 10 health records, most recent first
        rng: Random source for category jitter (default: unseeded)
        today: Reference date for the age computation (default: today)

    Returns:
        RiskComputation with all scores in [0, 100]
    """
    rng = rng or random.Random()

    age = age_in_years(profile.date_of_birth, today)
    bmi = body_mass_index(profile.height_cm, profile.weight_kg)
    conditions = list(profile.medical_conditions or [])

    total = BASE_RISK
    # A zero age (born this year) adds nothing, like a missing one
    total += _points(age or None, AGE_POINTS)
    total += _points(bmi, BMI_POINTS)
    total += POINTS_PER_CONDITION * len(conditions)
    total += _points(average_systolic(recent_records), SYSTOLIC_POINTS)

    overall = min(total, MAX_RISK)

    categories = {
        name: _clamp(overall + rng.randint(0, upper) + offset)
        for name, (upper, offset) in CATEGORY_JITTER.items()
    }

    recommendations = []
    if overall > 50:
        recommendations.append(REC_CHECKUP)
    if categories["cardiovascular"] > 60:
        recommendations.append(REC_CARDIO)
    if categories["diabetes"] > 60:
        recommendations.append(REC_DIABETES)
    if bmi is not None and bmi > 25:
        recommendations.append(REC_WEIGHT)
    recommendations.append(REC_SLEEP)
    recommendations.append(REC_STRESS)

    return RiskComputation(
        overall_risk_score=overall,
        cardiovascular_risk=categories["cardiovascular"],
        diabetes_risk=categories["diabetes"],
        respiratory_risk=categories["respiratory"],
        cancer_risk=categories["cancer"],
        risk_factors={
            "age": age,
            "bmi": round(bmi, 2) if bmi is not None else None,
            "conditions": conditions,
        },
        recommendations=recommendations,
    )
