"""
Disease Impact Insight Engine
Turns a week of daily habit logs into per-disease lifestyle insights.

For each analysed disease (Cardiovascular Disease, Type 2 Diabetes,
Hypertension) the engine produces:
    - current_risk_level: 30 plus habit penalties, capped at 100
    - risk_trend: improving | worsening | stable
    - contributing_factors: factor name -> explanation sentence
    - preventive_actions / precautions / lifestyle_remedies: fixed advice

Averages are taken over the 7 most recent logs by log_date. A missing
value counts as 0 in the average, so a day logged without exercise drags
the exercise average down exactly like a day with 0 minutes.

The engine itself has no minimum number of logs; the caller decides how
much history is enough (see assessment_service.generate_disease_insights).
"""

from dataclasses import dataclass, field
from typing import Sequence

from healthguard.core.constants import (
    DISEASE_CARDIOVASCULAR,
    DISEASE_HYPERTENSION,
    DISEASE_TYPE_2_DIABETES,
    TREND_IMPROVING,
    TREND_STABLE,
    TREND_WORSENING,
)
from healthguard.services.snapshots import DailyLogSnapshot, ProfileSnapshot


BASE_RISK_LEVEL = 30
MAX_RISK_LEVEL = 100
RECENT_DAYS = 7


@dataclass(frozen=True)
class HabitAverages:
    sleep_hours: float = 0.0
    exercise_minutes: float = 0.0
    stress_level: float = 0.0


@dataclass
class DiseaseImpactResult:
    """One disease of a generation, ready to be stored."""
    disease_name: str
    current_risk_level: int
    risk_trend: str
    contributing_factors: dict[str, str] = field(default_factory=dict)
    preventive_actions: list[str] = field(default_factory=list)
    precautions: list[str] = field(default_factory=list)
    lifestyle_remedies: list[str] = field(default_factory=list)


# ============================================================================
# FIXED ADVICE
# ============================================================================

ADVICE = {
    DISEASE_CARDIOVASCULAR: {
        "preventive_actions": (
            "Aim for 150 minutes of moderate aerobic activity per week",
            "Reduce sodium intake to below 2,300mg per day",
            "Monitor blood pressure regularly",
            "Include omega-3 rich foods in your diet",
        ),
        "precautions": (
            "Avoid smoking and limit alcohol consumption",
            "Manage cholesterol levels through diet",
            "Watch for warning signs: chest pain, shortness of breath",
            "Stay up to date with cardiac screenings if family history exists",
        ),
        "lifestyle_remedies": (
            "Practice deep breathing exercises for 10 minutes daily to reduce stress",
            "Walk briskly for 30 minutes, 5 days per week",
            "Eat a Mediterranean-style diet rich in vegetables, fruits, whole grains, and olive oil",
            "Maintain a healthy weight (BMI between 18.5-24.9)",
        ),
    },
    DISEASE_TYPE_2_DIABETES: {
        "preventive_actions": (
            "Maintain blood sugar levels within target range (fasting: 80-130 mg/dL)",
            "Get HbA1c tested every 3-6 months",
            "Limit refined carbohydrates and sugary drinks",
            "Maintain healthy body weight",
        ),
        "precautions": (
            "Monitor for symptoms: increased thirst, frequent urination, fatigue",
            "Check feet daily for cuts or infections",
            "Avoid prolonged sitting - move every 30 minutes",
            "Be cautious with high glycemic index foods",
        ),
        "lifestyle_remedies": (
            "Follow a low-glycemic diet with complex carbohydrates, lean proteins, and fiber",
            "Exercise at least 150 minutes per week to improve insulin sensitivity",
            "Stay hydrated with 8-10 glasses of water daily",
            "Manage portion sizes and eat regular meals to stabilize blood sugar",
        ),
    },
    DISEASE_HYPERTENSION: {
        "preventive_actions": (
            "Monitor blood pressure at home regularly (target: below 120/80 mmHg)",
            "Reduce sodium intake to 1,500mg or less per day",
            "Limit caffeine consumption",
            "Maintain healthy body weight",
        ),
        "precautions": (
            "Avoid foods high in sodium: processed foods, canned soups, deli meats",
            "Limit alcohol to moderate levels",
            "Be aware of symptoms: severe headaches, vision problems, chest pain",
            "Don't skip medications if prescribed",
        ),
        "lifestyle_remedies": (
            "Practice stress-reduction techniques: meditation, yoga, progressive muscle relaxation",
            "Follow the DASH diet emphasizing fruits, vegetables, whole grains, and low-fat dairy",
            "Get 7-9 hours of quality sleep each night",
            "Engage in regular aerobic exercise: brisk walking, cycling, swimming",
        ),
    },
}


# ============================================================================
# AVERAGING
# ============================================================================

def recent_habit_averages(daily_logs: Sequence[DailyLogSnapshot]) -> HabitAverages:
    """
    Average sleep, exercise and stress over the last RECENT_DAYS logs.

    Input order does not matter, logs are sorted by log_date first.
    An empty sequence gives all-zero averages.
    """
    recent = sorted(daily_logs, key=lambda log: log.log_date)[-RECENT_DAYS:]
    if not recent:
        return HabitAverages()

    count = len(recent)
    return HabitAverages(
        sleep_hours=sum(log.sleep_hours or 0 for log in recent) / count,
        exercise_minutes=sum(log.exercise_minutes or 0 for log in recent) / count,
        stress_level=sum(log.stress_level or 0 for log in recent) / count,
    )


# ============================================================================
# PER-DISEASE RULES
# ============================================================================

def _cardiovascular(avg: HabitAverages, profile: ProfileSnapshot):
    low_exercise = avg.exercise_minutes < 30
    high_stress = avg.stress_level > 6
    short_sleep = avg.sleep_hours < 7

    risk = BASE_RISK_LEVEL
    risk += 15 if low_exercise else 0
    risk += 10 if high_stress else 0
    risk += 10 if short_sleep else 0

    if avg.exercise_minutes > 30 and avg.stress_level < 7:
        trend = TREND_IMPROVING
    elif avg.exercise_minutes < 20:
        trend = TREND_WORSENING
    else:
        trend = TREND_STABLE

    factors = {
        "exercise": (
            "Low physical activity increases heart disease risk"
            if low_exercise else "Good activity level"
        ),
        "stress": (
            "High stress levels are damaging your cardiovascular health"
            if high_stress else "Stress managed well"
        ),
        "sleep": (
            "Insufficient sleep increases inflammation and heart strain"
            if short_sleep else "Healthy sleep duration"
        ),
    }
    return risk, trend, factors


def _type_2_diabetes(avg: HabitAverages, profile: ProfileSnapshot):
    sedentary = avg.exercise_minutes < 20
    poor_sleep = avg.sleep_hours < 6
    # Exact, case-sensitive match on the stored condition name
    family_history = "Diabetes" in (profile.medical_conditions or [])

    risk = BASE_RISK_LEVEL
    risk += 20 if sedentary else 0
    risk += 15 if poor_sleep else 0

    if avg.exercise_minutes > 30 and avg.sleep_hours > 7:
        trend = TREND_IMPROVING
    else:
        trend = TREND_STABLE

    factors = {
        "exercise": (
            "Sedentary lifestyle increases insulin resistance"
            if sedentary else "Physical activity helps regulate blood sugar"
        ),
        "sleep": (
            "Poor sleep disrupts glucose metabolism and increases diabetes risk"
            if poor_sleep else "Adequate sleep supports metabolic health"
        ),
        "family_history": (
            "Family history significantly increases your risk"
            if family_history else "No known family history"
        ),
    }
    return risk, trend, factors


def _hypertension(avg: HabitAverages, profile: ProfileSnapshot):
    high_stress = avg.stress_level > 7
    low_exercise = avg.exercise_minutes < 25

    risk = BASE_RISK_LEVEL
    risk += 20 if high_stress else 0
    risk += 15 if low_exercise else 0

    if avg.stress_level > 8:
        trend = TREND_WORSENING
    elif avg.stress_level < 5 and avg.exercise_minutes > 30:
        trend = TREND_IMPROVING
    else:
        trend = TREND_STABLE

    factors = {
        "stress": (
            "Your stress levels are significantly increasing your blood pressure and hypertension risk"
            if high_stress else "Stress levels are manageable"
        ),
        "exercise": (
            "Lack of regular activity contributes to high blood pressure"
            if low_exercise else "Good activity level"
        ),
        "lifestyle": "Daily habits play a crucial role in blood pressure management",
    }
    return risk, trend, factors


# Evaluation (and output) order
RULES = (
    (DISEASE_CARDIOVASCULAR, _cardiovascular),
    (DISEASE_TYPE_2_DIABETES, _type_2_diabetes),
    (DISEASE_HYPERTENSION, _hypertension),
)


def compute_disease_impact(
    profile: ProfileSnapshot,
    daily_logs: Sequence[DailyLogSnapshot],
) -> list[DiseaseImpactResult]:
    """
    Analyse recent habits against each tracked disease.

    Args:
        profile: Profile snapshot (only medical_conditions is read)
        daily_logs: Daily logs in any order; the last 7 by date are used

    Returns:
        Three DiseaseImpactResult objects in fixed order:
        Cardiovascular Disease, Type 2 Diabetes, Hypertension
    """
    averages = recent_habit_averages(daily_logs)

    results = []
    for disease_name, rule in RULES:
        risk, trend, factors = rule(averages, profile)
        advice = ADVICE[disease_name]
        results.append(
            DiseaseImpactResult(
                disease_name=disease_name,
                current_risk_level=min(risk, MAX_RISK_LEVEL),
                risk_trend=trend,
                contributing_factors=factors,
                preventive_actions=list(advice["preventive_actions"]),
                precautions=list(advice["precautions"]),
                lifestyle_remedies=list(advice["lifestyle_remedies"]),
            )
        )
    return results
