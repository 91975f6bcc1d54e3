"""
Unit Tests for the Disease Impact Insight Engine
"""
import random
from datetime import date, timedelta

import pytest

from healthguard.core.constants import (
    ANALYSED_DISEASES,
    DISEASE_CARDIOVASCULAR,
    DISEASE_HYPERTENSION,
    DISEASE_TYPE_2_DIABETES,
    TREND_IMPROVING,
    TREND_STABLE,
    TREND_WORSENING,
)
from healthguard.services.disease_impact import compute_disease_impact, recent_habit_averages
from healthguard.services.snapshots import DailyLogSnapshot, ProfileSnapshot


START = date(2025, 1, 1)


def make_logs(count, sleep=None, exercise=None, stress=None, start=START):
    return [
        DailyLogSnapshot(
            log_date=start + timedelta(days=i),
            sleep_hours=sleep,
            exercise_minutes=exercise,
            stress_level=stress,
        )
        for i in range(count)
    ]


def by_disease(results):
    return {result.disease_name: result for result in results}


class TestHabitAverages:
    def test_uses_last_seven_days_in_any_order(self):
        old = make_logs(3, sleep=4, exercise=0, stress=10)
        recent = make_logs(7, sleep=8, exercise=60, stress=3, start=START + timedelta(days=3))
        logs = old + recent
        random.Random(5).shuffle(logs)

        averages = recent_habit_averages(logs)

        assert averages.sleep_hours == 8
        assert averages.exercise_minutes == 60
        assert averages.stress_level == 3

    def test_missing_values_count_as_zero(self):
        logs = make_logs(2, exercise=40) + make_logs(2, start=START + timedelta(days=2))

        assert recent_habit_averages(logs).exercise_minutes == 20

    def test_empty_is_all_zero(self):
        averages = recent_habit_averages([])

        assert (averages.sleep_hours, averages.exercise_minutes, averages.stress_level) == (0, 0, 0)


class TestComputeDiseaseImpact:
    def test_fixed_disease_order(self):
        results = compute_disease_impact(ProfileSnapshot(), make_logs(3, sleep=7, exercise=30, stress=5))

        assert [r.disease_name for r in results] == ANALYSED_DISEASES

    def test_unhealthy_week(self):
        results = by_disease(
            compute_disease_impact(ProfileSnapshot(), make_logs(7, sleep=5, exercise=0, stress=9))
        )

        cvd = results[DISEASE_CARDIOVASCULAR]
        assert cvd.current_risk_level == 65
        assert cvd.risk_trend == TREND_WORSENING
        assert cvd.contributing_factors["exercise"] == "Low physical activity increases heart disease risk"

        t2d = results[DISEASE_TYPE_2_DIABETES]
        assert t2d.current_risk_level == 65
        assert t2d.risk_trend == TREND_STABLE

        htn = results[DISEASE_HYPERTENSION]
        assert htn.current_risk_level == 65
        assert htn.risk_trend == TREND_WORSENING

    def test_healthy_week_improves_everything(self):
        results = compute_disease_impact(ProfileSnapshot(), make_logs(7, sleep=8, exercise=45, stress=3))

        for result in results:
            assert result.current_risk_level == 30
            assert result.risk_trend == TREND_IMPROVING

    def test_no_logs(self):
        results = by_disease(compute_disease_impact(ProfileSnapshot(), []))

        assert results[DISEASE_CARDIOVASCULAR].current_risk_level == 55
        assert results[DISEASE_CARDIOVASCULAR].risk_trend == TREND_WORSENING
        assert results[DISEASE_TYPE_2_DIABETES].current_risk_level == 65
        assert results[DISEASE_HYPERTENSION].current_risk_level == 45
        assert results[DISEASE_HYPERTENSION].risk_trend == TREND_STABLE

    @pytest.mark.parametrize("conditions, expected", [
        (["Diabetes"], "Family history significantly increases your risk"),
        (["Asthma", "Diabetes"], "Family history significantly increases your risk"),
        (["diabetes"], "No known family history"),
        ([], "No known family history"),
    ])
    def test_family_history_is_exact_match(self, conditions, expected):
        profile = ProfileSnapshot(medical_conditions=conditions)
        results = by_disease(compute_disease_impact(profile, make_logs(3)))

        assert results[DISEASE_TYPE_2_DIABETES].contributing_factors["family_history"] == expected

    def test_hypertension_has_constant_lifestyle_factor(self):
        results = by_disease(compute_disease_impact(ProfileSnapshot(), make_logs(3)))

        factors = results[DISEASE_HYPERTENSION].contributing_factors
        assert set(factors) == {"stress", "exercise", "lifestyle"}
        assert factors["lifestyle"] == "Daily habits play a crucial role in blood pressure management"

    def test_advice_lists_are_independent(self):
        first = compute_disease_impact(ProfileSnapshot(), [])
        first[0].preventive_actions.clear()

        second = compute_disease_impact(ProfileSnapshot(), [])
        assert len(second[0].preventive_actions) == 4
        assert len(second[0].precautions) == 4
        assert len(second[0].lifestyle_remedies) == 4
