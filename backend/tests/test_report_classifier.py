"""
Unit Tests for the Report Classifier
"""
from healthguard.services.report_classifier import classify


class TestClassify:
    def test_blood_test(self):
        analysis = classify("Blood Test")

        assert analysis.findings == [
            "Hemoglobin levels within normal range",
            "Glucose levels slightly elevated",
            "Cholesterol levels borderline high",
        ]
        assert len(analysis.risk_factors) == 2
        assert len(analysis.recommendations) == 3

    def test_imaging_types_have_no_risk_factors(self):
        assert classify("X-Ray").risk_factors == []
        assert classify("ECG").findings[0] == "Normal sinus rhythm"

    def test_other_types_get_manual_review(self):
        for report_type in ("MRI Scan", "Prescription", "Something else"):
            analysis = classify(report_type)
            assert analysis.findings == ["Report uploaded successfully", "Manual review recommended"]

    def test_match_is_case_sensitive(self):
        assert "Manual review recommended" in classify("blood test").findings

    def test_results_are_fresh_lists(self):
        first = classify("Blood Test")
        first.findings.append("tampered")

        assert "tampered" not in classify("Blood Test").findings

    def test_to_dict(self):
        assert set(classify("ECG").to_dict()) == {"findings", "risk_factors", "recommendations"}

    def test_unrecognized_type(self):
        assert len(classify("Foo").findings) == 2

    def test_same_type_same_output(self):
        assert classify("Blood Test") == classify("Blood Test")
        assert classify("Foo").to_dict() == classify("Foo").to_dict()
