import unittest
from unittest.mock import patch

from aicura.analysis.validation import (
    DEFAULT_ANALYSIS_SUMMARY,
    DEFAULT_NEXT_STEPS,
    DEFAULT_RECOMMENDATIONS,
    DEFAULT_SUMMARY,
    validate_and_clean,
)
from aicura.models import AnalysisResult, SeverityTier

VALIDATION_LOGGER = "aicura.analysis.validation"


def _condition(**overrides) -> dict:
    condition = {
        "name": "Migraine",
        "confidence": 80,
        "description": "Recurrent headaches.",
        "severity": "low",
        "symptoms": ["headache", "nausea"],
        "recommendations": ["Rest in a dark room"],
    }
    condition.update(overrides)
    return condition


class ValidateAndCleanTests(unittest.TestCase):
    def assert_well_formed(self, result: AnalysisResult) -> None:
        self.assertIsInstance(result, AnalysisResult)
        self.assertIsInstance(result.conditions, list)
        self.assertIsInstance(result.summary, str)
        self.assertTrue(result.next_steps)

    def test_valid_payload_passes_through_without_defaults(self) -> None:
        payload = {
            "conditions": [_condition()],
            "summary": "Likely benign.",
            "nextSteps": ["Rest", "See a GP"],
        }
        with self.assertNoLogs(VALIDATION_LOGGER, level="INFO"):
            result = validate_and_clean(payload)

        self.assertEqual(result.summary, "Likely benign.")
        self.assertEqual(result.next_steps, ["Rest", "See a GP"])
        condition = result.conditions[0]
        self.assertEqual(condition.name, "Migraine")
        self.assertEqual(condition.confidence, 80)
        self.assertEqual(condition.severity, SeverityTier.LOW)
        self.assertEqual(condition.symptoms, ["headache", "nausea"])

    def test_malformed_top_level_values_never_raise(self) -> None:
        for raw in (None, "not json", 42, [], [1, 2], {"conditions": "many"}, {}):
            with self.subTest(raw=raw):
                with self.assertLogs(VALIDATION_LOGGER, level="INFO"):
                    result = validate_and_clean(raw)
                self.assert_well_formed(result)
                self.assertEqual(result.conditions, [])
                self.assertEqual(result.summary, DEFAULT_SUMMARY)
                self.assertEqual(result.next_steps, DEFAULT_NEXT_STEPS)

    def test_confidence_is_clamped(self) -> None:
        cases = [
            (100, 95),
            (10, 60),
            (None, 60),
            ("80", 80),
            (72.6, 73),
            (72.5, 73),
            (73.5, 74),
            ("n/a", 60),
            (True, 60),
            (10**400, 95),
            (-(10**400), 60),
            ("1e400", 95),
        ]
        for raw_confidence, expected in cases:
            with self.subTest(confidence=raw_confidence):
                result = validate_and_clean(
                    {"conditions": [_condition(confidence=raw_confidence)]}
                )
                self.assertEqual(result.conditions[0].confidence, expected)

    def test_oversized_confidence_does_not_discard_other_conditions(self) -> None:
        result = validate_and_clean(
            {"conditions": [_condition(confidence=10**400), _condition(confidence=70)]}
        )

        self.assertEqual([c.confidence for c in result.conditions], [95, 70])
        self.assertNotEqual(result.summary, DEFAULT_ANALYSIS_SUMMARY)

    def test_clamping_is_reported(self) -> None:
        with self.assertLogs(VALIDATION_LOGGER, level="INFO") as logs:
            validate_and_clean(
                {"conditions": [_condition(confidence=99)], "summary": "s", "nextSteps": ["a"]}
            )
        self.assertEqual(len(logs.records), 1)
        self.assertIn("conditions[0].confidence", logs.output[0])

    def test_severity_is_coerced(self) -> None:
        cases = [("HIGH", SeverityTier.HIGH), (" medium ", SeverityTier.MEDIUM),
                 ("critical", SeverityTier.MEDIUM), (None, SeverityTier.MEDIUM), (3, SeverityTier.MEDIUM)]
        for raw_severity, expected in cases:
            with self.subTest(severity=raw_severity):
                result = validate_and_clean({"conditions": [_condition(severity=raw_severity)]})
                self.assertEqual(result.conditions[0].severity, expected)

    def test_missing_condition_fields_get_defaults(self) -> None:
        with self.assertLogs(VALIDATION_LOGGER, level="INFO") as logs:
            result = validate_and_clean({"conditions": [{}], "summary": "s", "nextSteps": ["a"]})

        condition = result.conditions[0]
        self.assertEqual(condition.name, "Unknown Condition")
        self.assertEqual(condition.description, "No description available")
        self.assertEqual(condition.confidence, 60)
        self.assertEqual(condition.severity, SeverityTier.MEDIUM)
        self.assertEqual(condition.symptoms, [])
        self.assertEqual(condition.recommendations, DEFAULT_RECOMMENDATIONS)
        logged = "\n".join(logs.output)
        for field in ("name", "description", "confidence", "severity", "symptoms", "recommendations"):
            self.assertIn(f"conditions[0].{field}", logged)

    def test_non_object_condition_becomes_unknown_condition(self) -> None:
        result = validate_and_clean({"conditions": ["oops", None]})
        self.assertEqual(len(result.conditions), 2)
        self.assertEqual(result.conditions[0].name, "Unknown Condition")

    def test_list_fields_keep_only_text(self) -> None:
        result = validate_and_clean(
            {
                "conditions": [_condition(symptoms=["fever", None, {"x": 1}, 39.5])],
                "nextSteps": ["Rest", "", None],
            }
        )
        self.assertEqual(result.conditions[0].symptoms, ["fever", "39.5"])
        self.assertEqual(result.next_steps, ["Rest"])

    def test_summary_and_next_steps_defaults(self) -> None:
        result = validate_and_clean({"conditions": [], "summary": 7, "nextSteps": []})
        self.assertEqual(result.summary, DEFAULT_SUMMARY)
        self.assertEqual(result.next_steps, DEFAULT_NEXT_STEPS)

    def test_snake_case_next_steps_accepted(self) -> None:
        result = validate_and_clean({"summary": "s", "next_steps": ["Hydrate"]})
        self.assertEqual(result.next_steps, ["Hydrate"])

    def test_internal_failure_returns_default_analysis(self) -> None:
        with patch(
            "aicura.analysis.validation._clean",
            side_effect=RuntimeError("boom"),
        ), self.assertLogs(VALIDATION_LOGGER, level="ERROR"):
            result = validate_and_clean({"conditions": []})

        self.assertEqual(result.conditions, [])
        self.assertEqual(result.summary, DEFAULT_ANALYSIS_SUMMARY)
        self.assertEqual(result.next_steps, DEFAULT_NEXT_STEPS)

    def test_serializes_next_steps_with_wire_name(self) -> None:
        result = validate_and_clean({"summary": "s", "nextSteps": ["a"]})
        self.assertIn("nextSteps", result.model_dump(by_alias=True))


if __name__ == "__main__":
    unittest.main()
