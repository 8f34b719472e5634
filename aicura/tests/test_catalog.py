import unittest

from pydantic import ValidationError

from aicura.matcher.catalog import (
    DISEASE_INFO,
    SYMPTOM_ROWS,
    SymptomCatalog,
    build_default_catalog,
)
from aicura.matcher.guidance import DEFAULT_GUIDANCE, severity_guidance
from aicura.models import DiseaseInfo, SeverityTier


class SymptomCatalogTests(unittest.TestCase):
    def setUp(self) -> None:
        self.catalog = build_default_catalog()

    def test_rows_merge_into_one_entry_per_disease(self) -> None:
        self.assertEqual(len(SYMPTOM_ROWS), 82)
        self.assertEqual(len(self.catalog), 41)
        first = self.catalog.entries[0]
        self.assertEqual(first.disease_name, "Fungal infection")
        self.assertEqual(
            first.known_symptoms,
            ("itching", "skin_rash", "nodal_skin_eruptions", "dischromic _patches"),
        )
        self.assertEqual(first.severity, SeverityTier.LOW)

    def test_every_disease_has_info(self) -> None:
        for entry in self.catalog:
            self.assertIn(entry.disease_name, DISEASE_INFO)
            self.assertNotEqual(entry.description, "No description available")

    def test_all_symptoms_unique_in_first_seen_order(self) -> None:
        symptoms = self.catalog.all_symptoms()
        self.assertEqual(len(symptoms), len(set(symptoms)))
        self.assertEqual(symptoms[:3], ["itching", "skin_rash", "nodal_skin_eruptions"])
        self.assertIn("foul_smell_of urine", symptoms)

    def test_get_disease_info(self) -> None:
        info = self.catalog.get_disease_info("Heart attack")
        self.assertEqual(info.severity, SeverityTier.HIGH)
        self.assertIsNone(self.catalog.get_disease_info("Dragon pox"))

    def test_missing_info_defaults_to_medium(self) -> None:
        catalog = SymptomCatalog.from_rows([("Mystery", "aaa", "bbb", "aaa")])
        entry = catalog.entries[0]
        self.assertEqual(entry.known_symptoms, ("aaa", "bbb"))
        self.assertEqual(entry.severity, SeverityTier.MEDIUM)
        self.assertEqual(entry.description, "No description available")

    def test_entries_are_immutable(self) -> None:
        entry = self.catalog.entries[0]
        with self.assertRaises(ValidationError):
            entry.severity = SeverityTier.HIGH

    def test_default_catalogs_are_independent_values(self) -> None:
        other = build_default_catalog()
        self.assertIsNot(other, self.catalog)
        self.assertEqual(other.entries, self.catalog.entries)


class SeverityGuidanceTests(unittest.TestCase):
    def test_guidance_per_tier(self) -> None:
        self.assertIn("mild", severity_guidance(SeverityTier.LOW))
        self.assertIn("manageable", severity_guidance("medium"))
        self.assertIn("consult a doctor soon", severity_guidance(SeverityTier.HIGH))

    def test_unknown_tier_gets_default(self) -> None:
        self.assertEqual(severity_guidance("critical"), DEFAULT_GUIDANCE)
        self.assertEqual(severity_guidance(None), DEFAULT_GUIDANCE)

    def test_info_default_model(self) -> None:
        self.assertEqual(DiseaseInfo().severity, SeverityTier.MEDIUM)


if __name__ == "__main__":
    unittest.main()
