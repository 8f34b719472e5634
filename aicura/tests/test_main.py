import unittest
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from aicura.config import settings
from aicura.main import app


class ApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._client_cm = TestClient(app)
        cls.client = cls._client_cm.__enter__()

    @classmethod
    def tearDownClass(cls) -> None:
        cls._client_cm.__exit__(None, None, None)

    def test_health(self) -> None:
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["catalog_size"], 41)

    def test_list_symptoms(self) -> None:
        response = self.client.get("/api/symptoms")
        self.assertEqual(response.status_code, 200)
        self.assertIn("itching", response.json()["symptoms"])

    def test_condition_info(self) -> None:
        response = self.client.get("/api/conditions/Migraine")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["severity"], "low")
        self.assertIn("mild", body["guidance"])

    def test_unknown_condition_is_404(self) -> None:
        self.assertEqual(self.client.get("/api/conditions/Dragon%20pox").status_code, 404)

    def test_predict_ranks_matches(self) -> None:
        response = self.client.post("/api/predict", json={"symptoms": "itching, skin_rash"})
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["input"], "itching, skin_rash")
        self.assertEqual(body["matched_symptoms"], ["internal_itching", "itching", "skin_rash"])
        self.assertEqual(body["results"][0]["disease_name"], "Fungal infection")
        self.assertEqual(body["results"][0]["confidence"], 35)
        self.assertIn("mild", body["results"][0]["guidance"])
        self.assertLessEqual(len(body["results"]), 5)

    def test_predict_without_matches_returns_empty_results(self) -> None:
        response = self.client.post("/api/predict", json={"symptoms": "xyzzy qwerty"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["results"], [])

    def test_predict_requires_symptoms(self) -> None:
        self.assertEqual(self.client.post("/api/predict", json={"age": 30}).status_code, 422)

    def test_analyze_falls_back_on_unusable_reply(self) -> None:
        with patch.object(settings, "analysis_enabled", True), patch(
            "aicura.analysis.adapter.chat_completion",
            new=AsyncMock(return_value="not json"),
        ) as mock_call:
            response = self.client.post(
                "/api/analyze",
                json={"symptoms": "headache", "age": 30, "weight": 72.5},
            )

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["source"], "fallback")
        self.assertEqual(body["analysis"]["conditions"][0]["name"], "Tension Headache")
        self.assertEqual(len(body["analysis"]["nextSteps"]), 4)
        prompt = mock_call.await_args.kwargs["user_prompt"]
        self.assertIn("- Age: 30", prompt)
        self.assertIn("- Weight: 72.5 kg", prompt)


if __name__ == "__main__":
    unittest.main()
