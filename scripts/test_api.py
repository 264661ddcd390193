import unittest

from fastapi.testclient import TestClient

from app.api.deps import AuthUser, get_current_user
from app.main import app
from app.services.health_store import HealthStore, get_health_store
from app.services.insights_llm import get_insight_generator
from app.services.settings_store import SettingsStore, get_settings_store
from fake_firestore import FakeFirestore

HEALTHY = {
    "age": 40,
    "exerciseMinutesPerWeek": 200,
    "sleepHoursPerNight": 8,
    "dietQuality": 8,
    "smokingStatus": "never",
    "bloodPressureSystolic": 118,
    "bloodPressureDiastolic": 76,
}


def _failing_generator(profile):
    raise RuntimeError("model unavailable")


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        self.db = FakeFirestore()
        self.prompts = []

        def fake_generator(profile):
            self.prompts.append(profile)
            return "Stay active."

        app.dependency_overrides[get_insight_generator] = lambda: fake_generator
        app.dependency_overrides[get_current_user] = lambda: AuthUser(uid="u1", email="u1@example.com")
        app.dependency_overrides[get_health_store] = lambda: HealthStore(self.db, "health_data")
        app.dependency_overrides[get_settings_store] = lambda: SettingsStore(self.db, "users")
        self.addCleanup(app.dependency_overrides.clear)

        self.client = TestClient(app)


class TestAnalyze(ApiTestCase):
    def test_analyze(self):
        resp = self.client.post("/api/analyze", json=HEALTHY)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {
                "longevityScore": 83,
                "healthAge": 34,
                "focusAreas": [],
                "insights": "Stay active.",
                "analyzed": True,
            },
        )
        self.assertEqual(self.prompts[0].exercise_minutes_per_week, 200)

    def test_health_age_omitted_without_age(self):
        resp = self.client.post("/api/analyze", json={"smokingStatus": "current"})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["longevityScore"], 60)
        self.assertNotIn("healthAge", body)

    def test_empty_profile(self):
        body = self.client.post("/api/analyze", json={}).json()
        self.assertEqual(body["longevityScore"], 70)
        self.assertEqual(body["focusAreas"], [])

    def test_out_of_range_rejected(self):
        resp = self.client.post("/api/analyze", json={"dietQuality": 42})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(self.prompts, [])

    def test_nan_rejected(self):
        resp = self.client.post("/api/analyze", json={"dietQuality": "NaN", "age": 40})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(self.prompts, [])

    def test_generator_failure_is_generic_500(self):
        app.dependency_overrides[get_insight_generator] = lambda: _failing_generator
        resp = self.client.post("/api/analyze", json=HEALTHY)
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"detail": "Failed to analyze health data"})

    def test_health_check(self):
        self.assertEqual(self.client.get("/health").json(), {"status": "ok"})


class TestHealthRecords(ApiTestCase):
    def test_submit_and_read_back(self):
        resp = self.client.post("/health_records/", json=HEALTHY)
        self.assertEqual(resp.status_code, 201)
        created = resp.json()
        self.assertEqual(created["longevityScore"], 83)
        record_id = created["id"]

        latest = self.client.get("/health_records/latest").json()["item"]
        self.assertEqual(latest["id"], record_id)
        self.assertEqual(latest["data"]["exerciseMinutesPerWeek"], 200)
        self.assertEqual(latest["insights"], "Stay active.")

        items = self.client.get("/health_records/").json()["items"]
        self.assertEqual([i["id"] for i in items], [record_id])

        detail = self.client.get(f"/health_records/{record_id}")
        self.assertEqual(detail.status_code, 200)
        self.assertEqual(detail.json()["healthAge"], 34)

    def test_latest_empty(self):
        self.assertEqual(self.client.get("/health_records/latest").json(), {"item": None})

    def test_missing_record(self):
        self.assertEqual(self.client.get("/health_records/nope").status_code, 404)
        self.assertEqual(self.client.delete("/health_records/nope").status_code, 404)

    def test_delete(self):
        record_id = self.client.post("/health_records/", json=HEALTHY).json()["id"]
        self.assertEqual(self.client.delete(f"/health_records/{record_id}").status_code, 204)
        self.assertEqual(self.client.get(f"/health_records/{record_id}").status_code, 404)

    def test_failed_analysis_is_not_saved(self):
        app.dependency_overrides[get_insight_generator] = lambda: _failing_generator
        resp = self.client.post("/health_records/", json=HEALTHY)
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(self.db.collections.get("health_data", {}), {})

    def test_nan_submission_is_not_saved(self):
        resp = self.client.post("/health_records/", json={"sleepHoursPerNight": "nan"})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(self.db.collections.get("health_data", {}), {})

    def test_history_reports_score_change(self):
        self.client.post("/health_records/", json={"smokingStatus": "current"})
        self.client.post("/health_records/", json=HEALTHY)
        items = self.client.get("/health_records/").json()["items"]
        changes = sorted(i["scoreChange"] for i in items if i["scoreChange"] is not None)
        self.assertEqual(len(items), 2)
        self.assertEqual(len(changes), 1)
        self.assertEqual(abs(changes[0]), 23)

    def test_limit_is_validated(self):
        self.assertEqual(self.client.get("/health_records/?limit=0").status_code, 422)

    def test_me(self):
        self.assertEqual(
            self.client.get("/auth/me").json(),
            {"uid": "u1", "email": "u1@example.com", "emailVerified": False},
        )

    def test_requires_token(self):
        app.dependency_overrides.pop(get_current_user)
        resp = self.client.get("/health_records/")
        self.assertIn(resp.status_code, (401, 403))


class TestStudiesAndSettings(ApiTestCase):
    def test_studies_filter(self):
        body = self.client.get("/studies/", params={"tag": "sleep"}).json()
        self.assertEqual([s["id"] for s in body["items"]], ["3"])
        self.assertIn("sleep", body["tags"])

    def test_notification_defaults_and_update(self):
        defaults = self.client.get("/settings/notifications").json()
        self.assertEqual(
            defaults,
            {
                "emailUpdates": True,
                "weeklyReports": True,
                "healthTips": True,
                "studyAlerts": False,
                "marketingEmails": False,
            },
        )
        updated = self.client.put("/settings/notifications", json={"studyAlerts": True}).json()
        self.assertTrue(updated["studyAlerts"])
        self.assertTrue(updated["emailUpdates"])
        self.assertTrue(self.client.get("/settings/notifications").json()["studyAlerts"])

    def test_privacy_update_keeps_notifications(self):
        self.client.put("/settings/notifications", json={"healthTips": False})
        privacy = self.client.put("/settings/privacy", json={"dataSharing": True}).json()
        self.assertTrue(privacy["dataSharing"])
        self.assertTrue(privacy["anonymousAnalytics"])
        self.assertFalse(self.client.get("/settings/notifications").json()["healthTips"])


if __name__ == '__main__':
    unittest.main()
