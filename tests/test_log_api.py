# -*- coding: utf-8 -*-

from __future__ import annotations

import inspect
import unittest

from fastapi.testclient import TestClient

from healthlog.api import create_app
from healthlog.logs.api import list_logs, submit_log
from healthlog.logs.storage import LogStore


BREAKFAST = {
    "Date": "2024-01-01",
    "Time": "08:00",
    "Food_Item": "Oatmeal",
    "Calories": "300",
}


class TestLogApi(unittest.TestCase):
    def setUp(self) -> None:
        self.store = LogStore()
        self.client = TestClient(create_app(store=self.store))

    def tearDown(self) -> None:
        self.client.close()

    def assert_nothing_stored(self) -> None:
        self.assertEqual(len(self.store), 0)
        resp = self.client.get("/api/log")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["totalLogs"], 0)
        self.assertEqual(resp.json()["logs"], [])

    def test_app_uses_the_given_store(self) -> None:
        self.assertIs(self.client.app.state.log_store, self.store)
        resp = self.client.post("/api/log", json=BREAKFAST)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(self.store), 1)
        entries, total = self.store.list()
        self.assertEqual(total, 1)
        self.assertEqual(entries[0].id, resp.json()["data"]["id"])

    def test_submit_handler_is_sync(self) -> None:
        # Sync handlers run on the thread pool, alongside list_logs.
        self.assertFalse(inspect.iscoroutinefunction(submit_log))
        self.assertFalse(inspect.iscoroutinefunction(list_logs))

    def test_submit_returns_entry_and_total(self) -> None:
        resp = self.client.post("/api/log", json=BREAKFAST)
        self.assertEqual(resp.status_code, 200)
        payload = resp.json()
        self.assertTrue(payload["success"])
        self.assertEqual(payload["message"], "Health data logged successfully!")
        self.assertEqual(payload["totalLogs"], 1)

        data = payload["data"]
        self.assertEqual(data["Date"], "2024-01-01")
        self.assertEqual(data["Time"], "08:00")
        self.assertEqual(data["Food_Item"], "Oatmeal")
        self.assertEqual(data["Calories"], "300")
        self.assertTrue(data["id"].isdigit())
        self.assertTrue(data["timestamp"].endswith("Z"))
        # Fields the form did not send stay empty.
        self.assertIsNone(data["Notes"])

    def test_missing_date_and_time_is_rejected(self) -> None:
        resp = self.client.post("/api/log", json={"Food_Item": "Oatmeal"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Date and Time are required fields"})
        self.assert_nothing_stored()

    def test_empty_time_is_rejected(self) -> None:
        resp = self.client.post("/api/log", json={"Date": "2024-01-01", "Time": ""})
        self.assertEqual(resp.status_code, 400)
        self.assert_nothing_stored()

    def test_malformed_body_is_server_error(self) -> None:
        resp = self.client.post(
            "/api/log",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Failed to process health data"})

        resp = self.client.post("/api/log", json=["2024-01-01", "08:00"])
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Failed to process health data"})
        self.assert_nothing_stored()

    def test_structured_field_value_is_server_error(self) -> None:
        resp = self.client.post("/api/log", json={**BREAKFAST, "Weight": {"kg": 70}})
        self.assertEqual(resp.status_code, 500)
        self.assert_nothing_stored()

    def test_list_preserves_submission_order(self) -> None:
        lunch = {"Date": "2024-01-01", "Time": "12:30", "Food_Item": "Salad", "BP_Systolic": 120}
        self.assertEqual(self.client.post("/api/log", json=BREAKFAST).status_code, 200)
        resp = self.client.post("/api/log", json=lunch)
        self.assertEqual(resp.json()["totalLogs"], 2)

        resp = self.client.get("/api/log")
        self.assertEqual(resp.status_code, 200)
        payload = resp.json()
        self.assertTrue(payload["success"])
        self.assertEqual(payload["totalLogs"], 2)
        self.assertEqual([log["Time"] for log in payload["logs"]], ["08:00", "12:30"])
        # Numbers are stored in their string form.
        self.assertEqual(payload["logs"][1]["BP_Systolic"], "120")

        ids = [log["id"] for log in payload["logs"]]
        self.assertTrue(all(ids))

    def test_list_is_repeatable(self) -> None:
        self.client.post("/api/log", json=BREAKFAST)
        first = self.client.get("/api/log").json()
        second = self.client.get("/api/log").json()
        self.assertEqual(first, second)

    def test_list_empty_store(self) -> None:
        resp = self.client.get("/api/log")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True, "logs": [], "totalLogs": 0})

    def test_extra_fields_are_kept(self) -> None:
        resp = self.client.post("/api/log", json={**BREAKFAST, "Mood": "good"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["Mood"], "good")

    def test_generated_fields_override_caller_values(self) -> None:
        resp = self.client.post("/api/log", json={**BREAKFAST, "id": "mine", "timestamp": "yesterday"})
        data = resp.json()["data"]
        self.assertNotEqual(data["id"], "mine")
        self.assertNotEqual(data["timestamp"], "yesterday")

    def test_health_check(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "ok")


class TestLogApiFetchFailure(unittest.TestCase):
    def test_fetch_failure_is_server_error(self) -> None:
        class BrokenStore(LogStore):
            def list(self):
                raise RuntimeError("boom")

        client = TestClient(create_app(store=BrokenStore()))
        resp = client.get("/api/log")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Failed to fetch health data"})
        client.close()


if __name__ == "__main__":
    unittest.main()
