import asyncio
import os
import sys
import unittest
from datetime import timedelta

import httpx
from postgrest.exceptions import APIError

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from fakes import FakeSupabaseClient
from services.errors import BackendError, ConnectivityError, classify_backend_error
from services.supabase_service import SupabaseService
from utils.timezone_utils import get_utc_now


def days_ago(days: float) -> str:
    return (get_utc_now() - timedelta(days=days)).isoformat()


class SupabaseServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.client = FakeSupabaseClient({
            "exercises": [
                {"id": 2, "name": "Squat", "category": "Legs"},
                {"id": 1, "name": "Bench Press", "category": "Chest"},
            ],
            "workouts": [
                {"id": "w1", "user_id": "u1", "exercise_name": "Squat", "weight": 100,
                 "reps": 5, "sets": 3, "created_at": days_ago(40)},
                {"id": "w2", "user_id": "u1", "exercise_name": "Squat", "weight": 105,
                 "reps": 5, "sets": 3, "created_at": days_ago(10)},
                {"id": "w3", "user_id": "u1", "exercise_name": "Bench Press", "weight": 80,
                 "reps": 8, "sets": 4, "created_at": days_ago(5)},
                {"id": "w4", "user_id": "u2", "exercise_name": "Squat", "weight": 200,
                 "reps": 1, "sets": 1, "created_at": days_ago(1)},
                {"id": "w5", "user_id": "u1", "exercise_name": "Squat", "weight": 110,
                 "reps": 5, "sets": 3, "created_at": days_ago(2)},
            ],
            "body_measurements": [
                {"id": f"b{i}", "user_id": "u1", "weight": 70 + i * 0.1,
                 "created_at": days_ago(40 - i)}
                for i in range(35)
            ],
        })
        self.service = SupabaseService(client=self.client)

    def test_exercises_ordering(self) -> None:
        by_category = asyncio.run(self.service.get_exercises("category"))
        self.assertEqual([e["name"] for e in by_category], ["Bench Press", "Squat"])
        self.assertEqual(by_category[0]["id"], "1")

        by_name = asyncio.run(self.service.get_exercises("name"))
        self.assertEqual(self.client.queries[-1].order_by, ("name", False))
        self.assertEqual(len(by_name), 2)

        asyncio.run(self.service.get_exercises("id; drop table"))
        self.assertEqual(self.client.queries[-1].order_by, ("category", False))

    def test_history_is_scoped_and_descending(self) -> None:
        workouts = asyncio.run(self.service.get_workouts("u1"))
        self.assertEqual([w["id"] for w in workouts], ["w5", "w3", "w2", "w1"])
        self.assertIn(("eq", "user_id", "u1"), self.client.queries[-1].filters)

    def test_chart_series_window(self) -> None:
        workouts = asyncio.run(self.service.get_recent_exercise_workouts("u1", "Squat"))
        self.assertEqual([w["weight"] for w in workouts], [105, 110])

        query = self.client.queries[-1]
        self.assertEqual(query.order_by, ("created_at", False))
        self.assertEqual(query.columns, "id, weight, created_at")
        self.assertIn(("eq", "exercise_name", "Squat"), query.filters)

    def test_get_workout_requires_owner(self) -> None:
        self.assertIsNotNone(asyncio.run(self.service.get_workout("u1", "w3")))
        self.assertIsNone(asyncio.run(self.service.get_workout("u2", "w3")))

    def test_create_workout(self) -> None:
        created = asyncio.run(self.service.create_workout({
            "user_id": "u1", "exercise_name": "Deadlift", "weight": 140.0, "reps": 5, "sets": 1
        }))
        self.assertEqual(created["user_id"], "u1")
        self.assertIn("created_at", created)
        self.assertEqual(len(self.client.tables["workouts"]), 6)

    def test_body_measurements_limited_to_30(self) -> None:
        rows = asyncio.run(self.service.get_body_measurements("u1"))
        self.assertEqual(len(rows), 30)
        self.assertEqual(rows[0]["id"], "b34")
        self.assertEqual(self.client.queries[-1].order_by, ("created_at", True))

    def test_network_failure_is_connectivity_error(self) -> None:
        self.client.errors["workouts"] = httpx.ConnectError("Name or service not known")
        with self.assertRaises(ConnectivityError) as ctx:
            asyncio.run(self.service.get_workouts("u1"))
        self.assertTrue(ctx.exception.retryable)
        self.assertEqual(ctx.exception.status_code, 503)

    def test_backend_error_passes_message(self) -> None:
        self.client.errors["workouts"] = APIError({
            "message": "permission denied for table workouts",
            "code": "42501",
            "hint": None,
            "details": None,
        })
        with self.assertRaises(BackendError) as ctx:
            asyncio.run(self.service.create_workout({"user_id": "u1"}))
        self.assertEqual(ctx.exception.message, "permission denied for table workouts")

    def test_empty_insert_response_is_backend_error(self) -> None:
        class EmptyInsertClient(FakeSupabaseClient):
            def table(self, name):
                query = super().table(name)
                query.execute = lambda: type("R", (), {"data": []})()
                return query

        service = SupabaseService(client=EmptyInsertClient())
        with self.assertRaises(BackendError) as ctx:
            asyncio.run(service.create_body_measurement({"user_id": "u1", "weight": 70}))
        self.assertEqual(ctx.exception.message, "Failed to save body measurement")

    def test_health_check(self) -> None:
        self.assertEqual(asyncio.run(self.service.health_check())["status"], "healthy")
        self.client.errors["exercises"] = httpx.ConnectTimeout("timed out")
        self.assertEqual(asyncio.run(self.service.health_check())["status"], "unhealthy")


class ClassifyBackendErrorTestCase(unittest.TestCase):
    def test_classification_is_by_type(self) -> None:
        # message mentions "network" but the backend answered, so not connectivity
        error = classify_backend_error(APIError({"message": "network policy violated"}))
        self.assertIsInstance(error, BackendError)

        self.assertIsInstance(classify_backend_error(httpx.ReadTimeout("slow")), ConnectivityError)
        self.assertIsInstance(classify_backend_error(ValueError("odd")), BackendError)

    def test_fitrack_errors_pass_through(self) -> None:
        original = ConnectivityError()
        self.assertIs(classify_backend_error(original), original)

    def test_detail_shape(self) -> None:
        detail = ConnectivityError().to_detail()
        self.assertEqual(detail["kind"], "connectivity")
        self.assertTrue(detail["retryable"])


if __name__ == "__main__":
    unittest.main()
