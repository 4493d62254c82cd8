import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from models.plan_schemas import WorkoutPlan, difficulty_label


class WorkoutPlanTestCase(unittest.TestCase):
    def test_from_row(self) -> None:
        plan = WorkoutPlan.from_row({
            "id": 7,
            "name": "Full Body Starter",
            "description": "Three days a week",
            "difficulty": "beginner",
            "duration_weeks": 4,
            "exercises": [
                {"day": 1, "exercises": ["Squat", "Bench Press"]},
                {"day": 2, "exercises": ["Deadlift"]},
            ],
        })
        self.assertEqual(plan.id, "7")
        self.assertEqual(plan.difficulty_label, "Beginner")
        self.assertEqual([d.day_number for d in plan.days], [1, 2])
        self.assertEqual(plan.days[0].exercise_names, ["Squat", "Bench Press"])

    def test_unknown_difficulty_falls_back_to_raw(self) -> None:
        self.assertEqual(difficulty_label("elite"), "elite")
        self.assertEqual(difficulty_label("advanced"), "Advanced")
        self.assertEqual(difficulty_label(None), "")

    def test_malformed_days(self) -> None:
        plan = WorkoutPlan.from_row({
            "id": "p1",
            "name": "Broken",
            "difficulty": "intermediate",
            "exercises": {"not": "a list"},
        })
        self.assertEqual(plan.days, [])
        self.assertIsNone(plan.duration_weeks)

        plan = WorkoutPlan.from_row({
            "id": "p2",
            "name": "Partial",
            "difficulty": "intermediate",
            "exercises": [{"exercises": "Squat"}, "junk", {"day": 3, "exercises": ["Row"]}],
        })
        self.assertEqual([d.day_number for d in plan.days], [1, 3])
        self.assertEqual(plan.days[0].exercise_names, [])


if __name__ == "__main__":
    unittest.main()
