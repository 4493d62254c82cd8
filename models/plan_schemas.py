# models/plan_schemas.py
from enum import Enum
from pydantic import BaseModel
from typing import Optional, List, Any, Dict

class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

DIFFICULTY_LABELS = {
    Difficulty.BEGINNER: "Beginner",
    Difficulty.INTERMEDIATE: "Intermediate",
    Difficulty.ADVANCED: "Advanced",
}

def difficulty_label(raw: Optional[str]) -> str:
    """Display text for a stored difficulty, the raw label when unrecognized"""
    try:
        return DIFFICULTY_LABELS[Difficulty(raw)]
    except ValueError:
        return raw or ""

class PlanDay(BaseModel):
    day_number: int
    exercise_names: List[str]

class WorkoutPlan(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    difficulty: str
    difficulty_label: str
    duration_weeks: Optional[int] = None
    days: List[PlanDay]

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "WorkoutPlan":
        """Build a plan from a workout_plans row, tolerating malformed day JSON"""
        days = []
        raw_days = row.get('exercises')
        if isinstance(raw_days, list):
            for index, day in enumerate(raw_days):
                if not isinstance(day, dict):
                    continue
                names = day.get('exercises')
                day_number = day.get('day')
                days.append(PlanDay(
                    day_number=day_number if isinstance(day_number, int) else index + 1,
                    exercise_names=[str(name) for name in names] if isinstance(names, list) else []
                ))

        difficulty = row.get('difficulty') or ""
        return cls(
            id=str(row['id']),
            name=row['name'],
            description=row.get('description'),
            difficulty=difficulty,
            difficulty_label=difficulty_label(difficulty),
            duration_weeks=row.get('duration_weeks'),
            days=days
        )

class WorkoutPlanListResponse(BaseModel):
    success: bool
    plans: List[WorkoutPlan]

class WorkoutPlanResponse(BaseModel):
    success: bool
    plan: WorkoutPlan
