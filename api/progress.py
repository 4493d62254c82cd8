# api/progress.py
from fastapi import APIRouter, HTTPException, Depends

from models.auth_schemas import Identity
from models.workout_schemas import ChartData, ChartDataset, ProgressResponse, ProgressSummary
from services.errors import FitTrackError, InputValidationError
from services.supabase_service import CHART_WINDOW_DAYS, SupabaseService, get_supabase_service
from utils.progress import calculate_progress
from utils.session import get_current_identity
from utils.timezone_utils import get_timezone_offset, to_user_date

router = APIRouter()

@router.get("", response_model=ProgressResponse)
async def get_exercise_progress(
    exercise: str = "",
    tz_offset: int = Depends(get_timezone_offset),
    supabase_service: SupabaseService = Depends(get_supabase_service),
    identity: Identity = Depends(get_current_identity)
):
    """Weight trend for one exercise over the last 30 days"""
    try:
        exercise_name = exercise.strip()
        if not exercise_name:
            raise InputValidationError("Please select an exercise")

        print(f"📈 Getting {exercise_name} progress for user: {identity.id}")

        rows = await supabase_service.get_recent_exercise_workouts(identity.id, exercise_name)

        points = [
            (to_user_date(row['created_at'], tz_offset), float(row['weight']))
            for row in rows
        ]

        chart = ChartData(
            title=f"{exercise_name} - Weight trend (last {CHART_WINDOW_DAYS} days)",
            labels=[day.strftime("%m/%d") for day, _ in points],
            datasets=[ChartDataset(label="Weight (kg)", data=[weight for _, weight in points])]
        )

        progress = calculate_progress(points)

        return ProgressResponse(
            success=True,
            exercise_name=exercise_name,
            has_enough_data=progress is not None,
            chart=chart,
            progress=ProgressSummary(**progress.to_dict()) if progress else None
        )

    except FitTrackError as e:
        print(f"❌ Error loading progress: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"❌ Error loading progress: {e}")
        raise HTTPException(status_code=500, detail=str(e))
