# api/workouts.py
from fastapi import APIRouter, HTTPException, Depends

from models.auth_schemas import Identity
from models.workout_schemas import Exercise, WorkoutRecord, WorkoutRecordCreate
from services.errors import FitTrackError
from services.supabase_service import SupabaseService, get_supabase_service
from utils.exercise_videos import get_exercise_video
from utils.session import get_current_identity
from utils.timezone_utils import get_timezone_offset, get_user_day_start_utc
from utils.validation import validate_workout_input

router = APIRouter()

@router.get("/exercises")
async def get_exercises(
    order_by: str = "category",
    supabase_service: SupabaseService = Depends(get_supabase_service),
    identity: Identity = Depends(get_current_identity)
):
    """Exercise catalog for the entry form and the chart picker"""
    try:
        rows = await supabase_service.get_exercises(order_by)

        exercises = [
            Exercise(
                id=row['id'],
                name=row['name'],
                category=row.get('category'),
                video_url=get_exercise_video(row['name'])
            )
            for row in rows
        ]
        return {"success": True, "exercises": exercises}

    except FitTrackError as e:
        print(f"❌ Error loading exercises: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"❌ Error loading exercises: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.post("/workouts")
async def create_workout(
    workout_data: WorkoutRecordCreate,
    supabase_service: SupabaseService = Depends(get_supabase_service),
    identity: Identity = Depends(get_current_identity)
):
    """Validate and save one workout record for the signed-in user"""
    try:
        valid = validate_workout_input(
            workout_data.exercise_name,
            workout_data.weight,
            workout_data.reps,
            workout_data.sets
        )

        print(f"💪 Saving workout: {valid.exercise_name} {valid.weight}kg x {valid.reps} x {valid.sets} for user {identity.id}")

        created = await supabase_service.create_workout({
            'user_id': identity.id,
            'exercise_name': valid.exercise_name,
            'weight': valid.weight,
            'reps': valid.reps,
            'sets': valid.sets
        })

        return {
            "success": True,
            "workout": WorkoutRecord(**created),
            "video_url": get_exercise_video(valid.exercise_name)
        }

    except FitTrackError as e:
        print(f"❌ Error saving workout: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"❌ Error saving workout: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/workouts/today")
async def get_today_workouts(
    tz_offset: int = Depends(get_timezone_offset),
    supabase_service: SupabaseService = Depends(get_supabase_service),
    identity: Identity = Depends(get_current_identity)
):
    """Workouts logged since the start of the user's local day, newest first"""
    try:
        day_start = get_user_day_start_utc(tz_offset)
        rows = await supabase_service.get_workouts(identity.id, since=day_start)

        return {
            "success": True,
            "user": identity,
            "workouts": [WorkoutRecord(**row) for row in rows],
            "total": len(rows)
        }

    except FitTrackError as e:
        print(f"❌ Error loading today's workouts: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"❌ Error loading today's workouts: {e}")
        raise HTTPException(status_code=500, detail=str(e))
