# api/history.py
from fastapi import APIRouter, HTTPException, Depends

from models.auth_schemas import Identity
from models.workout_schemas import HistoryGroup, HistoryResponse, ShareResponse, WorkoutRecord
from services.errors import FitTrackError, NotFoundError
from services.supabase_service import SupabaseService, get_supabase_service
from utils.date_labels import group_by_date_label
from utils.session import get_current_identity
from utils.share_utils import generate_share_link, generate_share_text
from utils.timezone_utils import get_timezone_offset, get_utc_now

router = APIRouter()

@router.get("", response_model=HistoryResponse)
async def get_history(
    tz_offset: int = Depends(get_timezone_offset),
    supabase_service: SupabaseService = Depends(get_supabase_service),
    identity: Identity = Depends(get_current_identity)
):
    """All of the user's workouts, newest first, grouped by relative date"""
    try:
        print(f"📅 Getting workout history for user: {identity.id}")

        rows = await supabase_service.get_workouts(identity.id, ascending=False)
        grouped = group_by_date_label(rows, now=get_utc_now(), tz_offset=tz_offset)

        groups = [
            HistoryGroup(
                label=label,
                workouts=[WorkoutRecord(**row, date_label=label) for row in workouts]
            )
            for label, workouts in grouped.items()
        ]

        return HistoryResponse(success=True, groups=groups, total=len(rows))

    except FitTrackError as e:
        print(f"❌ Error loading history: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"❌ Error loading history: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/{workout_id}/share", response_model=ShareResponse)
async def share_workout(
    workout_id: str,
    supabase_service: SupabaseService = Depends(get_supabase_service),
    identity: Identity = Depends(get_current_identity)
):
    """Shareable text summary of one of the user's workouts"""
    try:
        workout = await supabase_service.get_workout(identity.id, workout_id)
        if not workout:
            raise NotFoundError("Workout not found")

        return ShareResponse(
            success=True,
            text=generate_share_text(workout),
            link=generate_share_link(workout)
        )

    except FitTrackError as e:
        print(f"❌ Error sharing workout {workout_id}: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"❌ Error sharing workout {workout_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
