# api/plans.py
from fastapi import APIRouter, HTTPException, Depends

from models.auth_schemas import Identity
from models.plan_schemas import WorkoutPlan, WorkoutPlanListResponse, WorkoutPlanResponse
from services.errors import FitTrackError, NotFoundError
from services.supabase_service import SupabaseService, get_supabase_service
from utils.session import get_current_identity

router = APIRouter()

@router.get("", response_model=WorkoutPlanListResponse)
async def get_workout_plans(
    supabase_service: SupabaseService = Depends(get_supabase_service),
    identity: Identity = Depends(get_current_identity)
):
    """Predefined plans ordered by difficulty"""
    try:
        rows = await supabase_service.get_workout_plans()
        plans = [WorkoutPlan.from_row(row) for row in rows]
        print(f"✅ Returning {len(plans)} workout plans")
        return WorkoutPlanListResponse(success=True, plans=plans)

    except FitTrackError as e:
        print(f"❌ Error loading workout plans: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"❌ Error loading workout plans: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/{plan_id}", response_model=WorkoutPlanResponse)
async def get_workout_plan(
    plan_id: str,
    supabase_service: SupabaseService = Depends(get_supabase_service),
    identity: Identity = Depends(get_current_identity)
):
    """One plan expanded day by day"""
    try:
        row = await supabase_service.get_workout_plan(plan_id)
        if not row:
            raise NotFoundError("Workout plan not found")

        return WorkoutPlanResponse(success=True, plan=WorkoutPlan.from_row(row))

    except FitTrackError as e:
        print(f"❌ Error loading workout plan {plan_id}: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"❌ Error loading workout plan {plan_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
