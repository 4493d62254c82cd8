# api/body.py
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException, Depends

from models.auth_schemas import Identity
from models.body_schemas import (
    BodyMeasurement,
    BodyMeasurementCreate,
    BodyMeasurementListResponse,
    BodyMeasurementSaveResponse
)
from services.errors import FitTrackError
from services.supabase_service import SupabaseService, get_supabase_service
from utils.date_labels import relative_date_label
from utils.session import get_current_identity
from utils.timezone_utils import get_timezone_offset, get_utc_now
from utils.validation import validate_body_measurement_input

router = APIRouter()

def _labelled(rows: List[Dict[str, Any]], tz_offset: int) -> List[BodyMeasurement]:
    now = get_utc_now()
    return [
        BodyMeasurement(**row, date_label=relative_date_label(row['created_at'], now, tz_offset))
        for row in rows
    ]

@router.get("", response_model=BodyMeasurementListResponse)
async def get_body_measurements(
    tz_offset: int = Depends(get_timezone_offset),
    supabase_service: SupabaseService = Depends(get_supabase_service),
    identity: Identity = Depends(get_current_identity)
):
    """Latest 30 body measurements, newest first"""
    try:
        rows = await supabase_service.get_body_measurements(identity.id)
        return BodyMeasurementListResponse(success=True, measurements=_labelled(rows, tz_offset))

    except FitTrackError as e:
        print(f"❌ Error loading body measurements: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"❌ Error loading body measurements: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.post("", response_model=BodyMeasurementSaveResponse)
async def save_body_measurement(
    measurement_data: BodyMeasurementCreate,
    tz_offset: int = Depends(get_timezone_offset),
    supabase_service: SupabaseService = Depends(get_supabase_service),
    identity: Identity = Depends(get_current_identity)
):
    """Validate and save a body measurement, then return the refreshed list"""
    try:
        valid = validate_body_measurement_input(
            measurement_data.weight,
            measurement_data.body_fat,
            measurement_data.muscle_mass,
            measurement_data.notes
        )

        created = await supabase_service.create_body_measurement({
            'user_id': identity.id,
            'weight': valid.weight,
            'body_fat': valid.body_fat,
            'muscle_mass': valid.muscle_mass,
            'notes': valid.notes
        })

        rows = await supabase_service.get_body_measurements(identity.id)
        labelled = _labelled(rows, tz_offset)

        return BodyMeasurementSaveResponse(
            success=True,
            message="Saved successfully! 📏",
            entry=_labelled([created], tz_offset)[0],
            measurements=labelled
        )

    except FitTrackError as e:
        print(f"❌ Error saving body measurement: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"❌ Error saving body measurement: {e}")
        raise HTTPException(status_code=500, detail=str(e))
