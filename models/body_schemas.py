# models/body_schemas.py
from pydantic import BaseModel
from typing import Optional, List

from models.workout_schemas import RawNumber

class BodyMeasurementCreate(BaseModel):
    weight: Optional[RawNumber] = None
    body_fat: Optional[RawNumber] = None
    muscle_mass: Optional[RawNumber] = None
    notes: Optional[str] = None

class BodyMeasurement(BaseModel):
    id: str
    user_id: str
    weight: float
    body_fat: Optional[float] = None
    muscle_mass: Optional[float] = None
    notes: Optional[str] = None
    created_at: str
    date_label: Optional[str] = None

class BodyMeasurementListResponse(BaseModel):
    success: bool
    measurements: List[BodyMeasurement]

class BodyMeasurementSaveResponse(BaseModel):
    success: bool
    message: str
    entry: BodyMeasurement
    measurements: List[BodyMeasurement]
