# models/workout_schemas.py
from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt
from typing import Optional, List, Union

# Strict members keep JSON booleans from being coerced to 1.0 so the
# form validators can reject them
RawNumber = Union[StrictBool, StrictInt, StrictFloat, str]

class Exercise(BaseModel):
    id: str
    name: str
    category: Optional[str] = None
    video_url: Optional[str] = None

class WorkoutRecordCreate(BaseModel):
    """Raw form input, validated by utils.validation before any write"""
    exercise_name: Optional[str] = None
    weight: Optional[RawNumber] = None
    reps: Optional[RawNumber] = None
    sets: Optional[RawNumber] = 1

class WorkoutRecord(BaseModel):
    id: str
    user_id: str
    exercise_name: str
    weight: float
    reps: int
    sets: int
    created_at: str
    date_label: Optional[str] = None

class HistoryGroup(BaseModel):
    label: str
    workouts: List[WorkoutRecord]

class HistoryResponse(BaseModel):
    success: bool
    groups: List[HistoryGroup]
    total: int

class ShareResponse(BaseModel):
    success: bool
    text: str
    link: str

class ChartDataset(BaseModel):
    label: str
    data: List[float]

class ChartData(BaseModel):
    title: str
    labels: List[str]
    datasets: List[ChartDataset]

class ProgressSummary(BaseModel):
    delta: float
    delta_text: str
    percent: Optional[float] = None
    percent_text: Optional[str] = None

class ProgressResponse(BaseModel):
    success: bool
    exercise_name: str
    has_enough_data: bool
    chart: ChartData
    progress: Optional[ProgressSummary] = None
