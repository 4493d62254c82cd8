# utils/validation.py
"""Form validation for workout records, body measurements and credentials.

Every rule raises a single InputValidationError with one user-facing
message. Fields are checked in form order and each field runs
required -> parse -> lower bound -> upper bound, stopping at the first
failure, so nothing is written when any rule fails.
"""
import math
from dataclasses import dataclass
from typing import Optional, Union

from services.errors import InputValidationError

RawNumber = Union[str, int, float, None]

MAX_WORKOUT_WEIGHT = 1000
MAX_REPS = 1000
MAX_SETS = 100
MAX_BODY_WEIGHT = 500
MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True)
class WorkoutInput:
    exercise_name: str
    weight: float
    reps: int
    sets: int


@dataclass(frozen=True)
class BodyMeasurementInput:
    weight: float
    body_fat: Optional[float] = None
    muscle_mass: Optional[float] = None
    notes: Optional[str] = None


def is_blank(value: RawNumber) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def parse_decimal(value: RawNumber) -> Optional[float]:
    """Parse a finite decimal, or return None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    return number


def parse_integer(value: RawNumber) -> Optional[int]:
    """Parse a whole number; "10.5" or 10.5 are not integers."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _require_decimal(value: RawNumber, invalid_message: str) -> float:
    if is_blank(value):
        raise InputValidationError(invalid_message)
    number = parse_decimal(value)
    if number is None:
        raise InputValidationError(invalid_message)
    return number


def _require_integer(value: RawNumber, invalid_message: str) -> int:
    if is_blank(value):
        raise InputValidationError(invalid_message)
    number = parse_integer(value)
    if number is None:
        raise InputValidationError(invalid_message)
    return number


def validate_weight(value: RawNumber, maximum: float = MAX_WORKOUT_WEIGHT,
                    label: str = "weight") -> float:
    weight = _require_decimal(value, f"Please enter a valid {label} (must be greater than 0)")
    if weight <= 0:
        raise InputValidationError(f"Please enter a valid {label} (must be greater than 0)")
    if weight > maximum:
        raise InputValidationError(f"{label.capitalize()} cannot exceed {maximum}kg")
    return weight


def validate_reps(value: RawNumber) -> int:
    reps = _require_integer(value, "Please enter a valid number of reps (must be greater than 0)")
    if reps <= 0:
        raise InputValidationError("Please enter a valid number of reps (must be greater than 0)")
    if reps > MAX_REPS:
        raise InputValidationError(f"Reps cannot exceed {MAX_REPS}")
    return reps


def validate_sets(value: RawNumber) -> int:
    sets = _require_integer(value, "Please enter a valid number of sets (must be greater than 0)")
    if sets <= 0:
        raise InputValidationError("Please enter a valid number of sets (must be greater than 0)")
    if sets > MAX_SETS:
        raise InputValidationError(f"Sets cannot exceed {MAX_SETS}")
    return sets


def validate_body_fat(value: RawNumber) -> Optional[float]:
    if is_blank(value):
        return None
    body_fat = parse_decimal(value)
    if body_fat is None or body_fat < 0 or body_fat > 100:
        raise InputValidationError("Body fat percentage must be between 0 and 100%")
    return body_fat


def validate_muscle_mass(value: RawNumber) -> Optional[float]:
    if is_blank(value):
        return None
    muscle_mass = parse_decimal(value)
    if muscle_mass is None or muscle_mass <= 0:
        raise InputValidationError("Muscle mass must be greater than 0")
    return muscle_mass


def clean_notes(notes: Optional[str]) -> Optional[str]:
    if notes is None:
        return None
    notes = notes.strip()
    return notes or None


def validate_workout_input(exercise_name: Optional[str], weight: RawNumber,
                           reps: RawNumber, sets: RawNumber) -> WorkoutInput:
    if exercise_name is None or not exercise_name.strip():
        raise InputValidationError("Please select an exercise")

    return WorkoutInput(
        exercise_name=exercise_name.strip(),
        weight=validate_weight(weight, MAX_WORKOUT_WEIGHT, "weight"),
        reps=validate_reps(reps),
        sets=validate_sets(sets),
    )


def validate_body_measurement_input(weight: RawNumber, body_fat: RawNumber = None,
                                    muscle_mass: RawNumber = None,
                                    notes: Optional[str] = None) -> BodyMeasurementInput:
    return BodyMeasurementInput(
        weight=validate_weight(weight, MAX_BODY_WEIGHT, "body weight"),
        body_fat=validate_body_fat(body_fat),
        muscle_mass=validate_muscle_mass(muscle_mass),
        notes=clean_notes(notes),
    )


def validate_credentials(email: Optional[str], password: Optional[str],
                         sign_up: bool = False) -> None:
    if not email or not email.strip():
        raise InputValidationError("Email and password required")
    if not password:
        raise InputValidationError("Email and password required")
    if sign_up and len(password) < MIN_PASSWORD_LENGTH:
        raise InputValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
