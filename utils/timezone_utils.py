# utils/timezone_utils.py
from datetime import datetime, date, timedelta, timezone
from typing import Optional, Union
from fastapi import Header

def parse_timezone_offset(offset_str: Optional[str]) -> int:
    """
    Parse timezone offset from various formats.
    Examples: "300" (minutes), "+05:00", "-08:00"
    """
    if not offset_str:
        return 0

    try:
        # Already in minutes
        if offset_str.lstrip('-').isdigit():
            return int(offset_str)

        # "+05:00" or "-08:00"
        if ':' in offset_str:
            sign = -1 if offset_str.startswith('-') else 1
            parts = offset_str.lstrip('+-').split(':')
            hours = int(parts[0])
            minutes = int(parts[1]) if len(parts) > 1 else 0
            return sign * (hours * 60 + minutes)
    except ValueError:
        print(f"⚠️ Could not parse timezone offset: {offset_str}")

    return 0

def parse_timestamp(value: Union[str, datetime]) -> datetime:
    """
    Parse a Supabase timestamp into an aware UTC datetime.
    Accepts "2024-01-05T10:20:30.123+00:00", a trailing "Z", naive strings
    (treated as UTC) and datetime objects.
    """
    if isinstance(value, datetime):
        dt = value
    else:
        text = value.strip().replace('Z', '+00:00').replace(' ', 'T', 1)

        # Older interpreters only accept 3 or 6 fractional digits
        if '.' in text:
            head, _, tail = text.partition('.')
            digits = ''
            while tail and tail[0].isdigit():
                digits += tail[0]
                tail = tail[1:]
            text = f"{head}.{digits[:6].ljust(6, '0')}{tail}"

        dt = datetime.fromisoformat(text)

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)

def get_utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)

def get_user_now(timezone_offset: int = 0) -> datetime:
    """Get current datetime in user's timezone (wall clock, naive)."""
    utc_now = get_utc_now().replace(tzinfo=None)
    return utc_now + timedelta(minutes=timezone_offset)

def get_user_today(timezone_offset: int = 0) -> date:
    """Get today's date in user's timezone."""
    return get_user_now(timezone_offset).date()

def to_user_date(value: Union[str, datetime], timezone_offset: int = 0) -> date:
    """Calendar date of a stored timestamp as seen in the user's timezone."""
    dt = parse_timestamp(value)
    return (dt + timedelta(minutes=timezone_offset)).date()

def get_user_day_start_utc(timezone_offset: int = 0) -> datetime:
    """UTC instant at which the user's current local day started."""
    local_midnight = datetime.combine(get_user_today(timezone_offset), datetime.min.time())
    return (local_midnight - timedelta(minutes=timezone_offset)).replace(tzinfo=timezone.utc)

# FastAPI dependency to extract timezone from headers
async def get_timezone_offset(
    x_timezone_offset: Optional[str] = Header(None),
    x_timezone_string: Optional[str] = Header(None)
) -> int:
    """
    Extract timezone offset from request headers.
    Returns offset in minutes from UTC.
    """
    if x_timezone_offset:
        return parse_timezone_offset(x_timezone_offset)

    if x_timezone_string:
        return parse_timezone_offset(x_timezone_string)

    # Default to UTC
    return 0
