# utils/date_labels.py
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional, Union

from utils.timezone_utils import get_utc_now, parse_timestamp, to_user_date

def relative_date_label(
    created_at: Union[str, datetime],
    now: Optional[datetime] = None,
    tz_offset: int = 0
) -> str:
    """
    Friendly label for a record timestamp: "Today", "Yesterday",
    "N days ago" (2-6), otherwise the calendar date in the user's timezone.

    The day difference is taken on the raw timestamps and floored, it is
    not aligned to midnight. Seven days or more falls back to the date.
    """
    timestamp = parse_timestamp(created_at)
    now = parse_timestamp(now) if now is not None else get_utc_now()

    diff_days = (now - timestamp) // timedelta(days=1)

    # Future timestamps only come from clock skew between client and backend
    if diff_days <= 0:
        return "Today"
    if diff_days == 1:
        return "Yesterday"
    if diff_days < 7:
        return f"{diff_days} days ago"

    return to_user_date(timestamp, tz_offset).isoformat()

def group_by_date_label(
    records: Iterable[Dict[str, Any]],
    now: Optional[datetime] = None,
    tz_offset: int = 0,
    key: str = "created_at"
) -> Dict[str, List[Dict[str, Any]]]:
    """
    Group records under their relative date label.

    Buckets keep the order in which their label is first seen and records
    keep the order they were received in (newest first for history queries).
    """
    now = now if now is not None else get_utc_now()
    groups: Dict[str, List[Dict[str, Any]]] = {}

    for record in records:
        label = relative_date_label(record[key], now, tz_offset)
        groups.setdefault(label, []).append(record)

    return groups
