# utils/progress.py
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from utils.share_utils import format_weight

Point = Tuple[object, Union[int, float]]


@dataclass(frozen=True)
class Progress:
    """First-vs-last weight change over a chart window."""
    delta: float
    percent: Optional[float]

    @property
    def delta_text(self) -> str:
        sign = "+" if self.delta >= 0 else "-"
        return f"{sign}{format_weight(abs(self.delta))}kg"

    @property
    def percent_text(self) -> Optional[str]:
        if self.percent is None:
            return None
        text = f"{self.percent:.1f}"
        if text == "-0.0":
            text = "0.0"
        sign = "" if text.startswith("-") else "+"
        return f"{sign}{text}%"

    def to_dict(self) -> dict:
        return {
            "delta": self.delta,
            "delta_text": self.delta_text,
            "percent": self.percent,
            "percent_text": self.percent_text,
        }


def calculate_progress(points: Sequence[Point]) -> Optional[Progress]:
    """
    Compare the first and last weights of a time-ascending series.

    Returns None when there are fewer than two points. A first weight of
    zero leaves the percentage undefined (None) while the delta is kept.
    The percentage comes from the unrounded change; only the reported
    delta is rounded.
    """
    if len(points) < 2:
        return None

    first = float(points[0][1])
    last = float(points[-1][1])
    change = last - first
    # + 0.0 turns a rounded -0.0 into 0.0
    delta = round(change, 3) + 0.0

    if first == 0:
        return Progress(delta=delta, percent=None)

    return Progress(delta=delta, percent=change / first * 100)
