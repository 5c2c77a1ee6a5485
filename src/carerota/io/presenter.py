"""Plain-text rendering of care weeks."""
import sys
from typing import Iterable, List, Optional, TextIO

from carerota.models.care_week import CareWeek


def format_care_week(week: CareWeek) -> str:
    return (
        f"week #{week.week_number} "
        f"{week.start_date.isoformat()} - {week.end_date.isoformat()}: {week.caretaker}"
    )


def render_schedule(weeks: Iterable[CareWeek]) -> List[str]:
    return [format_care_week(w) for w in weeks]


def print_schedule(weeks: Iterable[CareWeek], stream: Optional[TextIO] = None) -> None:
    """Write one line per week (stdout by default)."""
    out = stream or sys.stdout
    for line in render_schedule(weeks):
        print(line, file=out)
