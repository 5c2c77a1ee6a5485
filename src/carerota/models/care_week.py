"""One resolved week of the rotation."""
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict

from .config import WeekKey


@dataclass(frozen=True)
class CareWeek:
    """Caretaker assignment for a single ISO week (Monday to Sunday)."""

    year: int  # ISO year of start_date
    week_number: int
    caretaker: str
    start_date: date
    end_date: date
    regular_caretaker: str = ""
    overridden: bool = False

    def __post_init__(self):
        if self.end_date - self.start_date != timedelta(days=6):
            raise ValueError(
                f"week {self.year}-{self.week_number:02d} must span 7 days, "
                f"got {self.start_date} - {self.end_date}"
            )

    @property
    def key(self) -> WeekKey:
        return WeekKey(self.year, self.week_number)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "week": self.week_number,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "caretaker": self.caretaker,
            "regular_caretaker": self.regular_caretaker,
            "overridden": self.overridden,
        }
