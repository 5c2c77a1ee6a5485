"""Rotation preview: the generated weeks of one run."""
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List

import pandas as pd

from .care_week import CareWeek

COLUMNS = ["year", "week", "start_date", "end_date", "caretaker", "regular_caretaker", "overridden"]


@dataclass
class RotaPreview:
    """Ordered care weeks starting at the week of ``reference_date``."""

    reference_date: date
    weeks: List[CareWeek] = field(default_factory=list)
    base_index: int = 0

    def __len__(self) -> int:
        return len(self.weeks)

    def __iter__(self):
        return iter(self.weeks)

    @property
    def overrides(self) -> List[CareWeek]:
        return [w for w in self.weeks if w.overridden]

    def to_dataframe(self) -> pd.DataFrame:
        """Convert weeks to a DataFrame, one row per week."""
        if not self.weeks:
            return pd.DataFrame(columns=COLUMNS)

        rows = [
            {
                "year": w.year,
                "week": w.week_number,
                "start_date": w.start_date,
                "end_date": w.end_date,
                "caretaker": w.caretaker,
                "regular_caretaker": w.regular_caretaker,
                "overridden": w.overridden,
            }
            for w in self.weeks
        ]
        return pd.DataFrame(rows, columns=COLUMNS)

    def caretaker_load(self) -> Dict[str, int]:
        """Number of weeks each caretaker is on duty in this preview."""
        df = self.to_dataframe()
        if df.empty:
            return {}
        counts = df["caretaker"].value_counts(sort=False)
        return {str(name): int(n) for name, n in counts.items()}

    def summary(self) -> Dict[str, Any]:
        """Get summary dictionary for display."""
        first = self.weeks[0] if self.weeks else None
        last = self.weeks[-1] if self.weeks else None
        return {
            "reference_date": self.reference_date.isoformat(),
            "weeks": len(self.weeks),
            "base_index": self.base_index,
            "first_week": str(first.key) if first else None,
            "last_week": str(last.key) if last else None,
            "overrides": len(self.overrides),
            "load": self.caretaker_load(),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary(),
            "weeks": [w.to_dict() for w in self.weeks],
        }
