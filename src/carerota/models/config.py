"""Rotation configuration and week identity."""
import re
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple

_WEEK_KEY_RE = re.compile(r"^\s*(\d{4})-[Ww]?(\d{1,2})\s*$")


class WeekKey(NamedTuple):
    """ISO week identity: (ISO year, ISO week number)."""
    year: int
    week: int

    def __str__(self) -> str:
        return f"{self.year}-{self.week:02d}"

    @property
    def monday(self) -> date:
        return date.fromisocalendar(self.year, self.week, 1)

    @classmethod
    def of(cls, day: date) -> "WeekKey":
        """Key of the ISO week containing ``day``."""
        iso = day.isocalendar()
        return cls(iso[0], iso[1])

    @classmethod
    def parse(cls, text: str) -> "WeekKey":
        """Parse ``"YYYY-WW"`` or ``"YYYY-Www"``."""
        m = _WEEK_KEY_RE.match(text)
        if not m:
            raise ValueError(
                f"invalid week key {text!r}: expected 'YYYY-WW' "
                "(bare week numbers are ambiguous across years)"
            )
        return cls._checked(int(m.group(1)), int(m.group(2)))

    @classmethod
    def coerce(cls, value: Any) -> "WeekKey":
        """Accept a WeekKey, a (year, week) pair or a key string."""
        if isinstance(value, WeekKey):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, (tuple, list)) and len(value) == 2:
            year, week = value
            if isinstance(year, int) and isinstance(week, int) and not isinstance(year, bool):
                return cls._checked(year, week)
        if isinstance(value, int):
            raise ValueError(
                f"bare week number {value} is ambiguous across years; use 'YYYY-WW'"
            )
        raise ValueError(f"cannot interpret {value!r} as a week key")

    @classmethod
    def _checked(cls, year: int, week: int) -> "WeekKey":
        try:
            date.fromisocalendar(year, week, 1)
        except ValueError:
            raise ValueError(f"ISO year {year} has no week {week}") from None
        return cls(year, week)


@dataclass(frozen=True)
class Config:
    """Read-only rotation configuration, loaded once per run."""

    start_date: date
    caretakers: Tuple[str, ...]
    reschedule: Mapping[WeekKey, str] = field(default_factory=dict)

    # reschedule is a read-only mapping, so configs are compared but never hashed
    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "caretakers", tuple(self.caretakers))
        overrides = {WeekKey.coerce(k): v for k, v in dict(self.reschedule).items()}
        object.__setattr__(self, "reschedule", MappingProxyType(overrides))

    def override_for(self, key: WeekKey) -> Optional[str]:
        return self.reschedule.get(key)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the on-disk document shape."""
        return {
            "startdate": self.start_date.isoformat(),
            "caretakers": list(self.caretakers),
            "reschedule": {str(k): v for k, v in sorted(self.reschedule.items())},
        }
