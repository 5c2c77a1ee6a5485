"""
Pydantic Validated Models
=========================
Validation layer for the on-disk rotation document.

Usage:
    from carerota.models.validated import ConfigDocument

    doc = ConfigDocument.model_validate(json.loads(text))
    config = doc.to_config()

The ``reschedule`` field accepts three shapes, all normalized to a
``WeekKey -> caretaker`` mapping:

    {"2024-52": "Bob"}
    [["2024-52", "Bob"]]
    [{"week": "2024-52", "caretaker": "Bob"}]
"""
from datetime import date, datetime
from typing import Annotated, Any, Dict, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictStr, field_validator

from .config import Config, WeekKey

WeekKeyField = Annotated[WeekKey, BeforeValidator(WeekKey.coerce)]


def _reschedule_pairs(value: Any) -> List[Any]:
    if isinstance(value, dict):
        return list(value.items())
    if not isinstance(value, list):
        raise ValueError("reschedule must be a mapping or a list of pairs")

    pairs = []
    for item in value:
        if isinstance(item, dict):
            if set(item) != {"week", "caretaker"}:
                raise ValueError(f"reschedule entry {item!r} needs exactly 'week' and 'caretaker'")
            pairs.append((item["week"], item["caretaker"]))
        elif isinstance(item, (list, tuple)) and len(item) == 2:
            pairs.append((item[0], item[1]))
        else:
            raise ValueError(f"reschedule entry {item!r} is neither a pair nor a week/caretaker object")
    return pairs


class ConfigDocument(BaseModel):
    """
    Pydantic-validated rotation document.

    Converted to the immutable dataclass ``Config`` used by the engine.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    startdate: date = Field(description="First day of rotation week zero (YYYY-MM-DD)")
    caretakers: List[StrictStr] = Field(description="Rotation order")
    reschedule: Dict[WeekKeyField, StrictStr] = Field(default_factory=dict)

    @field_validator("startdate", mode="before")
    @classmethod
    def parse_startdate(cls, v: Any) -> date:
        """Only the plain ISO calendar form is accepted."""
        if not isinstance(v, str):
            raise ValueError("startdate must be a 'YYYY-MM-DD' string")
        return datetime.strptime(v.strip(), "%Y-%m-%d").date()

    @field_validator("caretakers")
    @classmethod
    def validate_caretakers(cls, v: List[str]) -> List[str]:
        names = [name.strip() for name in v]
        if any(not name for name in names):
            raise ValueError("caretaker names must not be blank")
        return names

    @field_validator("reschedule", mode="before")
    @classmethod
    def normalize_reschedule(cls, v: Any) -> Dict[str, str]:
        """Collapse every accepted shape into one mapping, rejecting duplicate weeks."""
        if v is None:
            return {}
        mapping: Dict[str, str] = {}
        for raw_key, who in _reschedule_pairs(v):
            key = str(WeekKey.coerce(raw_key))
            if key in mapping:
                raise ValueError(f"week {key} is rescheduled more than once")
            if not isinstance(who, str):
                raise ValueError(f"caretaker for week {key} must be a string, got {who!r}")
            mapping[key] = who.strip()
        return mapping

    @field_validator("reschedule")
    @classmethod
    def validate_reschedule_names(cls, v: Dict[WeekKey, str]) -> Dict[WeekKey, str]:
        blank = [str(k) for k, who in v.items() if not who]
        if blank:
            raise ValueError(f"blank caretaker for rescheduled week(s): {', '.join(blank)}")
        return v

    def to_config(self) -> Config:
        """Convert to dataclass Config for the rotation engine."""
        return Config(
            start_date=self.startdate,
            caretakers=tuple(self.caretakers),
            reschedule=dict(self.reschedule),
        )
