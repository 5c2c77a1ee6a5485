# carerota/models - Data models for the caretaker rotation
from .care_week import CareWeek
from .config import Config, WeekKey
from .schedule import RotaPreview
from .validated import ConfigDocument

__all__ = [
    "Config", "WeekKey",
    "CareWeek", "RotaPreview",
    "ConfigDocument",
]
