"""Weekly caretaker rotation: who is on duty for each upcoming ISO week."""
from carerota.engine.rotation import (
    build_preview,
    current_caretaker,
    current_rotation_index,
    generate_weeks,
)
from carerota.errors import (
    ConfigMalformedError,
    ConfigMissingError,
    EmptyCaretakersError,
    ReferenceDateError,
    RotaError,
)
from carerota.io.config_loader import load_config
from carerota.models import CareWeek, Config, RotaPreview, WeekKey

__version__ = "0.3.0"

__all__ = [
    "Config", "WeekKey", "CareWeek", "RotaPreview",
    "load_config",
    "current_rotation_index", "generate_weeks", "current_caretaker", "build_preview",
    "RotaError", "ConfigMissingError", "ConfigMalformedError",
    "EmptyCaretakersError", "ReferenceDateError",
]
