# carerota/engine - Rotation computation
from .rotation import (
    build_preview,
    current_caretaker,
    current_rotation_index,
    elapsed_weeks,
    generate_weeks,
    week_start,
)

__all__ = [
    "current_rotation_index",
    "generate_weeks",
    "current_caretaker",
    "build_preview",
    "week_start",
    "elapsed_weeks",
]
