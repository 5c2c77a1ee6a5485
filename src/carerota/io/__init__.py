# carerota/io - Input/output handling
from .config_loader import load_config, parse_config
from .export import export_schedule
from .presenter import format_care_week, print_schedule, render_schedule

__all__ = [
    "load_config", "parse_config",
    "format_care_week", "render_schedule", "print_schedule",
    "export_schedule",
]
