"""Process-level defaults for the rotation CLI."""
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

ENV_PREFIX = "CAREROTA_"

_TRUE = ("1", "true", "yes", "on")


@dataclass
class RotaSettings:
    """Defaults used when a CLI flag is not given."""

    config_path: str = "config.json"
    default_weeks: int = 4
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False

    def __post_init__(self):
        self.default_weeks = int(self.default_weeks)
        if self.default_weeks < 0:
            raise ValueError(f"default_weeks must be >= 0, got {self.default_weeks}")
        self.log_level = str(self.log_level).upper()
        if isinstance(self.log_json, str):
            self.log_json = self.log_json.strip().lower() in _TRUE
        if not self.log_file:
            self.log_file = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "RotaSettings":
        """Create from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in known})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RotaSettings":
        """
        Read overrides from ``CAREROTA_*`` environment variables.

        CAREROTA_CONFIG, CAREROTA_WEEKS, CAREROTA_LOG_LEVEL,
        CAREROTA_LOG_FILE, CAREROTA_LOG_JSON
        """
        env = os.environ if environ is None else environ
        mapping = {
            "CONFIG": "config_path",
            "WEEKS": "default_weeks",
            "LOG_LEVEL": "log_level",
            "LOG_FILE": "log_file",
            "LOG_JSON": "log_json",
        }
        values = {
            attr: env[ENV_PREFIX + name]
            for name, attr in mapping.items()
            if ENV_PREFIX + name in env
        }
        return cls.from_dict(values)
