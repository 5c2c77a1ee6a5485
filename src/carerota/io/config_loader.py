"""JSON loading for the rotation configuration."""
import json
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from pydantic import ValidationError

from carerota.errors import ConfigMalformedError, ConfigMissingError
from carerota.models.config import Config
from carerota.models.validated import ConfigDocument
from carerota.utils.logging_setup import get_logger, log_function_call

logger = get_logger("carerota.io.config_loader")


def _unique_keys(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    """JSON object hook that refuses repeated keys instead of keeping the last one."""
    obj: Dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise ValueError(f"duplicate key {key!r} in JSON object")
        obj[key] = value
    return obj


def _describe(err: ValidationError) -> str:
    parts = []
    for e in err.errors():
        loc = ".".join(str(p) for p in e["loc"]) or "document"
        parts.append(f"{loc}: {e['msg']}")
    return "; ".join(parts)


def parse_config(payload: Any, source: str = "<config>") -> Config:
    """
    Validate an already-decoded document and build a Config.

    Args:
        payload: Decoded JSON value (must be an object)
        source: Label used in error messages

    Returns:
        Immutable Config

    Raises:
        ConfigMalformedError: on any structural problem
    """
    if not isinstance(payload, dict):
        raise ConfigMalformedError(f"{source}: top level must be a JSON object")

    try:
        doc = ConfigDocument.model_validate(payload)
    except ValidationError as exc:
        raise ConfigMalformedError(f"{source}: {_describe(exc)}") from exc

    config = doc.to_config()

    dupes = sorted(name for name, n in Counter(config.caretakers).items() if n > 1)
    if dupes:
        logger.warning(f"{source}: caretaker(s) listed more than once: {', '.join(dupes)}")
    strangers = sorted({who for who in config.reschedule.values() if who not in config.caretakers})
    if strangers:
        logger.warning(f"{source}: rescheduled to caretaker(s) outside the rotation: {', '.join(strangers)}")

    logger.info(
        f"Loaded {source}: start {config.start_date}, "
        f"{len(config.caretakers)} caretaker(s), {len(config.reschedule)} reschedule(s)"
    )
    return config


@log_function_call
def load_config(path: Union[str, Path]) -> Config:
    """
    Load the rotation configuration from a JSON file.

    Args:
        path: Path to the JSON document

    Returns:
        Immutable Config

    Raises:
        ConfigMissingError: file does not exist or cannot be read
        ConfigMalformedError: file is not valid JSON or fails validation
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError as exc:
        raise ConfigMissingError(f"configuration file not found: {path}") from exc
    except OSError as exc:
        raise ConfigMissingError(f"cannot read configuration file {path}: {exc}") from exc

    try:
        # utf-8-sig also accepts a leading byte-order mark
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ConfigMalformedError(f"{path}: not valid UTF-8 ({exc})") from exc

    try:
        payload = json.loads(text, object_pairs_hook=_unique_keys)
    except json.JSONDecodeError as exc:
        raise ConfigMalformedError(f"{path}: invalid JSON ({exc})") from exc
    except ValueError as exc:
        raise ConfigMalformedError(f"{path}: {exc}") from exc

    return parse_config(payload, source=str(path))
