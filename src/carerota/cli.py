from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path

from carerota.engine.rotation import build_preview
from carerota.errors import RotaError
from carerota.io.config_loader import load_config
from carerota.io.export import export_schedule
from carerota.io.presenter import print_schedule
from carerota.settings import RotaSettings
from carerota.utils.logging_setup import get_logger, level_from_verbosity, setup_logging
from carerota.utils.structured_logging import (
    bind_context,
    clear_context,
    configure_structlog,
    get_structured_logger,
)

logger = get_logger("carerota.cli")

EXPORT_SUFFIXES = (".csv", ".xlsx")


def _today() -> date:
    return date.today()


def _week_count(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid week count {value!r}: expected a non-negative integer")
    if n < 0:
        raise argparse.ArgumentTypeError(f"invalid week count {n}: must be >= 0")
    return n


def _export_path(value: str) -> Path:
    path = Path(value)
    if path.suffix.lower() not in EXPORT_SUFFIXES:
        raise argparse.ArgumentTypeError(f"unsupported export file {value!r}: use .csv or .xlsx")
    return path


def build_parser(settings: RotaSettings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="care-rota",
        description="Preview the weekly caretaker rotation",
    )
    p.add_argument("weeks", nargs="?", type=_week_count, default=settings.default_weeks,
                   help=f"Number of weeks to preview (default: {settings.default_weeks})")
    p.add_argument("--config", default=settings.config_path,
                   help=f"Rotation JSON file (default: {settings.config_path})")
    p.add_argument("--json", dest="json_out", action="store_true", help="JSON output (summary + weeks)")
    p.add_argument("--export", type=_export_path, default=None, help="Also write the preview to .csv or .xlsx")
    p.add_argument("-v", "--verbose", action="count", default=0)
    p.add_argument("--log-file", default=settings.log_file, help="Append logs to this file")
    p.add_argument("--log-json", action="store_true", default=settings.log_json,
                   help="Emit run events as JSON lines on stderr")
    return p


def main(argv: list[str] | None = None) -> int:
    try:
        settings = RotaSettings.from_env()
    except ValueError as exc:
        print(f"error: invalid CAREROTA_* setting: {exc}", file=sys.stderr)
        return 1

    args = build_parser(settings).parse_args(argv)

    level = level_from_verbosity(args.verbose, settings.log_level)
    setup_logging(level="DEBUG", log_file=args.log_file, console_level=level)
    # run events are opt-in: stderr already gets the plain "error:" line
    if args.log_json:
        event_level = "INFO" if level == "WARNING" else level
    else:
        event_level = level if args.verbose else "CRITICAL"
    configure_structlog(json_output=args.log_json, level=event_level)
    log = get_structured_logger("carerota.cli")
    bind_context(config=str(args.config))

    try:
        config = load_config(args.config)
        preview = build_preview(config, _today(), args.weeks)
        if args.export:
            export_schedule(preview, args.export)
    except (RotaError, OSError) as exc:
        log.error("run_failed", kind=type(exc).__name__, error=str(exc))
        clear_context()
        print(f"error: {exc}", file=sys.stderr)
        return 1

    summary = preview.summary()
    log.info("preview_generated", **{k: v for k, v in summary.items() if k != "load"})
    clear_context()

    if args.json_out:
        print(json.dumps(preview.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_schedule(preview.weeks)
    logger.debug(f"Done: {len(preview)} week(s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
