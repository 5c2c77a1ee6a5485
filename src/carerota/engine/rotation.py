"""
Rotation Engine
===============
Maps elapsed whole weeks since the start week onto a caretaker index and
generates consecutive ISO weeks, applying one-off reschedules.

Everything here is a pure function of its arguments. The reference date is
always passed in; nothing in this module reads the clock.
"""
from datetime import date, timedelta
from typing import List

from carerota.errors import EmptyCaretakersError, ReferenceDateError
from carerota.models.care_week import CareWeek
from carerota.models.config import Config, WeekKey
from carerota.models.schedule import RotaPreview
from carerota.utils.logging_setup import get_logger, log_function_call

logger = get_logger("carerota.engine.rotation")

WEEK = timedelta(days=7)


def week_start(day: date) -> date:
    """Monday of the ISO week containing ``day``."""
    return day - timedelta(days=day.isoweekday() - 1)


def elapsed_weeks(start_date: date, reference_date: date) -> int:
    """
    Whole weeks from the start week to the reference week.

    Counted on absolute days between the two Mondays, so ISO week numbers
    restarting at new year (and 53-week years) do not matter.
    """
    return (week_start(reference_date) - week_start(start_date)).days // 7


def _require_caretakers(config: Config) -> int:
    n = len(config.caretakers)
    if n == 0:
        raise EmptyCaretakersError("no caretakers configured; cannot compute a rotation")
    return n


def current_rotation_index(config: Config, reference_date: date) -> int:
    """
    Base rotation cursor for the week containing ``reference_date``.

    Args:
        config: Rotation configuration
        reference_date: Any day of the week to resolve

    Returns:
        Index into ``config.caretakers``; the start week maps to 0

    Raises:
        EmptyCaretakersError: no caretakers configured
        ReferenceDateError: reference week lies before the start week
    """
    n = _require_caretakers(config)
    elapsed = elapsed_weeks(config.start_date, reference_date)
    if elapsed < 0:
        raise ReferenceDateError(
            f"reference date {reference_date} is before the rotation start week "
            f"({week_start(config.start_date)})"
        )
    return elapsed % n


def generate_weeks(config: Config, reference_date: date, count: int) -> List[CareWeek]:
    """
    Generate ``count`` consecutive care weeks starting at the week of ``reference_date``.

    Reschedules replace the caretaker of their own week only; the regular
    cursor keeps advancing one position per week regardless.
    """
    if count < 0:
        raise ValueError(f"week count must be >= 0, got {count}")

    base = current_rotation_index(config, reference_date)
    n = len(config.caretakers)
    monday = week_start(reference_date)

    weeks = []
    for i in range(count):
        key = WeekKey.of(monday)
        regular = config.caretakers[(base + i) % n]
        override = config.override_for(key)
        weeks.append(CareWeek(
            year=key.year,
            week_number=key.week,
            caretaker=override if override is not None else regular,
            start_date=monday,
            end_date=monday + timedelta(days=6),
            regular_caretaker=regular,
            overridden=override is not None,
        ))
        if override is not None:
            logger.debug(f"week {key}: {override} replaces {regular}")
        monday += WEEK

    return weeks


def current_caretaker(config: Config, reference_date: date) -> str:
    """Caretaker on duty for the week containing ``reference_date``, reschedules included."""
    return generate_weeks(config, reference_date, 1)[0].caretaker


@log_function_call
def build_preview(config: Config, reference_date: date, count: int) -> RotaPreview:
    """Generate weeks and wrap them with the base index for summaries and exports."""
    weeks = generate_weeks(config, reference_date, count)
    base = current_rotation_index(config, reference_date)
    logger.info(
        f"Generated {len(weeks)} week(s) from {week_start(reference_date)} "
        f"(base index {base}, {sum(w.overridden for w in weeks)} rescheduled)"
    )
    return RotaPreview(weeks=weeks, reference_date=reference_date, base_index=base)
