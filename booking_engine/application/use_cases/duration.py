from __future__ import annotations

import math

from booking_engine.application.utils.parsing import parse_number
from booking_engine.domain.entities.frequency import FrequencyRow
from booking_engine.domain.entities.quote import DurationAdjustment


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_hours(hours: float) -> str:
    """
    3.0 -> "3 Hr", 3.25 -> "3 Hr", 2.5 -> "2 Hr 30 Min".
    Remainders under 30 minutes are dropped and never carry into the hour.
    """
    whole = int(hours)
    # rounding can reach 60 for values just under the next hour
    minutes = min(_round_half_up((hours - whole) * 60), 59)
    if minutes >= 30:
        return f"{whole} Hr {minutes} Min"
    return f"{whole} Hr"


def adjust_duration(
    frequency: FrequencyRow | None,
    duration: str | float | None,
    duration_unit: str = "Hours",
    is_first_appointment: bool = True,
) -> DurationAdjustment:
    """
    Shorten the job length for recurring frequencies configured with shorter_job_length.
    The result is informational only; hourly pricing keeps using the requested duration.
    """
    original = parse_number(duration) or 0.0
    unchanged = DurationAdjustment(duration=original, duration_unit=duration_unit)

    if frequency is None or not frequency.is_recurring or frequency.shorter_job_length != "yes":
        return unchanged

    # first visit keeps its full length
    if is_first_appointment and frequency.exclude_first_appointment:
        return unchanged

    pct = parse_number(frequency.shorter_job_length_by)
    if pct is None or pct <= 0:
        return unchanged

    reduced = original * (1 - pct / 100)

    if duration_unit == "Minutes":
        minutes = _round_half_up(reduced)
        return DurationAdjustment(
            duration=float(minutes),
            duration_unit=duration_unit,
            display_text=f"{minutes} Min",
            adjusted=True,
        )

    return DurationAdjustment(
        duration=reduced,
        duration_unit=duration_unit,
        display_text=format_hours(reduced),
        adjusted=True,
    )
