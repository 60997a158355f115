from __future__ import annotations

from datetime import date

from dateutil.relativedelta import relativedelta


def _normalize(value: str | None) -> str:
    return "-".join((value or "").lower().split())


def interval_for(frequency_name: str, frequency_repeats: str | None = None) -> relativedelta:
    """
    Step between two visits. frequency_repeats wins over the frequency name;
    unknown cadences default to weekly.
    """
    for text in (_normalize(frequency_repeats), _normalize(frequency_name)):
        if not text:
            continue
        if "daily" in text:
            return relativedelta(days=1)
        if "bi-weekly" in text or "biweekly" in text or "every-other" in text or "every-2" in text:
            return relativedelta(days=14)
        if "weekly" in text:
            return relativedelta(days=7)
        if "monthly" in text:
            return relativedelta(months=1)
        if "yearly" in text:
            return relativedelta(years=1)
    return relativedelta(days=7)


def next_occurrence(day: date, frequency_name: str, frequency_repeats: str | None = None) -> date:
    return day + interval_for(frequency_name, frequency_repeats)


def occurrence_dates(
    start: date,
    frequency_name: str,
    frequency_repeats: str | None = None,
    count: int = 4,
    end: date | None = None,
) -> list[date]:
    """
    The start date plus following visits, at most `count` dates and never past `end`.
    Every visit is offset from `start`, so Jan 31 monthly gives Feb 28 then Mar 31.
    """
    step = interval_for(frequency_name, frequency_repeats)
    dates: list[date] = []
    for index in range(max(count, 0)):
        current = start + step * index
        if end is not None and current > end:
            break
        dates.append(current)
    return dates
