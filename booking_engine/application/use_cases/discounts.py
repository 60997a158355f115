from __future__ import annotations

from typing import Iterable, Mapping

from booking_engine.domain.entities.exclude_parameter import ExcludeParameter
from booking_engine.domain.entities.frequency import FrequencyRow


def partial_cleaning_discount(
    is_partial_cleaning: bool,
    selected_names: Iterable[str],
    quantities: Mapping[str, int],
    exclude_parameters: Iterable[ExcludeParameter],
) -> float:
    """Sum of price x quantity over the opted-out sub-tasks. Returned positive; callers subtract it."""
    if not is_partial_cleaning:
        return 0.0

    by_name = {param.name: param for param in exclude_parameters}
    total = 0.0
    for name in selected_names:
        param = by_name.get(name)
        if param is None:
            continue
        total += float(param.price) * quantities.get(name, 1)
    return total


def frequency_discount(
    frequency: FrequencyRow | None,
    service_total: float,
    extras_total: float,
    partial_discount: float,
    is_first_appointment: bool = True,
) -> float:
    if frequency is None or not frequency.discount or frequency.discount <= 0:
        return 0.0

    # first visit is charged at full price
    if frequency.is_recurring and frequency.frequency_discount == "exclude-first" and is_first_appointment:
        return 0.0

    if frequency.discount_type == "%":
        base = service_total + extras_total - partial_discount
        return base * frequency.discount / 100

    return float(frequency.discount)
