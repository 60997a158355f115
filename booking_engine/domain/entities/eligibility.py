from __future__ import annotations

from dataclasses import dataclass, field

from booking_engine.domain.entities.exclude_parameter import ExcludeParameter
from booking_engine.domain.entities.extra import Extra
from booking_engine.domain.entities.frequency import FrequencyRow
from booking_engine.domain.entities.pricing_parameter import PricingParameter
from booking_engine.domain.entities.service_category import ServiceCategory


@dataclass(frozen=True)
class Eligibility:
    """Options that may be shown for the current service/frequency selection."""

    service_categories: tuple[ServiceCategory, ...] = ()
    frequencies: tuple[FrequencyRow, ...] = ()
    extras: tuple[Extra, ...] = ()
    variable_options: dict[str, tuple[PricingParameter, ...]] = field(default_factory=dict)
    exclude_parameters: tuple[ExcludeParameter, ...] = ()
