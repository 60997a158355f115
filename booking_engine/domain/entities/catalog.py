from __future__ import annotations

from dataclasses import dataclass

from booking_engine.domain.entities.exclude_parameter import ExcludeParameter
from booking_engine.domain.entities.extra import Extra
from booking_engine.domain.entities.frequency import FrequencyRow
from booking_engine.domain.entities.pricing_parameter import PricingParameter
from booking_engine.domain.entities.service_category import ServiceCategory


@dataclass(frozen=True)
class Industry:
    id: str
    name: str


@dataclass(frozen=True)
class CatalogSnapshot:
    """Read-only configuration for one industry, fetched once per booking session."""

    industry_id: str
    service_categories: tuple[ServiceCategory, ...] = ()
    frequencies: tuple[FrequencyRow, ...] = ()
    extras: tuple[Extra, ...] = ()
    pricing_parameters: tuple[PricingParameter, ...] = ()
    exclude_parameters: tuple[ExcludeParameter, ...] = ()

    def find_category(self, name_or_id: str) -> ServiceCategory | None:
        for category in self.service_categories:
            if category.matches(name_or_id):
                return category
        return None

    def find_frequency(self, name: str) -> FrequencyRow | None:
        if not name:
            return None
        for row in self.frequencies:
            if row.name == name:
                return row
        return None

    def find_extra(self, extra_id: str) -> Extra | None:
        for extra in self.extras:
            if extra.id == extra_id:
                return extra
        return None

    def find_exclude_parameter(self, name: str) -> ExcludeParameter | None:
        for param in self.exclude_parameters:
            if param.name == name:
                return param
        return None
