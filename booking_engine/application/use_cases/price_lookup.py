from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from booking_engine.application.utils.parsing import duration_in_hours, parse_positive, split_allow_list
from booking_engine.domain.entities.pricing_parameter import PricingParameter
from booking_engine.domain.entities.service_category import ServiceCategory


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceLookupResult:
    price: float
    source: str  # "pricing_parameter" | "fixed" | "hourly" | "none"
    parameter_id: str | None = None


def find_category(categories: Iterable[ServiceCategory], name_or_id: str) -> ServiceCategory | None:
    for category in categories:
        if category.matches(name_or_id):
            return category
    return None


def parameter_allows(
    param: PricingParameter,
    service_name: str,
    frequency_name: str,
    category: ServiceCategory | None = None,
) -> bool:
    """
    Apply a pricing parameter's own show_based_on_* gates.
    A gate is only enforced when it is enabled and its allow-list is non-empty.
    """
    if param.show_based_on_frequency:
        allowed = split_allow_list(param.frequency)
        if allowed and frequency_name not in allowed:
            return False

    if param.show_based_on_service_category:
        allowed = split_allow_list(param.service_category)
        if allowed:
            keys = {service_name}
            if category is not None:
                keys.update((category.id, category.name))
            if not keys.intersection(allowed):
                return False

    return True


def lookup_base_price(
    service_name: str,
    frequency_name: str,
    category_values: Mapping[str, str],
    pricing_parameters: Iterable[PricingParameter],
    service_categories: Iterable[ServiceCategory],
    duration: str | float | None = None,
    duration_unit: str = "Hours",
) -> PriceLookupResult:
    """
    Resolve the base service price. First match wins:
    matching pricing parameter, fixed category price, hourly rate x duration.
    """
    category = find_category(service_categories, service_name)

    for param in pricing_parameters:
        if not parameter_allows(param, service_name, frequency_name, category):
            continue
        if param.variable_category and category_values.get(param.variable_category) != param.name:
            continue
        return PriceLookupResult(price=float(param.price), source="pricing_parameter", parameter_id=param.id)

    if category is not None:
        fixed = category.service_category_price
        fixed_price = parse_positive(fixed.price) if fixed.enabled else None
        if fixed_price is not None:
            return PriceLookupResult(price=fixed_price, source="fixed")

        hourly = category.hourly_service
        hourly_price = parse_positive(hourly.price) if hourly.enabled else None
        if hourly_price is not None:
            hours = duration_in_hours(duration, duration_unit)
            return PriceLookupResult(price=hourly_price * hours, source="hourly")

    logger.info(
        "No pricing found",
        extra={"service": service_name, "frequency": frequency_name, "reason": "no_pricing_match"},
    )
    return PriceLookupResult(price=0.0, source="none")
