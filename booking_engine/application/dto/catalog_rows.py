from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from booking_engine.application.utils.parsing import parse_number, split_allow_list
from booking_engine.domain.entities.catalog import Industry
from booking_engine.domain.entities.exclude_parameter import ExcludeParameter
from booking_engine.domain.entities.extra import Extra
from booking_engine.domain.entities.frequency import FrequencyRow
from booking_engine.domain.entities.pricing_parameter import PricingParameter
from booking_engine.domain.entities.service_category import FixedPrice, HourlyService, ServiceCategory


logger = logging.getLogger(__name__)


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def _as_float(value: Any) -> float:
    number = parse_number(value)
    return number if number is not None else 0.0


def _as_optional_int(value: Any) -> int | None:
    number = parse_number(value)
    return int(number) if number is not None else None


class _Row(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> str:
        if value is None or str(value).strip() == "":
            raise ValueError("id is required")
        return str(value)


class IndustryRow(_Row):
    name: str = ""

    def to_entity(self) -> Industry:
        return Industry(id=self.id, name=self.name)


class FrequencyRowDTO(_Row):
    name: str
    occurrence_time: str | None = "onetime"
    discount: Any = 0
    discount_type: str | None = Field(default="%", alias="discountType")
    shorter_job_length: str | None = "no"
    shorter_job_length_by: Any = "0"
    exclude_first_appointment: bool | None = False
    frequency_discount: str | None = "all"
    display: str | None = "Both"
    is_default: bool | None = False
    frequency_repeats: str | None = None
    service_categories: Any = None
    extras: Any = None
    exclude_parameters: Any = None
    bedroom_variables: Any = None
    bathroom_variables: Any = None
    sqft_variables: Any = None
    variables: dict[str, Any] | None = None

    @field_validator("discount_type", mode="before")
    @classmethod
    def _discount_type(cls, value: Any) -> str:
        return "$" if value == "$" else "%"

    def to_entity(self) -> FrequencyRow:
        variables: dict[str, tuple[str, ...]] = {}
        for label, raw in (
            ("Bedroom", self.bedroom_variables),
            ("Bathroom", self.bathroom_variables),
            ("Sq Ft", self.sqft_variables),
        ):
            names = split_allow_list(raw)
            if names:
                variables[label] = names
        for label, raw in (self.variables or {}).items():
            names = split_allow_list(raw)
            if names:
                variables[str(label)] = names

        return FrequencyRow(
            id=self.id,
            name=self.name,
            occurrence_time=self.occurrence_time or "onetime",
            discount=_as_float(self.discount),
            discount_type=self.discount_type or "%",
            shorter_job_length=(self.shorter_job_length or "no").lower(),
            shorter_job_length_by=_as_str(self.shorter_job_length_by) or "0",
            exclude_first_appointment=bool(self.exclude_first_appointment),
            frequency_discount=self.frequency_discount or "all",
            display=self.display or "Both",
            is_default=bool(self.is_default),
            frequency_repeats=self.frequency_repeats,
            service_categories=split_allow_list(self.service_categories),
            extras=split_allow_list(self.extras),
            exclude_parameters=split_allow_list(self.exclude_parameters),
            variables=variables,
        )


class ExtraRow(_Row):
    name: str
    price: Any = 0
    time_minutes: Any = Field(default=0, alias="time")
    qty_based: bool | None = Field(default=False, alias="qtyBased")
    maximum_quantity: Any = Field(default=None, alias="maximumQuantity")
    exempt_from_discount: bool | None = Field(default=False, alias="exemptFromDiscount")
    service_category: str | None = Field(default=None, alias="serviceCategory")
    display: str | None = "frontend-backend-admin"

    def to_entity(self) -> Extra:
        return Extra(
            id=self.id,
            name=self.name,
            price=_as_float(self.price),
            time=int(_as_float(self.time_minutes)),
            qty_based=bool(self.qty_based),
            maximum_quantity=_as_optional_int(self.maximum_quantity),
            exempt_from_discount=bool(self.exempt_from_discount),
            service_category=self.service_category,
            display=self.display or "frontend-backend-admin",
        )


class PricingParameterRow(_Row):
    name: str
    price: Any = 0
    variable_category: str | None = ""
    service_category: Any = ""
    frequency: Any = ""
    show_based_on_frequency: bool | None = False
    show_based_on_service_category: bool | None = False
    time_minutes: Any = 0
    is_default: bool | None = False

    def to_entity(self) -> PricingParameter:
        return PricingParameter(
            id=self.id,
            name=self.name,
            price=_as_float(self.price),
            variable_category=self.variable_category or "",
            service_category=",".join(split_allow_list(self.service_category)),
            frequency=",".join(split_allow_list(self.frequency)),
            show_based_on_frequency=bool(self.show_based_on_frequency),
            show_based_on_service_category=bool(self.show_based_on_service_category),
            time_minutes=int(_as_float(self.time_minutes)),
            is_default=bool(self.is_default),
        )


class ExcludeParameterRow(_Row):
    name: str
    price: Any = 0
    icon: str | None = None
    qty_based: bool | None = False
    maximum_quantity: Any = None

    def to_entity(self) -> ExcludeParameter:
        return ExcludeParameter(
            id=self.id,
            name=self.name,
            price=_as_float(self.price),
            icon=self.icon,
            qty_based=bool(self.qty_based),
            maximum_quantity=_as_optional_int(self.maximum_quantity),
        )


class _PriceConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    enabled: bool | None = False
    price: Any = None
    price_calculation_type: str | None = Field(default="customTime", alias="priceCalculationType")


class ServiceCategoryRow(_Row):
    name: str
    description: str | None = None
    service_category_frequency: bool | None = False
    selected_frequencies: Any = None
    extras: Any = None
    variables: dict[str, Any] | None = None
    selected_exclude_parameters: Any = None
    service_category_price: _PriceConfig | None = None
    hourly_service: _PriceConfig | None = None

    def to_entity(self) -> ServiceCategory:
        fixed = self.service_category_price or _PriceConfig()
        hourly = self.hourly_service or _PriceConfig()
        return ServiceCategory(
            id=self.id,
            name=self.name,
            description=self.description,
            service_category_frequency=bool(self.service_category_frequency),
            selected_frequencies=split_allow_list(self.selected_frequencies),
            extras=split_allow_list(self.extras),
            variables={str(k): split_allow_list(v) for k, v in (self.variables or {}).items()},
            selected_exclude_parameters=split_allow_list(self.selected_exclude_parameters),
            service_category_price=FixedPrice(enabled=bool(fixed.enabled), price=fixed.price),
            hourly_service=HourlyService(
                enabled=bool(hourly.enabled),
                price=hourly.price,
                price_calculation_type=hourly.price_calculation_type or "customTime",
            ),
        )


def convert_rows(
    rows: Iterable[Any],
    parse: Callable[[dict[str, Any]], Any],
    kind: str,
) -> list[Any]:
    """Validate raw rows and convert them to entities. Invalid rows are skipped, not fatal."""
    entities: list[Any] = []
    for raw in rows or []:
        if not isinstance(raw, dict):
            logger.warning("Skipping malformed catalog row", extra={"reason": f"{kind}: not an object"})
            continue
        try:
            entities.append(parse(raw).to_entity())
        except ValidationError as e:
            logger.warning(
                "Skipping invalid catalog row",
                extra={"reason": kind, "error": str(e.errors()[:1])},
            )
    return entities
