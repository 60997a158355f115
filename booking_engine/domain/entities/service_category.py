from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FixedPrice:
    enabled: bool = False
    price: str | float | None = None


@dataclass(frozen=True)
class HourlyService:
    enabled: bool = False
    price: str | float | None = None
    price_calculation_type: str = "customTime"  # "customTime" | "pricingParametersTime"


@dataclass(frozen=True)
class ServiceCategory:
    id: str
    name: str
    description: str | None = None
    # True: sub-options are gated by the selected frequency's dependencies
    service_category_frequency: bool = False
    selected_frequencies: tuple[str, ...] = ()
    extras: tuple[str, ...] = ()  # extra ids
    variables: dict[str, tuple[str, ...]] = field(default_factory=dict)
    selected_exclude_parameters: tuple[str, ...] = ()  # exclude-parameter names
    service_category_price: FixedPrice = FixedPrice()
    hourly_service: HourlyService = HourlyService()

    def matches(self, name_or_id: str) -> bool:
        key = (name_or_id or "").strip()
        return bool(key) and key in (self.name, self.id)
