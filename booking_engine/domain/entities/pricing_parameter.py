from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PricingParameter:
    id: str
    name: str
    price: float
    variable_category: str = ""  # e.g. "Bedrooms", "Square Footage"
    service_category: str = ""  # comma-separated names/ids, empty = unrestricted
    frequency: str = ""  # comma-separated frequency names, empty = unrestricted
    show_based_on_frequency: bool = False
    show_based_on_service_category: bool = False
    time_minutes: int = 0
    is_default: bool = False
