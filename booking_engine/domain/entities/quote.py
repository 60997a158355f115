from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DurationAdjustment:
    duration: float
    duration_unit: str
    display_text: str | None = None
    adjusted: bool = False


@dataclass(frozen=True)
class Quote:
    service_total: float
    extras_total: float
    partial_cleaning_discount: float
    frequency_discount: float
    subtotal: float
    final_amount: float
    price_source: str = "none"  # "pricing_parameter" | "fixed" | "hourly" | "none"

    @property
    def total_discount(self) -> float:
        return self.partial_cleaning_discount + self.frequency_discount
