from __future__ import annotations

from dataclasses import dataclass

CUSTOMER_DISPLAY_VALUES = ("frontend-backend-admin", "Both", "Booking")


@dataclass(frozen=True)
class Extra:
    id: str
    name: str
    price: float
    time: int = 0  # minutes
    qty_based: bool = False
    maximum_quantity: int | None = None
    exempt_from_discount: bool = False
    service_category: str | None = None  # legacy single-category tag
    display: str = "frontend-backend-admin"

    @property
    def is_customer_visible(self) -> bool:
        return self.display in CUSTOMER_DISPLAY_VALUES
