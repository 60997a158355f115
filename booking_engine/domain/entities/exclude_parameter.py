from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExcludeParameter:
    id: str
    name: str
    price: float  # credit applied when the customer opts out
    icon: str | None = None
    qty_based: bool = False
    maximum_quantity: int | None = None
