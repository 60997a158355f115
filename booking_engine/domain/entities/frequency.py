from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FrequencyDependencies:
    """Allow-lists resolved for one (industry, frequency) pair."""

    service_categories: tuple[str, ...] = ()
    extras: tuple[str, ...] = ()
    exclude_parameters: tuple[str, ...] = ()
    variables: dict[str, tuple[str, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class FrequencyRow:
    id: str
    name: str
    occurrence_time: str = "onetime"  # "onetime" | "recurring"
    discount: float = 0.0
    discount_type: str = "%"  # "%" | "$"
    shorter_job_length: str = "no"  # "yes" | "no"
    shorter_job_length_by: str = "0"  # percentage
    exclude_first_appointment: bool = False
    frequency_discount: str = "all"  # "all" | "exclude-first"
    display: str = "Both"  # "Both" | "Booking" | "Quote"
    is_default: bool = False
    frequency_repeats: str | None = None
    # dependency allow-lists configured on the frequency itself
    service_categories: tuple[str, ...] = ()
    extras: tuple[str, ...] = ()
    exclude_parameters: tuple[str, ...] = ()
    variables: dict[str, tuple[str, ...]] = field(default_factory=dict)

    @property
    def is_recurring(self) -> bool:
        return self.occurrence_time == "recurring"

    @property
    def is_bookable(self) -> bool:
        return self.display in ("Both", "Booking")
