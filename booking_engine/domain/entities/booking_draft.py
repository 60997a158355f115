from __future__ import annotations

from dataclasses import dataclass, field

from booking_engine.domain.entities.frequency import FrequencyDependencies


@dataclass(frozen=True)
class CustomerInfo:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    zip_code: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class ManualAdjustments:
    adjust_service_total: bool = False
    adjustment_service_total_amount: str | None = None
    adjust_price: bool = False
    adjustment_amount: str | None = None
    adjust_time: bool = False
    adjusted_hours: str | None = None
    adjusted_minutes: str | None = None


@dataclass(frozen=True)
class BookingDraft:
    customer: CustomerInfo = CustomerInfo()
    service: str = ""  # service category name
    frequency: str = ""  # frequency name
    date: str = ""  # YYYY-MM-DD
    time: str = ""  # HH:MM
    duration: str = ""
    duration_unit: str = "Hours"  # "Hours" | "Minutes"
    variable_values: dict[str, str] = field(default_factory=dict)
    selected_extras: tuple[str, ...] = ()  # extra ids
    extra_quantities: dict[str, int] = field(default_factory=dict)
    is_partial_cleaning: bool = False
    selected_exclude_params: tuple[str, ...] = ()  # exclude-parameter names
    exclude_quantities: dict[str, int] = field(default_factory=dict)
    adjustments: ManualAdjustments = ManualAdjustments()
    is_first_appointment: bool = True
    # dependencies resolved for `dependencies_frequency`; None until resolved
    dependencies: FrequencyDependencies | None = None
    dependencies_frequency: str | None = None
    service_provider_id: str | None = None
    payment_method: str = ""
    notes: str = ""
    priority: str = "Medium"
    waiting_list: bool = False
