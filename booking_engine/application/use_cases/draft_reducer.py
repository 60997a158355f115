from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Union

from booking_engine.application.use_cases.eligibility import repair_selections
from booking_engine.domain.entities.booking_draft import BookingDraft, CustomerInfo
from booking_engine.domain.entities.catalog import CatalogSnapshot
from booking_engine.domain.entities.frequency import FrequencyDependencies


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectService:
    service: str


@dataclass(frozen=True)
class SelectFrequency:
    frequency: str


@dataclass(frozen=True)
class DependenciesResolved:
    frequency: str
    dependencies: FrequencyDependencies | None


@dataclass(frozen=True)
class SetVariable:
    category: str
    value: str


@dataclass(frozen=True)
class ToggleExtra:
    extra_id: str


@dataclass(frozen=True)
class SetExtraQuantity:
    extra_id: str
    quantity: int


@dataclass(frozen=True)
class SetPartialCleaning:
    enabled: bool


@dataclass(frozen=True)
class ToggleExcludeParameter:
    name: str


@dataclass(frozen=True)
class SetExcludeQuantity:
    name: str
    quantity: int


@dataclass(frozen=True)
class SetDuration:
    duration: str
    unit: str = "Hours"


@dataclass(frozen=True)
class SetFirstAppointment:
    is_first: bool


@dataclass(frozen=True)
class SetServiceTotalOverride:
    enabled: bool
    amount: str | None = None


@dataclass(frozen=True)
class SetPriceOverride:
    enabled: bool
    amount: str | None = None


@dataclass(frozen=True)
class SetTimeOverride:
    enabled: bool
    hours: str | None = None
    minutes: str | None = None


@dataclass(frozen=True)
class SetCustomer:
    customer: CustomerInfo


@dataclass(frozen=True)
class SetSchedule:
    date: str
    time: str


@dataclass(frozen=True)
class SetNotes:
    notes: str


@dataclass(frozen=True)
class AssignProvider:
    provider_id: str | None


DraftAction = Union[
    SelectService,
    SelectFrequency,
    DependenciesResolved,
    SetVariable,
    ToggleExtra,
    SetExtraQuantity,
    SetPartialCleaning,
    ToggleExcludeParameter,
    SetExcludeQuantity,
    SetDuration,
    SetFirstAppointment,
    SetServiceTotalOverride,
    SetPriceOverride,
    SetTimeOverride,
    SetCustomer,
    SetSchedule,
    SetNotes,
    AssignProvider,
]


def _clamp(quantity: int, maximum: int | None, qty_based: bool) -> int:
    if not qty_based:
        return 1
    quantity = max(1, int(quantity))
    if maximum is not None and maximum > 0:
        quantity = min(quantity, maximum)
    return quantity


def _toggle(items: tuple[str, ...], key: str) -> tuple[str, ...]:
    if key in items:
        return tuple(item for item in items if item != key)
    return items + (key,)


def _transition(draft: BookingDraft, action: DraftAction, snapshot: CatalogSnapshot) -> BookingDraft:
    if isinstance(action, SelectService):
        return replace(draft, service=action.service)

    if isinstance(action, SelectFrequency):
        if action.frequency == draft.frequency:
            return draft
        return replace(draft, frequency=action.frequency, dependencies=None, dependencies_frequency=None)

    if isinstance(action, DependenciesResolved):
        if action.frequency != draft.frequency:
            logger.debug(
                "Discarding stale frequency dependencies",
                extra={"frequency": action.frequency, "reason": f"current={draft.frequency}"},
            )
            return draft
        return replace(draft, dependencies=action.dependencies, dependencies_frequency=action.frequency)

    if isinstance(action, SetVariable):
        values = dict(draft.variable_values)
        if action.value:
            values[action.category] = action.value
        else:
            values.pop(action.category, None)
        return replace(draft, variable_values=values)

    if isinstance(action, ToggleExtra):
        selected = _toggle(draft.selected_extras, action.extra_id)
        quantities = {key: qty for key, qty in draft.extra_quantities.items() if key in selected}
        return replace(draft, selected_extras=selected, extra_quantities=quantities)

    if isinstance(action, SetExtraQuantity):
        extra = snapshot.find_extra(action.extra_id)
        if extra is None:
            return draft
        if action.quantity <= 0:
            selected = tuple(item for item in draft.selected_extras if item != action.extra_id)
            quantities = {key: qty for key, qty in draft.extra_quantities.items() if key != action.extra_id}
            return replace(draft, selected_extras=selected, extra_quantities=quantities)
        selected = draft.selected_extras
        if action.extra_id not in selected:
            selected = selected + (action.extra_id,)
        quantities = dict(draft.extra_quantities)
        quantities[action.extra_id] = _clamp(action.quantity, extra.maximum_quantity, extra.qty_based)
        return replace(draft, selected_extras=selected, extra_quantities=quantities)

    if isinstance(action, SetPartialCleaning):
        if action.enabled:
            return replace(draft, is_partial_cleaning=True)
        return replace(draft, is_partial_cleaning=False, selected_exclude_params=(), exclude_quantities={})

    if isinstance(action, ToggleExcludeParameter):
        selected = _toggle(draft.selected_exclude_params, action.name)
        quantities = {key: qty for key, qty in draft.exclude_quantities.items() if key in selected}
        return replace(draft, selected_exclude_params=selected, exclude_quantities=quantities)

    if isinstance(action, SetExcludeQuantity):
        param = snapshot.find_exclude_parameter(action.name)
        if param is None or action.name not in draft.selected_exclude_params:
            return draft
        quantities = dict(draft.exclude_quantities)
        quantities[action.name] = _clamp(action.quantity, param.maximum_quantity, param.qty_based)
        return replace(draft, exclude_quantities=quantities)

    if isinstance(action, SetDuration):
        return replace(draft, duration=action.duration, duration_unit=action.unit)

    if isinstance(action, SetFirstAppointment):
        return replace(draft, is_first_appointment=action.is_first)

    if isinstance(action, SetServiceTotalOverride):
        adjustments = replace(
            draft.adjustments,
            adjust_service_total=action.enabled,
            adjustment_service_total_amount=action.amount,
        )
        return replace(draft, adjustments=adjustments)

    if isinstance(action, SetPriceOverride):
        adjustments = replace(draft.adjustments, adjust_price=action.enabled, adjustment_amount=action.amount)
        return replace(draft, adjustments=adjustments)

    if isinstance(action, SetTimeOverride):
        adjustments = replace(
            draft.adjustments,
            adjust_time=action.enabled,
            adjusted_hours=action.hours,
            adjusted_minutes=action.minutes,
        )
        return replace(draft, adjustments=adjustments)

    if isinstance(action, SetCustomer):
        return replace(draft, customer=action.customer)

    if isinstance(action, SetSchedule):
        return replace(draft, date=action.date, time=action.time)

    if isinstance(action, SetNotes):
        return replace(draft, notes=action.notes)

    if isinstance(action, AssignProvider):
        return replace(draft, service_provider_id=action.provider_id)

    raise TypeError(f"Unknown draft action: {type(action).__name__}")


def reduce(
    draft: BookingDraft,
    action: DraftAction,
    snapshot: CatalogSnapshot,
    customer_facing: bool = True,
) -> BookingDraft:
    """Apply one action and clear any selection it made ineligible. Pure; the input draft is untouched."""
    return repair_selections(snapshot, _transition(draft, action, snapshot), customer_facing)


def replay(
    actions: list[DraftAction],
    snapshot: CatalogSnapshot,
    draft: BookingDraft | None = None,
    customer_facing: bool = True,
) -> BookingDraft:
    current = draft or BookingDraft()
    for action in actions:
        current = reduce(current, action, snapshot, customer_facing)
    return current
