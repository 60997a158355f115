from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Mapping

from booking_engine.application.use_cases.discounts import frequency_discount, partial_cleaning_discount
from booking_engine.application.use_cases.duration import adjust_duration
from booking_engine.application.use_cases.price_lookup import lookup_base_price
from booking_engine.application.use_cases.recurrence import occurrence_dates
from booking_engine.application.utils.parsing import parse_number
from booking_engine.domain.entities.booking_draft import BookingDraft, ManualAdjustments
from booking_engine.domain.entities.catalog import CatalogSnapshot
from booking_engine.domain.entities.extra import Extra
from booking_engine.domain.entities.quote import DurationAdjustment, Quote


def extras_total(
    selected_ids: Iterable[str],
    quantities: Mapping[str, int],
    extras: Iterable[Extra],
) -> float:
    # quantities are clamped at selection time, not here
    by_id = {extra.id: extra for extra in extras}
    total = 0.0
    for extra_id in selected_ids:
        extra = by_id.get(extra_id)
        if extra is None:
            continue
        total += float(extra.price) * quantities.get(extra_id, 1)
    return total


def aggregate_total(
    service_total: float,
    extras_sum: float,
    partial_discount: float,
    freq_discount: float,
    adjustments: ManualAdjustments = ManualAdjustments(),
) -> tuple[float, float]:
    """Return (subtotal, final_amount). Manual overrides replace values outright and are never clamped."""
    subtotal = service_total + extras_sum
    if adjustments.adjust_service_total:
        override = parse_number(adjustments.adjustment_service_total_amount)
        if override is not None:
            subtotal = override

    final_amount = max(0.0, subtotal - (partial_discount + freq_discount))
    if adjustments.adjust_price:
        override = parse_number(adjustments.adjustment_amount)
        if override is not None:
            final_amount = override

    return subtotal, final_amount


class QuoteCalculator:
    """Computes the quote for a draft against one industry's catalog snapshot."""

    def __init__(self, snapshot: CatalogSnapshot) -> None:
        self._snapshot = snapshot
        self._logger = logging.getLogger(__name__)

    def calculate(self, draft: BookingDraft) -> Quote:
        snapshot = self._snapshot
        frequency = snapshot.find_frequency(draft.frequency)

        base = lookup_base_price(
            service_name=draft.service,
            frequency_name=draft.frequency,
            category_values=draft.variable_values,
            pricing_parameters=snapshot.pricing_parameters,
            service_categories=snapshot.service_categories,
            duration=draft.duration,
            duration_unit=draft.duration_unit,
        )
        extras_sum = extras_total(draft.selected_extras, draft.extra_quantities, snapshot.extras)
        partial = partial_cleaning_discount(
            draft.is_partial_cleaning,
            draft.selected_exclude_params,
            draft.exclude_quantities,
            snapshot.exclude_parameters,
        )
        freq_discount = frequency_discount(
            frequency,
            service_total=base.price,
            extras_total=extras_sum,
            partial_discount=partial,
            is_first_appointment=draft.is_first_appointment,
        )
        subtotal, final_amount = aggregate_total(base.price, extras_sum, partial, freq_discount, draft.adjustments)

        self._logger.debug(
            "Quote calculated",
            extra={"service": draft.service, "frequency": draft.frequency, "reason": base.source},
        )
        return Quote(
            service_total=base.price,
            extras_total=extras_sum,
            partial_cleaning_discount=partial,
            frequency_discount=freq_discount,
            subtotal=subtotal,
            final_amount=final_amount,
            price_source=base.source,
        )

    def adjusted_duration(self, draft: BookingDraft) -> DurationAdjustment:
        return adjust_duration(
            self._snapshot.find_frequency(draft.frequency),
            draft.duration,
            draft.duration_unit,
            draft.is_first_appointment,
        )

    def visit_dates(self, draft: BookingDraft, count: int = 4) -> list[date]:
        """Upcoming visit dates for recurring frequencies, starting with the booked date."""
        frequency = self._snapshot.find_frequency(draft.frequency)
        if frequency is None or not frequency.is_recurring or not draft.date:
            return []
        try:
            start = date.fromisoformat(draft.date)
        except ValueError:
            self._logger.info("Unparsable booking date", extra={"frequency": draft.frequency, "reason": draft.date})
            return []
        return occurrence_dates(start, frequency.name, frequency.frequency_repeats, count=count)
