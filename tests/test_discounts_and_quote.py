"""
Tests for discounts, extras totals and the final quote aggregation.
"""

from __future__ import annotations

from dataclasses import replace

from booking_engine.application.use_cases.discounts import frequency_discount, partial_cleaning_discount
from booking_engine.application.use_cases.quote import QuoteCalculator, aggregate_total, extras_total
from booking_engine.domain.entities.booking_draft import BookingDraft, ManualAdjustments
from booking_engine.domain.entities.exclude_parameter import ExcludeParameter
from booking_engine.domain.entities.extra import Extra
from booking_engine.domain.entities.frequency import FrequencyRow


WEEKLY_PCT = FrequencyRow(
    id="f-w",
    name="Weekly",
    occurrence_time="recurring",
    discount=10,
    discount_type="%",
    frequency_discount="exclude-first",
)

EXCLUDES = [
    ExcludeParameter(id="x1", name="Kitchen", price=10),
    ExcludeParameter(id="x2", name="Bathrooms", price=8, qty_based=True, maximum_quantity=4),
]


def test_partial_cleaning_discount_is_zero_when_disabled():
    assert partial_cleaning_discount(False, ["Kitchen"], {}, EXCLUDES) == 0


def test_partial_cleaning_discount_sums_price_times_quantity():
    assert partial_cleaning_discount(True, ["Kitchen", "Bathrooms"], {"Bathrooms": 2}, EXCLUDES) == 26


def test_partial_cleaning_discount_ignores_unknown_names():
    assert partial_cleaning_discount(True, ["Garage"], {}, EXCLUDES) == 0


def test_exclude_first_skips_discount_on_first_visit():
    """Recurring exclude-first frequencies give nothing on the first appointment, for % and $ alike."""
    flat = replace(WEEKLY_PCT, discount=25, discount_type="$")
    assert frequency_discount(WEEKLY_PCT, 100, 55, 10, is_first_appointment=True) == 0
    assert frequency_discount(flat, 100, 55, 10, is_first_appointment=True) == 0


def test_exclude_first_applies_on_later_visits():
    assert frequency_discount(WEEKLY_PCT, 100, 55, 10, is_first_appointment=False) == 14.5


def test_exclude_first_is_ignored_for_one_time_frequencies():
    one_time = replace(WEEKLY_PCT, occurrence_time="onetime")
    assert frequency_discount(one_time, 100, 0, 0, is_first_appointment=True) == 10


def test_percent_discount_scales_and_flat_discount_does_not():
    pct = replace(WEEKLY_PCT, frequency_discount="all")
    flat = replace(pct, discount=20, discount_type="$")

    assert frequency_discount(pct, 200, 0, 0) == 2 * frequency_discount(pct, 100, 0, 0)
    assert frequency_discount(flat, 200, 0, 0) == frequency_discount(flat, 100, 0, 0) == 20


def test_no_frequency_or_zero_discount_gives_nothing():
    assert frequency_discount(None, 100, 0, 0) == 0
    assert frequency_discount(replace(WEEKLY_PCT, discount=0), 100, 0, 0, is_first_appointment=False) == 0


def test_extras_total_multiplies_quantity():
    extras = [Extra(id="a", name="A", price=20), Extra(id="b", name="B", price=15)]
    assert extras_total(["a", "b"], {"a": 2}, extras) == 55


def test_extras_total_does_not_clamp_quantity():
    extras = [Extra(id="a", name="A", price=20, qty_based=True, maximum_quantity=3)]
    assert extras_total(["a"], {"a": 10}, extras) == 200


def test_aggregate_total_weekly_scenario():
    subtotal, final = aggregate_total(100, 55, 10, 14.5)
    assert subtotal == 155
    assert final == 130.5


def test_aggregate_total_is_never_negative():
    subtotal, final = aggregate_total(10, 0, 50, 20)
    assert subtotal == 10
    assert final == 0


def test_service_total_override_replaces_subtotal():
    adjustments = ManualAdjustments(adjust_service_total=True, adjustment_service_total_amount="200")
    subtotal, final = aggregate_total(100, 55, 10, 0, adjustments)
    assert subtotal == 200
    assert final == 190


def test_price_override_wins_and_is_not_clamped():
    assert aggregate_total(100, 55, 10, 14.5, ManualAdjustments(adjust_price=True, adjustment_amount="0"))[1] == 0
    assert aggregate_total(100, 0, 0, 0, ManualAdjustments(adjust_price=True, adjustment_amount="-5"))[1] == -5


def test_unparsable_override_is_ignored():
    adjustments = ManualAdjustments(adjust_price=True, adjustment_amount="abc")
    assert aggregate_total(100, 55, 10, 14.5, adjustments) == (155, 130.5)


def test_quote_calculator_repeat_visit(catalog, weekly_draft):
    """130 base + 55 extras, 10 kitchen credit, 15% of 175 weekly discount."""
    quote = QuoteCalculator(catalog).calculate(weekly_draft)

    assert quote.price_source == "pricing_parameter"
    assert quote.service_total == 130
    assert quote.extras_total == 55
    assert quote.partial_cleaning_discount == 10
    assert quote.frequency_discount == 26.25
    assert quote.subtotal == 185
    assert quote.total_discount == 36.25
    assert quote.final_amount == 148.75


def test_quote_calculator_first_visit_is_full_price(catalog, weekly_draft):
    quote = QuoteCalculator(catalog).calculate(replace(weekly_draft, is_first_appointment=True))
    assert quote.frequency_discount == 0
    assert quote.final_amount == 175


def test_quote_calculator_is_deterministic(catalog, weekly_draft):
    calculator = QuoteCalculator(catalog)
    assert calculator.calculate(weekly_draft) == calculator.calculate(weekly_draft)


def test_quote_for_hourly_service(catalog):
    draft = BookingDraft(service="Hourly Cleaning", frequency="One-Time", duration="3")
    quote = QuoteCalculator(catalog).calculate(draft)
    assert quote.price_source == "hourly"
    assert quote.final_amount == 135
