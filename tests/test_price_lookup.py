"""
Tests for base price resolution: pricing parameter, then fixed price, then hourly rate.
"""

from __future__ import annotations

from booking_engine.application.use_cases.price_lookup import lookup_base_price, parameter_allows
from booking_engine.domain.entities.pricing_parameter import PricingParameter
from booking_engine.domain.entities.service_category import FixedPrice, HourlyService, ServiceCategory


def _category(**kwargs) -> ServiceCategory:
    defaults = dict(
        id="sc-1",
        name="Deep Cleaning",
        service_category_price=FixedPrice(enabled=True, price="250"),
        hourly_service=HourlyService(enabled=True, price="45"),
    )
    defaults.update(kwargs)
    return ServiceCategory(**defaults)


BEDROOM_2 = PricingParameter(id="pp-2", name="2 Bedrooms", price=130, variable_category="Bedrooms")


def test_pricing_parameter_wins_over_fixed_and_hourly():
    """All three sources configured: the matching pricing parameter is used."""
    result = lookup_base_price(
        "Deep Cleaning",
        "Weekly",
        {"Bedrooms": "2 Bedrooms"},
        [BEDROOM_2],
        [_category()],
        duration="3",
    )
    assert result.price == 130
    assert result.source == "pricing_parameter"
    assert result.parameter_id == "pp-2"


def test_fixed_price_used_when_no_parameter_matches():
    result = lookup_base_price("Deep Cleaning", "Weekly", {"Bedrooms": "3 Bedrooms"}, [BEDROOM_2], [_category()], "3")
    assert result.price == 250
    assert result.source == "fixed"


def test_hourly_price_multiplies_duration():
    category = _category(service_category_price=FixedPrice(enabled=False, price="250"))
    assert lookup_base_price("Deep Cleaning", "", {}, [], [category], "3", "Hours").price == 135
    assert lookup_base_price("Deep Cleaning", "", {}, [], [category], "90", "Minutes").price == 67.5


def test_non_positive_fixed_price_falls_through_to_hourly():
    category = _category(service_category_price=FixedPrice(enabled=True, price="0"))
    result = lookup_base_price("Deep Cleaning", "", {}, [], [category], "2")
    assert result.price == 90
    assert result.source == "hourly"


def test_no_pricing_found_returns_zero():
    category = _category(
        service_category_price=FixedPrice(enabled=False),
        hourly_service=HourlyService(enabled=True, price="not a number"),
    )
    result = lookup_base_price("Deep Cleaning", "Weekly", {}, [BEDROOM_2], [category], "2")
    assert result.price == 0
    assert result.source == "none"


def test_parameter_without_variable_category_matches_any_selection():
    flat = PricingParameter(id="pp-flat", name="Base visit", price=80)
    assert lookup_base_price("Deep Cleaning", "", {}, [flat], [_category()]).price == 80


def test_frequency_gate_restricts_parameter():
    weekly_only = PricingParameter(
        id="pp-w",
        name="2 Bedrooms",
        price=110,
        variable_category="Bedrooms",
        frequency="Weekly, Monthly",
        show_based_on_frequency=True,
    )
    values = {"Bedrooms": "2 Bedrooms"}
    assert lookup_base_price("Deep Cleaning", "Monthly", values, [weekly_only, BEDROOM_2], [_category()]).price == 110
    assert lookup_base_price("Deep Cleaning", "One-Time", values, [weekly_only, BEDROOM_2], [_category()]).price == 130


def test_service_gate_accepts_category_name_or_id():
    category = _category()
    by_id = PricingParameter(id="p", name="x", price=1, service_category="sc-1", show_based_on_service_category=True)
    by_name = PricingParameter(
        id="p", name="x", price=1, service_category="Deep Cleaning", show_based_on_service_category=True
    )
    other = PricingParameter(id="p", name="x", price=1, service_category="Move Out", show_based_on_service_category=True)

    assert parameter_allows(by_id, "Deep Cleaning", "", category)
    assert parameter_allows(by_name, "Deep Cleaning", "", category)
    assert not parameter_allows(other, "Deep Cleaning", "", category)


def test_enabled_gate_with_empty_allow_list_is_unrestricted():
    param = PricingParameter(id="p", name="x", price=1, frequency="", show_based_on_frequency=True)
    assert parameter_allows(param, "Deep Cleaning", "Weekly")


def test_disabled_gate_ignores_allow_list():
    param = PricingParameter(id="p", name="x", price=1, frequency="Monthly", show_based_on_frequency=False)
    assert parameter_allows(param, "Deep Cleaning", "Weekly")
