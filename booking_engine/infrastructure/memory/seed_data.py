from __future__ import annotations

from booking_engine.domain.entities.catalog import CatalogSnapshot, Industry
from booking_engine.domain.entities.exclude_parameter import ExcludeParameter
from booking_engine.domain.entities.extra import Extra
from booking_engine.domain.entities.frequency import FrequencyRow
from booking_engine.domain.entities.pricing_parameter import PricingParameter
from booking_engine.domain.entities.service_category import FixedPrice, HourlyService, ServiceCategory

DEMO_BUSINESS_ID = "demo-business"

DEMO_INDUSTRIES = [Industry(id="home-cleaning", name="Home Cleaning")]

DEMO_CATALOG = CatalogSnapshot(
    industry_id="home-cleaning",
    service_categories=(
        ServiceCategory(
            id="sc-standard",
            name="Standard Cleaning",
            selected_frequencies=("One-Time", "Weekly", "Every Other Week"),
            extras=("ex-fridge", "ex-oven", "ex-windows"),
            variables={"Bedrooms": ("1 Bedroom", "2 Bedrooms", "3 Bedrooms")},
            selected_exclude_parameters=("Kitchen", "Bathrooms"),
        ),
        ServiceCategory(
            id="sc-deep",
            name="Deep Cleaning",
            service_category_frequency=True,
            service_category_price=FixedPrice(enabled=True, price="250"),
        ),
        ServiceCategory(
            id="sc-hourly",
            name="Hourly Cleaning",
            hourly_service=HourlyService(enabled=True, price="45"),
        ),
    ),
    frequencies=(
        FrequencyRow(id="f-once", name="One-Time", is_default=True),
        FrequencyRow(
            id="f-weekly",
            name="Weekly",
            occurrence_time="recurring",
            discount=15,
            discount_type="%",
            shorter_job_length="yes",
            shorter_job_length_by="25",
            exclude_first_appointment=True,
            frequency_discount="exclude-first",
            frequency_repeats="weekly",
            service_categories=("sc-deep",),
            extras=("ex-fridge",),
            exclude_parameters=("Kitchen",),
        ),
        FrequencyRow(
            id="f-biweekly",
            name="Every Other Week",
            occurrence_time="recurring",
            discount=20,
            discount_type="$",
            frequency_repeats="every-other-week",
        ),
        FrequencyRow(id="f-quote", name="Custom Schedule", display="Quote"),
    ),
    extras=(
        Extra(id="ex-fridge", name="Inside Fridge", price=20, time=30, qty_based=True, maximum_quantity=3),
        Extra(id="ex-oven", name="Inside Oven", price=15, time=20),
        Extra(id="ex-windows", name="Interior Windows", price=5, time=5, qty_based=True, maximum_quantity=20),
        Extra(id="ex-laundry", name="Laundry", price=25, time=45, display="admin-only"),
    ),
    pricing_parameters=(
        PricingParameter(id="pp-1", name="1 Bedroom", price=100, variable_category="Bedrooms"),
        PricingParameter(id="pp-2", name="2 Bedrooms", price=130, variable_category="Bedrooms"),
        PricingParameter(id="pp-3", name="3 Bedrooms", price=160, variable_category="Bedrooms"),
    ),
    exclude_parameters=(
        ExcludeParameter(id="xp-kitchen", name="Kitchen", price=10),
        ExcludeParameter(id="xp-bath", name="Bathrooms", price=8, qty_based=True, maximum_quantity=4),
    ),
)

DEMO_PROVIDER_SLOTS: dict[str, list[str]] = {
    "prov-1": ["09:00", "11:00", "14:00"],
    "prov-2": ["09:00", "13:00"],
}
