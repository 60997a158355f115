from __future__ import annotations

import pytest

from booking_engine.application.use_cases.resolve_dependencies import resolve_from_snapshot
from booking_engine.domain.entities.booking_draft import BookingDraft, CustomerInfo
from booking_engine.domain.entities.catalog import CatalogSnapshot
from booking_engine.infrastructure.memory.memory_backend import MemoryBackend
from booking_engine.infrastructure.memory.seed_data import DEMO_CATALOG


@pytest.fixture
def catalog() -> CatalogSnapshot:
    return DEMO_CATALOG


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def weekly_draft(catalog: CatalogSnapshot) -> BookingDraft:
    """Standard Cleaning, weekly, 2 bedrooms, fridge x2 + oven, kitchen excluded, not the first visit."""
    return BookingDraft(
        customer=CustomerInfo(
            first_name="Dana",
            last_name="Reyes",
            email="dana@example.com",
            phone="555-0100",
            address="12 Elm St",
            zip_code="94110",
        ),
        service="Standard Cleaning",
        frequency="Weekly",
        date="2026-11-02",
        time="09:00",
        duration="4",
        duration_unit="Hours",
        variable_values={"Bedrooms": "2 Bedrooms"},
        selected_extras=("ex-fridge", "ex-oven"),
        extra_quantities={"ex-fridge": 2},
        is_partial_cleaning=True,
        selected_exclude_params=("Kitchen",),
        is_first_appointment=False,
        dependencies=resolve_from_snapshot(catalog, "Weekly"),
        dependencies_frequency="Weekly",
        service_provider_id="prov-1",
        payment_method="Credit Card",
    )
