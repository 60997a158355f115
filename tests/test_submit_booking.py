"""
Tests for booking validation, payload construction and submission failures.
"""

from __future__ import annotations

import asyncio
from dataclasses import replace

import pytest

from booking_engine.application.exceptions import BookingSubmissionError, BookingValidationError
from booking_engine.application.use_cases.submit_booking import (
    SubmitBookingUseCase,
    normalize_payment_method,
    validate_draft,
)
from booking_engine.domain.entities.booking_draft import BookingDraft, CustomerInfo
from booking_engine.infrastructure.memory.memory_backend import MemoryBackend


def test_validate_draft_flags_missing_fields():
    errors = validate_draft(BookingDraft(customer=CustomerInfo(first_name="Dana", email="  ")))
    assert errors == {
        "first_name": False,
        "last_name": True,
        "email": True,
        "service": True,
        "date": True,
        "time": True,
        "address": True,
    }


def test_validate_draft_passes_complete_draft(weekly_draft):
    assert not any(validate_draft(weekly_draft).values())


def test_normalize_payment_method():
    assert normalize_payment_method("Cash") == "cash"
    assert normalize_payment_method("Credit Card") == "online"
    assert normalize_payment_method("Bank Transfer") == "online"
    assert normalize_payment_method("") == "cash"
    assert normalize_payment_method("Voucher") == "cash"


def test_invalid_draft_never_reaches_the_store(catalog, backend):
    uc = SubmitBookingUseCase(store=backend, business_id="demo-business")
    with pytest.raises(BookingValidationError) as exc:
        asyncio.run(uc.execute(BookingDraft(service="Standard Cleaning"), catalog))

    assert exc.value.errors["first_name"]
    assert backend.bookings == []


def test_payload_carries_the_current_quote(catalog, backend, weekly_draft):
    uc = SubmitBookingUseCase(store=backend, business_id="demo-business")
    confirmation = asyncio.run(uc.execute(weekly_draft, catalog))

    assert confirmation.booking_id.startswith("mem_booking_")
    [record] = backend.bookings
    assert record["amount"] == confirmation.quote.final_amount == 148.75
    assert record["service_total"] == 130
    assert record["extras_total"] == 55
    assert record["partial_cleaning_discount"] == 10
    assert record["frequency_discount"] == 26.25
    assert record["extra_quantities"] == {"ex-fridge": 2, "ex-oven": 1}
    assert record["excluded_areas"] == ["Kitchen"]
    assert record["payment_method"] == "online"
    assert record["provider_id"] == "prov-1"
    assert record["customer_name"] == "Dana Reyes"
    assert record["is_first_appointment"] is False
    assert record["status"] == "pending"


def test_price_override_is_what_gets_stored(catalog, backend, weekly_draft):
    adjustments = replace(weekly_draft.adjustments, adjust_price=True, adjustment_amount="99")
    draft = replace(weekly_draft, adjustments=adjustments)
    asyncio.run(SubmitBookingUseCase(store=backend, business_id="demo-business").execute(draft, catalog))
    assert backend.bookings[0]["amount"] == 99
    assert backend.bookings[0]["adjust_price"] is True


def test_failed_submission_keeps_the_draft(catalog, weekly_draft):
    backend = MemoryBackend(failing={"create_booking"})
    before = replace(weekly_draft)
    uc = SubmitBookingUseCase(store=backend, business_id="demo-business")

    with pytest.raises(BookingSubmissionError) as exc:
        asyncio.run(uc.execute(weekly_draft, catalog))

    assert exc.value.detail == "create_booking unavailable"
    assert weekly_draft == before
    assert backend.bookings == []

    # same draft submits fine once the backend recovers
    retry = SubmitBookingUseCase(store=MemoryBackend(), business_id="demo-business")
    confirmation = asyncio.run(retry.execute(weekly_draft, catalog))
    assert confirmation.quote.final_amount == 148.75
