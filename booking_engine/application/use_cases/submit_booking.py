from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from booking_engine.application.exceptions import BookingSubmissionError, BookingValidationError
from booking_engine.application.ports.booking_store import BookingStorePort
from booking_engine.application.use_cases.quote import QuoteCalculator
from booking_engine.domain.entities.booking_draft import BookingDraft
from booking_engine.domain.entities.catalog import CatalogSnapshot
from booking_engine.domain.entities.quote import Quote


@dataclass(frozen=True)
class BookingConfirmation:
    booking_id: str | None
    quote: Quote
    record: dict[str, Any]


def validate_draft(draft: BookingDraft) -> dict[str, bool]:
    """Per-field flags, True meaning the field is missing."""
    customer = draft.customer
    return {
        "first_name": not customer.first_name.strip(),
        "last_name": not customer.last_name.strip(),
        "email": not customer.email.strip(),
        "service": not draft.service.strip(),
        "date": not draft.date.strip(),
        "time": not draft.time.strip(),
        "address": not customer.address.strip(),
    }


def ensure_valid(draft: BookingDraft) -> None:
    errors = validate_draft(draft)
    if any(errors.values()):
        raise BookingValidationError(errors)


def normalize_payment_method(method: str | None) -> str:
    value = (method or "").strip().lower()
    if value == "cash":
        return "cash"
    if "card" in value or "bank" in value:
        return "online"
    return "cash"


def build_payload(draft: BookingDraft, quote: Quote, business_id: str, status: str = "pending") -> dict[str, Any]:
    customer = draft.customer
    adjustments = draft.adjustments
    return {
        "business_id": business_id,
        "provider_id": draft.service_provider_id,
        "customer_name": customer.full_name,
        "customer_email": customer.email.strip(),
        "customer_phone": customer.phone.strip(),
        "address": customer.address.strip(),
        "zip_code": customer.zip_code.strip() or None,
        "service": draft.service,
        "frequency": draft.frequency,
        "date": draft.date,
        "time": draft.time,
        "duration": draft.duration,
        "duration_unit": draft.duration_unit,
        "status": status,
        "amount": quote.final_amount,
        "service_total": quote.service_total,
        "extras_total": quote.extras_total,
        "partial_cleaning_discount": quote.partial_cleaning_discount,
        "frequency_discount": quote.frequency_discount,
        "payment_method": normalize_payment_method(draft.payment_method),
        "notes": draft.notes,
        "selected_extras": list(draft.selected_extras),
        "extra_quantities": {key: draft.extra_quantities.get(key, 1) for key in draft.selected_extras},
        "category_values": dict(draft.variable_values),
        "is_partial_cleaning": draft.is_partial_cleaning,
        "excluded_areas": list(draft.selected_exclude_params),
        "exclude_quantities": {key: draft.exclude_quantities.get(key, 1) for key in draft.selected_exclude_params},
        "is_first_appointment": draft.is_first_appointment,
        "adjust_service_total": adjustments.adjust_service_total,
        "adjustment_service_total_amount": adjustments.adjustment_service_total_amount,
        "adjust_price": adjustments.adjust_price,
        "adjustment_amount": adjustments.adjustment_amount,
        "adjust_time": adjustments.adjust_time,
        "adjusted_hours": adjustments.adjusted_hours,
        "adjusted_minutes": adjustments.adjusted_minutes,
        "priority": draft.priority,
        "waiting_list": draft.waiting_list,
    }


class SubmitBookingUseCase:
    def __init__(self, store: BookingStorePort, business_id: str) -> None:
        self._store = store
        self._business_id = business_id
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        draft: BookingDraft,
        snapshot: CatalogSnapshot,
        status: str = "pending",
    ) -> BookingConfirmation:
        """
        Validate, price and persist a draft.
        The quote is recomputed here from the draft being submitted, right before
        serialization, so the stored numbers always match the current selections.
        The draft itself is never modified, so a failed submission can be retried as-is.
        """
        ensure_valid(draft)

        quote = QuoteCalculator(snapshot).calculate(draft)
        payload = build_payload(draft, quote, self._business_id, status)

        try:
            record = await self._store.create_booking(payload, self._business_id)
        except BookingSubmissionError as e:
            self._logger.error(
                "Booking submission failed",
                extra={"service": draft.service, "status": e.status_code, "error": e.error or str(e)},
            )
            raise

        booking_id = record.get("id")
        self._logger.info(
            "Booking created",
            extra={"booking_id": booking_id, "service": draft.service, "frequency": draft.frequency},
        )
        return BookingConfirmation(
            booking_id=str(booking_id) if booking_id is not None else None,
            quote=quote,
            record=record,
        )
