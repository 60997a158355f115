from __future__ import annotations

import logging
from typing import Any

from booking_engine.application.exceptions import BackendUnavailableError, BookingSubmissionError
from booking_engine.application.ports.booking_store import BookingStorePort
from booking_engine.infrastructure.backend.http_client import BackendClient


class HttpBookingStore(BookingStorePort):
    def __init__(self, client: BackendClient) -> None:
        self._client = client
        self._logger = logging.getLogger(__name__)

    async def create_booking(self, payload: dict[str, Any], business_id: str) -> dict[str, Any]:
        try:
            response = await self._client.post_json("/bookings", payload, business_id=business_id)
        except BackendUnavailableError as e:
            raise BookingSubmissionError("Could not reach the booking service", detail=str(e)) from e

        try:
            body = response.json() if response.content else {}
        except ValueError:
            body = None

        if response.status_code >= 400 or not isinstance(body, dict):
            error = body.get("error") if isinstance(body, dict) else None
            detail = body.get("detail") if isinstance(body, dict) else response.text or None
            hint = body.get("hint") if isinstance(body, dict) else None
            self._logger.error(
                "Booking creation rejected",
                extra={"status": response.status_code, "error": error or detail},
            )
            raise BookingSubmissionError(
                error or "Failed to create booking",
                status_code=response.status_code,
                error=error,
                detail=detail,
                hint=hint,
            )

        record = body.get("data")
        return record if isinstance(record, dict) else body
