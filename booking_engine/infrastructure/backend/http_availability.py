from __future__ import annotations

from datetime import date

from booking_engine.application.ports.availability import AvailabilityPort
from booking_engine.infrastructure.backend.http_client import BackendClient


class HttpAvailability(AvailabilityPort):
    def __init__(self, client: BackendClient) -> None:
        self._client = client

    async def get_available_slots(self, provider_id: str, day: date, business_id: str) -> list[str]:
        data = await self._client.get_json(
            f"/admin/providers/{provider_id}/available-slots",
            {"date": day.isoformat(), "businessId": business_id},
        )
        slots = data.get("availableSlots") or []
        return [str(slot) for slot in slots if isinstance(slot, str) and slot.strip()]
