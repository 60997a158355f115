from __future__ import annotations

import asyncio
import logging
from datetime import date

from booking_engine.application.ports.availability import AvailabilityPort


class ProviderAvailabilityUseCase:
    """Fan out one slot lookup per (provider, date) and merge the results into a sorted set."""

    def __init__(self, availability: AvailabilityPort, max_concurrency: int = 10) -> None:
        self._availability = availability
        self._semaphore_size = max(1, max_concurrency)
        self._logger = logging.getLogger(__name__)

    async def execute(self, provider_ids: list[str], days: list[date], business_id: str) -> list[str]:
        if not provider_ids or not days:
            return []

        semaphore = asyncio.Semaphore(self._semaphore_size)

        async def lookup(provider_id: str, day: date) -> list[str]:
            async with semaphore:
                try:
                    return await self._availability.get_available_slots(provider_id, day, business_id)
                except Exception as e:
                    self._logger.warning(
                        "Availability lookup failed",
                        extra={"reason": f"provider={provider_id} date={day.isoformat()}", "error": str(e)},
                    )
                    return []

        results = await asyncio.gather(*(lookup(p, d) for p in provider_ids for d in days))
        merged: set[str] = set()
        for slots in results:
            merged.update(slots)
        return sorted(merged)
