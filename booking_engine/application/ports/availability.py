from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class AvailabilityPort(ABC):
    @abstractmethod
    async def get_available_slots(self, provider_id: str, day: date, business_id: str) -> list[str]:
        """Return free start times for the provider on the day as HH:MM (24h) strings."""
        raise NotImplementedError
