from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BookingStorePort(ABC):
    @abstractmethod
    async def create_booking(self, payload: dict[str, Any], business_id: str) -> dict[str, Any]:
        """
        Persist a booking and return the stored record.
        Raises BookingSubmissionError when the backend rejects it.
        """
        raise NotImplementedError
