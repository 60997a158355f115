from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Any

from booking_engine.application.exceptions import BackendUnavailableError, BookingSubmissionError
from booking_engine.application.ports.availability import AvailabilityPort
from booking_engine.application.ports.booking_store import BookingStorePort
from booking_engine.application.ports.catalog import CatalogPort
from booking_engine.domain.entities.catalog import CatalogSnapshot, Industry
from booking_engine.domain.entities.exclude_parameter import ExcludeParameter
from booking_engine.domain.entities.extra import Extra
from booking_engine.domain.entities.frequency import FrequencyRow
from booking_engine.domain.entities.pricing_parameter import PricingParameter
from booking_engine.domain.entities.service_category import ServiceCategory
from booking_engine.infrastructure.memory.seed_data import (
    DEMO_BUSINESS_ID,
    DEMO_CATALOG,
    DEMO_INDUSTRIES,
    DEMO_PROVIDER_SLOTS,
)


class MemoryBackend(CatalogPort, AvailabilityPort, BookingStorePort):
    """In-process stand-in for the HTTP backend, used in dev/local and in tests."""

    def __init__(
        self,
        catalogs: dict[str, CatalogSnapshot] | None = None,
        industries: dict[str, list[Industry]] | None = None,
        provider_slots: dict[str, list[str]] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self._catalogs = catalogs if catalogs is not None else {DEMO_CATALOG.industry_id: DEMO_CATALOG}
        self._industries = industries if industries is not None else {DEMO_BUSINESS_ID: list(DEMO_INDUSTRIES)}
        self._provider_slots = provider_slots if provider_slots is not None else dict(DEMO_PROVIDER_SLOTS)
        # operation names that should fail, e.g. {"list_extras"}
        self._failing = failing or set()
        self._bookings: dict[str, dict[str, Any]] = {}
        self._logger = logging.getLogger(__name__)

    @property
    def bookings(self) -> list[dict[str, Any]]:
        return list(self._bookings.values())

    def _check(self, operation: str) -> None:
        if operation in self._failing:
            raise BackendUnavailableError(f"{operation} unavailable")

    def _catalog(self, industry_id: str) -> CatalogSnapshot:
        return self._catalogs.get(industry_id) or CatalogSnapshot(industry_id=industry_id)

    async def list_industries(self, business_id: str) -> list[Industry]:
        self._check("list_industries")
        return list(self._industries.get(business_id, []))

    async def list_frequencies(self, industry_id: str, zipcode: str | None = None) -> list[FrequencyRow]:
        self._check("list_frequencies")
        return list(self._catalog(industry_id).frequencies)

    async def list_service_categories(self, industry_id: str) -> list[ServiceCategory]:
        self._check("list_service_categories")
        return list(self._catalog(industry_id).service_categories)

    async def list_extras(self, industry_id: str) -> list[Extra]:
        self._check("list_extras")
        return list(self._catalog(industry_id).extras)

    async def list_pricing_parameters(self, industry_id: str) -> list[PricingParameter]:
        self._check("list_pricing_parameters")
        return list(self._catalog(industry_id).pricing_parameters)

    async def list_exclude_parameters(self, industry_id: str) -> list[ExcludeParameter]:
        self._check("list_exclude_parameters")
        return list(self._catalog(industry_id).exclude_parameters)

    async def get_available_slots(self, provider_id: str, day: date, business_id: str) -> list[str]:
        self._check("get_available_slots")
        return list(self._provider_slots.get(provider_id, []))

    async def create_booking(self, payload: dict[str, Any], business_id: str) -> dict[str, Any]:
        if "create_booking" in self._failing:
            raise BookingSubmissionError(
                "Failed to create booking",
                status_code=500,
                error="Failed to create booking",
                detail="create_booking unavailable",
            )
        booking_id = f"mem_booking_{uuid.uuid4().hex[:8]}"
        record = {"id": booking_id, **payload, "business_id": business_id}
        self._bookings[booking_id] = record
        self._logger.info("Memory booking created", extra={"booking_id": booking_id})
        return record
