from __future__ import annotations

from abc import ABC, abstractmethod

from booking_engine.domain.entities.catalog import Industry
from booking_engine.domain.entities.exclude_parameter import ExcludeParameter
from booking_engine.domain.entities.extra import Extra
from booking_engine.domain.entities.frequency import FrequencyRow
from booking_engine.domain.entities.pricing_parameter import PricingParameter
from booking_engine.domain.entities.service_category import ServiceCategory


class CatalogPort(ABC):
    """Read-only access to an industry's booking configuration. Failures raise BackendUnavailableError."""

    @abstractmethod
    async def list_industries(self, business_id: str) -> list[Industry]:
        raise NotImplementedError

    @abstractmethod
    async def list_frequencies(self, industry_id: str, zipcode: str | None = None) -> list[FrequencyRow]:
        raise NotImplementedError

    @abstractmethod
    async def list_service_categories(self, industry_id: str) -> list[ServiceCategory]:
        raise NotImplementedError

    @abstractmethod
    async def list_extras(self, industry_id: str) -> list[Extra]:
        raise NotImplementedError

    @abstractmethod
    async def list_pricing_parameters(self, industry_id: str) -> list[PricingParameter]:
        raise NotImplementedError

    @abstractmethod
    async def list_exclude_parameters(self, industry_id: str) -> list[ExcludeParameter]:
        raise NotImplementedError
