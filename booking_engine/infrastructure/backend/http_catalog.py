from __future__ import annotations

import logging

from booking_engine.application.dto.catalog_rows import (
    ExcludeParameterRow,
    ExtraRow,
    FrequencyRowDTO,
    IndustryRow,
    PricingParameterRow,
    ServiceCategoryRow,
    convert_rows,
)
from booking_engine.application.ports.catalog import CatalogPort
from booking_engine.core.config import settings
from booking_engine.domain.entities.catalog import Industry
from booking_engine.domain.entities.exclude_parameter import ExcludeParameter
from booking_engine.domain.entities.extra import Extra
from booking_engine.domain.entities.frequency import FrequencyRow
from booking_engine.domain.entities.pricing_parameter import PricingParameter
from booking_engine.domain.entities.service_category import ServiceCategory
from booking_engine.infrastructure.backend.http_client import BackendClient


class HttpCatalog(CatalogPort):
    def __init__(self, client: BackendClient, include_all_frequencies: bool | None = None) -> None:
        self._client = client
        self._include_all = (
            settings.INCLUDE_ALL_FREQUENCIES if include_all_frequencies is None else include_all_frequencies
        )
        self._logger = logging.getLogger(__name__)

    async def list_industries(self, business_id: str) -> list[Industry]:
        data = await self._client.get_json("/industries", {"business_id": business_id})
        return convert_rows(data.get("industries", []), IndustryRow.model_validate, "industries")

    async def list_frequencies(self, industry_id: str, zipcode: str | None = None) -> list[FrequencyRow]:
        params = {
            "industryId": industry_id,
            "includeAll": "true" if self._include_all else None,
            "zipcode": zipcode,
        }
        data = await self._client.get_json("/industry-frequency", params)
        return convert_rows(data.get("frequencies", []), FrequencyRowDTO.model_validate, "frequencies")

    async def list_service_categories(self, industry_id: str) -> list[ServiceCategory]:
        data = await self._client.get_json("/service-categories", {"industryId": industry_id})
        return convert_rows(data.get("serviceCategories", []), ServiceCategoryRow.model_validate, "service_categories")

    async def list_extras(self, industry_id: str) -> list[Extra]:
        data = await self._client.get_json("/extras", {"industryId": industry_id})
        return convert_rows(data.get("extras", []), ExtraRow.model_validate, "extras")

    async def list_pricing_parameters(self, industry_id: str) -> list[PricingParameter]:
        data = await self._client.get_json("/pricing-parameters", {"industryId": industry_id})
        return convert_rows(data.get("pricingParameters", []), PricingParameterRow.model_validate, "pricing_parameters")

    async def list_exclude_parameters(self, industry_id: str) -> list[ExcludeParameter]:
        data = await self._client.get_json("/exclude-parameters", {"industryId": industry_id})
        return convert_rows(data.get("excludeParameters", []), ExcludeParameterRow.model_validate, "exclude_parameters")
