from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, TypeVar

from booking_engine.application.ports.catalog import CatalogPort
from booking_engine.domain.entities.catalog import CatalogSnapshot, Industry


T = TypeVar("T")


class LoadCatalogUseCase:
    """
    Fetch every configuration list for an industry concurrently.
    Each read degrades to an empty tuple on its own, so one failing endpoint
    never blanks the whole snapshot.
    """

    def __init__(self, catalog: CatalogPort) -> None:
        self._catalog = catalog
        self._logger = logging.getLogger(__name__)

    async def _safe(self, name: str, industry_id: str, call: Awaitable[list[T]]) -> tuple[T, ...]:
        try:
            return tuple(await call)
        except Exception as e:
            self._logger.warning(
                "Catalog read failed; using empty result",
                extra={"industry_id": industry_id, "reason": name, "error": str(e)},
            )
            return ()

    async def execute(self, industry_id: str, zipcode: str | None = None) -> CatalogSnapshot:
        categories, frequencies, extras, params, excludes = await asyncio.gather(
            self._safe("service_categories", industry_id, self._catalog.list_service_categories(industry_id)),
            self._safe("frequencies", industry_id, self._catalog.list_frequencies(industry_id, zipcode)),
            self._safe("extras", industry_id, self._catalog.list_extras(industry_id)),
            self._safe("pricing_parameters", industry_id, self._catalog.list_pricing_parameters(industry_id)),
            self._safe("exclude_parameters", industry_id, self._catalog.list_exclude_parameters(industry_id)),
        )
        return CatalogSnapshot(
            industry_id=industry_id,
            service_categories=categories,
            frequencies=frequencies,
            extras=extras,
            pricing_parameters=params,
            exclude_parameters=excludes,
        )

    async def list_industries(self, business_id: str) -> list[Industry]:
        industries = list(await self._safe("industries", "", self._catalog.list_industries(business_id)))
        if not industries:
            self._logger.info("No industries found", extra={"reason": f"business_id={business_id}"})
        return industries
