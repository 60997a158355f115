from __future__ import annotations

import logging

from booking_engine.application.ports.catalog import CatalogPort
from booking_engine.application.use_cases.draft_reducer import DependenciesResolved, reduce
from booking_engine.application.use_cases.eligibility import compute_eligibility
from booking_engine.application.use_cases.load_catalog import LoadCatalogUseCase
from booking_engine.application.use_cases.resolve_dependencies import resolve_from_snapshot
from booking_engine.domain.entities.booking_draft import BookingDraft
from booking_engine.domain.entities.catalog import CatalogSnapshot
from booking_engine.domain.entities.eligibility import Eligibility


class BookingSessionUseCase:
    """Load an industry snapshot and bring a draft in line with it (dependencies resolved, selections repaired)."""

    def __init__(self, catalog: CatalogPort) -> None:
        self._loader = LoadCatalogUseCase(catalog)
        self._logger = logging.getLogger(__name__)

    async def prepare(
        self,
        industry_id: str,
        draft: BookingDraft,
        zipcode: str | None = None,
        customer_facing: bool = True,
    ) -> tuple[CatalogSnapshot, BookingDraft]:
        snapshot = await self._loader.execute(industry_id, zipcode)
        dependencies = resolve_from_snapshot(snapshot, draft.frequency)
        prepared = reduce(
            draft,
            DependenciesResolved(frequency=draft.frequency, dependencies=dependencies),
            snapshot,
            customer_facing,
        )
        if prepared != draft:
            self._logger.info(
                "Cleared ineligible selections",
                extra={"industry_id": industry_id, "service": draft.service, "frequency": draft.frequency},
            )
        return snapshot, prepared

    async def eligibility(
        self,
        industry_id: str,
        draft: BookingDraft,
        zipcode: str | None = None,
        customer_facing: bool = True,
    ) -> tuple[Eligibility, BookingDraft]:
        snapshot, prepared = await self.prepare(industry_id, draft, zipcode, customer_facing)
        return compute_eligibility(snapshot, prepared, customer_facing), prepared
