from __future__ import annotations

import logging

from booking_engine.domain.entities.catalog import CatalogSnapshot
from booking_engine.domain.entities.frequency import FrequencyDependencies, FrequencyRow


logger = logging.getLogger(__name__)


def dependencies_for(row: FrequencyRow) -> FrequencyDependencies:
    return FrequencyDependencies(
        service_categories=row.service_categories,
        extras=row.extras,
        exclude_parameters=row.exclude_parameters,
        variables=dict(row.variables),
    )


def resolve_from_snapshot(snapshot: CatalogSnapshot, frequency_name: str | None) -> FrequencyDependencies | None:
    """
    Dependency bundle for the named frequency, read from the same snapshot the filters use.
    None when nothing is selected or the frequency is unknown (including a failed
    frequency read, which leaves the snapshot without rows); the eligibility
    filter treats None as "nothing gated by the frequency is allowed".
    """
    if not frequency_name:
        return None

    row = snapshot.find_frequency(frequency_name)
    if row is None:
        logger.info(
            "No frequency found with name",
            extra={"industry_id": snapshot.industry_id, "frequency": frequency_name},
        )
        return None
    return dependencies_for(row)
