from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Iterable, Mapping

from booking_engine.application.use_cases.price_lookup import parameter_allows
from booking_engine.domain.entities.booking_draft import BookingDraft
from booking_engine.domain.entities.catalog import CatalogSnapshot
from booking_engine.domain.entities.eligibility import Eligibility
from booking_engine.domain.entities.exclude_parameter import ExcludeParameter
from booking_engine.domain.entities.extra import Extra
from booking_engine.domain.entities.frequency import FrequencyDependencies, FrequencyRow
from booking_engine.domain.entities.pricing_parameter import PricingParameter
from booking_engine.domain.entities.service_category import ServiceCategory


logger = logging.getLogger(__name__)

_MAX_REPAIR_PASSES = 5


def label_key(category_name: str) -> str:
    return re.sub(r"[^a-z0-9]", "", (category_name or "").strip().lower())


def variable_key(category_name: str) -> str:
    """Loose bucket for a variable-category label so "Bedrooms", "bedroom" and "Bedroom" compare equal."""
    lowered = (category_name or "").strip().lower()
    if "bedroom" in lowered:
        return "bedroom"
    if "bathroom" in lowered:
        return "bathroom"
    if "sqft" in lowered or "sq ft" in lowered or "square" in lowered or "area" in lowered:
        return "sqft"
    return label_key(category_name)


class _VariableAllowLists:
    """Exact label match first; the loose bucket only when no label matches exactly."""

    def __init__(self, lists: Mapping[str, Iterable[str]]) -> None:
        self._exact: dict[str, set[str]] = {}
        self._buckets: dict[str, set[str]] = {}
        for name, names in lists.items():
            self._exact.setdefault(label_key(name), set()).update(names)
            self._buckets.setdefault(variable_key(name), set()).update(names)

    def get(self, category_name: str) -> set[str]:
        exact = self._exact.get(label_key(category_name))
        if exact is not None:
            return exact
        return self._buckets.get(variable_key(category_name), set())


def active_dependencies(draft: BookingDraft) -> FrequencyDependencies | None:
    """Dependencies only count for the frequency they were resolved for."""
    if not draft.frequency or draft.dependencies_frequency != draft.frequency:
        return None
    return draft.dependencies


def filter_frequencies(
    frequencies: Iterable[FrequencyRow],
    category: ServiceCategory | None,
) -> tuple[FrequencyRow, ...]:
    rows = tuple(row for row in frequencies if row.is_bookable)
    if category is not None and category.selected_frequencies:
        allowed = set(category.selected_frequencies)
        rows = tuple(row for row in rows if row.name in allowed)
    return rows


def filter_service_categories(
    categories: Iterable[ServiceCategory],
    frequency_name: str,
    dependencies: FrequencyDependencies | None,
) -> tuple[ServiceCategory, ...]:
    """Frequency-gated categories are hidden once a frequency is chosen unless its dependencies list them."""
    if not frequency_name:
        return tuple(categories)

    allowed = set(dependencies.service_categories) if dependencies is not None else set()
    return tuple(
        category
        for category in categories
        if not category.service_category_frequency or category.id in allowed or category.name in allowed
    )


def filter_extras(
    extras: Iterable[Extra],
    category: ServiceCategory | None,
    dependencies: FrequencyDependencies | None,
    customer_facing: bool = True,
) -> tuple[Extra, ...]:
    visible = tuple(extra for extra in extras if extra.is_customer_visible or not customer_facing)
    if category is None:
        return ()

    if category.service_category_frequency:
        allowed = set(dependencies.extras) if dependencies is not None else set()
    else:
        allowed = set(category.extras)

    return tuple(extra for extra in visible if extra.id in allowed)


def filter_exclude_parameters(
    params: Iterable[ExcludeParameter],
    category: ServiceCategory | None,
    dependencies: FrequencyDependencies | None,
) -> tuple[ExcludeParameter, ...]:
    if category is None:
        return ()

    if category.service_category_frequency:
        allowed = set(dependencies.exclude_parameters) if dependencies is not None else set()
    else:
        allowed = set(category.selected_exclude_parameters)

    return tuple(param for param in params if param.name in allowed or param.id in allowed)


def _variable_allow_lists(
    category: ServiceCategory,
    dependencies: FrequencyDependencies | None,
) -> Mapping[str, tuple[str, ...]]:
    if category.service_category_frequency:
        return dependencies.variables if dependencies is not None else {}
    return category.variables


def filter_variable_options(
    params: Iterable[PricingParameter],
    category: ServiceCategory | None,
    frequency_name: str,
    dependencies: FrequencyDependencies | None,
) -> dict[str, tuple[PricingParameter, ...]]:
    """
    Group pricing parameters into the options shown per variable category.
    A parameter must be allowed by the category/frequency source of truth and by its own gates.
    """
    if category is None:
        return {}

    allow_lists = _VariableAllowLists(_variable_allow_lists(category, dependencies))
    grouped: dict[str, list[PricingParameter]] = {}
    for param in params:
        if not param.variable_category:
            continue
        allowed = allow_lists.get(param.variable_category)
        if not allowed or param.name not in allowed:
            continue
        if not parameter_allows(param, category.name, frequency_name, category):
            continue
        grouped.setdefault(param.variable_category, []).append(param)

    return {name: tuple(options) for name, options in grouped.items()}


def compute_eligibility(
    snapshot: CatalogSnapshot,
    draft: BookingDraft,
    customer_facing: bool = True,
) -> Eligibility:
    category = snapshot.find_category(draft.service)
    dependencies = active_dependencies(draft)
    return Eligibility(
        service_categories=filter_service_categories(snapshot.service_categories, draft.frequency, dependencies),
        frequencies=filter_frequencies(snapshot.frequencies, category),
        extras=filter_extras(snapshot.extras, category, dependencies, customer_facing),
        variable_options=filter_variable_options(snapshot.pricing_parameters, category, draft.frequency, dependencies),
        exclude_parameters=filter_exclude_parameters(snapshot.exclude_parameters, category, dependencies),
    )


def _repair_once(draft: BookingDraft, eligibility: Eligibility) -> BookingDraft:
    changes: dict[str, object] = {}

    if draft.frequency and draft.frequency not in {row.name for row in eligibility.frequencies}:
        changes.update(frequency="", dependencies=None, dependencies_frequency=None)

    option_names = {name: {param.name for param in options} for name, options in eligibility.variable_options.items()}
    variable_values = {
        name: value for name, value in draft.variable_values.items() if value in option_names.get(name, ())
    }
    if variable_values != draft.variable_values:
        changes["variable_values"] = variable_values

    extra_ids = {extra.id for extra in eligibility.extras}
    selected_extras = tuple(extra_id for extra_id in draft.selected_extras if extra_id in extra_ids)
    if selected_extras != draft.selected_extras:
        changes["selected_extras"] = selected_extras
        changes["extra_quantities"] = {
            key: qty for key, qty in draft.extra_quantities.items() if key in selected_extras
        }

    exclude_names = {param.name for param in eligibility.exclude_parameters}
    selected_excludes = tuple(name for name in draft.selected_exclude_params if name in exclude_names)
    if selected_excludes != draft.selected_exclude_params:
        changes["selected_exclude_params"] = selected_excludes
        changes["exclude_quantities"] = {
            key: qty for key, qty in draft.exclude_quantities.items() if key in selected_excludes
        }

    if not changes:
        return draft
    return replace(draft, **changes)


def repair_selections(
    snapshot: CatalogSnapshot,
    draft: BookingDraft,
    customer_facing: bool = True,
) -> BookingDraft:
    """
    Clear every selection that is no longer eligible. Runs until nothing changes,
    since clearing the frequency can narrow the other option sets again.
    """
    current = draft
    for _ in range(_MAX_REPAIR_PASSES):
        repaired = _repair_once(current, compute_eligibility(snapshot, current, customer_facing))
        if repaired == current:
            return current
        current = repaired

    logger.warning("Selection repair did not settle", extra={"service": draft.service, "frequency": draft.frequency})
    return current
