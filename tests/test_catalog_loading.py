"""
Tests for snapshot loading, dependency resolution and the HTTP catalog adapter.
"""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from booking_engine.application.dto.catalog_rows import ExtraRow, convert_rows
from booking_engine.application.exceptions import BackendUnavailableError, BookingSubmissionError
from booking_engine.application.use_cases.booking_session import BookingSessionUseCase
from booking_engine.application.use_cases.load_catalog import LoadCatalogUseCase
from booking_engine.application.use_cases.resolve_dependencies import resolve_from_snapshot
from booking_engine.domain.entities.booking_draft import BookingDraft
from booking_engine.infrastructure.backend.http_booking_store import HttpBookingStore
from booking_engine.infrastructure.backend.http_catalog import HttpCatalog
from booking_engine.infrastructure.backend.http_client import BackendClient
from booking_engine.infrastructure.memory.memory_backend import MemoryBackend


def _client(handler) -> BackendClient:
    return BackendClient(
        base_url="http://backend.test/api",
        api_token="secret",
        timeout=5,
        transport=httpx.MockTransport(handler),
    )


def test_failed_read_degrades_to_empty_list():
    backend = MemoryBackend(failing={"list_extras"})
    snapshot = asyncio.run(LoadCatalogUseCase(backend).execute("home-cleaning"))

    assert snapshot.extras == ()
    assert len(snapshot.service_categories) == 3
    assert len(snapshot.frequencies) == 4


def test_list_industries_for_business(backend):
    industries = asyncio.run(LoadCatalogUseCase(backend).list_industries("demo-business"))
    assert [i.id for i in industries] == ["home-cleaning"]
    assert asyncio.run(LoadCatalogUseCase(backend).list_industries("unknown")) == []


def test_dependencies_resolved_from_snapshot(catalog):
    deps = resolve_from_snapshot(catalog, "Weekly")
    assert deps.service_categories == ("sc-deep",)
    assert deps.extras == ("ex-fridge",)

    assert resolve_from_snapshot(catalog, "Fortnightly") is None
    assert resolve_from_snapshot(catalog, "") is None


class _CountingBackend(MemoryBackend):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.frequency_reads: list[str | None] = []

    async def list_frequencies(self, industry_id, zipcode=None):
        self.frequency_reads.append(zipcode)
        return await super().list_frequencies(industry_id, zipcode)


def test_prepare_reads_frequencies_once_with_zipcode():
    backend = _CountingBackend()
    session = BookingSessionUseCase(backend)
    draft = BookingDraft(service="Deep Cleaning", frequency="Weekly")

    snapshot, prepared = asyncio.run(session.prepare("home-cleaning", draft, zipcode="94110"))

    assert backend.frequency_reads == ["94110"]
    assert prepared.dependencies == resolve_from_snapshot(snapshot, "Weekly")
    assert prepared.dependencies_frequency == "Weekly"


def test_failed_frequency_read_leaves_dependencies_unresolved():
    session = BookingSessionUseCase(MemoryBackend(failing={"list_frequencies"}))
    draft = BookingDraft(service="Deep Cleaning", frequency="Weekly", selected_extras=("ex-fridge",))

    snapshot, prepared = asyncio.run(session.prepare("home-cleaning", draft))

    assert snapshot.frequencies == ()
    assert prepared.dependencies is None
    assert prepared.selected_extras == ()


def test_http_catalog_converts_rows():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "frequencies": [
                    {
                        "id": 7,
                        "name": "Weekly",
                        "occurrence_time": "recurring",
                        "discount": "15",
                        "discountType": "%",
                        "service_categories": "sc-deep, sc-move",
                        "extras": ["ex-1"],
                        "bedroom_variables": "1 Bedroom,2 Bedrooms",
                    },
                    {"name": "No id"},
                ]
            },
        )

    catalog = HttpCatalog(_client(handler), include_all_frequencies=True)
    rows = asyncio.run(catalog.list_frequencies("ind-1", zipcode="94110"))

    assert len(rows) == 1
    row = rows[0]
    assert row.id == "7"
    assert row.discount == 15.0
    assert row.is_recurring
    assert row.service_categories == ("sc-deep", "sc-move")
    assert row.variables == {"Bedroom": ("1 Bedroom", "2 Bedrooms")}

    request = seen[0]
    assert request.url.path == "/api/industry-frequency"
    assert request.url.params["industryId"] == "ind-1"
    assert request.url.params["includeAll"] == "true"
    assert request.url.params["zipcode"] == "94110"
    assert request.headers["Authorization"] == "Bearer secret"


def test_http_catalog_service_category_price_config():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "serviceCategories": [
                    {
                        "id": "sc-1",
                        "name": "Deep Cleaning",
                        "service_category_frequency": True,
                        "service_category_price": {"enabled": True, "price": "250"},
                        "hourly_service": {"enabled": False, "priceCalculationType": "pricingParametersTime"},
                    }
                ]
            },
        )

    [category] = asyncio.run(HttpCatalog(_client(handler)).list_service_categories("ind-1"))
    assert category.service_category_frequency
    assert category.service_category_price.price == "250"
    assert category.hourly_service.price_calculation_type == "pricingParametersTime"


def test_backend_error_status_raises():
    client = _client(lambda request: httpx.Response(503, text="down"))
    with pytest.raises(BackendUnavailableError):
        asyncio.run(HttpCatalog(client).list_extras("ind-1"))


def test_backend_invalid_json_raises():
    client = _client(lambda request: httpx.Response(200, content=b"<html>"))
    with pytest.raises(BackendUnavailableError):
        asyncio.run(client.get_json("/extras"))


def test_convert_rows_skips_invalid_rows():
    rows = [
        {"id": "ex-1", "name": "Fridge", "price": "20", "time": 30, "qtyBased": True, "maximumQuantity": "3"},
        {"id": "", "name": "Broken"},
        "not a row",
    ]
    [extra] = convert_rows(rows, ExtraRow.model_validate, "extras")
    assert extra.price == 20
    assert extra.time == 30
    assert extra.maximum_quantity == 3


def test_booking_store_surfaces_backend_error_fields():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["x-business-id"] == "biz-1"
        assert json.loads(request.content)["amount"] == 10
        return httpx.Response(
            400,
            json={"error": "Invalid provider", "detail": "provider is inactive", "hint": "pick another provider"},
        )

    store = HttpBookingStore(_client(handler))
    with pytest.raises(BookingSubmissionError) as exc:
        asyncio.run(store.create_booking({"amount": 10}, business_id="biz-1"))

    assert exc.value.status_code == 400
    assert exc.value.error == "Invalid provider"
    assert exc.value.detail == "provider is inactive"
    assert exc.value.hint == "pick another provider"


def test_booking_store_unwraps_data_envelope():
    store = HttpBookingStore(_client(lambda request: httpx.Response(201, json={"data": {"id": "bk-9"}})))
    assert asyncio.run(store.create_booking({}, business_id="biz-1")) == {"id": "bk-9"}
