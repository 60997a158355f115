from functools import lru_cache
import logging

from booking_engine.core.config import settings
from booking_engine.application.ports.availability import AvailabilityPort
from booking_engine.application.ports.booking_store import BookingStorePort
from booking_engine.application.ports.catalog import CatalogPort
from booking_engine.application.use_cases.availability import ProviderAvailabilityUseCase
from booking_engine.application.use_cases.booking_session import BookingSessionUseCase
from booking_engine.application.use_cases.load_catalog import LoadCatalogUseCase
from booking_engine.infrastructure.backend.http_availability import HttpAvailability
from booking_engine.infrastructure.backend.http_booking_store import HttpBookingStore
from booking_engine.infrastructure.backend.http_catalog import HttpCatalog
from booking_engine.infrastructure.backend.http_client import BackendClient
from booking_engine.infrastructure.memory.memory_backend import MemoryBackend


def _use_memory_backend() -> bool:
    return not settings.BACKEND_API_TOKEN and settings.ENV.lower() in {"dev", "local"}


@lru_cache
def get_memory_backend() -> MemoryBackend:
    logging.getLogger(__name__).info("Using MemoryBackend (no BACKEND_API_TOKEN, ENV=dev/local)")
    return MemoryBackend()


@lru_cache
def get_backend_client() -> BackendClient:
    return BackendClient()


def get_catalog() -> CatalogPort:
    if _use_memory_backend():
        return get_memory_backend()
    return HttpCatalog(client=get_backend_client())


def get_availability() -> AvailabilityPort:
    if _use_memory_backend():
        return get_memory_backend()
    return HttpAvailability(client=get_backend_client())


def get_booking_store() -> BookingStorePort:
    if _use_memory_backend():
        return get_memory_backend()
    return HttpBookingStore(client=get_backend_client())


def get_booking_session_use_case() -> BookingSessionUseCase:
    return BookingSessionUseCase(catalog=get_catalog())


def get_load_catalog_use_case() -> LoadCatalogUseCase:
    return LoadCatalogUseCase(catalog=get_catalog())


def get_availability_use_case() -> ProviderAvailabilityUseCase:
    return ProviderAvailabilityUseCase(
        availability=get_availability(),
        max_concurrency=settings.MAX_PROVIDER_FANOUT,
    )
