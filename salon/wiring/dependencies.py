from functools import lru_cache
import logging

from salon.core.config import settings
from salon.application.ports.appointment_repository import AppointmentRepositoryPort
from salon.application.ports.service_catalog import ServiceCatalogPort
from salon.application.use_cases.booking import AppointmentBookingUseCase
from salon.application.use_cases.calendar_view import WeekCalendarUseCase
from salon.application.use_cases.daily_summary import DailySummaryUseCase
from salon.infrastructure.backend.repositories import RestAppointmentRepository, RestServiceCatalog
from salon.infrastructure.backend.rest_client import BackendRestClient
from salon.infrastructure.store.memory_store import MemoryAppointmentRepository, MemoryServiceCatalog
from salon.infrastructure.store.service_catalog_data import SERVICE_CATALOG


def _use_memory_store() -> bool:
    return (
        not settings.BACKEND_URL
        or not settings.BACKEND_API_KEY
        or settings.ENV.lower() in {"dev", "local"}
    )


@lru_cache
def get_backend_client() -> BackendRestClient:
    return BackendRestClient(
        base_url=settings.BACKEND_URL or "",
        api_key=settings.BACKEND_API_KEY or "",
        timeout=settings.BACKEND_TIMEOUT_SECONDS,
    )


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    if _use_memory_store():
        logging.getLogger(__name__).info("Using MemoryServiceCatalog (ENV=%s)", settings.ENV)
        return MemoryServiceCatalog(default_services=SERVICE_CATALOG)
    return RestServiceCatalog(get_backend_client())


@lru_cache
def get_appointment_repository() -> AppointmentRepositoryPort:
    if _use_memory_store():
        logging.getLogger(__name__).info("Using MemoryAppointmentRepository (ENV=%s)", settings.ENV)
        return MemoryAppointmentRepository()
    return RestAppointmentRepository(get_backend_client())


def get_booking_use_case() -> AppointmentBookingUseCase:
    return AppointmentBookingUseCase(
        catalog=get_service_catalog(),
        repository=get_appointment_repository(),
    )


def get_calendar_use_case() -> WeekCalendarUseCase:
    return WeekCalendarUseCase(
        repository=get_appointment_repository(),
        locale=settings.CALENDAR_LOCALE,
        utc_offset_label=settings.UTC_OFFSET_LABEL,
    )


def get_summary_use_case() -> DailySummaryUseCase:
    return DailySummaryUseCase(repository=get_appointment_repository())
