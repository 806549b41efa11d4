"""
Tests for the HTTP API, backed by the in-memory store.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from salon.application.use_cases.booking import AppointmentBookingUseCase
from salon.application.use_cases.calendar_view import WeekCalendarUseCase
from salon.application.use_cases.daily_summary import DailySummaryUseCase
from salon.core.config import settings
from salon.main import app
from salon.wiring.dependencies import (
    get_appointment_repository,
    get_booking_use_case,
    get_calendar_use_case,
    get_service_catalog,
    get_summary_use_case,
)

HEADERS = {"X-User-Id": "owner-1", "Authorization": "Bearer token-1"}

BOOKING = {
    "client_id": "client-1",
    "employee_id": "employee-1",
    "service_ids": ["A", "B"],
    "appointment_date": "2025-08-26",
    "start_time": "14:00",
}


@pytest.fixture
def client(catalog, repository):
    app.dependency_overrides[get_booking_use_case] = lambda: AppointmentBookingUseCase(catalog, repository)
    app.dependency_overrides[get_calendar_use_case] = lambda: WeekCalendarUseCase(repository, locale="pt-BR")
    app.dependency_overrides[get_summary_use_case] = lambda: DailySummaryUseCase(repository)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_ok(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_missing_user_header_is_unauthorized(client):
    response = client.post("/api/v1/appointments/quote", json={"service_ids": ["A"]})
    assert response.status_code == 401


def test_quote(client):
    response = client.post(
        "/api/v1/appointments/quote",
        json={"service_ids": ["A", "B"], "start_time": "14:00"},
        headers=HEADERS,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["end_time"] == "15:15"
    assert body["total_duration_minutes"] == 75
    assert float(body["total_price"]) == 130.0


def test_quote_with_bad_start_time(client):
    response = client.post(
        "/api/v1/appointments/quote",
        json={"service_ids": ["A"], "start_time": "25:00"},
        headers=HEADERS,
    )
    assert response.status_code == 400


def test_book_complete_and_summarize(client):
    created = client.post("/api/v1/appointments", json=BOOKING, headers=HEADERS)
    assert created.status_code == 201
    appointment = created.json()
    assert appointment["end_time"] == "15:15"
    assert appointment["status"] == "scheduled"
    assert appointment["service_ids"] == ["A", "B"]

    completed = client.post(f"/api/v1/appointments/{appointment['id']}/complete", headers=HEADERS)
    assert completed.status_code == 200
    assert completed.json()["status"] == "completed"

    again = client.post(f"/api/v1/appointments/{appointment['id']}/cancel", headers=HEADERS)
    assert again.status_code == 400

    summary = client.get("/api/v1/appointments/summary", params={"day": "2025-08-26"}, headers=HEADERS)
    assert summary.status_code == 200
    body = summary.json()
    assert body["total"] == 1
    assert body["completed"] == 1
    assert body["pending"] == 0
    assert float(body["expected_revenue"]) == 130.0
    assert body["upcoming"] == []


def test_book_rejects_midnight_crossing(client):
    response = client.post(
        "/api/v1/appointments",
        json={**BOOKING, "start_time": "23:30"},
        headers=HEADERS,
    )
    assert response.status_code == 400


def test_book_requires_services(client):
    response = client.post("/api/v1/appointments", json={**BOOKING, "service_ids": []}, headers=HEADERS)
    assert response.status_code == 422


def test_update_and_delete(client):
    appointment = client.post("/api/v1/appointments", json=BOOKING, headers=HEADERS).json()

    updated = client.put(
        f"/api/v1/appointments/{appointment['id']}",
        json={**BOOKING, "service_ids": ["A"], "start_time": "09:00"},
        headers=HEADERS,
    )
    assert updated.status_code == 200
    assert updated.json()["end_time"] == "09:30"

    assert client.delete(f"/api/v1/appointments/{appointment['id']}", headers=HEADERS).status_code == 204
    assert client.delete(f"/api/v1/appointments/{appointment['id']}", headers=HEADERS).status_code == 404
    assert client.put("/api/v1/appointments/missing", json=BOOKING, headers=HEADERS).status_code == 404


def test_week_calendar(client):
    client.post("/api/v1/appointments", json={**BOOKING, "start_time": "09:00"}, headers=HEADERS)

    response = client.get("/api/v1/calendar/week", params={"date": "2025-08-26"}, headers=HEADERS)
    assert response.status_code == 200
    body = response.json()
    assert body["week"] == [
        "2025-08-24",
        "2025-08-25",
        "2025-08-26",
        "2025-08-27",
        "2025-08-28",
        "2025-08-29",
        "2025-08-30",
    ]
    assert body["title"] == "agosto de 2025"
    assert len(body["slots"]) == 16
    cell = body["rows"][body["slots"].index("09:00")][2]
    assert cell["date"] == "2025-08-26"
    assert cell["occupants"][0]["service_name"] == "Corte, Escova"

    next_week = client.get(
        "/api/v1/calendar/week",
        params={"date": "2025-08-26", "offset": 1, "compact": True},
        headers=HEADERS,
    ).json()
    assert next_week["week"][0] == "2025-08-31"
    assert len(next_week["slots"]) == 7


@pytest.fixture
def wired_client(monkeypatch):
    monkeypatch.setattr(settings, "ENV", "dev")
    get_service_catalog.cache_clear()
    get_appointment_repository.cache_clear()
    yield TestClient(app)
    get_service_catalog.cache_clear()
    get_appointment_repository.cache_clear()


def test_default_wiring_books_from_bundled_catalog(wired_client):
    quote = wired_client.post(
        "/api/v1/appointments/quote",
        json={"service_ids": ["corte", "escova"], "start_time": "14:00"},
        headers=HEADERS,
    )
    assert quote.status_code == 200
    assert quote.json()["total_duration_minutes"] == 75

    created = wired_client.post(
        "/api/v1/appointments",
        json={**BOOKING, "service_ids": ["corte"]},
        headers=HEADERS,
    )
    assert created.status_code == 201
    assert created.json()["end_time"] == "14:30"
    assert float(created.json()["price"]) == 50.0
