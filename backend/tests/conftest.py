import pytest
from fastapi.testclient import TestClient

from vacation_calendar.config import Settings
from vacation_calendar.main import app
from vacation_calendar.services.calendar_service import (
    CalendarClient,
    get_calendar_client,
)

BASE_URL = "https://calendarific.test/api/v2"
API_KEY = "test-key-123"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        CALENDARIFIC_API_KEY=API_KEY,
        CALENDARIFIC_API_BASE_URL=BASE_URL,
    )


@pytest.fixture
def calendar_client(settings) -> CalendarClient:
    return CalendarClient(settings)


@pytest.fixture
def client(calendar_client):
    app.dependency_overrides[get_calendar_client] = lambda: calendar_client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
