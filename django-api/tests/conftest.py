"""Pytest configuration and shared fixtures."""

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from agenda.services.event_service import EventService
from agenda.stores.json_store import JsonFileEventStore


@pytest.fixture
def events_file(tmp_path):
    return tmp_path / "data" / "events.json"


@pytest.fixture
def store(events_file) -> JsonFileEventStore:
    return JsonFileEventStore(events_file)


@pytest.fixture
def service(store) -> EventService:
    return EventService(store)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def app_store(store):
    """Route API requests to the per-test store."""
    config = apps.get_app_config("agenda")
    config.set_store(store)
    yield store
    config.set_store(None)
