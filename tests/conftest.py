import pytest

from pdevents.config import get_settings
from pdevents.models.event import Event, Payload


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    # Keep a local .env out of the settings under test
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PAGERDUTY_EVENTS_URL", raising=False)
    monkeypatch.delenv("PAGERDUTY_TIMEOUT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def trigger_event() -> Event:
    return Event.trigger(
        "R",
        Payload(summary="Disk full on db-1", source="db-1", severity="critical"),
    )
