# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from shippo_adapter.core.config import Settings, get_settings
from shippo_adapter.core.logging_config import LicenseNotice
from shippo_adapter.integrations.host import InMemoryStaticData, ItemParameters, ListOutputChannel
from shippo_adapter.main import create_app
from shippo_adapter.services.shippo.client import ShippoClient


@pytest.fixture(scope="session")
def settings():
    """Provide test settings"""
    return Settings(
        SHIPPO_API_TOKEN="shippo_test_token",
        SHIPPO_API_BASE_URL="https://api.goshippo.com",
        SHIPPO_WEBHOOK_URL="https://example.com/webhooks/shippo",
        SHIPPO_WEBHOOK_EVENT="track_updated",
        SHIPPO_LICENSE_NOTICE=False,
    )


@pytest.fixture
def shippo_client(settings):
    """Client built from test settings; tests patch _make_request or the transport"""
    return ShippoClient(settings=settings)


@pytest.fixture
def silent_notice():
    return LicenseNotice(enabled=False)


@pytest.fixture
def make_params():
    """Build an ItemParameters from node-level values and per-item overrides"""
    def _make(parameters=None, items=None):
        return ItemParameters(parameters or {}, items)
    return _make


@pytest.fixture
def output_channel():
    return ListOutputChannel()


@pytest.fixture
def static_data():
    return InMemoryStaticData()


@pytest.fixture
def test_client(settings, output_channel, static_data):
    """Provide a test client with overridden settings and in-memory host collaborators"""
    app = create_app(output_channel=output_channel, static_data=static_data)
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as client:
        yield client


@pytest.fixture
def mock_make_request(mocker):
    """Patch the single-request executor for every ShippoClient"""
    return mocker.patch.object(ShippoClient, "_make_request", return_value={})
