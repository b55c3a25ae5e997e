from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from locationiq.providers.maps import reset_client
from locationiq.providers.maps.locationiq_adapter import LocationIQClient


@pytest.fixture(autouse=True)
def clear_client_singleton():
    """Every test starts and ends without a process-wide client."""
    reset_client()
    yield
    reset_client()


@pytest.fixture
def client():
    """LocationIQ client whose HTTP transport is an AsyncMock."""
    c = LocationIQClient(api_key="pk.test")
    c._client = AsyncMock(spec=httpx.AsyncClient)
    return c


@pytest.fixture
def respond(client):
    """Make the mocked transport return ``payload`` with a 200 status."""

    def _respond(payload):
        mock_response = MagicMock(spec=httpx.Response)
        mock_response.status_code = 200
        mock_response.json.return_value = payload
        mock_response.raise_for_status = MagicMock()
        client._client.get = AsyncMock(return_value=mock_response)
        return client._client.get

    return _respond
