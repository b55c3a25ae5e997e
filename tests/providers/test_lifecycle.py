from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from pydantic import ValidationError

from locationiq.core.errors import NotInitializedError
from locationiq.models.types import ClientConfig, GeocodingRequest
from locationiq.providers.maps import (
    get_client,
    get_maps_provider,
    initialize_client,
    initialize_client_from_settings,
    reset_client,
)
from locationiq.providers.maps.interface import MapsProvider
from locationiq.providers.maps.locationiq_adapter import LocationIQClient


class TestClientSingleton:
    def test_get_client_before_initialize_fails(self):
        with pytest.raises(NotInitializedError, match="not initialized"):
            get_client()

    def test_initialize_then_get_returns_same_instance(self):
        created = initialize_client(ClientConfig(api_key="pk.test"))
        assert get_client() is created
        assert get_client().api_key == "pk.test"

    def test_reinitialize_replaces_instance(self):
        first = initialize_client(ClientConfig(api_key="pk.first"))
        second = initialize_client(ClientConfig(api_key="pk.second", base_url="http://localhost/v1"))
        assert get_client() is second
        assert second is not first
        assert first.api_key == "pk.first"
        assert second.base_url == "http://localhost/v1"

    async def test_reinitialize_leaves_previous_pool_open_for_caller(self):
        first = initialize_client(ClientConfig(api_key="pk.first"))
        second = initialize_client(ClientConfig(api_key="pk.second"))

        assert first._client.is_closed is False
        await first.close()
        assert first._client.is_closed is True
        assert second._client.is_closed is False
        await second.close()

    def test_reset_returns_forgotten_client(self):
        created = initialize_client(ClientConfig(api_key="pk.test"))

        assert reset_client() is created
        assert reset_client() is None
        with pytest.raises(NotInitializedError):
            get_client()

    async def test_initialized_client_sends_configured_key(self):
        initialize_client(ClientConfig(api_key="pk.test"))
        c = get_client()
        mock_response = MagicMock(spec=httpx.Response)
        mock_response.status_code = 200
        mock_response.json.return_value = []
        mock_response.raise_for_status = MagicMock()
        c._client = AsyncMock(spec=httpx.AsyncClient)
        c._client.get = AsyncMock(return_value=mock_response)

        await c.geocode(GeocodingRequest(q="Paris"))

        assert c._client.get.call_args.kwargs["params"]["key"] == "pk.test"

    def test_initialize_from_settings(self):
        with patch("locationiq.providers.maps.settings") as mock_settings:
            mock_settings.locationiq_api_key = "pk.env"
            mock_settings.locationiq_base_url = "https://eu1.locationiq.com/v1"
            created = initialize_client_from_settings()
        assert get_client() is created
        assert created.base_url == "https://eu1.locationiq.com/v1"


class TestClientConfig:
    def test_empty_api_key_rejected(self):
        with pytest.raises(ValidationError):
            ClientConfig(api_key="")

    def test_base_url_default(self):
        assert ClientConfig(api_key="pk.test").base_url == "https://api.locationiq.com/v1"

    def test_base_url_trailing_slash_stripped(self):
        config = ClientConfig(api_key="pk.test", base_url="http://localhost:8080/v1/")
        assert config.base_url == "http://localhost:8080/v1"


class TestMapsProviderFactory:
    def test_protocol_exposes_every_endpoint(self):
        for name in (
            "geocode",
            "reverse_geocode",
            "autocomplete",
            "get_directions",
            "get_matrix",
            "get_nearest",
            "get_timezone",
            "get_nearby_poi",
            "get_static_map_url",
            "get_balance",
        ):
            assert hasattr(MapsProvider, name)

    def test_factory_returns_locationiq_client(self):
        with patch("locationiq.providers.maps.settings") as mock:
            mock.maps_provider = "locationiq"
            mock.locationiq_api_key = "pk.test"
            mock.locationiq_base_url = "https://api.locationiq.com/v1"
            provider = get_maps_provider()
        assert isinstance(provider, LocationIQClient)

    def test_factory_unknown_provider_raises(self):
        with patch("locationiq.providers.maps.settings") as mock:
            mock.maps_provider = "unknown"
            with pytest.raises(ValueError, match="Unknown maps provider"):
                get_maps_provider()
