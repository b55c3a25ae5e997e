"""Async client for the LocationIQ geospatial API plus UI-facing async-state hooks.

Example usage:
    from locationiq import ClientConfig, GeocodingRequest, initialize_client

    client = initialize_client(ClientConfig(api_key="pk.your_key"))
    results = await client.geocode(GeocodingRequest(q="Paris"))
"""

from locationiq.core.errors import (
    APIError,
    BadRequestError,
    DecodeError,
    InvalidArgumentError,
    LocationIQError,
    NotInitializedError,
    RateLimitedError,
    UnauthorizedError,
    UnknownAPIError,
)
from locationiq.models.types import (
    AutocompleteRequest,
    AutocompleteResult,
    BalanceResult,
    ClientConfig,
    GeocodingRequest,
    GeocodingResult,
    MatrixRequest,
    MatrixResult,
    NearbyPOIRequest,
    NearbyPOIResult,
    NearestRequest,
    NearestResult,
    ReverseGeocodingRequest,
    ReverseGeocodingResult,
    RoutingLeg,
    RoutingRequest,
    RoutingRoute,
    RoutingStep,
    StaticMapMarker,
    StaticMapRequest,
    TimezoneResult,
)
from locationiq.providers.maps import (
    get_client,
    get_maps_provider,
    initialize_client,
    initialize_client_from_settings,
)
from locationiq.providers.maps.locationiq_adapter import LocationIQClient

__all__ = [
    "APIError",
    "AutocompleteRequest",
    "AutocompleteResult",
    "BadRequestError",
    "BalanceResult",
    "ClientConfig",
    "DecodeError",
    "GeocodingRequest",
    "GeocodingResult",
    "InvalidArgumentError",
    "LocationIQClient",
    "LocationIQError",
    "MatrixRequest",
    "MatrixResult",
    "NearbyPOIRequest",
    "NearbyPOIResult",
    "NearestRequest",
    "NearestResult",
    "NotInitializedError",
    "RateLimitedError",
    "ReverseGeocodingRequest",
    "ReverseGeocodingResult",
    "RoutingLeg",
    "RoutingRequest",
    "RoutingRoute",
    "RoutingStep",
    "StaticMapMarker",
    "StaticMapRequest",
    "TimezoneResult",
    "UnauthorizedError",
    "UnknownAPIError",
    "get_client",
    "get_maps_provider",
    "initialize_client",
    "initialize_client_from_settings",
]
