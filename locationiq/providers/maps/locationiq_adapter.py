from functools import lru_cache
from typing import Any, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import TypeAdapter, ValidationError

from locationiq.core.config import DEFAULT_BASE_URL
from locationiq.core.errors import (
    APIError,
    BadRequestError,
    DecodeError,
    InvalidArgumentError,
    RateLimitedError,
    UnauthorizedError,
    UnknownAPIError,
)
from locationiq.models.types import (
    AutocompleteRequest,
    AutocompleteResult,
    BalanceResult,
    Coordinate,
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
    RoutingRequest,
    RoutingRoute,
    StaticMapRequest,
    TimezoneResult,
)
from locationiq.providers.maps import params as p

T = TypeVar("T")

REQUEST_TIMEOUT = 10.0
RESPONSE_FORMAT = "json"
DEFAULT_PROFILE = "car"
MIN_AUTOCOMPLETE_LENGTH = 3
MIN_ROUTING_COORDINATES = 2


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def _decode(result_type: type[T] | Any, data: Any, name: str) -> T:
    try:
        return _adapter(result_type).validate_python(data)
    except ValidationError as e:
        raise DecodeError(name, cause=e) from e


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _classify(error: httpx.HTTPStatusError) -> APIError:
    status = error.response.status_code
    match status:
        case 401:
            return UnauthorizedError(cause=error)
        case 429:
            return RateLimitedError(cause=error)
        case 400:
            return BadRequestError(_response_body(error.response), cause=error)
        case _:
            return UnknownAPIError(
                f"Request failed with status {status}", status_code=status, cause=error
            )


def _require_coordinates(coordinates: list[Coordinate]) -> None:
    if len(coordinates) < MIN_ROUTING_COORDINATES:
        raise InvalidArgumentError(
            f"At least {MIN_ROUTING_COORDINATES} coordinates are required, got {len(coordinates)}"
        )


class LocationIQClient:
    """Async client for the LocationIQ REST API.

    The API key and base URL are fixed at construction. Each endpoint method
    issues at most one GET request, decodes the body into the endpoint's
    result type and raises a classified ``APIError`` on failure. Nothing is
    retried or cached.
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL):
        if not api_key or not api_key.strip():
            raise InvalidArgumentError("API key is required")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(timeout=REQUEST_TIMEOUT)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    async def geocode(self, request: GeocodingRequest) -> list[GeocodingResult]:
        """Forward geocoding: free-form address to matching places."""
        if not request.q.strip():
            raise InvalidArgumentError("Query must not be empty")
        data = await self._get("/search", p.geocoding_params(request))
        return _decode(list[GeocodingResult], data, "GeocodingResult")

    async def reverse_geocode(self, request: ReverseGeocodingRequest) -> ReverseGeocodingResult:
        data = await self._get("/reverse", p.reverse_geocoding_params(request))
        return _decode(ReverseGeocodingResult, data, "ReverseGeocodingResult")

    async def autocomplete(self, request: AutocompleteRequest) -> list[AutocompleteResult]:
        """Address suggestions. Queries shorter than three characters return ``[]`` offline."""
        if len(request.q.strip()) < MIN_AUTOCOMPLETE_LENGTH:
            return []
        data = await self._get("/autocomplete", p.autocomplete_params(request))
        return _decode(list[AutocompleteResult], data, "AutocompleteResult")

    async def get_directions(self, request: RoutingRequest) -> list[RoutingRoute]:
        _require_coordinates(request.coordinates)
        data = await self._get(
            self._routing_path("directions", request.profile, request.coordinates),
            p.routing_params(request),
        )
        if not isinstance(data, dict):
            raise DecodeError("RoutingRoute")
        return _decode(list[RoutingRoute], data.get("routes") or [], "RoutingRoute")

    async def get_matrix(self, request: MatrixRequest) -> MatrixResult:
        _require_coordinates(request.coordinates)
        data = await self._get(
            self._routing_path("matrix", request.profile, request.coordinates),
            p.matrix_params(request),
        )
        return _decode(MatrixResult, data, "MatrixResult")

    async def get_nearest(self, request: NearestRequest) -> NearestResult:
        _require_coordinates(request.coordinates)
        data = await self._get(
            self._routing_path("nearest", request.profile, request.coordinates),
            p.nearest_params(request),
        )
        return _decode(NearestResult, data, "NearestResult")

    async def get_timezone(self, lat: float, lon: float) -> TimezoneResult:
        data = await self._get("/timezone", p.timezone_params(lat, lon))
        return _decode(TimezoneResult, data, "TimezoneResult")

    async def get_nearby_poi(self, request: NearbyPOIRequest) -> list[NearbyPOIResult]:
        data = await self._get("/nearby", p.nearby_poi_params(request))
        return _decode(list[NearbyPOIResult], data, "NearbyPOIResult")

    def get_static_map_url(self, request: StaticMapRequest) -> str:
        """Build a ready-to-use static map image URL. Performs no I/O."""
        query = urlencode({"key": self._api_key, **p.static_map_params(request)})
        return f"{self._base_url}/staticmap?{query}"

    async def get_balance(self) -> BalanceResult:
        data = await self._get("/balance", {})
        return _decode(BalanceResult, data, "BalanceResult")

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "LocationIQClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _routing_path(
        self, service: str, profile: str | None, coordinates: list[Coordinate]
    ) -> str:
        return f"/{service}/{profile or DEFAULT_PROFILE}/{p.encode_coordinates(coordinates)}"

    async def _get(self, path: str, params: p.Params) -> Any:
        query = {"key": self._api_key, "format": RESPONSE_FORMAT, **params}
        try:
            response = await self._client.get(f"{self._base_url}{path}", params=query)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise _classify(e) from e
        except httpx.HTTPError as e:
            raise UnknownAPIError(f"Request failed: {e}", cause=e) from e
        except ValueError as e:
            raise UnknownAPIError(f"Invalid JSON response: {e}", cause=e) from e
