"""Per-endpoint hooks exposing ``{<data>, loading, error, <action>}`` to UI code.

Each hook can be bound to default arguments at construction and called with
per-call overrides. Overrides win; when neither supplies a required value the
action returns without touching state.

Hooks use the client passed at construction, or the process-wide client
from ``get_client()``. The client is resolved when the action starts, so a
later ``initialize_client`` does not affect calls already in flight.
Invalid arguments that fail request validation are stored as the hook error.
"""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from locationiq.hooks.async_state import AsyncHook
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
    Profile,
    ReverseGeocodingRequest,
    ReverseGeocodingResult,
    RoutingRequest,
    RoutingRoute,
    TimezoneResult,
)
from locationiq.providers.geolocation.interface import GeolocationProvider
from locationiq.providers.maps import get_client
from locationiq.providers.maps.interface import MapsProvider

T = TypeVar("T")

NEARBY_POI_LIMIT = 50
DIRECTIONS_ANNOTATIONS = ["duration", "distance"]


class _ClientHook(AsyncHook[T]):
    def __init__(self, client: MapsProvider | None = None, *, latest_only: bool = False):
        super().__init__(latest_only=latest_only)
        self._client = client

    def _resolve_client(self) -> MapsProvider:
        return self._client if self._client is not None else get_client()

    async def _run_with_client(self, call: Callable[[MapsProvider], Awaitable[T]]) -> None:
        await self._run(lambda: call(self._resolve_client()))


def _pick(override: T | None, default: T | None) -> T | None:
    return override if override is not None else default


class GeocodingHook(_ClientHook[list[GeocodingResult]]):
    def __init__(
        self,
        query: str = "",
        client: MapsProvider | None = None,
        *,
        latest_only: bool = False,
    ):
        super().__init__(client, latest_only=latest_only)
        self._query = query

    @property
    def results(self) -> list[GeocodingResult] | None:
        return self.data

    async def geocode(self, query: str | None = None) -> None:
        q = query or self._query
        if not q.strip():
            return
        await self._run_with_client(lambda client: client.geocode(GeocodingRequest(q=q)))

    execute = geocode


class ReverseGeocodingHook(_ClientHook[ReverseGeocodingResult]):
    def __init__(
        self,
        lat: float | None = None,
        lon: float | None = None,
        client: MapsProvider | None = None,
        *,
        latest_only: bool = False,
    ):
        super().__init__(client, latest_only=latest_only)
        self._lat = lat
        self._lon = lon

    @property
    def result(self) -> ReverseGeocodingResult | None:
        return self.data

    async def reverse_geocode(self, lat: float | None = None, lon: float | None = None) -> None:
        lat, lon = _pick(lat, self._lat), _pick(lon, self._lon)
        if lat is None or lon is None:
            return
        await self._run_with_client(
            lambda client: client.reverse_geocode(ReverseGeocodingRequest(lat=lat, lon=lon))
        )

    execute = reverse_geocode

    async def locate(self, provider: GeolocationProvider) -> None:
        """Reverse-geocode the provider's current position.

        A failure to obtain the position is stored as the hook's error.
        """

        async def call(client: MapsProvider) -> ReverseGeocodingResult:
            lat, lon = await provider.current_position()
            return await client.reverse_geocode(ReverseGeocodingRequest(lat=lat, lon=lon))

        await self._run_with_client(call)


class AutocompleteHook(_ClientHook[list[AutocompleteResult]]):
    def __init__(
        self,
        query: str = "",
        client: MapsProvider | None = None,
        *,
        latest_only: bool = False,
    ):
        super().__init__(client, latest_only=latest_only)
        self._query = query

    @property
    def results(self) -> list[AutocompleteResult] | None:
        return self.data

    async def autocomplete(self, query: str | None = None) -> None:
        q = query or self._query
        if not q.strip():
            return
        await self._run_with_client(lambda client: client.autocomplete(AutocompleteRequest(q=q)))

    execute = autocomplete


class DirectionsHook(_ClientHook[list[RoutingRoute]]):
    def __init__(
        self,
        coordinates: list[Coordinate] | None = None,
        client: MapsProvider | None = None,
        *,
        latest_only: bool = False,
    ):
        super().__init__(client, latest_only=latest_only)
        self._coordinates = coordinates

    @property
    def routes(self) -> list[RoutingRoute] | None:
        return self.data

    async def get_directions(
        self,
        coordinates: list[Coordinate] | None = None,
        profile: Profile = "car",
    ) -> None:
        coords = coordinates or self._coordinates
        if not coords or len(coords) < 2:
            return
        await self._run_with_client(
            lambda client: client.get_directions(
                RoutingRequest(
                    coordinates=coords,
                    profile=profile,
                    geometries="geojson",
                    steps=True,
                    annotations=DIRECTIONS_ANNOTATIONS,
                )
            )
        )

    execute = get_directions


class MatrixHook(_ClientHook[MatrixResult]):
    def __init__(
        self,
        coordinates: list[Coordinate] | None = None,
        client: MapsProvider | None = None,
        *,
        latest_only: bool = False,
    ):
        super().__init__(client, latest_only=latest_only)
        self._coordinates = coordinates

    @property
    def matrix(self) -> MatrixResult | None:
        return self.data

    async def get_matrix(
        self,
        coordinates: list[Coordinate] | None = None,
        profile: Profile = "car",
    ) -> None:
        coords = coordinates or self._coordinates
        if not coords or len(coords) < 2:
            return
        await self._run_with_client(
            lambda client: client.get_matrix(MatrixRequest(coordinates=coords, profile=profile))
        )

    execute = get_matrix


class TimezoneHook(_ClientHook[TimezoneResult]):
    def __init__(
        self,
        lat: float | None = None,
        lon: float | None = None,
        client: MapsProvider | None = None,
        *,
        latest_only: bool = False,
    ):
        super().__init__(client, latest_only=latest_only)
        self._lat = lat
        self._lon = lon

    @property
    def timezone(self) -> TimezoneResult | None:
        return self.data

    async def get_timezone(self, lat: float | None = None, lon: float | None = None) -> None:
        lat, lon = _pick(lat, self._lat), _pick(lon, self._lon)
        if lat is None or lon is None:
            return
        await self._run_with_client(lambda client: client.get_timezone(lat, lon))

    execute = get_timezone


class NearbyPOIHook(_ClientHook[list[NearbyPOIResult]]):
    def __init__(
        self,
        lat: float | None = None,
        lon: float | None = None,
        client: MapsProvider | None = None,
        *,
        latest_only: bool = False,
    ):
        super().__init__(client, latest_only=latest_only)
        self._lat = lat
        self._lon = lon

    @property
    def pois(self) -> list[NearbyPOIResult] | None:
        return self.data

    async def get_nearby(
        self,
        lat: float | None = None,
        lon: float | None = None,
        tag: str | None = None,
    ) -> None:
        lat, lon = _pick(lat, self._lat), _pick(lon, self._lon)
        if lat is None or lon is None:
            return
        await self._run_with_client(
            lambda client: client.get_nearby_poi(
                NearbyPOIRequest(lat=lat, lon=lon, tag=tag, limit=NEARBY_POI_LIMIT)
            )
        )

    execute = get_nearby


class BalanceHook(_ClientHook[BalanceResult]):
    @property
    def balance(self) -> BalanceResult | None:
        return self.data

    async def get_balance(self) -> None:
        await self._run_with_client(lambda client: client.get_balance())

    execute = get_balance
