from typing import Protocol

from locationiq.models.types import (
    AutocompleteRequest,
    AutocompleteResult,
    BalanceResult,
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


class MapsProvider(Protocol):
    async def geocode(self, request: GeocodingRequest) -> list[GeocodingResult]: ...

    async def reverse_geocode(self, request: ReverseGeocodingRequest) -> ReverseGeocodingResult: ...

    async def autocomplete(self, request: AutocompleteRequest) -> list[AutocompleteResult]: ...

    async def get_directions(self, request: RoutingRequest) -> list[RoutingRoute]: ...

    async def get_matrix(self, request: MatrixRequest) -> MatrixResult: ...

    async def get_nearest(self, request: NearestRequest) -> NearestResult: ...

    async def get_timezone(self, lat: float, lon: float) -> TimezoneResult: ...

    async def get_nearby_poi(self, request: NearbyPOIRequest) -> list[NearbyPOIResult]: ...

    def get_static_map_url(self, request: StaticMapRequest) -> str: ...

    async def get_balance(self) -> BalanceResult: ...
