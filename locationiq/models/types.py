from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

from locationiq.core.config import DEFAULT_BASE_URL

Profile = Literal["car", "bike", "foot"]
Geometries = Literal["geojson", "polyline", "polyline6"]
ImageFormat = Literal["png", "jpg", "gif"]

# (first, second) pair; routing endpoints expect (lon, lat), static maps (lat, lon)
Coordinate = tuple[float, float]


class ClientConfig(BaseModel):
    api_key: str
    base_url: str = DEFAULT_BASE_URL

    @field_validator("api_key")
    @classmethod
    def api_key_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("API key is required")
        return v

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class BoundingBox(BaseModel):
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float


# --- Request types ---


class _Request(BaseModel):
    model_config = ConfigDict(extra="forbid")


class GeocodingRequest(_Request):
    q: str
    countrycodes: str | None = None
    limit: int | None = None
    addressdetails: int | None = None
    viewbox: str | None = None
    bounded: int | None = None
    accept_language: str | None = None
    namedetails: int | None = None
    extratags: int | None = None


class ReverseGeocodingRequest(_Request):
    lat: float
    lon: float
    zoom: int | None = None
    addressdetails: int | None = None
    accept_language: str | None = None
    namedetails: int | None = None
    extratags: int | None = None


class AutocompleteRequest(_Request):
    q: str
    countrycodes: str | None = None
    limit: int | None = None
    dedupe: int | None = None
    viewbox: str | None = None
    bounded: int | None = None
    accept_language: str | None = None
    tag: str | None = None


class RoutingRequest(_Request):
    coordinates: list[Coordinate]
    profile: Profile | None = None
    alternatives: bool | None = None
    steps: bool | None = None
    annotations: list[str] | None = None
    geometries: Geometries | None = None
    continue_straight: bool | None = None
    waypoint_names: list[str] | None = None
    waypoints: list[int] | None = None
    approaches: list[str] | None = None
    exclude: list[str] | None = None


class MatrixRequest(_Request):
    coordinates: list[Coordinate]
    profile: Profile | None = None
    sources: list[int] | None = None
    destinations: list[int] | None = None
    annotations: list[str] | None = None
    exclude: list[str] | None = None


class NearestRequest(_Request):
    coordinates: list[Coordinate]
    profile: Profile | None = None
    number: int | None = None
    exclude: list[str] | None = None


class NearbyPOIRequest(_Request):
    lat: float
    lon: float
    tag: str | None = None
    radius: int | None = None
    limit: int | None = None


class StaticMapMarker(_Request):
    lat: float
    lon: float
    size: str | None = None
    color: str | None = None
    icon: str | None = None


class StaticMapRequest(_Request):
    center: Coordinate | None = None
    zoom: int | None = None
    size: tuple[int, int] | None = None
    format: ImageFormat | None = None
    style: str | None = None
    markers: list[StaticMapMarker] | None = None


# --- Result types ---


class _Result(BaseModel):
    # Keys the API adds beyond the declared fields are kept as-is
    model_config = ConfigDict(extra="allow")


class GeocodingResult(_Result):
    lat: str
    lon: str
    place_id: str | int | None = None
    licence: str | None = None
    osm_id: str | int | None = None
    osm_type: str | None = None
    boundingbox: list[str] | None = None
    display_name: str | None = None
    name: str | None = None
    type: str | None = None
    importance: float | None = None
    address: dict[str, Any] | str | None = None


class ReverseGeocodingResult(GeocodingResult):
    place_rank: int | None = None


class AutocompleteResult(_Result):
    lat: str
    lon: str
    place_id: str | int | None = None
    osm_id: str | int | None = None
    osm_type: str | None = None
    boundingbox: list[str] | None = None
    display_name: str | None = None
    display_place: str | None = None
    display_address: str | None = None
    importance: float | None = None
    address: dict[str, Any] | str | None = None


class Maneuver(_Result):
    location: Coordinate | None = None
    bearing_before: float | None = None
    bearing_after: float | None = None
    type: str | None = None


class RoutingStep(_Result):
    distance: float
    duration: float
    weight: float | None = None
    name: str | None = None
    instruction: str | None = None
    way_points: list[int] | None = None
    geometry: Any = None
    maneuver: Maneuver | None = None


class RoutingLeg(_Result):
    distance: float
    duration: float
    weight: float | None = None
    steps: list[RoutingStep] = []
    summary: str | None = None


class RoutingRoute(_Result):
    distance: float
    duration: float
    weight: float | None = None
    weight_name: str | None = None
    # GeoJSON object, or an encoded polyline string
    geometry: Any = None
    legs: list[RoutingLeg] = []
    summary: str | None = None


class MatrixEndpoint(_Result):
    name: str | None = None
    hint: str | None = None
    location: Coordinate | None = None


class MatrixResult(_Result):
    code: str
    durations: list[list[float | None]] | None = None
    distances: list[list[float | None]] | None = None
    sources: list[MatrixEndpoint] | None = None
    destinations: list[MatrixEndpoint] | None = None


class Waypoint(_Result):
    location: Coordinate
    name: str | None = None
    hint: str | None = None
    distance: float | None = None


class NearestResult(_Result):
    code: str
    waypoints: list[Waypoint]
    routes: list[RoutingRoute] | None = None


class TimezoneInfo(_Result):
    name: str
    now_in_dst: int | None = None
    offset_sec: int | None = None
    short_name: str | None = None


class TimezoneResult(_Result):
    timezone: TimezoneInfo | str
    abbreviation: str | None = None
    utc_offset: str | None = None
    is_dst: bool | None = None
    current_time: str | None = None


class NearbyPOIResult(_Result):
    lat: str
    lon: str
    place_id: str | int | None = None
    name: str | None = None
    display_name: str | None = None
    place_rank: int | None = None
    boundingbox: list[str] | None = None
    osm_type: str | None = None
    osm_id: str | int | None = None
    type: str | None = None
    importance: float | None = None
    icon: str | None = None
    distance: float | None = None
    address: dict[str, Any] | None = None


class BalanceResult(_Result):
    balance: float | dict[str, int]
    currency: str | None = None
    status: str | None = None
