"""Query-string serializers, one per endpoint.

Each serializer maps a typed request to an ordered ``dict[str, str]``.
Fields left as ``None`` are omitted. The API key and ``format`` are not added
here; the client injects them for every fetched endpoint.
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from locationiq.models.types import (
    AutocompleteRequest,
    Coordinate,
    GeocodingRequest,
    MatrixRequest,
    NearbyPOIRequest,
    NearestRequest,
    ReverseGeocodingRequest,
    RoutingRequest,
    StaticMapMarker,
    StaticMapRequest,
)

COORDINATE_SEPARATOR = ","
COORDINATE_PAIR_SEPARATOR = ";"
ANNOTATION_SEPARATOR = ","
EXCLUDE_SEPARATOR = ","
WAYPOINT_SEPARATOR = ";"
WAYPOINT_NAME_SEPARATOR = ";"
APPROACH_SEPARATOR = ";"
SOURCE_SEPARATOR = ";"
DESTINATION_SEPARATOR = ";"
MARKER_FIELD_SEPARATOR = "|"
MARKER_SEPARATOR = "|"
SIZE_SEPARATOR = "x"

DEFAULT_GEOMETRIES = "geojson"

Params = dict[str, str]


def _to_str(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        # Plain decimal notation; str() switches to exponents below 1e-4
        return format(Decimal(repr(value)), "f")
    return str(value)


def _join(values: Iterable[object], separator: str) -> str:
    return separator.join(_to_str(v) for v in values)


def _put(params: Params, name: str, value: object) -> None:
    if value is not None:
        params[name] = _to_str(value)


def _put_list(params: Params, name: str, values: Sequence[object] | None, separator: str) -> None:
    # Empty lists are treated as absent
    if values:
        params[name] = _join(values, separator)


def encode_coordinate(coordinate: Coordinate) -> str:
    return _join(coordinate, COORDINATE_SEPARATOR)


def encode_coordinates(coordinates: Sequence[Coordinate]) -> str:
    """Encode coordinate pairs as the routing path segment, e.g. ``"2.35,48.85;-0.12,51.5"``."""
    return COORDINATE_PAIR_SEPARATOR.join(encode_coordinate(c) for c in coordinates)


def geocoding_params(request: GeocodingRequest) -> Params:
    params: Params = {"q": request.q.strip()}
    _put(params, "countrycodes", request.countrycodes)
    _put(params, "limit", request.limit)
    _put(params, "addressdetails", request.addressdetails)
    _put(params, "viewbox", request.viewbox)
    _put(params, "bounded", request.bounded)
    _put(params, "accept-language", request.accept_language)
    _put(params, "namedetails", request.namedetails)
    _put(params, "extratags", request.extratags)
    return params


def reverse_geocoding_params(request: ReverseGeocodingRequest) -> Params:
    params: Params = {"lat": _to_str(request.lat), "lon": _to_str(request.lon)}
    _put(params, "zoom", request.zoom)
    _put(params, "addressdetails", request.addressdetails)
    _put(params, "accept-language", request.accept_language)
    _put(params, "namedetails", request.namedetails)
    _put(params, "extratags", request.extratags)
    return params


def autocomplete_params(request: AutocompleteRequest) -> Params:
    params: Params = {"q": request.q.strip()}
    _put(params, "countrycodes", request.countrycodes)
    _put(params, "limit", request.limit)
    _put(params, "dedupe", request.dedupe)
    _put(params, "viewbox", request.viewbox)
    _put(params, "bounded", request.bounded)
    _put(params, "accept-language", request.accept_language)
    _put(params, "tag", request.tag)
    return params


def routing_params(request: RoutingRequest) -> Params:
    params: Params = {"geometries": request.geometries or DEFAULT_GEOMETRIES}
    _put(params, "profile", request.profile)
    _put(params, "alternatives", request.alternatives)
    _put(params, "steps", request.steps)
    _put_list(params, "annotations", request.annotations, ANNOTATION_SEPARATOR)
    _put(params, "continue_straight", request.continue_straight)
    _put_list(params, "waypoint_names", request.waypoint_names, WAYPOINT_NAME_SEPARATOR)
    _put_list(params, "waypoints", request.waypoints, WAYPOINT_SEPARATOR)
    _put_list(params, "approaches", request.approaches, APPROACH_SEPARATOR)
    _put_list(params, "exclude", request.exclude, EXCLUDE_SEPARATOR)
    return params


def matrix_params(request: MatrixRequest) -> Params:
    params: Params = {}
    _put(params, "profile", request.profile)
    _put_list(params, "sources", request.sources, SOURCE_SEPARATOR)
    _put_list(params, "destinations", request.destinations, DESTINATION_SEPARATOR)
    _put_list(params, "annotations", request.annotations, ANNOTATION_SEPARATOR)
    _put_list(params, "exclude", request.exclude, EXCLUDE_SEPARATOR)
    return params


def nearest_params(request: NearestRequest) -> Params:
    params: Params = {}
    _put(params, "profile", request.profile)
    _put(params, "number", request.number)
    _put_list(params, "exclude", request.exclude, EXCLUDE_SEPARATOR)
    return params


def timezone_params(lat: float, lon: float) -> Params:
    return {"lat": _to_str(lat), "lon": _to_str(lon)}


def nearby_poi_params(request: NearbyPOIRequest) -> Params:
    params: Params = {"lat": _to_str(request.lat), "lon": _to_str(request.lon)}
    _put(params, "tag", request.tag)
    _put(params, "radius", request.radius)
    _put(params, "limit", request.limit)
    return params


def encode_marker(marker: StaticMapMarker) -> str:
    """Fold a marker into ``icon:<v>|color:<v>|size:<v>|lat,lon``, skipping unset fields."""
    parts = [
        f"{name}:{value}"
        for name, value in (("icon", marker.icon), ("color", marker.color), ("size", marker.size))
        if value
    ]
    parts.append(encode_coordinate((marker.lat, marker.lon)))
    return MARKER_FIELD_SEPARATOR.join(parts)


def static_map_params(request: StaticMapRequest) -> Params:
    params: Params = {}
    if request.center is not None:
        params["center"] = encode_coordinate(request.center)
    _put(params, "zoom", request.zoom)
    if request.size is not None:
        params["size"] = _join(request.size, SIZE_SEPARATOR)
    _put(params, "format", request.format)
    _put(params, "style", request.style)
    if request.markers:
        params["markers"] = MARKER_SEPARATOR.join(encode_marker(m) for m in request.markers)
    return params
