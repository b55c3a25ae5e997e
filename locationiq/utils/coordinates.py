"""Pure coordinate and geometry helpers. Coordinates here are ``(lat, lon)``."""

import math
from collections.abc import Sequence

from locationiq.core.errors import InvalidArgumentError
from locationiq.models.types import BoundingBox, Coordinate

EARTH_RADIUS_KM = 6371.0


def is_valid_coordinate(lat: float, lon: float) -> bool:
    return -90 <= lat <= 90 and -180 <= lon <= 180


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle (haversine) distance in kilometres."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    a = min(1.0, max(0.0, a))
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def format_coordinate(lat: float, lon: float, decimals: int = 4) -> str:
    return f"{lat:.{decimals}f}, {lon:.{decimals}f}"


def parse_coordinate_string(text: str) -> Coordinate | None:
    """Parse ``"lat, lon"``. Returns None for malformed or out-of-range input."""
    parts = text.split(",")
    if len(parts) != 2:
        return None
    try:
        lat, lon = float(parts[0].strip()), float(parts[1].strip())
    except ValueError:
        return None
    if not is_valid_coordinate(lat, lon):
        return None
    return lat, lon


def _require_points(coordinates: Sequence[Coordinate]) -> None:
    if not coordinates:
        raise InvalidArgumentError("At least one coordinate is required")


def get_bounding_box(coordinates: Sequence[Coordinate]) -> BoundingBox:
    _require_points(coordinates)
    lats = [c[0] for c in coordinates]
    lons = [c[1] for c in coordinates]
    return BoundingBox(min_lat=min(lats), max_lat=max(lats), min_lon=min(lons), max_lon=max(lons))


def get_center_point(coordinates: Sequence[Coordinate]) -> Coordinate:
    """Arithmetic centroid of the points (not antimeridian-aware)."""
    _require_points(coordinates)
    n = len(coordinates)
    return sum(c[0] for c in coordinates) / n, sum(c[1] for c in coordinates) / n


def format_distance(meters: float) -> str:
    if meters >= 1000:
        return f"{meters / 1000:.2f} km"
    return f"{meters:.0f} m"


def format_duration(seconds: float) -> str:
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def generate_viewbox(min_lat: float, min_lon: float, max_lat: float, max_lon: float) -> str:
    """Viewbox string in the API's ``min_lon,min_lat,max_lon,max_lat`` order."""
    return f"{min_lon},{min_lat},{max_lon},{max_lat}"
