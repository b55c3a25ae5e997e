from typing import Protocol

from locationiq.models.types import Coordinate


class GeolocationProvider(Protocol):
    async def current_position(self) -> Coordinate:
        """Return the device position as ``(lat, lon)``. May raise if unavailable."""
        ...
