"""Provider factory and the process-wide client accessor.

``initialize_client`` / ``get_client`` hold the only shared mutable state in
the library: a module-level reference to the current client. It is written
by ``initialize_client`` and read by ``get_client``, both from the event-loop
thread. Re-initialization swaps the reference; calls already in flight keep
the client they started with because clients are immutable.

Prefer constructing a ``LocationIQClient`` and passing it to consumers
explicitly; the global accessor exists for callers that cannot thread a
client through.
"""

import structlog

from locationiq.core.config import settings
from locationiq.core.errors import NotInitializedError
from locationiq.models.types import ClientConfig
from locationiq.providers.maps.interface import MapsProvider
from locationiq.providers.maps.locationiq_adapter import LocationIQClient

logger = structlog.get_logger()

_client: LocationIQClient | None = None


def get_maps_provider() -> MapsProvider:
    match settings.maps_provider:
        case "locationiq":
            return LocationIQClient(
                api_key=settings.locationiq_api_key,
                base_url=settings.locationiq_base_url,
            )
        case _:
            raise ValueError(f"Unknown maps provider: {settings.maps_provider}")


def initialize_client(config: ClientConfig) -> LocationIQClient:
    """Create the process-wide client, replacing any previous one.

    The replaced client is not closed, since calls already in flight may still
    be using its connection pool. Callers that re-initialize own the old client:
    take it from ``get_client()`` beforehand and ``await old.close()`` once
    those calls have finished.
    """
    global _client
    replaced = _client is not None
    _client = LocationIQClient(api_key=config.api_key, base_url=config.base_url)
    logger.info("LocationIQ client initialized", base_url=config.base_url, replaced=replaced)
    return _client


def initialize_client_from_settings() -> LocationIQClient:
    return initialize_client(
        ClientConfig(api_key=settings.locationiq_api_key, base_url=settings.locationiq_base_url)
    )


def get_client() -> LocationIQClient:
    if _client is None:
        raise NotInitializedError(
            "LocationIQ client not initialized. Call initialize_client() first."
        )
    return _client


def reset_client() -> LocationIQClient | None:
    """Forget the process-wide client and return it, unclosed, for the caller to close."""
    global _client
    previous, _client = _client, None
    return previous
