from locationiq.hooks.async_state import AsyncHook, AsyncState, HookStatus
from locationiq.hooks.endpoints import (
    AutocompleteHook,
    BalanceHook,
    DirectionsHook,
    GeocodingHook,
    MatrixHook,
    NearbyPOIHook,
    ReverseGeocodingHook,
    TimezoneHook,
)

__all__ = [
    "AsyncHook",
    "AsyncState",
    "AutocompleteHook",
    "BalanceHook",
    "DirectionsHook",
    "GeocodingHook",
    "HookStatus",
    "MatrixHook",
    "NearbyPOIHook",
    "ReverseGeocodingHook",
    "TimezoneHook",
]
