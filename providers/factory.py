"""Provider factory: returns the mock or the real Maps provider based on USE_REAL_APIS."""
import os

from providers.base import BaseMapsProvider


def get_provider() -> BaseMapsProvider:
    """Return the active Maps provider.

    Reads the USE_REAL_APIS env var. Returns MockMapsProvider by default.
    """
    use_real = os.environ.get("USE_REAL_APIS", "false").lower() == "true"

    if use_real:
        from providers.real.google_maps import GoogleMapsProvider
        return GoogleMapsProvider()
    from providers.mock.maps_provider import MockMapsProvider
    return MockMapsProvider()
