"""Turn user actions into location queries."""
import logging
from typing import Optional

from location_provider import (
    LocationProviderBase,
    LocationUnavailableError,
    UnsupportedCapabilityError,
)
from weather_data import ByCoords, ByName


def resolve_text(text: Optional[str]) -> Optional[ByName]:
    """Trimmed city query, or None when there is nothing to search for."""
    city = (text or "").strip()
    if not city:
        return None
    return ByName(city)


def resolve_recent(city: str) -> ByName:
    """A recent-search entry is searched exactly as stored."""
    return ByName(city)


def resolve_location(provider: Optional[LocationProviderBase]) -> ByCoords:
    """
    Ask the location capability for the current position.

    Raises:
        UnsupportedCapabilityError: If there is no capability
        LocationUnavailableError: If the capability call fails for any reason
    """
    if provider is None:
        raise UnsupportedCapabilityError()
    try:
        lat, lon = provider.current_position()
    except Exception as exc:
        logging.warning(f"Location lookup failed: {exc}")
        raise LocationUnavailableError() from exc
    return ByCoords(lat=float(lat), lon=float(lon))
