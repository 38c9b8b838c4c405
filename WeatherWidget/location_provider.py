"""Location capability abstraction - stands in for the device's geolocation."""
import logging
import os
from abc import ABC, abstractmethod
from typing import Optional, Tuple

UNSUPPORTED_MESSAGE = "Geolocation is not supported by your browser"
UNAVAILABLE_MESSAGE = "Unable to retrieve your location"


class LocationError(Exception):
    """Exception raised when the current position cannot be resolved."""
    pass


class UnsupportedCapabilityError(LocationError):
    """No location capability is available at all."""

    def __init__(self, message: str = UNSUPPORTED_MESSAGE):
        super().__init__(message)


class LocationUnavailableError(LocationError):
    """The capability exists but could not produce a position."""

    def __init__(self, message: str = UNAVAILABLE_MESSAGE):
        super().__init__(message)


class LocationProviderBase(ABC):
    """Abstract one-shot "get current position" capability."""

    @abstractmethod
    def current_position(self) -> Tuple[float, float]:
        """
        Resolve the current position.

        Returns:
            Tuple of (latitude, longitude)

        Raises:
            Exception: Implementations may raise any exception for any failure
                (denied, timed out, unavailable); callers treat every one as
                "location unavailable"
        """
        pass


class StaticLocationProvider(LocationProviderBase):
    """Always reports the same position."""

    def __init__(self, lat: float, lon: float):
        self.lat = lat
        self.lon = lon

    def current_position(self) -> Tuple[float, float]:
        return self.lat, self.lon


class EnvLocationProvider(LocationProviderBase):
    """Reads the position from WEATHER_LAT / WEATHER_LON on every request."""

    def __init__(self, lat_var: str = "WEATHER_LAT", lon_var: str = "WEATHER_LON"):
        self.lat_var = lat_var
        self.lon_var = lon_var

    def current_position(self) -> Tuple[float, float]:
        lat = os.getenv(self.lat_var)
        lon = os.getenv(self.lon_var)
        if not lat or not lon:
            raise LocationUnavailableError(f"Missing {self.lat_var}/{self.lon_var} in environment")
        try:
            lat_val = float(lat)
            lon_val = float(lon)
        except ValueError as exc:
            raise LocationUnavailableError(f"Invalid coordinates: {exc}") from exc
        if not (-90 <= lat_val <= 90 and -180 <= lon_val <= 180):
            raise LocationUnavailableError(f"Coordinates out of range: {lat_val}, {lon_val}")
        logging.debug(f"Position from environment: lat={lat_val} lon={lon_val}")
        return lat_val, lon_val


def env_location_provider() -> Optional[LocationProviderBase]:
    """An EnvLocationProvider if coordinates are configured, else None (unsupported)."""
    if os.getenv("WEATHER_LAT") or os.getenv("WEATHER_LON"):
        return EnvLocationProvider()
    return None
