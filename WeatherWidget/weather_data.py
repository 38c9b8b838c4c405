"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class ByName:
    """Location query for a city name as typed by the user."""
    city: str


@dataclass(frozen=True)
class ByCoords:
    """Location query for a latitude/longitude pair."""
    lat: float
    lon: float


LocationQuery = Union[ByName, ByCoords]


class Unit(Enum):
    """Temperature unit shown to the user."""
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @property
    def symbol(self) -> str:
        return "°C" if self is Unit.CELSIUS else "°F"


@dataclass(frozen=True)
class WeatherReading:
    """One successfully loaded set of current conditions, in source units."""
    city: str
    country: str
    description: str  # e.g., "clear sky", "light rain"
    icon: str  # e.g., "01d"
    temp: float  # Celsius
    feels_like: float  # Celsius
    humidity: float  # percentage
    wind_speed: float  # m/s
    pressure: float  # hPa

    @property
    def location_label(self) -> str:
        return f"{self.city}, {self.country}"
