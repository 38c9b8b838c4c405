"""Layout and formatting logic for the weather view - pure functions for testability."""
import math
from dataclasses import dataclass

from openweather_provider import icon_url
from weather_data import Unit, WeatherReading


@dataclass(frozen=True)
class WeatherView:
    """Text for every field of the weather-detail region."""
    location: str
    icon_url: str
    icon_alt: str
    description: str
    temperature: str
    feels_like: str
    humidity: str
    wind: str
    pressure: str


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves toward +infinity.

    Python's round() rounds halves to even (round(20.5) == 20); display
    values round 20.5 up to 21 and -0.5 up to 0.
    """
    return int(math.floor(value + 0.5))


def to_fahrenheit(temp_c: float) -> float:
    return temp_c * 9 / 5 + 32


def format_temperature(temp_c: float, unit: Unit) -> str:
    """
    Format a Celsius temperature for display in the given unit.

    Args:
        temp_c: Temperature in Celsius
        unit: Unit to display

    Returns:
        Rounded value with unit suffix (e.g., "20°C", "68°F")
    """
    value = temp_c if unit is Unit.CELSIUS else to_fahrenheit(temp_c)
    return f"{round_half_up(value)}{unit.symbol}"


def wind_kmh(speed_m_s: float) -> int:
    """Convert m/s to rounded km/h."""
    return round_half_up(speed_m_s * 3.6)


def _number(value: float) -> str:
    # Humidity and pressure come as integers from the API; keep "60", not "60.0".
    return str(int(value)) if float(value).is_integer() else str(value)


def calculate_layout(reading: WeatherReading, unit: Unit) -> WeatherView:
    """
    Calculate the weather-detail view for a reading.

    This is a pure function that returns display strings,
    making it easy to test without an actual renderer.
    """
    return WeatherView(
        location=reading.location_label,
        icon_url=icon_url(reading.icon),
        icon_alt=reading.description,
        description=reading.description,
        temperature=format_temperature(reading.temp, unit),
        feels_like=format_temperature(reading.feels_like, unit),
        humidity=f"{_number(reading.humidity)}%",
        wind=f"{wind_kmh(reading.wind_speed)} km/h",
        pressure=f"{_number(reading.pressure)} hPa",
    )
