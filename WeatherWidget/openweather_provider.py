"""OpenWeather Current Weather API provider implementation."""
import logging
import math
import requests
from typing import Any, Dict, Optional
from weather_provider import (
    WeatherProviderBase,
    WeatherProviderError,
    NotFoundError,
    MalformedResponseError,
)
from weather_data import ByCoords, ByName, LocationQuery, WeatherReading

ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"

CITY_NOT_FOUND = "City not found"
COORDS_NOT_AVAILABLE = "Weather data not available"


def icon_url(icon: str) -> str:
    """Image URL for an OpenWeather icon identifier such as "01d"."""
    return ICON_URL.format(icon=icon)


class OpenWeatherProvider(WeatherProviderBase):
    """
    Weather provider using OpenWeather Current Weather API.

    Uses the free Current Weather API: https://openweathermap.org/current
    Results are always requested in metric units; conversion to the
    user's unit happens at display time.
    """

    BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
    UNITS = "metric"

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize OpenWeather provider.

        Args:
            api_key: OpenWeather API key
            base_url: Override for the current-conditions endpoint
            timeout: HTTP request timeout in seconds (None waits indefinitely)
        """
        self.api_key = api_key
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout

    def build_params(self, query: LocationQuery) -> Dict[str, Any]:
        """Query string parameters for a city name or coordinate lookup."""
        if isinstance(query, ByName):
            params = {"q": query.city}
        elif isinstance(query, ByCoords):
            params = {"lat": query.lat, "lon": query.lon}
        else:
            raise TypeError(f"Unsupported location query: {query!r}")
        params["appid"] = self.api_key
        params["units"] = self.UNITS
        return params

    def get_current(self, query: LocationQuery) -> WeatherReading:
        """
        Fetch current weather from OpenWeather Current Weather API.

        Returns:
            WeatherReading: Current weather information

        Raises:
            NotFoundError: If the request fails or the status is not 2xx
            MalformedResponseError: If the body cannot be mapped to a reading
        """
        params = self.build_params(query)
        not_found = CITY_NOT_FOUND if isinstance(query, ByName) else COORDS_NOT_AVAILABLE

        try:
            logging.info(f"Making OpenWeather API request: {self.base_url}")
            logging.debug(f"Request query: {query}")

            response = requests.get(self.base_url, params=params, timeout=self.timeout)

            logging.info(f"API response status: {response.status_code}")
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise NotFoundError(not_found) from e

        # Check HTTP status
        if not response.ok:
            self._log_error_response(response)
            raise NotFoundError(not_found)

        try:
            data = response.json()
        except ValueError as e:
            logging.error(f"Response body is not JSON: {e}")
            raise MalformedResponseError() from e

        logging.debug(f"API response (truncated): {str(data)[:500]}...")
        return self.parse_reading(data)

    @staticmethod
    def parse_reading(data: Any) -> WeatherReading:
        """
        Map a Current Weather API body onto a WeatherReading.

        Raises:
            MalformedResponseError: If any consumed field is missing or mistyped
        """
        try:
            weather_array = data["weather"]
            if not weather_array:
                logging.error("Response missing 'weather' array")
                raise MalformedResponseError()
            weather = weather_array[0]

            main_data = data["main"]
            reading = WeatherReading(
                city=str(data["name"]),
                country=str(data["sys"]["country"]),
                description=str(weather["description"]),
                icon=str(weather["icon"]),
                temp=float(main_data["temp"]),
                feels_like=float(main_data["feels_like"]),
                humidity=float(main_data["humidity"]),
                wind_speed=float(data["wind"]["speed"]),
                pressure=float(main_data["pressure"]),
            )
        except WeatherProviderError:
            raise
        except (KeyError, IndexError, ValueError, TypeError, OverflowError) as e:
            logging.error(f"Failed to parse API response: {e!r}", exc_info=True)
            raise MalformedResponseError() from e

        numbers = (reading.temp, reading.feels_like, reading.humidity, reading.wind_speed, reading.pressure)
        if not all(math.isfinite(value) for value in numbers):
            logging.error(f"Non-finite number in API response: {numbers}")
            raise MalformedResponseError()

        logging.info(f"Successfully parsed weather data: {reading.location_label} {reading.temp}°C")
        return reading

    @staticmethod
    def _log_error_response(response: requests.Response) -> None:
        """Log the OpenWeather error payload; the user only sees the generic message."""
        try:
            error_data = response.json()
            logging.error(
                f"OpenWeather API error {error_data.get('cod', response.status_code)}: "
                f"{error_data.get('message', 'Unknown error')}"
            )
        except (ValueError, AttributeError):
            # Not JSON, use HTTP status
            logging.error(f"Non-JSON error response: HTTP {response.status_code}, body: {response.text[:200]}")
