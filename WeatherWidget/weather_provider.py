"""Weather provider abstraction - allows swapping different weather APIs."""
from abc import ABC, abstractmethod
from weather_data import LocationQuery, WeatherReading


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_current(self, query: LocationQuery) -> WeatherReading:
        """
        Fetch current weather for a location.

        Args:
            query: City name or coordinates to look up

        Returns:
            WeatherReading: Current weather information

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass


class NotFoundError(WeatherProviderError):
    """The service answered with a non-success status or could not be reached."""
    pass


class MalformedResponseError(WeatherProviderError):
    """The service answered, but the body lacks the fields we display."""

    def __init__(self, message: str = "Unexpected response from weather service"):
        super().__init__(message)
