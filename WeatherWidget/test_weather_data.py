"""Tests for weather_data module."""
import dataclasses
import pytest
from weather_data import ByCoords, ByName, Unit, WeatherReading


def test_weather_reading_creation():
    """Test creating WeatherReading with all fields."""
    reading = WeatherReading(
        city="Paris",
        country="FR",
        description="clear sky",
        icon="01d",
        temp=20.0,
        feels_like=19.0,
        humidity=60.0,
        wind_speed=3.0,
        pressure=1012.0
    )

    assert reading.city == "Paris"
    assert reading.country == "FR"
    assert reading.icon == "01d"
    assert reading.temp == 20.0
    assert reading.location_label == "Paris, FR"


def test_weather_reading_is_immutable():
    """Test that a loaded reading cannot be modified."""
    reading = WeatherReading("Oslo", "NO", "snow", "13d", -3.0, -7.0, 80.0, 4.0, 1000.0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        reading.temp = 10.0


def test_location_queries_compare_by_value():
    """Test that queries are plain immutable values."""
    assert ByName("Paris") == ByName("Paris")
    assert ByName("Paris") != ByName("paris")
    assert ByCoords(48.85, 2.35) == ByCoords(lat=48.85, lon=2.35)

    with pytest.raises(dataclasses.FrozenInstanceError):
        ByName("Paris").city = "Lyon"


def test_unit_symbols():
    """Test unit suffixes."""
    assert Unit.CELSIUS.symbol == "°C"
    assert Unit.FAHRENHEIT.symbol == "°F"
    assert Unit("fahrenheit") is Unit.FAHRENHEIT
