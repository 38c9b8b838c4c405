"""Tests for renderer backends."""
import io
import pytest
from layout import calculate_layout
from renderer import ConsoleRenderer, FakeRenderer, PILRenderer
from weather_data import Unit, WeatherReading


@pytest.fixture
def view():
    reading = WeatherReading("Paris", "FR", "clear sky", "01d", 20.0, 19.0, 60.0, 3.0, 1012.0)
    return calculate_layout(reading, Unit.CELSIUS)


def test_fake_renderer_regions_are_exclusive(view):
    """Test that showing one region replaces the previous one."""
    renderer = FakeRenderer()

    renderer.show_loading()
    assert renderer.region == "loading"

    renderer.show_weather(view)
    assert renderer.region == "weather"
    assert renderer.view is view

    renderer.show_error("City not found")
    assert renderer.region == "error"
    assert renderer.error_message == "City not found"


def test_fake_renderer_recent_visibility():
    """Test that an empty recent list hides the region."""
    renderer = FakeRenderer()

    renderer.show_recent(["Paris"])
    assert renderer.recent_visible is True

    renderer.show_recent([])
    assert renderer.recent_visible is False


def test_console_renderer_weather(view):
    """Test terminal output for a loaded reading."""
    out = io.StringIO()
    renderer = ConsoleRenderer(out)

    renderer.show_weather(view)
    text = out.getvalue()

    assert "Paris, FR" in text
    assert "20°C" in text
    assert "11 km/h" in text
    assert "1012 hPa" in text
    assert "60%" in text


def test_console_renderer_error_and_recent():
    out = io.StringIO()
    renderer = ConsoleRenderer(out)

    renderer.show_error("City not found")
    renderer.show_recent([])
    renderer.show_recent(["Paris", "Rome"])
    renderer.show_unit(Unit.FAHRENHEIT)

    lines = out.getvalue().splitlines()
    assert lines[0] == "Error: City not found"
    assert lines[1] == "Recent: [1] Paris  [2] Rome"
    assert "[°F]" in lines[2]


def test_pil_renderer_tracks_regions(view):
    renderer = PILRenderer(width=200, height=120)

    renderer.show_loading()
    assert renderer.region == "loading"

    renderer.show_weather(view)
    assert renderer.region == "weather"
    assert renderer.get_image().size == (200, 120)


def test_pil_renderer_save(tmp_path, view):
    """Test writing the widget card to a PNG."""
    renderer = PILRenderer(width=200, height=120, scale=2)
    renderer.set_input("Paris")
    renderer.show_unit(Unit.CELSIUS)
    renderer.show_weather(view)
    renderer.show_recent(["Paris"])

    output = tmp_path / "widget.png"
    renderer.save(str(output))

    assert output.exists()
    assert output.stat().st_size > 0
