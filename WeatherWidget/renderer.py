"""Renderer abstraction - allows swapping terminal, image and test backends."""
import sys
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO, Tuple

from PIL import Image, ImageDraw, ImageFont

from layout import WeatherView
from weather_data import Unit


class RendererBase(ABC):
    """
    Abstract display surface.

    Loading, error and weather detail are mutually exclusive regions: showing
    one hides the other two. Recent searches and the unit selector are
    independent of them.
    """

    @abstractmethod
    def show_loading(self) -> None:
        """Show the loading indicator."""
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Show the error region with a human-readable message."""
        pass

    @abstractmethod
    def show_weather(self, view: WeatherView) -> None:
        """Show the weather-detail region populated from view."""
        pass

    @abstractmethod
    def show_recent(self, cities: List[str]) -> None:
        """Show selectable recent searches; an empty list hides the region."""
        pass

    @abstractmethod
    def show_unit(self, unit: Unit) -> None:
        """Mark the unit selector for unit as active and the other as inactive."""
        pass

    def set_input(self, text: str) -> None:
        """Pre-fill the city input field (no-op where there is no field)."""
        pass


class ConsoleRenderer(RendererBase):
    """Renderer writing plain text to a terminal stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def _write(self, text: str = "") -> None:
        print(text, file=self.stream)

    def show_loading(self) -> None:
        self._write("Loading...")

    def show_error(self, message: str) -> None:
        self._write(f"Error: {message}")

    def show_weather(self, view: WeatherView) -> None:
        self._write(view.location)
        self._write(f"  {view.temperature}  {view.description}")
        self._write(f"  Feels like {view.feels_like}")
        self._write(f"  Humidity {view.humidity}  Wind {view.wind}  Pressure {view.pressure}")
        self._write(f"  Icon {view.icon_url}")

    def show_recent(self, cities: List[str]) -> None:
        if not cities:
            return
        entries = "  ".join(f"[{i}] {city}" for i, city in enumerate(cities, start=1))
        self._write(f"Recent: {entries}")

    def show_unit(self, unit: Unit) -> None:
        celsius = "[°C]" if unit is Unit.CELSIUS else " °C "
        fahrenheit = "[°F]" if unit is Unit.FAHRENHEIT else " °F "
        self._write(f"Unit: {celsius} {fahrenheit}")


class PILRenderer(RendererBase):
    """
    Pillow-based renderer that draws the widget as a card image.

    Useful for previews and snapshots without a display. Every call
    redraws the whole card from the remembered region contents.
    """

    BACKGROUND = (24, 28, 38)
    TEXT = (235, 235, 235)
    MUTED = (150, 155, 165)
    ACCENT = (0, 113, 255)
    ERROR = (230, 70, 60)

    def __init__(self, width: int = 360, height: int = 240, scale: int = 1):
        """
        Initialize PIL renderer.

        Args:
            width: Card width in pixels
            height: Card height in pixels
            scale: Scale factor for saved images
        """
        self._width = width
        self._height = height
        self._scale = scale
        self._font = ImageFont.load_default()

        self.region: Optional[str] = None  # "loading", "error" or "weather"
        self.error_message = ""
        self.view: Optional[WeatherView] = None
        self.recent: List[str] = []
        self.unit = Unit.CELSIUS
        self.input_text = ""

        self._image = Image.new("RGB", (width, height), self.BACKGROUND)
        self._redraw()

    def _text(self, draw: ImageDraw.ImageDraw, xy: Tuple[int, int], text: str, fill) -> None:
        draw.text(xy, text, fill=fill, font=self._font)

    def _redraw(self) -> None:
        self._image = Image.new("RGB", (self._width, self._height), self.BACKGROUND)
        draw = ImageDraw.Draw(self._image)

        self._text(draw, (10, 8), f"City: {self.input_text}", self.MUTED)
        for i, unit in enumerate(Unit):
            colour = self.ACCENT if unit is self.unit else self.MUTED
            self._text(draw, (self._width - 60 + i * 28, 8), unit.symbol, colour)

        y = 34
        if self.region == "loading":
            self._text(draw, (10, y), "Loading...", self.MUTED)
        elif self.region == "error":
            self._text(draw, (10, y), self.error_message, self.ERROR)
        elif self.region == "weather" and self.view is not None:
            view = self.view
            self._text(draw, (10, y), view.location, self.TEXT)
            self._text(draw, (10, y + 18), f"{view.temperature}  {view.description}", self.ACCENT)
            self._text(draw, (10, y + 36), f"Feels like {view.feels_like}", self.TEXT)
            self._text(draw, (10, y + 54), f"Humidity {view.humidity}", self.TEXT)
            self._text(draw, (10, y + 72), f"Wind {view.wind}", self.TEXT)
            self._text(draw, (10, y + 90), f"Pressure {view.pressure}", self.TEXT)

        if self.recent:
            self._text(draw, (10, self._height - 24), "Recent: " + ", ".join(self.recent), self.MUTED)

    def show_loading(self) -> None:
        self.region = "loading"
        self._redraw()

    def show_error(self, message: str) -> None:
        self.region = "error"
        self.error_message = message
        self._redraw()

    def show_weather(self, view: WeatherView) -> None:
        self.region = "weather"
        self.view = view
        self._redraw()

    def show_recent(self, cities: List[str]) -> None:
        self.recent = list(cities)
        self._redraw()

    def show_unit(self, unit: Unit) -> None:
        self.unit = unit
        self._redraw()

    def set_input(self, text: str) -> None:
        self.input_text = text
        self._redraw()

    def save(self, filename: str) -> None:
        """
        Save the card to a PNG file.

        Args:
            filename: Output filename (e.g., "weather.png")
        """
        if self._scale > 1:
            scaled = self._image.resize(
                (self._width * self._scale, self._height * self._scale),
                Image.NEAREST
            )
            scaled.save(filename)
        else:
            self._image.save(filename)

    def get_image(self):
        """Get the PIL Image object (for advanced usage)."""
        return self._image


class FakeRenderer(RendererBase):
    """
    Fake renderer for testing - remembers what is visible.

    Every call is also appended to `calls` as (method, argument).
    """

    def __init__(self):
        self.calls: List[Tuple[str, object]] = []
        self.region: Optional[str] = None
        self.error_message: Optional[str] = None
        self.view: Optional[WeatherView] = None
        self.recent: List[str] = []
        self.unit: Optional[Unit] = None
        self.input_text = ""

    @property
    def recent_visible(self) -> bool:
        return bool(self.recent)

    def show_loading(self) -> None:
        self.calls.append(("loading", None))
        self.region = "loading"

    def show_error(self, message: str) -> None:
        self.calls.append(("error", message))
        self.region = "error"
        self.error_message = message

    def show_weather(self, view: WeatherView) -> None:
        self.calls.append(("weather", view))
        self.region = "weather"
        self.view = view

    def show_recent(self, cities: List[str]) -> None:
        self.calls.append(("recent", list(cities)))
        self.recent = list(cities)

    def show_unit(self, unit: Unit) -> None:
        self.calls.append(("unit", unit))
        self.unit = unit

    def set_input(self, text: str) -> None:
        self.calls.append(("input", text))
        self.input_text = text
