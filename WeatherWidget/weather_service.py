"""Weather widget controller - drives fetches, presentation state and history."""
import logging
from typing import Optional

from input_resolver import resolve_location, resolve_recent, resolve_text
from layout import calculate_layout
from location_provider import LocationError, LocationProviderBase
from presentation_state import (
    PresentationState,
    Status,
    displayed_city,
    load_failed,
    load_succeeded,
    start_loading,
    switch_unit as change_unit,
)
from recent_searches import RecentSearchStore
from renderer import RendererBase
from weather_data import ByCoords, ByName, LocationQuery, Unit
from weather_provider import MalformedResponseError, WeatherProviderBase, WeatherProviderError


class WeatherWidget:
    """
    Owns the single presentation state value and threads it through the
    user events (search, location search, recent selection, unit switch).

    Each fetch ends in exactly one of LOADED or ERROR. Only successful
    lookups by city name touch the recent-search history.
    """

    def __init__(
        self,
        provider: WeatherProviderBase,
        recent: RecentSearchStore,
        renderer: RendererBase,
        location_provider: Optional[LocationProviderBase] = None,
        refetch_on_unit_change: bool = True,
        unit: Unit = Unit.CELSIUS
    ):
        """
        Initialize weather widget.

        Args:
            provider: Weather provider to fetch from
            recent: Recent-search history
            renderer: Display surface
            location_provider: Current-position capability (None if unsupported)
            refetch_on_unit_change: Re-fetch the displayed city when the unit
                changes; False reformats the last reading without a request
            unit: Initial temperature unit
        """
        self.provider = provider
        self.recent = recent
        self.renderer = renderer
        self.location_provider = location_provider
        self.refetch_on_unit_change = refetch_on_unit_change
        self.state = PresentationState(unit=unit)

    def start(self, restore_last: bool = True) -> None:
        """Render the stored history and reload the last searched city, if any."""
        self.renderer.show_unit(self.state.unit)
        self.renderer.show_recent(self.recent.list())
        last_city = self.recent.last_city() if restore_last else None
        if last_city:
            logging.info(f"Restoring last city: {last_city}")
            self.fetch_by_name(last_city)

    def search(self, text: Optional[str]) -> None:
        """Search for the typed city; blank input does nothing."""
        query = resolve_text(text)
        if query is None:
            logging.debug("Ignoring empty search")
            return
        self.fetch_by_name(query.city)

    def select_recent(self, city: str) -> None:
        query = resolve_recent(city)
        self.renderer.set_input(query.city)
        self.fetch_by_name(query.city)

    def location_search(self) -> None:
        """Look up the weather at the current position."""
        # An unsupported capability fails without showing the loading indicator.
        if self.location_provider is not None:
            self._begin()
        try:
            query = resolve_location(self.location_provider)
        except LocationError as e:
            self._fail(str(e))
            return
        self.fetch_by_coords(query)

    def fetch_by_name(self, city: str) -> None:
        query = ByName(city)
        if not self._fetch(query):
            return
        self.recent.record(city)
        self.recent.record_last_city(city)
        self.renderer.show_recent(self.recent.list())

    def fetch_by_coords(self, query: ByCoords) -> None:
        self._fetch(query)

    def switch_unit(self, unit: Unit) -> None:
        """
        Change the temperature unit.

        The displayed city is fetched again by name; with
        refetch_on_unit_change off the loaded reading is reformatted in place.
        """
        new_state = change_unit(self.state, unit)
        if new_state is self.state:
            return
        self.state = new_state
        logging.info(f"Unit switched to {unit.value}")
        self.renderer.show_unit(unit)

        if self.refetch_on_unit_change:
            city = displayed_city(self.state)
            if city:
                self.fetch_by_name(city)
        elif self.state.status is Status.LOADED:
            try:
                view = calculate_layout(self.state.reading, unit)
            except (ValueError, OverflowError) as e:
                logging.error(f"Cannot display reading in {unit.value}: {e}")
                self._fail(str(MalformedResponseError()))
                return
            self.renderer.show_weather(view)

    def _fetch(self, query: LocationQuery) -> bool:
        if self.state.status is not Status.LOADING:
            self._begin()
        try:
            reading = self.provider.get_current(query)
        except WeatherProviderError as e:
            logging.error(f"Weather fetch failed for {query}: {e}")
            self._fail(str(e))
            return False

        # Layout first so a reading that cannot be displayed never becomes LOADED.
        try:
            view = calculate_layout(reading, self.state.unit)
        except (ValueError, OverflowError) as e:
            logging.error(f"Cannot display reading for {query}: {e}")
            self._fail(str(MalformedResponseError()))
            return False
        self.state = load_succeeded(self.state, reading, query)
        logging.info(f"Loaded weather for {reading.location_label}")
        self.renderer.show_weather(view)
        return True

    def _begin(self) -> None:
        self.state = start_loading(self.state)
        self.renderer.show_loading()

    def _fail(self, message: str) -> None:
        self.state = load_failed(self.state, message)
        self.renderer.show_error(message)
