"""Tests for the presentation state machine."""
import pytest
from presentation_state import (
    PresentationState,
    Status,
    displayed_city,
    load_failed,
    load_succeeded,
    start_loading,
    switch_unit,
)
from weather_data import ByName, Unit, WeatherReading


@pytest.fixture
def reading():
    return WeatherReading("Paris", "FR", "clear sky", "01d", 20.0, 19.0, 60.0, 3.0, 1012.0)


def test_initial_state():
    state = PresentationState()

    assert state.status is Status.IDLE
    assert state.unit is Unit.CELSIUS
    assert state.reading is None
    assert displayed_city(state) is None


def test_idle_to_loading():
    state = start_loading(PresentationState())

    assert state.status is Status.LOADING
    assert state.reading is None


def test_loading_to_loaded(reading):
    state = load_succeeded(start_loading(PresentationState()), reading, ByName("Paris"))

    assert state.status is Status.LOADED
    assert state.reading == reading
    assert state.query == ByName("Paris")
    assert state.error_message is None
    assert state.location_label == "Paris, FR"


def test_loading_to_error():
    state = load_failed(start_loading(PresentationState()), "City not found")

    assert state.status is Status.ERROR
    assert state.error_message == "City not found"
    assert state.reading is None


def test_loaded_requires_loading(reading):
    """Test that a reading can only complete an outstanding fetch."""
    with pytest.raises(ValueError):
        load_succeeded(PresentationState(), reading, ByName("Paris"))


def test_only_loaded_carries_reading(reading):
    loaded = load_succeeded(start_loading(PresentationState()), reading, ByName("Paris"))

    assert start_loading(loaded).reading is None
    assert load_failed(start_loading(loaded), "oops").reading is None


def test_label_survives_error(reading):
    """Test that the last shown label is kept while the weather view is hidden."""
    loaded = load_succeeded(start_loading(PresentationState()), reading, ByName("Paris"))
    failed = load_failed(start_loading(loaded), "City not found")

    assert failed.location_label == "Paris, FR"
    assert displayed_city(failed) == "Paris"


def test_switch_unit_same_unit_is_noop():
    state = PresentationState()

    assert switch_unit(state, Unit.CELSIUS) is state


def test_switch_unit_keeps_reading(reading):
    loaded = load_succeeded(start_loading(PresentationState()), reading, ByName("Paris"))
    switched = switch_unit(loaded, Unit.FAHRENHEIT)

    assert switched.unit is Unit.FAHRENHEIT
    assert switched.status is Status.LOADED
    assert switched.reading == reading
    assert loaded.unit is Unit.CELSIUS
