"""Presentation state machine - which region is visible and what it shows.

The state is an immutable value; every transition returns a new one.

    IDLE ──start_loading──▶ LOADING ──load_succeeded──▶ LOADED
                               │                          │
                               └──load_failed──▶ ERROR ◀──┘ (via LOADING)

LOADED and ERROR go back to LOADING on the next fetch.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from weather_data import LocationQuery, Unit, WeatherReading


class Status(Enum):
    """Which of the mutually exclusive display regions is active."""
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class PresentationState:
    """Everything the display shows, as one immutable value."""
    status: Status = Status.IDLE
    unit: Unit = Unit.CELSIUS
    reading: Optional[WeatherReading] = None  # only set while LOADED
    query: Optional[LocationQuery] = None  # query behind the last LOADED reading
    error_message: Optional[str] = None  # only set while ERROR
    # Location label as last rendered; survives LOADING/ERROR like a hidden view.
    location_label: str = ""


def start_loading(state: PresentationState) -> PresentationState:
    """Enter LOADING from any status, dropping the shown reading or error."""
    return replace(state, status=Status.LOADING, reading=None, error_message=None)


def load_succeeded(
    state: PresentationState,
    reading: WeatherReading,
    query: LocationQuery
) -> PresentationState:
    """Complete an outstanding fetch with a reading."""
    if state.status is not Status.LOADING:
        raise ValueError(f"Cannot complete a fetch from {state.status.value}")
    return replace(
        state,
        status=Status.LOADED,
        reading=reading,
        query=query,
        error_message=None,
        location_label=reading.location_label,
    )


def load_failed(state: PresentationState, message: str) -> PresentationState:
    """Enter ERROR with a human-readable message."""
    # Unsupported geolocation fails straight from IDLE/LOADED without LOADING.
    return replace(state, status=Status.ERROR, reading=None, error_message=message)


def switch_unit(state: PresentationState, unit: Unit) -> PresentationState:
    """Select a unit; returns the same state object when nothing changes."""
    if unit is state.unit:
        return state
    return replace(state, unit=unit)


def displayed_city(state: PresentationState) -> Optional[str]:
    """City part of the location label ("Paris" from "Paris, FR"), if any."""
    city = state.location_label.split(",")[0]
    return city or None
