"""Terminal front end for the weather widget."""
import argparse
import logging
import os
import signal
import sys
from typing import List, Optional, TextIO, Tuple

from dotenv import load_dotenv

from key_value_store import JsonFileStore
from location_provider import env_location_provider
from openweather_provider import OpenWeatherProvider
from recent_searches import RecentSearchStore
from renderer import ConsoleRenderer, PILRenderer, RendererBase
from weather_data import Unit
from weather_service import WeatherWidget

DEFAULT_STORE = os.path.join("~", ".weather_widget.json")

HELP_TEXT = """Type a city name and press Enter to search.
  :here      weather at your configured location
  :c / :f    switch to Celsius / Fahrenheit
  :1 .. :5   search a recent city again
  :help      show this help
  :q         quit"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("weather-widget", description="Current weather lookup")
    parser.add_argument("--city", help="Look up a city and exit")
    parser.add_argument("--here", action="store_true", help="Look up the configured location and exit")
    parser.add_argument("--interactive", "-i", action="store_true", help="Keep reading commands from stdin")
    parser.add_argument("--unit", choices=[u.value for u in Unit], default=Unit.CELSIUS.value)
    parser.add_argument(
        "--local-unit-change",
        dest="refetch_on_unit_change",
        action="store_false",
        help="Reformat the loaded reading when the unit changes instead of fetching again"
    )
    parser.add_argument("--snapshot", metavar="PNG", help="Draw the widget to a PNG file instead of the terminal")
    parser.add_argument("--store", default=None, help="History file (default: $WEATHER_STORE or ~/.weather_widget.json)")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    # stdout belongs to the widget itself
    log_level = logging.DEBUG if verbose else logging.WARNING
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers
    )


def load_config(store_override: Optional[str] = None) -> Tuple[str, str]:
    load_dotenv()
    api_key = os.getenv("WEATHER_API_KEY")
    store_path = store_override or os.getenv("WEATHER_STORE") or DEFAULT_STORE

    if not api_key:
        raise SystemExit("Missing WEATHER_API_KEY in environment")

    logging.info("Configuration loaded: store=%s", store_path)
    return api_key, store_path


def build_widget(
    api_key: str,
    store_path: str,
    renderer: RendererBase,
    args: argparse.Namespace
) -> WeatherWidget:
    provider = OpenWeatherProvider(api_key=api_key, timeout=args.timeout)
    recent = RecentSearchStore(JsonFileStore(store_path))
    location_provider = env_location_provider()
    if location_provider is None:
        logging.info("WEATHER_LAT/WEATHER_LON not set; location search unsupported")
    return WeatherWidget(
        provider=provider,
        recent=recent,
        renderer=renderer,
        location_provider=location_provider,
        refetch_on_unit_change=args.refetch_on_unit_change,
        unit=Unit(args.unit),
    )


def handle_command(widget: WeatherWidget, line: str, output: TextIO) -> bool:
    """
    Apply one line of interactive input.

    Returns:
        False when the user asked to quit
    """
    command = line.strip()
    if command in (":q", ":quit", ":exit"):
        return False
    if command == ":help":
        print(HELP_TEXT, file=output)
    elif command == ":here":
        widget.location_search()
    elif command == ":c":
        widget.switch_unit(Unit.CELSIUS)
    elif command == ":f":
        widget.switch_unit(Unit.FAHRENHEIT)
    elif command[:1] == ":" and command[1:].isdigit():
        recent = widget.recent.list()
        index = int(command[1:]) - 1
        if 0 <= index < len(recent):
            widget.select_recent(recent[index])
        else:
            print(f"No recent search {command[1:]}", file=output)
    elif command.startswith(":"):
        print(f"Unknown command {command}; try :help", file=output)
    else:
        widget.search(command)
    return True


def interactive_loop(widget: WeatherWidget, input_stream: TextIO, output: TextIO) -> None:
    print(HELP_TEXT, file=output)
    while True:
        output.write("> ")
        output.flush()
        line = input_stream.readline()
        if not line:
            break
        if not handle_command(widget, line, output):
            break


def signal_handler(signum, frame):
    logging.info("Received signal %s, shutting down", signum)
    raise KeyboardInterrupt()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    api_key, store_path = load_config(args.store)

    renderer: RendererBase = PILRenderer() if args.snapshot else ConsoleRenderer()
    widget = build_widget(api_key, store_path, renderer, args)

    signal.signal(signal.SIGTERM, signal_handler)

    one_shot = bool(args.city or args.here)
    try:
        widget.start(restore_last=not one_shot)
        if args.city:
            widget.search(args.city)
        elif args.here:
            widget.location_search()
        if args.interactive:
            interactive_loop(widget, sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        logging.info("Stopping widget")
    finally:
        if args.snapshot:
            renderer.save(args.snapshot)
            logging.info("Snapshot written to %s", args.snapshot)


if __name__ == "__main__":
    main()
