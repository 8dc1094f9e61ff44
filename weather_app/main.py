import logging
import sys

from .config import (
    Colours,
    MissingApiKeyError,
    configure_logging,
    ensure_api_key,
    load_local_env,
)
from .services.favourites import FavouritesError, FavouritesStore
from .services.openweather import OpenWeatherService, WeatherServiceError
from .utils.formatting import colourize, format_weather

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands
search <city>       - show weather for <city>
add    <city>       - add <city> to favourites (max 3)
list                - list favourites with current weather
remove <city>       - remove <city> from favourites
update <old> <new>  - replace <old> with <new>
exit | quit         - close the app"""


class WeatherShell:
    """Command table for the interactive prompt."""

    def __init__(self, service, store, out=None, err=None, colour=None):
        self.service = service
        self.store = store
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err
        if colour is None:
            colour = hasattr(self.out, "isatty") and self.out.isatty()
        self.colour = colour
        self.commands = {
            "search": self.search,
            "add": self.add,
            "list": self.list_favourites,
            "remove": self.remove,
            "update": self.update,
        }

    def _say(self, text: str, colour: str = None) -> None:
        if colour and self.colour:
            text = colourize(text, colour)
        print(text, file=self.out)

    def _error(self, text: str) -> None:
        print(text, file=self.err)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def dispatch(self, line: str) -> bool:
        """Run one input line. Returns False when the user asked to leave."""
        parts = line.split()
        if not parts:
            return True

        cmd, args = parts[0], parts[1:]
        if cmd in ("exit", "quit"):
            return False
        if cmd == "help":
            self._say(HELP_TEXT)
            return True

        fn = self.commands.get(cmd)
        if fn is None:
            self._say(f'Unknown command "{cmd}". Type "help" for a list.')
        else:
            fn(args)
        return True

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def search(self, args) -> None:
        if not args:
            return self._say("Usage: search <city>")
        try:
            self._say(format_weather(self.service.fetch_weather(args[0])))
        except WeatherServiceError as exc:
            self._error(str(exc))

    def add(self, args) -> None:
        if not args:
            return self._say("Usage: add <city>")
        city = args[0]
        try:
            self.store.check_can_add(city)
        except FavouritesError as exc:
            return self._say(str(exc))

        try:
            self.service.fetch_weather(city)
            self.store.add(city)
        except (WeatherServiceError, FavouritesError) as exc:
            return self._error(str(exc))
        self._say(f'Added "{city}"', Colours.GREEN)

    def list_favourites(self, args=None) -> None:
        if not len(self.store):
            return self._say('No favourites yet. Use "add <city>" to add one.')

        self._say("Favourites", Colours.CYAN)
        for city, result in self.service.fetch_many(self.store):
            if isinstance(result, Exception):
                self._say(f"Error with {city}: unable to fetch weather right now")
            else:
                self._say(format_weather(result))

    def remove(self, args) -> None:
        if not args:
            return self._say("Usage: remove <city>")
        city = args[0]
        try:
            self.store.remove(city)
        except FavouritesError as exc:
            return self._say(str(exc))
        self._say(f'Removed "{city}"', Colours.YELLOW)

    def update(self, args) -> None:
        if len(args) < 2:
            return self._say("Usage: update <oldCity> <newCity>")
        old, new = args[0], args[1]
        try:
            self.store.check_can_replace(old, new)
        except FavouritesError as exc:
            return self._say(str(exc))

        try:
            self.service.fetch_weather(new)
            self.store.replace(old, new)
        except (WeatherServiceError, FavouritesError) as exc:
            return self._error(str(exc))
        self._say(f'Replaced "{old}" with "{new}"', Colours.GREEN)

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------
    def run(self, read=input) -> None:
        self._say('Call Current City Weather - type "help" for commands.')
        while True:
            try:
                line = read("> ")
            except EOFError:
                break
            if not self.dispatch(line):
                break
        self._say("Exiting Weather app...")


def main() -> None:
    configure_logging()
    load_local_env()
    try:
        api_key = ensure_api_key()
    except MissingApiKeyError as exc:
        sys.exit(str(exc))

    store = FavouritesStore().load()
    logger.info("Loaded %d favourites from %s", len(store), store.path)
    WeatherShell(OpenWeatherService(api_key), store).run()


if __name__ == "__main__":
    main()
