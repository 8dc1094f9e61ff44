"""
Runtime configuration for the weather CLI.

Values come from the process environment, optionally seeded from a local
`.env` file in the working directory.
"""

import logging
import os
import re
from pathlib import Path
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DOTENV = Path.cwd() / ".env"
API_KEY_VAR = "OPENWEATHER_API_KEY"

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
REQUEST_TIMEOUT = float(os.environ.get("OPENWEATHER_TIMEOUT", "10"))

FAV_FILE = Path(os.environ.get("WEATHER_FAV_FILE", "favourites.json"))
MAX_FAVOURITES = 3

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

_ENV_LINE = re.compile(r"^\s*([\w.-]+)\s*=\s*(.*?)\s*$")
_QUOTES = re.compile(r"^['\"]|['\"]$")


class Colours:
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    RESET = "\033[0m"


class MissingApiKeyError(ValueError):
    """No OpenWeather API key in the environment and none was entered."""


def configure_logging(level: Optional[str] = None) -> None:
    name = (level or os.environ.get("WEATHER_LOG_LEVEL", "WARNING")).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def load_local_env(path: Path = DOTENV) -> None:
    """Export KEY=VALUE pairs from `path` without overriding existing variables."""
    path = Path(path)
    if not path.exists():
        return

    for line in path.read_text(encoding="utf-8").splitlines():
        m = _ENV_LINE.match(line)
        if m and not os.environ.get(m.group(1)):
            os.environ[m.group(1)] = _QUOTES.sub("", m.group(2))
    logger.debug("Loaded environment from %s", path)


def ensure_api_key(path: Path = DOTENV, prompt: Callable[[str], str] = input) -> str:
    """
    Return the OpenWeather API key, asking for it if it isn't configured.

    A freshly entered key is written to `path` so the next run picks it up.
    """
    key = os.environ.get(API_KEY_VAR)
    if key:
        return key

    key = prompt("Enter your OpenWeather API key: ").strip()
    if not key:
        raise MissingApiKeyError("API key is required.")

    Path(path).write_text(f"{API_KEY_VAR}={key}\n", encoding="utf-8")
    print("Saved API key to .env")

    os.environ[API_KEY_VAR] = key
    return key
