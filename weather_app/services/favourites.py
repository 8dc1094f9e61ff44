import json
import logging
from pathlib import Path
from typing import Iterator, List

from ..config import FAV_FILE, MAX_FAVOURITES

logger = logging.getLogger(__name__)


class FavouritesError(ValueError):
    """A favourites change was refused; the message is meant for the user."""


class FavouritesStore:
    """Up to `limit` city names kept in a JSON array on disk."""

    def __init__(self, path: Path = FAV_FILE, limit: int = MAX_FAVOURITES):
        self.path = Path(path)
        self.limit = limit
        self._cities: List[str] = []

    def load(self) -> "FavouritesStore":
        if not self.path.exists():
            self._cities = []
            return self

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable favourites file %s: %s", self.path, exc)
            data = []
        if not isinstance(data, list):
            logger.warning("Ignoring favourites file %s: expected a list", self.path)
            data = []

        self._cities = [str(c) for c in data]
        return self

    def save(self) -> None:
        self.path.write_text(json.dumps(self._cities, indent=2), encoding="utf-8")

    @property
    def cities(self) -> List[str]:
        return list(self._cities)

    @property
    def is_full(self) -> bool:
        return len(self._cities) >= self.limit

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._cities))

    def __len__(self) -> int:
        return len(self._cities)

    def __contains__(self, city) -> bool:
        return city in self._cities

    # ------------------------------------------------------------------
    # Mutations; each one checks first, then persists
    # ------------------------------------------------------------------
    def check_can_add(self, city: str) -> None:
        if city in self._cities:
            raise FavouritesError(f'"{city}" is already in favourites.')
        if self.is_full:
            raise FavouritesError(
                f"Max favourites of {self.limit} reached. Remove one first or update"
            )

    def add(self, city: str) -> None:
        self.check_can_add(city)
        self._cities.append(city)
        self.save()

    def remove(self, city: str) -> None:
        if city not in self._cities:
            raise FavouritesError(f'"{city}" is not in favourites.')
        self._cities.remove(city)
        self.save()

    def check_can_replace(self, old: str, new: str) -> None:
        if old not in self._cities:
            raise FavouritesError(f'"{old}" is not in favourites.')
        if new in self._cities:
            raise FavouritesError(f'"{new}" is already in favourites.')

    def replace(self, old: str, new: str) -> None:
        self.check_can_replace(old, new)
        self._cities[self._cities.index(old)] = new
        self.save()
