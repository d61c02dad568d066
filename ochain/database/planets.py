"""Table of planets, keyed by universe and coordinates."""

from __future__ import annotations

from ochain.database.store import LATEST
from ochain.database.table import Table


class PlanetTable(Table):
    """Planets keyed by ``universe_id`` and a coordinate id.

    The coordinate id starts with the galaxy, then the solar system, joined
    by underscores, so planets of one galaxy or solar system share a prefix.
    """

    prefix = "planet_"

    def key_of(self, universe_id: str, coordinate_id: str) -> bytes:
        """Return the storage key of the planet at ``coordinate_id``."""
        return self._key(universe_id, coordinate_id)

    def exists(self, universe_id: str, coordinate_id: str, at: int = LATEST) -> bool:
        return self._exists_key(self.key_of(universe_id, coordinate_id), at)

    def get(self, universe_id: str, coordinate_id: str, at: int = LATEST) -> dict:
        return self._get_key(self.key_of(universe_id, coordinate_id), at)

    def insert(self, universe_id: str, coordinate_id: str, planet: dict) -> None:
        self._insert_key(self.key_of(universe_id, coordinate_id), planet, "planet")

    def update(self, universe_id: str, coordinate_id: str, planet: dict) -> None:
        self._update_key(self.key_of(universe_id, coordinate_id), planet, "planet")

    def upsert(self, universe_id: str, coordinate_id: str, planet: dict) -> None:
        self._upsert_key(self.key_of(universe_id, coordinate_id), planet)

    def delete(self, universe_id: str, coordinate_id: str) -> None:
        self._delete_key(self.key_of(universe_id, coordinate_id))

    def get_all(self, universe_id: str, at: int = LATEST) -> list[dict]:
        """Return every planet whose key starts with the universe id."""
        return self._scan(self.prefix + universe_id, at)

    def get_all_in_galaxy(
        self, universe_id: str, galaxy: str, at: int = LATEST
    ) -> list[dict]:
        """Return the planets whose coordinate id starts with ``galaxy``."""
        return self._scan(f"{self.prefix}{universe_id}_{galaxy}", at)

    def get_all_in_solar_system(
        self, universe_id: str, galaxy: str, solar_system: str, at: int = LATEST
    ) -> list[dict]:
        """Return the planets whose coordinate id starts with ``galaxy_solar_system``."""
        return self._scan(f"{self.prefix}{universe_id}_{galaxy}_{solar_system}", at)