"""Table of building and technology upgrades."""

from __future__ import annotations

from enum import IntEnum

from ochain.database.store import LATEST
from ochain.database.table import Table

UPGRADE_PREFIX = "upgrade_"


class UpgradeType(IntEnum):
    """Kind of thing an upgrade raises the level of."""

    BUILDING = 0
    TECHNOLOGY = 1


class UpgradeTable(Table):
    """Upgrades keyed by their id.

    An upgrade id starts with the universe id, the planet coordinate id and
    the upgrade type, joined by underscores, so upgrades of one planet (and
    of one type on that planet) share a key prefix.
    """

    prefix = UPGRADE_PREFIX + "_"

    def exists(self, upgrade_id: str, at: int = LATEST) -> bool:
        return self._exists_key(self._key(upgrade_id), at)

    def get(self, upgrade_id: str, at: int = LATEST) -> dict:
        return self._get_key(self._key(upgrade_id), at)

    def insert(self, upgrade_id: str, upgrade: dict) -> None:
        self._insert_key(self._key(upgrade_id), upgrade, "upgrade")

    def update(self, upgrade_id: str, upgrade: dict) -> None:
        self._update_key(self._key(upgrade_id), upgrade, "upgrade")

    def upsert(self, upgrade_id: str, upgrade: dict) -> None:
        self._upsert_key(self._key(upgrade_id), upgrade)

    def delete(self, upgrade_id: str) -> None:
        self._delete_key(self._key(upgrade_id))

    def get_all(self, at: int = LATEST) -> list[dict]:
        return self._scan(UPGRADE_PREFIX, at)

    def _planet_prefix(self, universe_id: str, planet_coordinate_id: str) -> str:
        return f"{self.prefix}{universe_id}_{planet_coordinate_id}"

    def _typed_prefix(
        self, universe_id: str, planet_coordinate_id: str, upgrade_type: UpgradeType
    ) -> str:
        base = self._planet_prefix(universe_id, planet_coordinate_id)
        return f"{base}_{int(upgrade_type)}"

    def get_by_planet(
        self, universe_id: str, planet_coordinate_id: str, at: int = LATEST
    ) -> list[dict]:
        """Return every upgrade of the planet."""
        return self._scan(self._planet_prefix(universe_id, planet_coordinate_id), at)

    def get_building_upgrades_by_planet(
        self, universe_id: str, planet_coordinate_id: str, at: int = LATEST
    ) -> list[dict]:
        """Return the planet's upgrades whose type is building."""
        return [
            upgrade
            for upgrade in self.get_by_planet(universe_id, planet_coordinate_id, at)
            if upgrade.get("upgrade_type") == UpgradeType.BUILDING
        ]

    def get_pending_building_upgrades_by_planet(
        self, universe_id: str, planet_coordinate_id: str, at: int = LATEST
    ) -> list[dict]:
        """Return the planet's building upgrades not yet executed."""
        prefix = self._typed_prefix(universe_id, planet_coordinate_id, UpgradeType.BUILDING)
        return [u for u in self._scan(prefix, at) if not u.get("executed", False)]

    def get_technology_upgrades_by_planet(
        self, universe_id: str, planet_coordinate_id: str, at: int = LATEST
    ) -> list[dict]:
        """Return the planet's upgrades whose type is technology."""
        prefix = self._typed_prefix(
            universe_id, planet_coordinate_id, UpgradeType.TECHNOLOGY
        )
        return [
            upgrade
            for upgrade in self._scan(prefix, at)
            if upgrade.get("upgrade_type") == UpgradeType.TECHNOLOGY
        ]

    def get_pending_technology_upgrades_by_planet(
        self, universe_id: str, planet_coordinate_id: str, at: int = LATEST
    ) -> list[dict]:
        """Return the planet's technology upgrades not yet executed."""
        prefix = self._typed_prefix(
            universe_id, planet_coordinate_id, UpgradeType.TECHNOLOGY
        )
        return [u for u in self._scan(prefix, at) if not u.get("executed", False)]