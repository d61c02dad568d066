"""Table of fleets owned by universe accounts."""

from __future__ import annotations

from ochain.database.store import LATEST
from ochain.database.table import Table


class FleetTable(Table):
    """Fleets keyed by ``universe_id``, owner ``address`` and fleet ``id``.

    The existence check used by ``exists``, ``insert`` and ``update`` looks
    at the key built from the universe and fleet id only, without the owner.
    """

    prefix = "fleet_"

    def exists(self, universe_id: str, fleet_id: str, at: int = LATEST) -> bool:
        return self._exists_key(self._key(universe_id, fleet_id), at)

    def _check_key(self, universe_id: str, fleet_id: str, at: int) -> bool:
        return self.exists(universe_id, fleet_id, at)

    def get(
        self, universe_id: str, address: str, fleet_id: str, at: int = LATEST
    ) -> dict:
        return self._get_key(self._key(universe_id, address, fleet_id), at)

    def insert(self, universe_id: str, address: str, fleet: dict) -> None:
        from ochain.database.table import DuplicateRecordError

        txn = self._require_txn()
        if self._check_key(universe_id, fleet["id"], txn.read_ts):
            raise DuplicateRecordError("fleet already exists")
        self._upsert_key(self._key(universe_id, address, fleet["id"]), fleet)

    def update(self, universe_id: str, address: str, fleet: dict) -> None:
        from ochain.database.table import MissingRecordError

        txn = self._require_txn()
        if not self._check_key(universe_id, fleet["id"], txn.read_ts):
            raise MissingRecordError("fleet doesn't exist")
        self._upsert_key(self._key(universe_id, address, fleet["id"]), fleet)

    def upsert(self, universe_id: str, address: str, fleet: dict) -> None:
        self._upsert_key(self._key(universe_id, address, fleet["id"]), fleet)

    def delete(self, universe_id: str, address: str, fleet_id: str) -> None:
        self._delete_key(self._key(universe_id, address, fleet_id))

    def get_account_fleet(
        self, universe_id: str, address: str, at: int = LATEST
    ) -> list[dict]:
        """Return the fleets whose key starts with the universe and owner address."""
        return self._scan(f"{self.prefix}{universe_id}_{address}", at)

    def get_all(self, universe_id: str, at: int = LATEST) -> list[dict]:
        """Return every fleet whose key starts with the universe id."""
        return self._scan(self.prefix + universe_id, at)