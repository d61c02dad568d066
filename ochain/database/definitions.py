"""Tables for technology and defense definitions."""

from __future__ import annotations

from ochain.database.store import LATEST
from ochain.database.table import Table


class TechnologyTable(Table):
    """Technology definitions keyed by their ``id``."""

    prefix = "technology_"

    def exists(self, technology_id: str, at: int = LATEST) -> bool:
        return self._exists_key(self._key(technology_id), at)

    def get(self, technology_id: str, at: int = LATEST) -> dict:
        return self._get_key(self._key(technology_id), at)

    def insert(self, technology: dict) -> None:
        self._insert_key(self._key(technology["id"]), technology, "technology")

    def update(self, technology: dict) -> None:
        self._update_key(self._key(technology["id"]), technology, "technology")

    def upsert(self, technology: dict) -> None:
        self._upsert_key(self._key(technology["id"]), technology)

    def delete(self, technology_id: str) -> None:
        self._delete_key(self._key(technology_id))

    def get_all(self, at: int = LATEST) -> list[dict]:
        return self._scan(self.prefix, at)


class DefenseTable(Table):
    """Defense definitions keyed by their ``id``."""

    prefix = "defense_"

    def exists(self, defense_id: str, at: int = LATEST) -> bool:
        return self._exists_key(self._key(defense_id), at)

    def get(self, defense_id: str, at: int = LATEST) -> dict:
        return self._get_key(self._key(defense_id), at)

    def insert(self, defense: dict) -> None:
        self._insert_key(self._key(defense["id"]), defense, "defense")

    def update(self, defense: dict) -> None:
        self._update_key(self._key(defense["id"]), defense, "defense")

    def upsert(self, defense: dict) -> None:
        self._upsert_key(self._key(defense["id"]), defense)

    def delete(self, defense_id: str) -> None:
        self._delete_key(self._key(defense_id))

    def get_all(self, at: int = LATEST) -> list[dict]:
        return self._scan(self.prefix, at)