"""Table of reward programs."""

from __future__ import annotations

from ochain.database.store import LATEST
from ochain.database.table import Table


class RewardProgramTable(Table):
    """Reward programs keyed by their ``id``."""

    prefix = "reward_programs_"

    def exists(self, program_id, at: int = LATEST) -> bool:
        return self._exists_key(self._key(program_id), at)

    def get(self, program_id, at: int = LATEST) -> dict:
        return self._get_key(self._key(program_id), at)

    def insert(self, program: dict) -> None:
        self._insert_key(self._key(program["id"]), program, "reward program")

    def update(self, program: dict) -> None:
        self._update_key(self._key(program["id"]), program, "reward program")

    def upsert(self, program: dict) -> None:
        self._upsert_key(self._key(program["id"]), program)

    def delete(self, program_id) -> None:
        self._delete_key(self._key(program_id))

    def get_all(self, at: int = LATEST) -> list[dict]:
        return self._scan(self.prefix, at)