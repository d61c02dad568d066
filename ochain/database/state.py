"""The single record holding the chain's application state."""

from __future__ import annotations

from ochain.database.store import LATEST, KeyNotFoundError
from ochain.database.table import Table

STATE_KEY = "ochain_network_state"


def default_state() -> dict:
    """Return the state of a chain that has processed nothing yet."""
    return {"size": 0, "height": 0, "hash": b"", "latest_portal_update": 0}


class StateTable(Table):
    """Stores the application state under one fixed key."""

    prefix = STATE_KEY

    def exists(self, at: int = LATEST) -> bool:
        return self._exists_key(STATE_KEY.encode(), at)

    def get(self, at: int = LATEST) -> dict:
        """Return the stored state, or the default state when none is stored."""
        try:
            return self._get_key(STATE_KEY.encode(), at)
        except KeyNotFoundError:
            return default_state()

    def upsert(self, state: dict) -> None:
        self._upsert_key(STATE_KEY.encode(), state)