"""Table of alliances and the join requests sent to them."""

from __future__ import annotations

from ochain.database.store import LATEST
from ochain.database.table import Table

JOIN_REQUEST_PREFIX = "ajr_"


class AllianceTable(Table):
    """Alliances keyed by their ``id``; join requests live under their own prefix."""

    prefix = "alliance_"

    def _request_key(self, request_id: str) -> bytes:
        return (JOIN_REQUEST_PREFIX + str(request_id)).encode()

    def _join_requests(self, at: int) -> list[dict]:
        return self._scan(JOIN_REQUEST_PREFIX, at)

    def exists(self, alliance_id: str, at: int = LATEST) -> bool:
        return self._exists_key(self._key(alliance_id), at)

    def get(self, alliance_id: str, at: int = LATEST) -> dict:
        return self._get_key(self._key(alliance_id), at)

    def get_join_request(self, request_id: str, at: int = LATEST) -> dict:
        return self._get_key(self._request_key(request_id), at)

    def insert(self, alliance: dict) -> None:
        self._insert_key(self._key(alliance["id"]), alliance, "alliance")

    def update(self, alliance: dict) -> None:
        self._update_key(self._key(alliance["id"]), alliance, "alliance")

    def upsert(self, alliance: dict) -> None:
        self._upsert_key(self._key(alliance["id"]), alliance)

    def delete(self, alliance_id: str) -> None:
        self._delete_key(self._key(alliance_id))

    def get_all(self, at: int = LATEST) -> list[dict]:
        return self._scan(self.prefix, at)

    def get_by_universe(
        self, universe_id: str, only_not_answered: bool = False, at: int = LATEST
    ) -> list[dict]:
        """Return stored join requests, only unanswered ones if asked.

        Requests carry no universe, so every request is considered.
        """
        return [
            request
            for request in self._join_requests(at)
            if not only_not_answered or request.get("answered_at", 0) == 0
        ]

    def has_pending_request(self, sender: str, at: int = LATEST) -> bool:
        """Tell whether ``sender`` has a join request not yet answered."""
        return bool(self.get_join_request_by_account(sender, True, at))

    def insert_join_request(self, request: dict) -> None:
        self._upsert_key(self._request_key(request["id"]), request)

    def get_join_requests_by_alliance(
        self, alliance_id: str, only_not_answered: bool = False, at: int = LATEST
    ) -> list[dict]:
        """Return stored join requests, only unanswered ones if asked.

        The filter applies to answer state only; every request is considered.
        """
        return [
            request
            for request in self._join_requests(at)
            if not only_not_answered or request.get("answered_at", 0) == 0
        ]

    def get_join_request_by_account(
        self, sender: str, only_not_answered: bool = False, at: int = LATEST
    ) -> list[dict]:
        """Return the join requests sent by ``sender``."""
        return [
            request
            for request in self._join_requests(at)
            if request.get("from") == sender
            and (not only_not_answered or request.get("answered_at", 0) == 0)
        ]

    def update_join_request(self, request: dict) -> None:
        self._upsert_key(self._request_key(request["id"]), request)