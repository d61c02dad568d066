"""Record encoding and the shared behaviour of database tables."""

from __future__ import annotations

from typing import Any

import cbor2

from ochain.database.store import LATEST, KeyNotFoundError, Transaction, VersionedStore


class DuplicateRecordError(Exception):
    """Raised when inserting a record whose key already exists."""


class MissingRecordError(Exception):
    """Raised when updating a record that does not exist."""


class NoTransactionError(Exception):
    """Raised when a write is attempted without a current transaction."""


def encode_record(record: Any) -> bytes:
    """Serialise a record to CBOR."""
    return cbor2.dumps(record)


def decode_record(data: bytes) -> Any:
    """Deserialise a CBOR record."""
    return cbor2.loads(data)


class Table:
    """Base for tables whose rows live under a common key prefix."""

    prefix = ""

    def __init__(self, store: VersionedStore) -> None:
        self._store = store
        self._txn: Transaction | None = None

    def set_current_txn(self, txn: Transaction | None) -> None:
        self._txn = txn

    @property
    def current_txn(self) -> Transaction | None:
        return self._txn

    def _key(self, *parts: object) -> bytes:
        return (self.prefix + "_".join(str(part) for part in parts)).encode()

    def _require_txn(self) -> Transaction:
        if self._txn is None:
            raise NoTransactionError("no transaction in progress")
        return self._txn

    def _exists_key(self, key: bytes, at: int = LATEST) -> bool:
        try:
            self._store.get(key, at)
        except KeyNotFoundError:
            return False
        return True

    def _get_key(self, key: bytes, at: int = LATEST) -> Any:
        return decode_record(self._store.get(key, at))

    def _insert_key(self, key: bytes, record: Any, what: str) -> None:
        txn = self._require_txn()
        if self._exists_key(key, txn.read_ts):
            raise DuplicateRecordError(f"{what} already exists")
        txn.set(key, encode_record(record))

    def _update_key(self, key: bytes, record: Any, what: str) -> None:
        txn = self._require_txn()
        if not self._exists_key(key, txn.read_ts):
            raise MissingRecordError(f"{what} doesn't exist")
        txn.set(key, encode_record(record))

    def _upsert_key(self, key: bytes, record: Any) -> None:
        self._require_txn().set(key, encode_record(record))

    def _delete_key(self, key: bytes) -> None:
        self._require_txn().delete(key)

    def _scan(self, prefix: str, at: int = LATEST) -> list[Any]:
        return [decode_record(value) for _, value in self._store.scan(prefix.encode(), at)]


class BuildingTable(Table):
    """Building definitions keyed by their ``id``."""

    prefix = "building_"

    def exists(self, building_id: str, at: int = LATEST) -> bool:
        return self._exists_key(self._key(building_id), at)

    def get(self, building_id: str, at: int = LATEST) -> dict:
        return self._get_key(self._key(building_id), at)

    def insert(self, building: dict) -> None:
        self._insert_key(self._key(building["id"]), building, "building")

    def update(self, building: dict) -> None:
        self._update_key(self._key(building["id"]), building, "building")

    def upsert(self, building: dict) -> None:
        self._upsert_key(self._key(building["id"]), building)

    def delete(self, building_id: str) -> None:
        self._delete_key(self._key(building_id))

    def get_all(self, at: int = LATEST) -> list[dict]:
        return self._scan(self.prefix, at)