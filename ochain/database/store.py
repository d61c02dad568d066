"""A versioned key-value store with timestamped transactions."""

from __future__ import annotations

import bisect
import os
import threading
from collections.abc import Iterator
from pathlib import Path

import cbor2

LATEST = 2**64 - 1


class KeyNotFoundError(KeyError):
    """Raised when a key has no visible value at the requested timestamp."""


class VersionedStore:
    """Keeps every committed version of each key, indexed by commit timestamp.

    Reads name a timestamp and see the newest version committed at or before it.
    When a path is given the store is loaded from it and saved on each commit.
    """

    def __init__(self, path: str | os.PathLike | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._versions: dict[bytes, list[tuple[int, bytes | None]]] = {}
        self._lock = threading.RLock()
        self._closed = False
        if self._path is not None and self._path.exists():
            self._load()

    def __enter__(self) -> VersionedStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("store is closed")

    def begin(self, read_ts: int) -> Transaction:
        """Start a writable transaction that reads and commits at ``read_ts``."""
        self._check_open()
        return Transaction(self, read_ts)

    def _visible(self, key: bytes, at: int) -> bytes | None:
        versions = self._versions.get(key)
        if not versions:
            return None
        index = bisect.bisect_right(versions, at, key=lambda entry: entry[0])
        if index == 0:
            return None
        return versions[index - 1][1]

    def get(self, key: bytes, at: int = LATEST) -> bytes:
        """Return the value of ``key`` as seen at timestamp ``at``."""
        with self._lock:
            self._check_open()
            value = self._visible(key, at)
        if value is None:
            raise KeyNotFoundError(key)
        return value

    def scan(self, prefix: bytes, at: int = LATEST) -> Iterator[tuple[bytes, bytes]]:
        """Yield ``(key, value)`` pairs whose key starts with ``prefix``, in key order."""
        with self._lock:
            self._check_open()
            found = []
            for key in sorted(k for k in self._versions if k.startswith(prefix)):
                value = self._visible(key, at)
                if value is not None:
                    found.append((key, value))
        yield from found

    def _apply(self, writes: dict[bytes, bytes | None], ts: int) -> None:
        with self._lock:
            self._check_open()
            for key, value in writes.items():
                versions = self._versions.setdefault(key, [])
                index = bisect.bisect_left(versions, ts, key=lambda entry: entry[0])
                if index < len(versions) and versions[index][0] == ts:
                    versions[index] = (ts, value)
                else:
                    versions.insert(index, (ts, value))
            self._save()

    def _save(self) -> None:
        if self._path is None:
            return
        payload = [
            [key, [[ts, value] for ts, value in versions]]
            for key, versions in self._versions.items()
        ]
        tmp = self._path.with_name(self._path.name + ".tmp")
        tmp.write_bytes(cbor2.dumps(payload))
        os.replace(tmp, self._path)

    def _load(self) -> None:
        payload = cbor2.loads(self._path.read_bytes())
        self._versions = {
            bytes(key): [(int(ts), value) for ts, value in versions]
            for key, versions in payload
        }

    def close(self) -> None:
        """Save pending state and refuse further use."""
        with self._lock:
            if not self._closed:
                self._save()
                self._closed = True


class Transaction:
    """A batch of writes committed together at the transaction's read timestamp."""

    def __init__(self, store: VersionedStore, read_ts: int) -> None:
        self._store = store
        self.read_ts = read_ts
        self._writes: dict[bytes, bytes | None] = {}
        self._done = False

    def _check_active(self) -> None:
        if self._done:
            raise ValueError("transaction has already been committed")

    def get(self, key: bytes) -> bytes:
        """Return the value of ``key``, seeing this transaction's own writes."""
        if key in self._writes:
            value = self._writes[key]
            if value is None:
                raise KeyNotFoundError(key)
            return value
        return self._store.get(key, self.read_ts)

    def set(self, key: bytes, value: bytes) -> None:
        self._check_active()
        self._writes[key] = bytes(value)

    def delete(self, key: bytes) -> None:
        self._check_active()
        self._writes[key] = None

    def commit(self) -> None:
        """Write every pending change at ``read_ts``."""
        self._check_active()
        self._store._apply(self._writes, self.read_ts)
        self._done = True