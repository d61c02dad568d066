"""Table of transactions bridged from the EVM chain."""

from __future__ import annotations

from ochain.database.store import LATEST
from ochain.database.table import Table


class BridgeTransactionTable(Table):
    """Bridge transactions keyed by their ``hash``."""

    prefix = "bridge_txs_"

    def exists(self, tx_hash: str, at: int = LATEST) -> bool:
        return self._exists_key(self._key(tx_hash), at)

    def get(self, tx_hash: str, at: int = LATEST) -> dict:
        return self._get_key(self._key(tx_hash), at)

    def insert(self, transaction: dict) -> None:
        self._insert_key(self._key(transaction["hash"]), transaction, "transaction")

    def update(self, transaction: dict) -> None:
        self._update_key(self._key(transaction["hash"]), transaction, "transaction")

    def upsert(self, transaction: dict) -> None:
        self._upsert_key(self._key(transaction["hash"]), transaction)

    def delete(self, tx_hash: str) -> None:
        self._delete_key(self._key(tx_hash))

    def get_all(self, at: int = LATEST) -> list[dict]:
        return self._scan(self.prefix, at)

    def get_by_account(self, address: str, at: int = LATEST) -> list[dict]:
        """Return the transactions whose ``account`` is ``address``."""
        return [tx for tx in self.get_all(at) if tx.get("account") == address]