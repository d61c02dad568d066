"""Table of chain validators."""

from __future__ import annotations

from ochain.database.store import LATEST, KeyNotFoundError
from ochain.database.table import Table


class ValidatorTable(Table):
    """Validators keyed by their ``public_key``."""

    prefix = "validator_"

    def exists(self, address: str, at: int = LATEST) -> bool:
        return self._exists_key(self._key(address), at)

    def is_enabled(self, address: str) -> bool:
        """Tell whether the validator stored under ``address`` is enabled.

        A validator that is not stored counts as not enabled.
        """
        try:
            validator = self._get_key(self._key(address))
        except KeyNotFoundError:
            return False
        return bool(validator.get("enabled", False))

    def get_by_address(self, address: str, at: int = LATEST) -> dict:
        """Return the validator whose ``public_key`` is ``address``.

        When several match, the last in key order wins; when none match an
        empty record is returned.
        """
        found: dict = {}
        for validator in self.get_all(at):
            if validator.get("public_key") == address:
                found = validator
        return found

    def get_by_id(self, validator_id: int, at: int = LATEST) -> dict:
        """Return the validator stored under the decimal form of ``validator_id``."""
        return self._get_key(self._key(int(validator_id)), at)

    def insert(self, validator: dict) -> None:
        self._insert_key(self._key(validator["public_key"]), validator, "validator")

    def update(self, validator: dict) -> None:
        self._update_key(self._key(validator["public_key"]), validator, "validator")

    def upsert(self, validator: dict) -> None:
        self._upsert_key(self._key(validator["public_key"]), validator)

    def delete(self, address: str) -> None:
        self._delete_key(self._key(address))

    def get_all(self, at: int = LATEST) -> list[dict]:
        return self._scan(self.prefix, at)