# ochain

Storage layer for the OChain game network: a versioned (multi-version,
timestamped) key-value store, and tables that keep game records in it as
CBOR-encoded dictionaries.

## Install

```
pip install ochain
```

To run the test suite:

```
pip install "ochain[test]"
pytest
```

## Configuration

`ochain.config` holds `OChainConfig`, a dataclass with three fields:
`evm_rpc`, `evm_chain_id` and `evm_portal_address`. `default_config()`
returns one filled with the defaults (`DEFAULT_EVM_RPC`,
`DEFAULT_EVM_CHAIN_ID`, `DEFAULT_EVM_PORTAL_ADDRESS`).

## The versioned store

`ochain.database.store.VersionedStore` keeps every committed version of
every key, stamped with the timestamp it was committed at. Reads name a
timestamp `at` and see the newest version committed at or before it; the
default, `LATEST` (2**64 - 1), sees the newest of all.

- `VersionedStore(path=None)` works in memory. With a path, the store is
  loaded from that file if it exists and written back (as CBOR) on every
  commit and on `close()`. It can be used as a context manager.
- `get(key, at=LATEST)` returns the bytes of a key, or raises
  `KeyNotFoundError` (a `KeyError`) when none is visible at `at`.
- `scan(prefix, at=LATEST)` yields `(key, value)` pairs whose key starts
  with `prefix`, in key order.
- `begin(read_ts)` opens a `Transaction`. Its `get(key)` sees its own
  pending writes first, then the store as of `read_ts`; `set(key, value)`
  and `delete(key)` queue changes; `commit()` writes them all at
  `read_ts`. A committed transaction refuses further writes, and a closed
  store refuses further use, both with `ValueError`.

## Tables

`ochain.database.table` provides `encode_record` / `decode_record` (CBOR),
the base class `Table`, and the errors `DuplicateRecordError`,
`MissingRecordError` and `NoTransactionError`. A table is built over a
store and given its transaction with `set_current_txn(txn)`; the
`current_txn` property shows it.

Every table follows the same pattern:

- `exists(...)`, `get(...)` and `get_all(...)` read committed data, with
  an optional `at` timestamp. `get` raises `KeyNotFoundError` when the
  record is missing.
- `insert(...)` raises `DuplicateRecordError` if the record exists,
  `update(...)` raises `MissingRecordError` if it does not, `upsert(...)`
  writes either way, and `delete(...)` removes it.
- Writes go into the current transaction; without one they raise
  `NoTransactionError`.

The existence checks of `insert` and `update` look at committed data as of
the transaction's read timestamp, so a record written earlier in the same
uncommitted transaction is not yet seen by them.

The tables:

| Table | Module | Key |
| --- | --- | --- |
| `BuildingTable` | `ochain.database.table` | record `"id"` |
| `TechnologyTable`, `DefenseTable` | `ochain.database.definitions` | record `"id"` |
| `StateTable` | `ochain.database.state` | one fixed key |
| `AllianceTable` | `ochain.database.alliance` | record `"id"` |
| `BridgeTransactionTable` | `ochain.database.bridge` | record `"hash"` |
| `PlanetTable` | `ochain.database.planets` | universe id and coordinate id |
| `UpgradeTable` | `ochain.database.upgrades` | upgrade id, given by the caller |
| `ValidatorTable` | `ochain.database.validators` | record `"public_key"` |
| `FleetTable` | `ochain.database.fleets` | universe id, owner address and fleet `"id"` |
| `RewardProgramTable` | `ochain.database.rewards` | record `"id"` |

Points particular to some of them:

- `StateTable.get()` returns `default_state()` (size, height and
  latest portal update zero, empty hash) when no state is stored.
- `AllianceTable` also stores join requests, keyed by their `"id"`:
  `insert_join_request` and `update_join_request` write them,
  `get_join_request` reads one, `get_join_request_by_account` returns
  those whose `"from"` matches, and `has_pending_request` tells whether a
  sender has one with no `"answered_at"`. `get_by_universe` and
  `get_join_requests_by_alliance` return every stored request, filtered
  only by answer state when `only_not_answered` is true.
- `BridgeTransactionTable.get_by_account(address)` filters on
  `"account"`.
- `PlanetTable.key_of(universe_id, coordinate_id)` gives a planet's key;
  `get_all`, `get_all_in_galaxy` and `get_all_in_solar_system` select by
  key prefix, so coordinate ids are expected to begin with the galaxy
  and then the solar system, joined by underscores.
- `UpgradeTable` selects a planet's upgrades by the prefix
  `universe_planet`, and by type with `UpgradeType.BUILDING` (0) or
  `UpgradeType.TECHNOLOGY` (1) appended; the pending variants drop
  upgrades whose `"executed"` is true.
- `ValidatorTable.is_enabled(address)` is false for a missing
  validator; `get_by_address` returns the last validator whose
  `"public_key"` matches, or an empty dict; `get_by_id` reads the key
  made from the decimal id.
- `FleetTable.exists(universe_id, fleet_id)` and the checks in
  `insert` / `update` look at a key made from the universe and fleet id
  only, without the owner address.

## Example

```python
from ochain.database.store import VersionedStore, KeyNotFoundError
from ochain.database.table import BuildingTable

store = VersionedStore()
buildings = BuildingTable(store)

txn = store.begin(100)
buildings.set_current_txn(txn)
buildings.insert({"id": "metal_mine", "name": "Metal Mine"})
txn.commit()

buildings.get("metal_mine")           # {"id": "metal_mine", "name": "Metal Mine"}
buildings.exists("metal_mine", at=99) # False: committed at 100
```

## What this package does not do

It is a storage library only. It runs no node, has no command line, and
does not process or validate transactions. There is no object that
groups all the tables: create each table over a shared `VersionedStore`
and give each the transaction yourself. Only the record kinds listed
above have tables; records such as accounts, universes, spaceships,
epochs and resource markets have none here.