import pytest

from ochain.database.definitions import DefenseTable, TechnologyTable
from ochain.database.store import KeyNotFoundError, VersionedStore
from ochain.database.table import DuplicateRecordError, MissingRecordError

COMPUTER = {"id": "COMPUTER", "name": "Computer", "base_cost": {"metal": 200, "crystal": 100}}
LAUNCHER = {"id": "ROCKET_LAUNCHER", "name": "Rocket launcher", "cost": {"metal": 2000}}


def _in_txn(store, tables, ts, action):
    txn = store.begin(ts)
    for table in tables:
        table.set_current_txn(txn)
    action()
    txn.commit()


def test_technology_round_trip():
    store = VersionedStore()
    table = TechnologyTable(store)
    _in_txn(store, [table], 1, lambda: table.insert(COMPUTER))
    assert table.get("COMPUTER") == COMPUTER
    assert table.get_all() == [COMPUTER]


def test_tables_do_not_mix_prefixes():
    store = VersionedStore()
    technologies = TechnologyTable(store)
    defenses = DefenseTable(store)

    def insert():
        technologies.insert(COMPUTER)
        defenses.insert(LAUNCHER)

    _in_txn(store, [technologies, defenses], 1, insert)
    assert technologies.get_all() == [COMPUTER]
    assert defenses.get_all() == [LAUNCHER]
    assert not defenses.exists("COMPUTER")


def test_defense_duplicate_and_missing():
    store = VersionedStore()
    table = DefenseTable(store)
    _in_txn(store, [table], 1, lambda: table.insert(LAUNCHER))
    table.set_current_txn(store.begin(2))
    with pytest.raises(DuplicateRecordError):
        table.insert(LAUNCHER)
    with pytest.raises(MissingRecordError):
        table.update({"id": "GAUSS_CANNON"})


def test_technology_delete():
    store = VersionedStore()
    table = TechnologyTable(store)
    _in_txn(store, [table], 1, lambda: table.upsert(COMPUTER))
    _in_txn(store, [table], 2, lambda: table.delete("COMPUTER"))
    with pytest.raises(KeyNotFoundError):
        table.get("COMPUTER")
    assert table.get("COMPUTER", 1) == COMPUTER