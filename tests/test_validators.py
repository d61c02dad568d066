import pytest

from ochain.database.store import KeyNotFoundError, VersionedStore
from ochain.database.table import DuplicateRecordError, MissingRecordError
from ochain.database.validators import ValidatorTable


@pytest.fixture
def store():
    return VersionedStore()


def write(store, table, ts, action):
    txn = store.begin(ts)
    table.set_current_txn(txn)
    action()
    txn.commit()


def test_insert_then_get_by_address(store):
    table = ValidatorTable(store)
    validator = {"public_key": "abcd", "enabled": True, "power": 10000}
    write(store, table, 10, lambda: table.insert(validator))
    assert table.exists("abcd")
    assert table.get_by_address("abcd") == validator


def test_get_by_address_missing_returns_empty(store):
    table = ValidatorTable(store)
    assert table.get_by_address("nobody") == {}


def test_insert_duplicate_raises(store):
    table = ValidatorTable(store)
    validator = {"public_key": "abcd", "enabled": True}
    write(store, table, 10, lambda: table.insert(validator))
    txn = store.begin(20)
    table.set_current_txn(txn)
    with pytest.raises(DuplicateRecordError):
        table.insert(validator)


def test_update_missing_raises(store):
    table = ValidatorTable(store)
    table.set_current_txn(store.begin(10))
    with pytest.raises(MissingRecordError):
        table.update({"public_key": "abcd"})


def test_is_enabled(store):
    table = ValidatorTable(store)
    write(store, table, 10, lambda: table.upsert({"public_key": "on", "enabled": True}))
    write(store, table, 11, lambda: table.upsert({"public_key": "off", "enabled": False}))
    assert table.is_enabled("on") is True
    assert table.is_enabled("off") is False
    assert table.is_enabled("missing") is False


def test_get_by_id_uses_decimal_key(store):
    table = ValidatorTable(store)
    validator = {"public_key": "3", "enabled": True}
    write(store, table, 10, lambda: table.upsert(validator))
    assert table.get_by_id(3) == validator
    with pytest.raises(KeyNotFoundError):
        table.get_by_id(4)


def test_visibility_by_timestamp(store):
    table = ValidatorTable(store)
    write(store, table, 10, lambda: table.insert({"public_key": "k", "power": 1}))
    write(store, table, 20, lambda: table.update({"public_key": "k", "power": 2}))
    assert not table.exists("k", 5)
    assert table.get_by_address("k", 15)["power"] == 1
    assert table.get_by_address("k")["power"] == 2


def test_delete_and_get_all(store):
    table = ValidatorTable(store)
    write(store, table, 10, lambda: table.upsert({"public_key": "a"}))
    write(store, table, 11, lambda: table.upsert({"public_key": "b"}))
    assert [v["public_key"] for v in table.get_all()] == ["a", "b"]
    write(store, table, 12, lambda: table.delete("a"))
    assert [v["public_key"] for v in table.get_all()] == ["b"]
    assert [v["public_key"] for v in table.get_all(11)] == ["a", "b"]