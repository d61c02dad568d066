import pytest

from ochain.database.alliance import AllianceTable
from ochain.database.store import KeyNotFoundError, VersionedStore
from ochain.database.table import DuplicateRecordError, MissingRecordError, NoTransactionError


@pytest.fixture
def table():
    return AllianceTable(VersionedStore())


def write(table, ts, action):
    txn = table._store.begin(ts)
    table.set_current_txn(txn)
    action()
    txn.commit()
    table.set_current_txn(None)


def test_insert_and_get(table):
    alliance = {"id": "a1", "name": "Stars"}
    write(table, 1, lambda: table.insert(alliance))
    assert table.get("a1") == alliance
    assert table.exists("a1")
    assert not table.exists("a2")


def test_versioned_read(table):
    write(table, 5, lambda: table.insert({"id": "a1"}))
    assert table.exists("a1", 5)
    assert not table.exists("a1", 4)
    with pytest.raises(KeyNotFoundError):
        table.get("a1", 4)


def test_insert_duplicate_raises(table):
    write(table, 1, lambda: table.insert({"id": "a1"}))
    with pytest.raises(DuplicateRecordError):
        write(table, 2, lambda: table.insert({"id": "a1"}))


def test_update_missing_raises(table):
    with pytest.raises(MissingRecordError):
        write(table, 1, lambda: table.update({"id": "a1"}))


def test_update_and_delete(table):
    write(table, 1, lambda: table.insert({"id": "a1", "name": "old"}))
    write(table, 2, lambda: table.update({"id": "a1", "name": "new"}))
    assert table.get("a1")["name"] == "new"
    assert table.get("a1", 1)["name"] == "old"
    write(table, 3, lambda: table.delete("a1"))
    assert not table.exists("a1")


def test_get_all_excludes_join_requests(table):
    def action():
        table.upsert({"id": "b"})
        table.upsert({"id": "a"})
        table.insert_join_request({"id": "r1", "from": "x", "answered_at": 0})

    write(table, 1, action)
    assert [a["id"] for a in table.get_all()] == ["a", "b"]


def test_join_request_roundtrip(table):
    request = {"id": "r1", "from": "alice", "alliance_id": "a1", "answered_at": 0}
    write(table, 1, lambda: table.insert_join_request(request))
    assert table.get_join_request("r1") == request


def test_insert_join_request_without_txn(table):
    with pytest.raises(NoTransactionError):
        table.insert_join_request({"id": "r1"})
    with pytest.raises(NoTransactionError):
        table.update_join_request({"id": "r1"})


def test_pending_requests(table):
    def action():
        table.insert_join_request({"id": "r1", "from": "alice", "answered_at": 0})
        table.insert_join_request({"id": "r2", "from": "bob", "answered_at": 7})

    write(table, 1, action)
    assert table.has_pending_request("alice")
    assert not table.has_pending_request("bob")
    assert not table.has_pending_request("carol")
    assert [r["id"] for r in table.get_join_request_by_account("bob", False)] == ["r2"]
    assert table.get_join_request_by_account("bob", True) == []


def test_answering_clears_pending(table):
    write(table, 1, lambda: table.insert_join_request({"id": "r1", "from": "alice", "answered_at": 0}))
    write(table, 2, lambda: table.update_join_request({"id": "r1", "from": "alice", "answered_at": 2}))
    assert not table.has_pending_request("alice")
    assert table.has_pending_request("alice", 1)


def test_requests_by_alliance_and_universe_filter_on_answer(table):
    def action():
        table.insert_join_request({"id": "r1", "from": "alice", "answered_at": 0})
        table.insert_join_request({"id": "r2", "from": "bob", "answered_at": 3})

    write(table, 1, action)
    assert [r["id"] for r in table.get_join_requests_by_alliance("a1", False)] == ["r1", "r2"]
    assert [r["id"] for r in table.get_join_requests_by_alliance("a1", True)] == ["r1"]
    assert [r["id"] for r in table.get_by_universe("main", True)] == ["r1"]
    assert len(table.get_by_universe("main", False)) == 2