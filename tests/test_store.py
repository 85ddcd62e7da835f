"""
Tests for the key-value session stores.
"""

import pytest

from core.drill import MemoryStateStore, SqlStateStore


@pytest.fixture(params=["memory", "sql"])
def any_store(request):
    if request.param == "memory":
        return MemoryStateStore()
    return SqlStateStore("sqlite://")


def test_read_missing_key_returns_none(any_store):
    assert any_store.read("missing") is None


def test_write_then_read(any_store):
    any_store.write("k", '{"a": 1}')
    assert any_store.read("k") == '{"a": 1}'


def test_write_overwrites(any_store):
    any_store.write("k", "one")
    any_store.write("k", "two")
    assert any_store.read("k") == "two"


def test_delete(any_store):
    any_store.write("k", "one")
    any_store.write("other", "two")

    any_store.delete("k")
    any_store.delete("never-written")

    assert any_store.read("k") is None
    assert any_store.read("other") == "two"


def test_sql_store_persists_to_file(tmp_path):
    url = f"sqlite:///{tmp_path / 'nested' / 'state.db'}"

    SqlStateStore(url).write("k", "saved")

    assert (tmp_path / "nested" / "state.db").exists()
    assert SqlStateStore(url).read("k") == "saved"


def test_sql_store_init_db_is_idempotent():
    store = SqlStateStore("sqlite://")
    store.write("k", "v")
    store.init_db()
    assert store.read("k") == "v"
