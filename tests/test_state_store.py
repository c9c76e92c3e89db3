"""Tests for the process-wide state stores."""
from drupal_regression.db.models import KeyValue
from drupal_regression.state import ENDPOINTS_STATE_KEY, KeyValueStateStore, MemoryStateStore


def test_memory_state_store_default():
    store = MemoryStateStore()

    assert store.get(ENDPOINTS_STATE_KEY, {}) == {}
    assert store.get(ENDPOINTS_STATE_KEY) is None


def test_memory_state_store_copies_values():
    store = MemoryStateStore()
    endpoints = {"node": [1]}
    store.set(ENDPOINTS_STATE_KEY, endpoints)
    endpoints["node"].append(2)

    assert store.get(ENDPOINTS_STATE_KEY) == {"node": [1]}


def test_key_value_state_store_last_write_wins(db_session):
    store = KeyValueStateStore(db_session)

    store.set(ENDPOINTS_STATE_KEY, {"node": [1, 2], "paragraph": [3]})
    store.set(ENDPOINTS_STATE_KEY, {"node": [4]})

    assert store.get(ENDPOINTS_STATE_KEY, {}) == {"node": [4]}
    assert db_session.query(KeyValue).count() == 1


def test_key_value_state_store_is_shared_between_instances(db_session):
    KeyValueStateStore(db_session).set(ENDPOINTS_STATE_KEY, {"node": [9]})

    assert KeyValueStateStore(db_session).get(ENDPOINTS_STATE_KEY) == {"node": [9]}


def test_key_value_state_store_collections_are_separate(db_session):
    KeyValueStateStore(db_session, collection="state").set("key", 1)

    assert KeyValueStateStore(db_session, collection="other").get("key", "default") == "default"
