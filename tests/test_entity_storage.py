"""Tests for content entity storage."""
import pytest
from drupal_regression.core.errors import UnknownEntityTypeError
from drupal_regression.entity.storage import EntityStorage, PathautoState, slugify


def test_create_splits_entity_keys_from_field_values(db_session):
    storage = EntityStorage(db_session, "node")

    entity = storage.create({
        "type": "article",
        "title": "Hello",
        "status": False,
        "path": {"pathauto": PathautoState.SKIP},
        "field_a": "x",
    })

    assert entity.id is None
    assert entity.bundle == "article"
    assert entity.title == "Hello"
    assert entity.status is False
    assert entity.field_values == {"field_a": "x"}
    assert entity.path_alias is None


def test_pathauto_creates_alias_by_default(db_session):
    entity = EntityStorage(db_session, "node").create({"type": "article", "title": "Hello World!"})

    assert entity.path_alias == "/node/article/hello-world"


def test_explicit_alias(db_session):
    entity = EntityStorage(db_session, "node").create({
        "type": "article",
        "title": "Hello",
        "path": {"alias": "/custom"},
    })

    assert entity.path_alias == "/custom"


def test_save_and_load(db_session):
    storage = EntityStorage(db_session, "paragraph")
    entity = storage.save(storage.create({"type": "text", "field_text": "x"}))

    loaded = storage.load(entity.id)

    assert loaded is not None
    assert loaded.get("field_text") == "x"
    assert loaded.get("missing", "default") == "default"


def test_load_checks_entity_type(db_session):
    entity = EntityStorage(db_session, "paragraph").save(
        EntityStorage(db_session, "paragraph").create({"type": "text"})
    )

    assert EntityStorage(db_session, "node").load(entity.id) is None
    assert EntityStorage(db_session, "paragraph").load(entity.id + 100) is None


def test_entity_type_manager_rejects_unknown_types(entity_type_manager):
    assert entity_type_manager.get_storage("node").entity_type == "node"

    with pytest.raises(UnknownEntityTypeError):
        entity_type_manager.get_storage("user")

    with pytest.raises(UnknownEntityTypeError):
        entity_type_manager.get_view_builder("taxonomy_term", "http://testserver/")


def test_slugify():
    assert slugify("drupal-regression: (node: article)") == "drupal-regression-node-article"
