"""Shared fixtures: an in-memory database and a small content model."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from drupal_regression.api import deps
from drupal_regression.core.config_store import ConfigFactory
from drupal_regression.db.session import Base, get_db
from drupal_regression.db import models  # noqa
from drupal_regression.entity.field_manager import ContentModel, EntityFieldManager
from drupal_regression.entity.manager import EntityTypeManager
from drupal_regression.main import app

CONTENT_MODEL = {
    "node": {
        "article": {
            "label": "Article",
            "fields": {
                "field_teaser": {"type": "string"},
                "field_tags": {"type": "entity_reference", "target_type": "taxonomy_term", "cardinality": -1},
                "field_rating": {"type": "integer"},
            },
        },
        "page": {
            "label": "Basic page",
            "fields": {
                "field_body": {"type": "text_long"},
            },
        },
    },
    "paragraph": {
        "text": {
            "label": "Text",
            "fields": {
                "field_text": {"type": "text_long"},
            },
        },
    },
}

MOCK_DATA = {
    "fields": {},
    "entity_reference_target_types": {"taxonomy_term": 7},
    "field_types": {
        "string": "Lorem ipsum",
        "text_long": {"value": "<p>Body text</p>", "format": "basic_html"},
    },
}


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def content_model():
    return ContentModel(CONTENT_MODEL)


@pytest.fixture
def field_manager(content_model):
    return EntityFieldManager(content_model)


@pytest.fixture
def entity_type_manager(db_session, field_manager):
    return EntityTypeManager(db_session, field_manager)


@pytest.fixture
def config_factory():
    return ConfigFactory(data={
        "drupal_regression": {"enabled": True},
        "drupal_regression.settings": {"ignored_bundles": {}, "ignored_fields": {}},
        "drupal_regression.mock_data": MOCK_DATA,
    })


@pytest.fixture
def client(db_session, content_model, config_factory):
    """TestClient wired to the in-memory database and test configuration."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[deps.get_content_model] = lambda: content_model
    app.dependency_overrides[deps.get_config_factory] = lambda: config_factory
    try:
        # Not used as a context manager, so startup migrations are not run.
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
