from functools import lru_cache
from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session
from drupal_regression.core.config import settings
from drupal_regression.core.config_store import ConfigFactory
from drupal_regression.db.session import get_db
from drupal_regression.entity.field_manager import ContentModel, EntityFieldManager, EntityTypeBundleInfo
from drupal_regression.entity.manager import EntityTypeManager
from drupal_regression.generators.content_generator import ContentGenerator
from drupal_regression.state import KeyValueStateStore, StateStore

MODULE_CONFIG = "drupal_regression"


def get_config_factory() -> ConfigFactory:
    return ConfigFactory.from_settings(settings)


@lru_cache
def get_content_model() -> ContentModel:
    return ContentModel.from_file(settings.content_model_path)


def get_field_manager(content_model: ContentModel = Depends(get_content_model)) -> EntityFieldManager:
    return EntityFieldManager(content_model)


def get_bundle_info(content_model: ContentModel = Depends(get_content_model)) -> EntityTypeBundleInfo:
    return EntityTypeBundleInfo(content_model)


def get_entity_type_manager(
    db: Session = Depends(get_db),
    field_manager: EntityFieldManager = Depends(get_field_manager),
) -> EntityTypeManager:
    return EntityTypeManager(db, field_manager)


def get_state_store(db: Session = Depends(get_db)) -> StateStore:
    return KeyValueStateStore(db)


def get_content_generator(
    entity_type_manager: EntityTypeManager = Depends(get_entity_type_manager),
    config_factory: ConfigFactory = Depends(get_config_factory),
    field_manager: EntityFieldManager = Depends(get_field_manager),
) -> ContentGenerator:
    return ContentGenerator(entity_type_manager, config_factory, field_manager)


def require_enabled(config_factory: ConfigFactory = Depends(get_config_factory)) -> None:
    """
    Only enable the regression endpoints outside production.

    This avoids accidental content getting created, and further guards
    against accidental data exposure.
    """
    enabled = config_factory.get(MODULE_CONFIG).get("enabled")
    if not enabled:
        raise HTTPException(status_code=403, detail="Access denied")
