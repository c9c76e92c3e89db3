from __future__ import annotations
from sqlalchemy.orm import Session
from drupal_regression.core.errors import UnknownEntityTypeError
from drupal_regression.entity.field_manager import EntityFieldManager
from drupal_regression.entity.storage import EntityStorage
from drupal_regression.render.view_builder import EntityViewBuilder

CONTENT_ENTITY_TYPES = ("node", "paragraph")


class EntityTypeManager:
    def __init__(self, db: Session, field_manager: EntityFieldManager):
        self.db = db
        self.field_manager = field_manager

    def _check(self, entity_type: str) -> None:
        if entity_type not in CONTENT_ENTITY_TYPES:
            raise UnknownEntityTypeError(entity_type)

    def get_storage(self, entity_type: str) -> EntityStorage:
        self._check(entity_type)
        return EntityStorage(self.db, entity_type)

    def get_view_builder(self, entity_type: str, base_url: str) -> EntityViewBuilder:
        self._check(entity_type)
        return EntityViewBuilder(entity_type, self.field_manager, base_url)
