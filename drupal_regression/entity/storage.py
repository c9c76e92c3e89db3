from __future__ import annotations
import logging
import re
from enum import IntEnum
from typing import Any, Dict, Optional
from sqlalchemy.orm import Session
from drupal_regression.db.models import ContentEntity

log = logging.getLogger(__name__)


class PathautoState(IntEnum):
    SKIP = 0
    CREATE = 1


def slugify(text: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower())
    return slug.strip("-")


class EntityStorage:
    """Creates, saves and loads content entities of a single entity type."""

    def __init__(self, db: Session, entity_type: str):
        self.db = db
        self.entity_type = entity_type

    def create(self, values: Dict[str, Any]) -> ContentEntity:
        """Build an unsaved entity from a field value map."""
        values = dict(values)
        bundle = values.pop("type")
        title = values.pop("title", "")
        status = values.pop("status", True)
        path = values.pop("path", None) or {}

        entity = ContentEntity(
            entity_type=self.entity_type,
            bundle=bundle,
            title=str(title),
            status=bool(status),
            field_values=values,
        )

        if path.get("alias"):
            entity.path_alias = path["alias"]
        elif path.get("pathauto", PathautoState.CREATE) != PathautoState.SKIP:
            entity.path_alias = f"/{self.entity_type}/{bundle}/{slugify(entity.title)}"

        return entity

    def save(self, entity: ContentEntity) -> ContentEntity:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        log.info("Saved entity %s", entity.id, extra={"entity_type": self.entity_type, "bundle": entity.bundle})
        return entity

    def load(self, entity_id: int) -> Optional[ContentEntity]:
        entity = self.db.get(ContentEntity, entity_id)
        if entity is None or entity.entity_type != self.entity_type:
            return None
        return entity
