"""Bundle and field lookups over the YAML content model."""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from drupal_regression.core.errors import ConfigError
from drupal_regression.entity.definitions import BASE_FIELD_DEFINITIONS, FieldDefinition

log = logging.getLogger(__name__)


class ContentModel:
    """Parsed ``content_model.yml``: entity type -> bundle -> label and fields."""

    def __init__(self, data: Dict[str, Any] | None = None):
        self.data = data or {}

    @classmethod
    def from_file(cls, path: Path | str) -> "ContentModel":
        path = Path(path)
        if not path.exists():
            log.warning("Content model %s does not exist, no bundles are defined", path)
            return cls({})
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Content model {path} must be a mapping")
        return cls(data)

    def bundles(self, entity_type: str) -> Dict[str, Dict[str, Any]]:
        return self.data.get(entity_type) or {}


class EntityTypeBundleInfo:
    def __init__(self, content_model: ContentModel):
        self.content_model = content_model

    def get_bundle_info(self, entity_type: str) -> Dict[str, Dict[str, str]]:
        """Return ``{bundle: {"label": ...}}`` for every bundle of the entity type."""
        info = {}
        for bundle, definition in self.content_model.bundles(entity_type).items():
            definition = definition or {}
            info[bundle] = {"label": definition.get("label", bundle)}
        return info


class EntityFieldManager:
    def __init__(self, content_model: ContentModel):
        self.content_model = content_model

    def get_base_field_definitions(self, entity_type: str) -> Dict[str, FieldDefinition]:
        return dict(BASE_FIELD_DEFINITIONS.get(entity_type, {}))

    def get_field_definitions(self, entity_type: str, bundle: str) -> Dict[str, FieldDefinition]:
        """
        Get all field definitions of a bundle.

        Base fields come first, followed by the bundle's configured fields
        in the order the content model lists them.
        """
        definitions = self.get_base_field_definitions(entity_type)

        bundle_data = self.content_model.bundles(entity_type).get(bundle) or {}
        for field_name, field_data in (bundle_data.get("fields") or {}).items():
            field_data = dict(field_data or {})
            field_type = field_data.pop("type", None)
            if not field_type:
                raise ConfigError(f"Field {entity_type}.{bundle}.{field_name} has no type")
            label = field_data.pop("label", field_name)
            cardinality = field_data.pop("cardinality", 1)
            definitions[field_name] = FieldDefinition(
                name=field_name,
                type=field_type,
                label=label,
                is_base_field=False,
                cardinality=cardinality,
                settings=field_data,
            )

        return definitions
