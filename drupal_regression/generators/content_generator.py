"""
Content generator for the regression API.

Loops over the fields of a bundle and fills each one from the mock data
catalog, then creates and saves one entity per call.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Mapping, Tuple
from drupal_regression.core.config_store import ConfigFactory
from drupal_regression.entity.definitions import FieldDefinition
from drupal_regression.entity.field_manager import EntityFieldManager
from drupal_regression.entity.manager import EntityTypeManager
from drupal_regression.entity.storage import PathautoState
from drupal_regression.generators.mock_values import MISSING, has_field_override, resolve_mock_value
from drupal_regression.generators.types import GenerationMessages, GenerationResult
from drupal_regression.schemas.regression import GenerationSettings, MockDataCatalog

log = logging.getLogger(__name__)

SETTINGS_CONFIG = "drupal_regression.settings"
MOCK_DATA_CONFIG = "drupal_regression.mock_data"


def entity_title(entity_type: str, bundle: str) -> str:
    return f"drupal-regression: ({entity_type}: {bundle})"


def assemble_field_values(
    entity_type: str,
    bundle: str,
    fields: Mapping[str, FieldDefinition],
    settings: GenerationSettings,
    catalog: MockDataCatalog,
) -> Tuple[Dict[str, Any], GenerationMessages]:
    """
    Build the value map used to create a mock entity.

    Args:
        entity_type: Entity type ID, e.g. "node"
        bundle: Bundle machine name
        fields: Field definitions of the bundle, keyed by field name
        settings: Ignore lists
        catalog: Mock data catalog

    Returns:
        Tuple of the value map and the error messages for unmapped fields
    """
    messages = GenerationMessages()
    values: Dict[str, Any] = {
        "type": bundle,
        "title": entity_title(entity_type, bundle),
        "status": True,
        # Mock entities must not end up in the URL alias table.
        "path": {"pathauto": PathautoState.SKIP},
    }
    extra = {"entity_type": entity_type, "bundle": bundle}

    for field_name, field in fields.items():
        if settings.is_field_ignored(entity_type, field_name):
            continue

        # Base fields (nid, uuid, revisions..) are only filled when overridden.
        if field.is_base_field and not has_field_override(field, catalog):
            continue

        value = resolve_mock_value(field, catalog)
        if value is MISSING:
            message = (
                f"Could not find any data for field type: {field.type} "
                f"({entity_type}: {bundle}: {field_name})"
            )
            log.warning(message, extra=extra)
            messages.errors.append(message)
            continue

        values[field_name] = value

    return values, messages


class ContentGenerator:
    def __init__(
        self,
        entity_type_manager: EntityTypeManager,
        config_factory: ConfigFactory,
        field_manager: EntityFieldManager,
    ):
        self.entity_type_manager = entity_type_manager
        self.config_factory = config_factory
        self.field_manager = field_manager

    def get_settings(self) -> GenerationSettings:
        return GenerationSettings.model_validate(self.config_factory.get(SETTINGS_CONFIG))

    def get_mock_data(self) -> MockDataCatalog:
        return MockDataCatalog.model_validate(self.config_factory.get(MOCK_DATA_CONFIG))

    def generate(self, entity_type: str, bundle: str) -> GenerationResult:
        """Generate and save a single mock entity of the given bundle."""
        settings = self.get_settings()
        extra = {"entity_type": entity_type, "bundle": bundle}

        if settings.is_bundle_ignored(entity_type, bundle):
            log.warning("Bundle is ignored, skipping", extra=extra)
            return GenerationResult(
                messages=GenerationMessages(warnings=[f"{entity_type}: {bundle} has been ignored."]),
                entity=None,
            )

        catalog = self.get_mock_data()
        fields = self.field_manager.get_field_definitions(entity_type, bundle)
        values, messages = assemble_field_values(entity_type, bundle, fields, settings, catalog)

        storage = self.entity_type_manager.get_storage(entity_type)
        entity = storage.create(values)
        storage.save(entity)

        log.info("Generated entity %s", entity.id, extra=extra)
        return GenerationResult(messages=messages, entity=entity)
