"""
Mock value lookup for a single field.

Three resolvers are tried in order and the first one that finds a value
wins:

1. ``fields``: an override for the exact field name.
2. ``entity_reference_target_types``: a default target for reference
   fields, keyed by the entity type they point at.
3. ``field_types``: a default for the field's storage type.

Reference fields resolved by the first two tiers get a single target,
``[{"target_id": value}]``, whatever the field cardinality.
"""
from typing import Any, Callable, Tuple
from drupal_regression.entity.definitions import FieldDefinition
from drupal_regression.schemas.regression import MockDataCatalog


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

Resolver = Callable[[FieldDefinition, MockDataCatalog], Any]


def _lookup(table: dict, key: Any) -> Any:
    if key is None:
        return MISSING
    value = table.get(key)
    if value is None:
        return MISSING
    return value


def reference_item(target_id: Any) -> list:
    return [{"target_id": target_id}]


def has_field_override(field: FieldDefinition, catalog: MockDataCatalog) -> bool:
    return _lookup(catalog.fields, field.name) is not MISSING


def field_name_value(field: FieldDefinition, catalog: MockDataCatalog) -> Any:
    value = _lookup(catalog.fields, field.name)
    if value is MISSING:
        return MISSING
    if field.is_reference:
        return reference_item(value)
    return value


def target_type_value(field: FieldDefinition, catalog: MockDataCatalog) -> Any:
    if not field.is_reference:
        return MISSING
    value = _lookup(catalog.entity_reference_target_types, field.target_type)
    if value is MISSING:
        return MISSING
    return reference_item(value)


def field_type_value(field: FieldDefinition, catalog: MockDataCatalog) -> Any:
    return _lookup(catalog.field_types, field.type)


RESOLVERS: Tuple[Resolver, ...] = (field_name_value, target_type_value, field_type_value)


def resolve_mock_value(field: FieldDefinition, catalog: MockDataCatalog) -> Any:
    """Return the mock value for ``field``, or ``MISSING`` when no tier has one."""
    for resolver in RESOLVERS:
        value = resolver(field, catalog)
        if value is not MISSING:
            return value
    return MISSING
