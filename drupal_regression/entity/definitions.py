"""Field definitions for the content entity types."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

REFERENCE_FIELD_TYPES = ("entity_reference", "entity_reference_revisions")


@dataclass(frozen=True)
class FieldDefinition:
    """Metadata describing a single field attached to a bundle."""
    name: str
    type: str
    label: str = ""
    is_base_field: bool = False
    cardinality: int = 1
    settings: Dict[str, Any] = field(default_factory=dict)

    @property
    def target_type(self) -> Optional[str]:
        return self.get_setting("target_type")

    @property
    def is_reference(self) -> bool:
        return self.type in REFERENCE_FIELD_TYPES

    def get_setting(self, name: str, default: Any = None) -> Any:
        return self.settings.get(name, default)


def _base(name: str, field_type: str, label: str, **settings: Any) -> FieldDefinition:
    return FieldDefinition(name=name, type=field_type, label=label, is_base_field=True, settings=settings)


# System-managed fields every bundle of the entity type carries.
BASE_FIELD_DEFINITIONS: Dict[str, Dict[str, FieldDefinition]] = {
    "node": {f.name: f for f in [
        _base("nid", "integer", "ID"),
        _base("uuid", "uuid", "UUID"),
        _base("vid", "integer", "Revision ID"),
        _base("langcode", "language", "Language"),
        _base("type", "entity_reference", "Content type", target_type="node_type"),
        _base("revision_timestamp", "created", "Revision create time"),
        _base("revision_uid", "entity_reference", "Revision user", target_type="user"),
        _base("revision_log", "string_long", "Revision log message"),
        _base("status", "boolean", "Published"),
        _base("uid", "entity_reference", "Authored by", target_type="user"),
        _base("title", "string", "Title"),
        _base("created", "created", "Authored on"),
        _base("changed", "changed", "Changed"),
        _base("promote", "boolean", "Promoted to front page"),
        _base("sticky", "boolean", "Sticky at top of lists"),
        _base("default_langcode", "boolean", "Default translation"),
        _base("path", "path", "URL alias"),
    ]},
    "paragraph": {f.name: f for f in [
        _base("id", "integer", "ID"),
        _base("uuid", "uuid", "UUID"),
        _base("revision_id", "integer", "Revision ID"),
        _base("langcode", "language", "Language"),
        _base("type", "entity_reference", "Paragraph type", target_type="paragraphs_type"),
        _base("status", "boolean", "Published"),
        _base("created", "created", "Authored on"),
        _base("parent_id", "string", "Parent ID"),
        _base("parent_type", "string", "Parent type"),
        _base("parent_field_name", "string", "Parent field name"),
        _base("behavior_settings", "string_long", "Behavior settings"),
        _base("default_langcode", "boolean", "Default translation"),
    ]},
}
