"""Full view mode rendering of content entities (plain string templates)."""
from __future__ import annotations
import html
import secrets
from typing import Any, List
from drupal_regression.db.models import ContentEntity
from drupal_regression.entity.definitions import FieldDefinition
from drupal_regression.entity.field_manager import EntityFieldManager

# Canonical paths of reference targets, keyed by target entity type.
TARGET_PATHS = {
    "node": "node/{id}",
    "taxonomy_term": "taxonomy/term/{id}",
    "user": "user/{id}",
    "media": "media/{id}",
    "file": "file/{id}",
}


def css_class(name: str) -> str:
    return name.replace("_", "-")


def _items(value: Any) -> List[Any]:
    if isinstance(value, list):
        return value
    return [value]


class EntityViewBuilder:
    def __init__(self, entity_type: str, field_manager: EntityFieldManager, base_url: str):
        self.entity_type = entity_type
        self.field_manager = field_manager
        self.base_url = base_url.rstrip("/")

    def view(self, entity: ContentEntity) -> str:
        """Render the entity and every bundle field that has a value."""
        definitions = self.field_manager.get_field_definitions(entity.entity_type, entity.bundle)
        fields = []
        for name, definition in definitions.items():
            if definition.is_base_field:
                continue
            value = entity.get(name)
            if value is None:
                continue
            fields.append(self.render_field(definition, value))

        if entity.entity_type == "paragraph":
            return self.render_paragraph(entity, fields)
        return self.render_node(entity, fields)

    def render_node(self, entity: ContentEntity, fields: List[str]) -> str:
        lines = [
            f'<article class="node node--type-{css_class(entity.bundle)} node--view-mode-full"'
            f' data-history-node-id="{entity.id}">',
            "",
            f'  <h2 class="node__title"><a href="{self.base_url}/node/{entity.id}" rel="bookmark">'
            f"<span>{html.escape(entity.title)}</span></a></h2>",
            "",
            '  <div class="node__content">',
        ]
        for field_markup in fields:
            lines.append(field_markup)
            lines.append("")
        lines.append("  </div>")
        lines.append("")
        lines.append("</article>")
        return "\n".join(lines) + "\n"

    def render_paragraph(self, entity: ContentEntity, fields: List[str]) -> str:
        status = "" if entity.status else " paragraph--unpublished"
        lines = [
            f'<div class="paragraph paragraph--type--{css_class(entity.bundle)} '
            f'paragraph--view-mode--default{status}" id="p-{entity.id}">',
            "",
        ]
        for field_markup in fields:
            lines.append(field_markup)
            lines.append("")
        lines.append("</div>")
        return "\n".join(lines) + "\n"

    def render_field(self, definition: FieldDefinition, value: Any) -> str:
        if definition.type == "viewsreference":
            items = [self.render_view(item) for item in _items(value)]
        elif definition.is_reference:
            items = [self.render_reference(definition, item) for item in _items(value)]
        else:
            items = [self.render_item(item) for item in _items(value)]

        lines = [
            f'    <div class="field field--name-{css_class(definition.name)} '
            f'field--type-{css_class(definition.type)}">',
            f'      <div class="field__label">{html.escape(definition.label or definition.name)}</div>',
        ]
        for item in items:
            lines.append(f'      <div class="field__item">{item}</div>')
        lines.append("    </div>")
        return "\n".join(lines)

    def render_item(self, item: Any) -> str:
        if isinstance(item, dict):
            # Formatted text is already markup.
            if "value" in item and "format" in item:
                return str(item["value"])
            if "uri" in item:
                uri = html.escape(str(item["uri"]), quote=True)
                title = html.escape(str(item.get("title") or item["uri"]))
                return f'<a href="{uri}">{title}</a>'
            if "target_id" in item:
                alt = html.escape(str(item.get("alt", "")), quote=True)
                return f'<img src="{self.base_url}/file/{item["target_id"]}" alt="{alt}" />'
            return html.escape(", ".join(f"{k}: {v}" for k, v in item.items()))
        if isinstance(item, bool):
            return "On" if item else "Off"
        return html.escape(str(item))

    def render_reference(self, definition: FieldDefinition, item: Any) -> str:
        target_id = item.get("target_id") if isinstance(item, dict) else item
        target_type = definition.target_type

        if target_type == "paragraph":
            return f'<div class="paragraph" id="p-{target_id}"></div>'

        pattern = TARGET_PATHS.get(target_type, f"{target_type}/{{id}}")
        path = pattern.format(id=target_id)
        return f'<a href="{self.base_url}/{path}" hreflang="en">{html.escape(str(target_id))}</a>'

    def render_view(self, item: Any) -> str:
        view_id = item.get("target_id") if isinstance(item, dict) else item
        dom_id = secrets.token_hex(32)
        return (
            '<div class="views-element-container">'
            f'<div class="view view-{css_class(str(view_id))} js-view-dom-id-{dom_id}"></div>'
            "</div>"
        )
