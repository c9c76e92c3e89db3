"""Strip per-render noise from entity markup before it is diffed."""
import re

ENTITY_ID_PLACEHOLDER = "__ENTITY_ID__"
LOCALHOST = "localhost"

_BLANK_LINES = re.compile(r"(^[\r\n]*|[\r\n]+)[\s\t]*[\r\n]+")
_VIEW_DOM_ID = re.compile(r'js-view-dom-id[^"]*"')


def collapse_blank_lines(markup: str) -> str:
    return _BLANK_LINES.sub("\n", markup)


def strip_view_dom_ids(markup: str) -> str:
    """Drop the random ``js-view-dom-id-<hash>`` token up to its closing quote."""
    return _VIEW_DOM_ID.sub('"', markup)


def replace_entity_id(markup: str, entity_id: int) -> str:
    markup = markup.replace(f"node/{entity_id}", f"node/{ENTITY_ID_PLACEHOLDER}")
    return markup.replace(f"p-{entity_id}", f"p-{ENTITY_ID_PLACEHOLDER}")


def replace_host(markup: str, host: str | None) -> str:
    if not host:
        return markup
    return markup.replace(host, LOCALHOST)


def sanitize_markup(markup: str, entity_id: int, host: str | None) -> str:
    """Apply every transform, in order, to rendered entity markup."""
    markup = collapse_blank_lines(markup)
    markup = strip_view_dom_ids(markup)
    markup = replace_entity_id(markup, entity_id)
    return replace_host(markup, host)
