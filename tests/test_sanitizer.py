"""Tests for rendered markup sanitization."""
from drupal_regression.render.sanitizer import (
    collapse_blank_lines,
    replace_entity_id,
    replace_host,
    sanitize_markup,
    strip_view_dom_ids,
)


def test_collapse_blank_lines():
    markup = "<div>\n\n   \n\t\n<p>a</p>\r\n\r\n</div>"

    assert collapse_blank_lines(markup) == "<div>\n<p>a</p>\n</div>"


def test_collapse_leading_blank_lines():
    assert collapse_blank_lines("\n\n<div></div>") == "\n<div></div>"


def test_strip_view_dom_ids_up_to_next_quote():
    markup = '<div class="view view-frontpage js-view-dom-id-4f2a9c0b">x</div><a href="/y">'

    assert strip_view_dom_ids(markup) == '<div class="view view-frontpage ">x</div><a href="/y">'


def test_strip_view_dom_ids_handles_several_views():
    markup = '<div class="js-view-dom-id-aaa"></div><div class="js-view-dom-id-bbb"></div>'

    assert strip_view_dom_ids(markup) == '<div class=""></div><div class=""></div>'


def test_replace_entity_id():
    markup = '<a href="/node/12">x</a><div id="p-12"></div>'

    assert replace_entity_id(markup, 12) == '<a href="/node/__ENTITY_ID__">x</a><div id="p-__ENTITY_ID__"></div>'


def test_replace_host():
    assert replace_host("http://example.com/node/1", "example.com") == "http://localhost/node/1"


def test_replace_host_without_host_header():
    assert replace_host("http://example.com/", None) == "http://example.com/"
    assert replace_host("http://example.com/", "") == "http://example.com/"


def test_sanitize_markup_scenario():
    markup = '<article>\n\n<a href="http://example.com/node/5">node/5</a>\n</article>'

    result = sanitize_markup(markup, 5, "example.com")

    assert result == '<article>\n<a href="http://localhost/node/__ENTITY_ID__">node/__ENTITY_ID__</a>\n</article>'


def test_literal_replacements_are_idempotent():
    """Running the id and host replacements again leaves sanitized markup unchanged."""
    once = sanitize_markup('<div id="p-8"><a href="http://example.com:8000/node/8"></a></div>', 8, "example.com:8000")

    twice = replace_host(replace_entity_id(once, 8), "example.com:8000")

    assert twice == once
