"""Tests for YAML/JSON redirect data parsing."""

from __future__ import annotations

import pytest

from minitools.errors import ParseError
from minitools.redirect.parsers import PathURL, build_map, parse_json, parse_yaml

YAML_DATA = """
- path: /urlshort
  url: https://github.com/gophercises/urlshort
- path: /urlshort-final
  url: https://github.com/gophercises/urlshort/tree/solution
"""

JSON_DATA = """
[
  {"path": "/urlshort", "url": "https://github.com/gophercises/urlshort"},
  {"path": "/urlshort-final", "url": "https://github.com/gophercises/urlshort/tree/solution"}
]
"""


def test_yaml_and_json_produce_the_same_records():
    assert parse_yaml(YAML_DATA) == parse_json(JSON_DATA)
    assert parse_yaml(YAML_DATA)[0] == PathURL(
        path="/urlshort", url="https://github.com/gophercises/urlshort"
    )


def test_parsers_accept_bytes():
    assert parse_yaml(YAML_DATA.encode()) == parse_json(JSON_DATA.encode())


def test_build_map_keeps_last_duplicate():
    """When a path repeats, the later record wins."""
    records = parse_yaml("- {path: /a, url: https://one.example}\n- {path: /a, url: https://two.example}\n")

    assert build_map(records) == {"/a": "https://two.example"}


@pytest.mark.parametrize(
    "data",
    [
        "- path: /a\n",
        "- path: /a\n  url: [not, a, string]\n",
        "path: /a\nurl: https://example.com\n",
        "- just-a-string\n",
        "- path: /a\n  url: [unclosed\n",
    ],
)
def test_malformed_yaml_raises_parse_error(data):
    with pytest.raises(ParseError):
        parse_yaml(data)


@pytest.mark.parametrize(
    "data",
    [
        '[{"path": "/a"}]',
        '[{"path": "/a", "url": 7}]',
        '{"path": "/a", "url": "https://example.com"}',
        '[{"path": "/a", "url": "https://example.com"}',
        "",
        "null",
    ],
)
def test_malformed_json_raises_parse_error(data):
    with pytest.raises(ParseError):
        parse_json(data)


def test_empty_yaml_document_is_an_empty_list():
    assert parse_yaml("") == []


def test_extra_fields_are_ignored():
    records = parse_json('[{"path": "/a", "url": "https://example.com", "note": "x"}]')

    assert build_map(records) == {"/a": "https://example.com"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
