from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from notes_markdown.errors import DecodeError, NotesMarkdownError
from notes_markdown.format.decode import decode
from notes_markdown.models import attr_int, attr_str


def test_decodes_nested_tree() -> None:
    raw = json.dumps(
        {
            "type": "doc",
            "content": [
                {"type": "heading", "attrs": {"level": 3}, "content": [{"type": "text", "text": "Hi"}]},
                {
                    "type": "paragraph",
                    "content": [{"type": "text", "text": "go", "marks": [{"type": "link", "attrs": {"href": "/x"}}]}],
                },
            ],
        }
    ).encode("utf-8")
    node = decode(raw)

    assert node.type == "doc"
    heading, para = node.content
    assert heading.attrs == {"level": 3}
    assert heading.content[0].text == "Hi"
    assert para.content[0].marks[0].type == "link"
    assert para.content[0].marks[0].attrs["href"] == "/x"


def test_missing_and_null_fields_take_defaults() -> None:
    node = decode('{"type": "paragraph", "content": null, "marks": null, "attrs": null}')
    assert node.content == ()
    assert node.marks == ()
    assert node.attrs == {}
    assert node.text == ""

    assert decode("{}").type == ""


def test_unknown_fields_are_ignored() -> None:
    node = decode('{"type": "text", "text": "a", "futureField": {"x": [1, 2]}, "version": 4}')
    assert node.type == "text"
    assert node.text == "a"


def test_non_scalar_attrs_are_dropped() -> None:
    node = decode('{"type": "heading", "attrs": {"level": 2, "meta": {"a": 1}, "ids": [1], "flag": true}}')
    assert node.attrs == {"level": 2, "flag": True}


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        "",
        '"just a string"',
        "[1, 2, 3]",
        "42",
        "null",
        '{"type": "doc", "content": "oops"}',
        '{"type": 5}',
    ],
)
def test_malformed_payloads_raise_decode_error(raw) -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode(raw)
    err = excinfo.value
    assert isinstance(err, NotesMarkdownError)
    assert isinstance(err.__cause__, ValidationError)
    assert err.context["errors"]
    assert str(err).startswith("failed to parse ProseMirror JSON")


def test_decoded_tree_is_frozen() -> None:
    node = decode('{"type": "doc"}')
    with pytest.raises(ValidationError):
        node.type = "paragraph"


def test_attr_accessors_apply_defaults() -> None:
    attrs = {"level": 2.0, "flag": True, "name": "go", "nan": float("nan")}
    assert attr_int(attrs, "level", 1) == 2
    assert attr_int(attrs, "flag", 1) == 1
    assert attr_int(attrs, "name", 1) == 1
    assert attr_int(attrs, "nan", 1) == 1
    assert attr_int(attrs, "missing", 4) == 4
    assert attr_str(attrs, "name") == "go"
    assert attr_str(attrs, "level") == ""
    assert attr_str(attrs, "missing", "txt") == "txt"


def test_attr_int_rejects_values_above_maximum() -> None:
    attrs = {"big": 1e300, "huge": 10**30, "six": 6}
    assert attr_int(attrs, "big", 1) == 1
    assert attr_int(attrs, "huge", 1) == 1
    assert attr_int(attrs, "six", 1, maximum=6) == 6
    assert attr_int(attrs, "six", 1, maximum=5) == 1
