"""
Tests for the field list operations.

Covers:
  - add_field numbers new fields by list length
  - remove_field / update_field ignore out-of-range indices
  - No operation mutates the list it was given
  - parse_default_input converts numbers and checkbox flags only
"""

import pytest

from shopify_schema_generator.fields import (
    FIELD_TYPES,
    add_field,
    field_type_label,
    format_default_for_input,
    parse_default_input,
    remove_field,
    set_field_attribute,
    update_field,
)


def make_fields(count):
    return [{"type": "text", "id": f"field_{i + 1}", "label": f"Field {i + 1}"} for i in range(count)]


class TestAddField:
    def test_first_field(self):
        assert add_field([]) == [{"type": "text", "id": "field_1", "label": "Field 1"}]

    def test_numbering_follows_length(self):
        fields = add_field(make_fields(2))
        assert fields[-1] == {"type": "text", "id": "field_3", "label": "Field 3"}

    def test_remove_then_add_can_repeat_an_id(self):
        fields = remove_field(make_fields(3), 0)
        fields = add_field(fields)
        assert [f["id"] for f in fields] == ["field_2", "field_3", "field_3"]

    def test_does_not_mutate_input(self):
        original = make_fields(1)
        add_field(original)
        assert len(original) == 1


class TestRemoveField:
    def test_removes_index(self):
        fields = remove_field(make_fields(3), 1)
        assert [f["id"] for f in fields] == ["field_1", "field_3"]

    @pytest.mark.parametrize("index", [3, 10, -1, None])
    def test_out_of_range_is_noop(self, index):
        fields = make_fields(3)
        assert remove_field(fields, index) == fields

    def test_does_not_mutate_input(self):
        original = make_fields(2)
        remove_field(original, 0)
        assert len(original) == 2


class TestUpdateField:
    def test_replaces_wholesale(self):
        replacement = {"type": "range", "id": "size", "label": "Size", "default": 4}
        fields = update_field(make_fields(2), 1, replacement)
        assert fields[1] == replacement

    @pytest.mark.parametrize("index", [2, -1])
    def test_out_of_range_is_noop(self, index):
        fields = make_fields(2)
        assert update_field(fields, index, {"type": "text", "id": "x", "label": "X"}) == fields

    def test_does_not_mutate_input(self):
        original = make_fields(1)
        update_field(original, 0, {"type": "html", "id": "x", "label": "X"})
        assert original[0]["type"] == "text"

    def test_set_field_attribute_keeps_other_keys(self):
        fields = set_field_attribute(make_fields(1), 0, "info", "Help")
        assert fields[0] == {"type": "text", "id": "field_1", "label": "Field 1", "info": "Help"}


class TestDefaultInput:
    @pytest.mark.parametrize(
        "field_type, raw, expected",
        [
            ("number", "5", 5),
            ("range", " 2.5 ", 2.5),
            ("number", "abc", "abc"),
            ("number", "nan", "nan"),
            ("checkbox", "TRUE", True),
            ("checkbox", "false", False),
            ("checkbox", "yes", "yes"),
            ("text", "42", "42"),
            ("number", "", ""),
        ],
    )
    def test_parse(self, field_type, raw, expected):
        assert parse_default_input(field_type, raw) == expected

    def test_parse_integer_stays_int(self):
        assert isinstance(parse_default_input("number", "5"), int)

    @pytest.mark.parametrize("value, expected", [(None, ""), (False, "false"), (0, "0"), ("hi", "hi")])
    def test_format_for_input(self, value, expected):
        assert format_default_for_input(value) == expected


def test_field_types_cover_reference_kinds():
    for kind in ("image_picker", "video_url", "product", "collection", "page", "blog", "article"):
        assert kind in FIELD_TYPES
    assert field_type_label("image_picker") == "image picker"
