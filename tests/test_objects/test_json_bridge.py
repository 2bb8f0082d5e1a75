"""Tests for the JSON bridge and the Rectangle object."""

import logging
from dataclasses import dataclass

import pytest

from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import ParseError
from cssbuilder.objects import Rectangle, deserialize, from_json, serialize, to_json


@dataclass
class Circle:
    radius: float

    def get_circumference(self) -> float:
        return 2 * 3.0 * self.radius


class Tags:
    def __init__(self, items):
        self.items = items

    def count(self):
        return len(self.items)


# ---------------------------------------------------------------------------
# Rectangle
# ---------------------------------------------------------------------------


class TestRectangle:
    def test_fields_and_area(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20
        assert r.get_area() == 200

    def test_fields_are_mutable(self):
        r = Rectangle(1, 2)
        r.width = 5
        assert r.get_area() == 10


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_insertion_order(self):
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_dataclass(self):
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_scalars(self):
        assert to_json(None) == "null"
        assert to_json("x") == '"x"'
        assert to_json(True) == "true"

    def test_non_ascii_kept(self):
        assert to_json({"name": "café"}) == '{"name":"café"}'

    def test_indent_from_config(self):
        text = to_json({"a": 1}, CssBuilderConfig(json_indent=2))
        assert text == '{\n  "a": 1\n}'

    def test_sort_keys_from_config(self):
        text = to_json({"b": 1, "a": 2}, CssBuilderConfig(sort_keys=True))
        assert text == '{"a":2,"b":1}'

    def test_unserializable_value(self):
        with pytest.raises(TypeError):
            to_json({"x": object()})

    def test_nested_dataclasses(self):
        assert to_json([Rectangle(1, 2)]) == '[{"width":1,"height":2}]'
        assert to_json({"r": Rectangle(1, 2)}) == '{"r":{"width":1,"height":2}}'

    def test_dataclass_class_is_not_encoded(self):
        with pytest.raises(TypeError):
            to_json([Rectangle])

    @pytest.mark.parametrize("number", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_numbers_rejected(self, number):
        with pytest.raises(ValueError):
            to_json({"width": number})


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_plain_data_without_behavior(self):
        assert from_json('{"a":[1,2]}') == {"a": [1, 2]}

    def test_dataclass_behavior(self):
        c = from_json('{"radius":10}', Circle)
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.get_circumference() == 60.0

    def test_rectangle_behavior(self):
        r = from_json('{"width":10,"height":20}', Rectangle)
        assert r.get_area() == 200

    def test_array_passed_positionally(self):
        tags = from_json('["a","b","c"]', Tags)
        assert tags.count() == 3

    def test_factory_function_behavior(self):
        assert from_json('{"x":2,"y":3}', lambda x, y: x * y) == 6

    def test_unknown_field_raises_type_error(self):
        with pytest.raises(TypeError):
            from_json('{"width":1,"height":2,"depth":3}', Rectangle)

    @pytest.mark.parametrize("text", ["", "{", "{'a': 1}", "[1,]", "nope"])
    def test_malformed_json(self, text):
        with pytest.raises(ParseError, match="Invalid JSON"):
            from_json(text, Rectangle)

    @pytest.mark.parametrize(
        "text",
        [
            "NaN",
            "Infinity",
            "-Infinity",
            '{"width": Infinity, "height": 1}',
            "[1, NaN]",
        ],
    )
    def test_non_finite_constants_rejected(self, text):
        with pytest.raises(ParseError, match="is not allowed"):
            from_json(text, None)
        with pytest.raises(ParseError):
            from_json(text, Rectangle)

    def test_decode_logged_without_behavior(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="cssbuilder"):
            from_json("[1,2]")
        assert "decoded list" in [r.getMessage() for r in caplog.records]

    def test_parse_error_location(self):
        with pytest.raises(ParseError) as info:
            from_json('{\n  "a": }')
        assert info.value.line == 2
        assert info.value.column is not None
        assert info.value.__cause__ is not None


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------


class TestRoundTrip:
    @pytest.mark.parametrize(
        "value",
        [
            {"width": 10, "height": 20},
            [1, "two", None, {"nested": [True, False]}],
            {"unicode": "ü", "float": 1.5},
        ],
    )
    def test_plain_values(self, value):
        assert deserialize(serialize(value)) == value

    def test_typed_value(self):
        original = Rectangle(3, 4)
        restored = deserialize(serialize(original), Rectangle)
        assert restored == original
        assert restored is not original
