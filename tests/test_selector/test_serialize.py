"""Tests for converting selector trees to and from plain data."""

import pytest

from cssbuilder.errors import DuplicateSingletonError, InvalidCombinatorError, ParseError
from cssbuilder.objects import from_json, to_json
from cssbuilder.selector import (
    Selector,
    css_selector_builder as builder,
    selector_from_data,
    selector_to_data,
)


class TestSelectorToData:
    def test_compound(self):
        sel = builder.element("a").id("x").class_("b").class_("c").pseudo_element("after")
        assert selector_to_data(sel) == {
            "element": "a",
            "id": "x",
            "class": ["b", "c"],
            "pseudoElement": "after",
        }

    def test_keys_in_category_order(self):
        sel = builder.element("a").attr("href").pseudo_class("hover")
        assert list(selector_to_data(sel)) == ["element", "attr", "pseudoClass"]

    def test_combined(self):
        combined = builder.combine(builder.id("a"), ">", builder.class_("b"))
        assert selector_to_data(combined) == {
            "left": {"id": "a"},
            "combinator": ">",
            "right": {"class": ["b"]},
        }


class TestSelectorFromData:
    def test_compound(self):
        sel = selector_from_data({"class": ["x", "y"], "element": "p"})
        assert isinstance(sel, Selector)
        assert sel.stringify() == "p.x.y"

    def test_single_string_for_repeatable(self):
        assert selector_from_data({"attr": "disabled"}).stringify() == "[disabled]"

    def test_combined(self):
        data = {
            "left": {"element": "ul"},
            "combinator": " ",
            "right": {
                "left": {"element": "li"},
                "combinator": "+",
                "right": {"element": "li"},
            },
        }
        assert selector_from_data(data).stringify() == "ul   li + li"

    def test_round_trip_through_json(self):
        combined = builder.combine(
            builder.element("div").id("main").class_("container"),
            "~",
            builder.element("a").attr('href^="http"').pseudo_class("visited"),
        )
        text = to_json(selector_to_data(combined))
        rebuilt = selector_from_data(from_json(text))
        assert rebuilt.stringify() == combined.stringify()

    def test_singleton_list_with_two_values(self):
        with pytest.raises(DuplicateSingletonError):
            selector_from_data({"id": ["a", "b"]})

    @pytest.mark.parametrize(
        "data, match",
        [
            ([], "must be an object"),
            ("div", "must be an object"),
            ({}, "must not be empty"),
            ({"tag": "div"}, "Unknown selector keys: tag"),
            ({"element": 3}, "string or a list of strings"),
            ({"class": ["a", 1]}, "string or a list of strings"),
            ({"left": {"id": "a"}, "combinator": ">"}, "Combined selector needs"),
            ({"left": {}, "combinator": ">", "right": {"id": "b"}, "x": 1}, "Combined selector needs"),
        ],
    )
    def test_invalid_trees(self, data, match):
        with pytest.raises(ParseError, match=match):
            selector_from_data(data)

    def test_invalid_combinator(self):
        with pytest.raises(InvalidCombinatorError):
            selector_from_data({"left": {"id": "a"}, "combinator": "|", "right": {"id": "b"}})
