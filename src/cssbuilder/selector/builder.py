"""Stateless facade for building CSS selectors.

Example::

    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'
"""

from __future__ import annotations

from cssbuilder.selector.kinds import FragmentKind
from cssbuilder.selector.model import (
    AnySelector,
    Combinator,
    CombinedSelector,
    Selector,
    combine,
)

__all__ = ["SelectorBuilder", "css_selector_builder"]


class SelectorBuilder:
    """Entry point for selector construction.

    Every method returns a brand-new object, so one builder can be shared
    freely; it holds no state of its own.
    """

    def element(self, value: str) -> Selector:
        return Selector().set_element(value)

    def id(self, value: str) -> Selector:
        return Selector().set_id(value)

    def class_(self, name: str) -> Selector:
        return Selector().add_class(name)

    def attr(self, expr: str) -> Selector:
        return Selector().add_attr(expr)

    def pseudo_class(self, name: str) -> Selector:
        return Selector().add_pseudo_class(name)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().set_pseudo_element(value)

    def fragment(self, kind: FragmentKind, value: str) -> Selector:
        """Start a selector from a fragment of any *kind*."""
        return Selector().add(kind, value)

    def combine(
        self, left: AnySelector, token: str | Combinator, right: AnySelector
    ) -> CombinedSelector:
        """Join two built selectors with a combinator token."""
        return combine(left, token, right)


css_selector_builder = SelectorBuilder()
