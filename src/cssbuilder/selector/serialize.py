"""Convert selector trees to and from plain JSON-compatible data."""

from __future__ import annotations

from typing import Any

from cssbuilder.errors import ParseError
from cssbuilder.selector.builder import css_selector_builder
from cssbuilder.selector.kinds import CATEGORY_ORDER, FragmentKind
from cssbuilder.selector.model import AnySelector, CombinedSelector, Selector

__all__ = ["selector_to_data", "selector_from_data"]

_COMBINED_KEYS = {"left", "combinator", "right"}
_KIND_BY_KEY = {kind.value: kind for kind in CATEGORY_ORDER}


def selector_to_data(selector: AnySelector) -> dict[str, Any]:
    """Describe *selector* as nested dicts, lists and strings."""
    if isinstance(selector, CombinedSelector):
        return {
            "left": selector_to_data(selector.left),
            "combinator": selector.combinator.value,
            "right": selector_to_data(selector.right),
        }
    data: dict[str, Any] = {}
    for kind in CATEGORY_ORDER:
        values = selector.values(kind)
        if not values:
            continue
        data[kind.value] = values[0] if kind.is_singleton else list(values)
    return data


def selector_from_data(data: Any) -> AnySelector:
    """Rebuild a selector tree produced by :func:`selector_to_data`.

    Fragments go through the public builder, so ordering and duplicate
    rules still apply.
    """
    if not isinstance(data, dict):
        raise ParseError(f"Selector node must be an object, got {type(data).__name__}")
    if not data:
        raise ParseError("Selector node must not be empty")

    if "combinator" in data:
        missing = _COMBINED_KEYS - data.keys()
        extra = data.keys() - _COMBINED_KEYS
        if missing or extra:
            raise ParseError(
                f"Combined selector needs exactly {sorted(_COMBINED_KEYS)}, "
                f"got {sorted(data.keys())}"
            )
        return css_selector_builder.combine(
            selector_from_data(data["left"]),
            data["combinator"],
            selector_from_data(data["right"]),
        )

    unknown = sorted(k for k in data if k not in _KIND_BY_KEY)
    if unknown:
        raise ParseError(f"Unknown selector keys: {', '.join(unknown)}")

    selector = Selector()
    for kind in CATEGORY_ORDER:
        if kind.value not in data:
            continue
        for value in _fragment_values(kind, data[kind.value]):
            selector.add(kind, value)
    return selector


def _fragment_values(kind: FragmentKind, raw: Any) -> list[str]:
    if isinstance(raw, str):
        return [raw]
    if isinstance(raw, list) and all(isinstance(v, str) for v in raw):
        return list(raw)
    raise ParseError(
        f"Value for {kind.value!r} must be a string or a list of strings"
    )
