"""Selector model: Selector, Combinator and CombinedSelector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from cssbuilder.errors import InvalidCombinatorError
from cssbuilder.log import get_logger
from cssbuilder.selector.kinds import CATEGORY_ORDER, FragmentKind
from cssbuilder.selector.ordering import FragmentOrder

log = get_logger("selector")


class Selector:
    """A single compound selector: ``element#id.class[attr]:pseudo::pseudo``.

    Mutators validate ordering first, then store the fragment, then return
    ``self`` so calls can be chained.
    """

    def __init__(self) -> None:
        self._order = FragmentOrder()
        self._fragments: dict[FragmentKind, list[str]] = {
            kind: [] for kind in CATEGORY_ORDER
        }

    # --- mutators -------------------------------------------------------------

    def _add(self, kind: FragmentKind, value: str) -> Selector:
        self._order.advance(kind)
        self._fragments[kind].append(value)
        log.debug("fragment added: kind=%s value=%r", kind.value, value)
        return self

    def set_element(self, value: str) -> Selector:
        return self._add(FragmentKind.ELEMENT, value)

    def set_id(self, value: str) -> Selector:
        return self._add(FragmentKind.ID, value)

    def add_class(self, name: str) -> Selector:
        return self._add(FragmentKind.CLASS, name)

    def add_attr(self, expr: str) -> Selector:
        return self._add(FragmentKind.ATTR, expr)

    def add_pseudo_class(self, name: str) -> Selector:
        return self._add(FragmentKind.PSEUDO_CLASS, name)

    def set_pseudo_element(self, value: str) -> Selector:
        return self._add(FragmentKind.PSEUDO_ELEMENT, value)

    def add(self, kind: FragmentKind, value: str) -> Selector:
        """Add a fragment of an arbitrary *kind*."""
        return self._add(kind, value)

    # chaining aliases, named like the builder entry points
    element = set_element
    id = set_id
    class_ = add_class
    attr = add_attr
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element

    # --- accessors ------------------------------------------------------------

    def values(self, kind: FragmentKind) -> tuple[str, ...]:
        """Return the fragments of *kind* in insertion order."""
        return tuple(self._fragments[kind])

    @property
    def last_kind(self) -> FragmentKind | None:
        return self._order.last

    def is_empty(self) -> bool:
        return not any(self._fragments.values())

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Render fragments in category order with their decoration."""
        return "".join(
            kind.decorate(value)
            for kind in CATEGORY_ORDER
            for value in self._fragments[kind]
        )

    def copy(self) -> Selector:
        """Return an independent selector with the same fragments and state."""
        clone = Selector.__new__(Selector)
        clone._order = self._order.copy()
        clone._fragments = {kind: list(vals) for kind, vals in self._fragments.items()}
        return clone

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"Selector({self.stringify()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selector):
            return NotImplemented
        return self._fragments == other._fragments

    __hash__ = None  # type: ignore[assignment]


class Combinator(str, Enum):
    """Token expressing the DOM relationship between two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def parse(cls, token: str | Combinator) -> Combinator:
        """Coerce a raw token into a Combinator."""
        try:
            return cls(token)
        except ValueError as exc:
            raise InvalidCombinatorError(
                f"Invalid combinator {token!r}; expected one of ' ', '+', '~', '>'",
                token=str(token),
            ) from exc


AnySelector = Union[Selector, "CombinedSelector"]


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator token.

    Operands may themselves be CombinedSelectors; rendering expands them
    recursively, left to right, exactly as constructed.
    """

    left: AnySelector
    combinator: Combinator
    right: AnySelector

    # operands are mutable Selectors
    __hash__ = None  # type: ignore[assignment]

    def stringify(self) -> str:
        return (
            f"{self.left.stringify()} {self.combinator.value} "
            f"{self.right.stringify()}"
        )

    def combine(self, token: str | Combinator, other: AnySelector) -> CombinedSelector:
        """Join this selector with *other*, this one on the left."""
        return combine(self, token, other)

    def __str__(self) -> str:
        return self.stringify()


def combine(left: AnySelector, token: str | Combinator, right: AnySelector) -> CombinedSelector:
    """Build a CombinedSelector owning snapshots of both operands."""
    combinator = Combinator.parse(token)
    for operand in (left, right):
        if not isinstance(operand, (Selector, CombinedSelector)):
            raise TypeError(
                f"combine() operands must be selectors, got {type(operand).__name__}"
            )
    log.debug("combine: combinator=%r", combinator.value)
    return CombinedSelector(
        left=_snapshot(left),
        combinator=combinator,
        right=_snapshot(right),
    )


def _snapshot(selector: AnySelector) -> AnySelector:
    if isinstance(selector, Selector):
        return selector.copy()
    # CombinedSelector is frozen and already holds snapshots
    return selector
