"""Ordering state machine for selector fragments."""

from __future__ import annotations

from cssbuilder.errors import DuplicateSingletonError, OrderViolation
from cssbuilder.log import get_logger
from cssbuilder.selector.kinds import FragmentKind

log = get_logger("selector")

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)


class FragmentOrder:
    """Tracks the last accepted fragment kind for one selector.

    Kinds must arrive in non-decreasing rank; element, id and pseudo-element
    may arrive at most once. There is no terminal state.
    """

    def __init__(self) -> None:
        self._last: FragmentKind | None = None

    @property
    def last(self) -> FragmentKind | None:
        """The most recently accepted kind, or None before any fragment."""
        return self._last

    @property
    def last_rank(self) -> int:
        return -1 if self._last is None else self._last.rank

    def advance(self, kind: FragmentKind) -> None:
        """Accept *kind* or raise without changing state."""
        rank = kind.rank
        if rank < self.last_rank:
            log.debug("rejected fragment: kind=%s after %s", kind.value, self._last)
            raise OrderViolation(ORDER_MESSAGE, kind=kind, previous=self._last)
        if kind.is_singleton and rank == self.last_rank:
            log.debug("rejected fragment: duplicate kind=%s", kind.value)
            raise DuplicateSingletonError(DUPLICATE_MESSAGE, kind=kind)
        self._last = kind

    def copy(self) -> FragmentOrder:
        clone = FragmentOrder()
        clone._last = self._last
        return clone

    def __repr__(self) -> str:
        last = self._last.value if self._last else None
        return f"FragmentOrder(last={last!r})"
