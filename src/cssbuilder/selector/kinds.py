"""Fragment categories and their rendering decoration."""

from __future__ import annotations

from enum import Enum


class FragmentKind(Enum):
    """One of the six selector fragment categories.

    Values double as the keys used when a selector is turned into plain data.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTR = "attr"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"

    @property
    def rank(self) -> int:
        """Position of this kind in ``CATEGORY_ORDER``."""
        return CATEGORY_ORDER.index(self)

    @property
    def is_singleton(self) -> bool:
        return self in SINGLETON_KINDS

    @property
    def prefix(self) -> str:
        return _DECORATION[self][0]

    @property
    def suffix(self) -> str:
        return _DECORATION[self][1]

    def decorate(self, value: str) -> str:
        """Wrap a raw fragment value with this category's prefix and suffix."""
        return f"{self.prefix}{value}{self.suffix}"


# Fragments must be added, and are rendered, in this order.
CATEGORY_ORDER: tuple[FragmentKind, ...] = (
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.CLASS,
    FragmentKind.ATTR,
    FragmentKind.PSEUDO_CLASS,
    FragmentKind.PSEUDO_ELEMENT,
)

SINGLETON_KINDS: frozenset[FragmentKind] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_DECORATION: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTR: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}
