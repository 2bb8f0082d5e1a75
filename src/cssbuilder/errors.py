"""Error hierarchy for cssbuilder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.selector.kinds import FragmentKind


class CssBuilderError(Exception):
    """Base error for all cssbuilder errors."""


# ---------------------------------------------------------------------------
# Selector construction
# ---------------------------------------------------------------------------


class SelectorError(CssBuilderError):
    """A selector was assembled from an invalid call sequence."""


class OrderViolation(SelectorError, ValueError):
    """A fragment was added after a fragment of a later category."""

    def __init__(
        self,
        message: str,
        *,
        kind: FragmentKind | None = None,
        previous: FragmentKind | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.previous = previous


class DuplicateSingletonError(SelectorError, ValueError):
    """An element, id or pseudo-element was added a second time."""

    def __init__(self, message: str, *, kind: FragmentKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class InvalidCombinatorError(SelectorError, ValueError):
    """The combinator token is not one of ' ', '+', '~', '>'."""

    def __init__(self, message: str, *, token: str = "") -> None:
        super().__init__(message)
        self.token = token


# ---------------------------------------------------------------------------
# Data
# ---------------------------------------------------------------------------


class ParseError(CssBuilderError, ValueError):
    """Raised when JSON text or a selector tree cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class ConfigError(CssBuilderError, ValueError):
    """Raised when configuration values are invalid."""
