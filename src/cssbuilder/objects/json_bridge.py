"""JSON bridge: encode values to text and decode text into typed objects.

Decoding never grafts methods onto parsed data. Instead the parsed fields
are handed to a *behavior* factory (usually a class) that builds a typed
object carrying both the data and the methods::

    r = from_json('{"width":10,"height":20}', Rectangle)
    r.get_area()  # 200
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Callable, TypeVar, overload

from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import ParseError
from cssbuilder.log import get_logger

__all__ = ["to_json", "from_json", "serialize", "deserialize"]

log = get_logger("json")

T = TypeVar("T")


def _encode_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ParseError(f"Invalid JSON: {name} is not allowed")


def to_json(value: Any, config: CssBuilderConfig | None = None) -> str:
    """Return the JSON text of *value*.

    Dataclass instances, nested ones included, are encoded as objects of
    their fields. Key order follows the value's own order unless
    ``config.sort_keys`` is set. NaN and infinities raise ValueError.
    """
    cfg = config or CssBuilderConfig()
    separators = (",", ":") if cfg.json_indent is None else None
    text = json.dumps(
        value,
        default=_encode_default,
        allow_nan=False,
        indent=cfg.json_indent,
        separators=separators,
        sort_keys=cfg.sort_keys,
        ensure_ascii=False,
    )
    log.debug("encoded %s to %d chars", type(value).__name__, len(text))
    return text


@overload
def from_json(text: str, behavior: None = None) -> Any: ...


@overload
def from_json(text: str, behavior: Callable[..., T]) -> T: ...


def from_json(text: str, behavior: Callable[..., Any] | None = None) -> Any:
    """Parse *text* and, if given, build a *behavior* object from it.

    Objects are passed to *behavior* as keyword arguments, any other JSON
    value as the single positional argument.

    Raises:
        ParseError: *text* is not well-formed JSON, or uses NaN or an
            infinity.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno
        ) from exc

    if behavior is None:
        log.debug("decoded %s", type(data).__name__)
        return data
    log.debug(
        "decoding %s into %s",
        type(data).__name__,
        getattr(behavior, "__name__", behavior),
    )
    if isinstance(data, dict):
        return behavior(**data)
    return behavior(data)


def serialize(value: Any, config: CssBuilderConfig | None = None) -> str:
    """Alias of :func:`to_json`."""
    return to_json(value, config)


def deserialize(text: str, behavior: Callable[..., Any] | None = None) -> Any:
    """Alias of :func:`from_json`."""
    return from_json(text, behavior)
