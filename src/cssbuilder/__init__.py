"""cssbuilder -- fluent CSS selector builder and JSON object helpers."""

__version__ = "0.1.0"

from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import (
    ConfigError,
    CssBuilderError,
    DuplicateSingletonError,
    InvalidCombinatorError,
    OrderViolation,
    ParseError,
    SelectorError,
)
from cssbuilder.objects import Rectangle, deserialize, from_json, serialize, to_json
from cssbuilder.selector import (
    Combinator,
    CombinedSelector,
    FragmentKind,
    Selector,
    SelectorBuilder,
    css_selector_builder,
    selector_from_data,
    selector_to_data,
)

__all__ = [
    "__version__",
    # config
    "CssBuilderConfig",
    # errors
    "CssBuilderError",
    "SelectorError",
    "OrderViolation",
    "DuplicateSingletonError",
    "InvalidCombinatorError",
    "ParseError",
    "ConfigError",
    # objects
    "Rectangle",
    "to_json",
    "from_json",
    "serialize",
    "deserialize",
    # selector
    "FragmentKind",
    "Selector",
    "Combinator",
    "CombinedSelector",
    "SelectorBuilder",
    "css_selector_builder",
    "selector_to_data",
    "selector_from_data",
]
