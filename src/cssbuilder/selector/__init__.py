from cssbuilder.selector.builder import SelectorBuilder, css_selector_builder
from cssbuilder.selector.kinds import CATEGORY_ORDER, FragmentKind
from cssbuilder.selector.model import Combinator, CombinedSelector, Selector
from cssbuilder.selector.ordering import FragmentOrder
from cssbuilder.selector.serialize import selector_from_data, selector_to_data

__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
    "CATEGORY_ORDER",
    "FragmentKind",
    "FragmentOrder",
    "Selector",
    "Combinator",
    "CombinedSelector",
    "selector_to_data",
    "selector_from_data",
]
