from objectkit.selector.builder import SelectorBuilder
from objectkit.selector.category import Category
from objectkit.selector.facade import (
    COMBINATORS,
    BuilderFacade,
    CombinedSelector,
    Stringifiable,
    css_selector_builder,
)

__all__ = [
    "Category",
    "SelectorBuilder",
    "CombinedSelector",
    "Stringifiable",
    "BuilderFacade",
    "COMBINATORS",
    "css_selector_builder",
]
