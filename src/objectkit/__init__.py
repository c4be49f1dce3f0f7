"""objectkit: shapes, a JSON codec, and a fluent CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objectkit.codec import from_json, to_json
from objectkit.config import ObjectKitConfig
from objectkit.errors import (
    CombinatorError,
    DuplicateError,
    ObjectKitError,
    OrderError,
    ParseError,
    SelectorError,
    StateError,
)
from objectkit.model import Circle, Rectangle
from objectkit.selector import BuilderFacade, CombinedSelector, SelectorBuilder, css_selector_builder

__all__ = [
    "__version__",
    "ObjectKitConfig",
    # model
    "Rectangle",
    "Circle",
    # codec
    "to_json",
    "from_json",
    # selector
    "SelectorBuilder",
    "CombinedSelector",
    "BuilderFacade",
    "css_selector_builder",
    # errors
    "ObjectKitError",
    "SelectorError",
    "DuplicateError",
    "OrderError",
    "CombinatorError",
    "StateError",
    "ParseError",
]
