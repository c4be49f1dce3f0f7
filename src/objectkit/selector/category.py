"""Selector fragment categories in canonical order."""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    """A fragment category of a compound selector.

    The value is the category's rank. Fragments render in rank order:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def rank(self) -> int:
        return self.value

    @property
    def singleton(self) -> bool:
        """True if at most one fragment of this category is allowed."""
        return self in _SINGLETONS

    def render(self, value: str) -> str:
        """Wrap *value* in this category's prefix and suffix."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_SINGLETONS = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_AFFIXES: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}
