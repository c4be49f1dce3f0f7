"""Fluent builder for compound CSS-like selectors."""

from __future__ import annotations

import logging

from objectkit.errors import DuplicateError, OrderError
from objectkit.selector.category import Category

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector fragments in canonical category order.

    Each fragment method validates before it mutates and returns the builder
    itself, so calls chain::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    Element, id and pseudo-element may each be written once. Once a category
    has been written, no earlier category may be written again.
    """

    def __init__(self) -> None:
        self._fragments: dict[Category, list[str]] = {c: [] for c in Category}
        self._cursor: int | None = None  # highest rank written so far

    # --- fragment methods -----------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._add(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._add(Category.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._add(Category.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._add(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._add(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._add(Category.PSEUDO_ELEMENT, value)

    def _add(self, category: Category, value: str) -> SelectorBuilder:
        if category.singleton and self._fragments[category]:
            logger.debug("Rejected duplicate %s fragment %r", category.name, value)
            raise DuplicateError(category=category)
        if self._cursor is not None and self._cursor > category.rank:
            logger.debug(
                "Rejected %s fragment %r after %s",
                category.name,
                value,
                Category(self._cursor).name,
            )
            raise OrderError(category=category)

        self._fragments[category].append(category.render(value))
        self._cursor = category.rank
        logger.debug("Added %s fragment %r", category.name, value)
        return self

    # --- rendering ------------------------------------------------------------

    @property
    def fragments(self) -> dict[Category, list[str]]:
        """Return a copy of the rendered fragments keyed by category."""
        return {category: list(parts) for category, parts in self._fragments.items()}

    def stringify(self) -> str:
        """Concatenate every fragment in canonical order."""
        return "".join("".join(parts) for parts in self._fragments.values())

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"


# ``class`` is a keyword, so that name is only reachable via getattr
setattr(SelectorBuilder, "class", SelectorBuilder.class_)
