"""Error hierarchy for objectkit."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from objectkit.selector.category import Category


class ObjectKitError(Exception):
    """Base error for all objectkit errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(ObjectKitError):
    """A selector chain rejected a fragment."""

    def __init__(
        self,
        message: str,
        *,
        category: Category | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.category = category


class DuplicateError(SelectorError):
    """Element, id or pseudo-element written twice on one chain."""

    DEFAULT_MESSAGE = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )

    def __init__(self, message: str = DEFAULT_MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class OrderError(SelectorError):
    """A fragment was written after a fragment of a later category."""

    DEFAULT_MESSAGE = (
        "Selector parts should be arranged in the following order: element, "
        "id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, message: str = DEFAULT_MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class CombinatorError(SelectorError):
    """Combinator token is not one of ' ', '+', '~', '>'."""


# ---------------------------------------------------------------------------
# Facade and codec errors
# ---------------------------------------------------------------------------


class StateError(ObjectKitError):
    """Facade result was read before anything was combined."""


class ParseError(ObjectKitError):
    """Raised when serialized text cannot be decoded."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column
