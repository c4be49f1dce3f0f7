"""Selector facade: one factory per fragment category plus combination."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from objectkit.config import ObjectKitConfig
from objectkit.errors import CombinatorError, StateError
from objectkit.selector.builder import SelectorBuilder

__all__ = ["COMBINATORS", "Stringifiable", "CombinedSelector", "BuilderFacade", "css_selector_builder"]

logger = logging.getLogger(__name__)

COMBINATORS = frozenset({" ", "+", "~", ">"})


@runtime_checkable
class Stringifiable(Protocol):
    """Anything that renders itself as selector text."""

    def stringify(self) -> str: ...


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator token.

    Operands may themselves be combined selectors, so combinations nest.
    ``text`` is rendered once, when the selectors are combined; later changes
    to an operand do not show up in it.
    """

    left: Stringifiable
    combinator: str
    right: Stringifiable
    text: str

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.stringify()


class BuilderFacade:
    """Entry point that starts a new selector chain per call.

    Every fragment method returns a fresh :class:`SelectorBuilder`.
    :meth:`combine` returns a :class:`CombinedSelector`; the facade also keeps
    the rendering of its most recent combination for :meth:`stringify`, which
    is shared by every caller of the same facade instance.
    """

    def __init__(self, config: ObjectKitConfig | None = None) -> None:
        self.config = config or ObjectKitConfig()
        self._lock = threading.Lock()
        self._last: str | None = None

    # --- chain factories ------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    # --- combination ----------------------------------------------------------

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> CombinedSelector:
        """Join *left* and *right* with *combinator*.

        Raises:
            TypeError: an operand has no ``stringify()`` or the combinator is
                not a string.
            CombinatorError: strict mode is on and the combinator is not one
                of ``" "``, ``"+"``, ``"~"``, ``">"``.
        """
        for operand in (left, right):
            if not isinstance(operand, Stringifiable):
                raise TypeError(
                    f"Cannot combine {type(operand).__name__}: it has no stringify()"
                )
        if not isinstance(combinator, str):
            raise TypeError(f"Combinator must be a str, got {type(combinator).__name__}")
        if self.config.strict_combinators and combinator not in COMBINATORS:
            raise CombinatorError(f"Invalid combinator: {combinator!r}")

        rendered = f"{left.stringify()} {combinator} {right.stringify()}"
        combined = CombinedSelector(
            left=left, combinator=combinator, right=right, text=rendered
        )
        with self._lock:
            self._last = rendered
        logger.debug("Combined selector %r", rendered)
        return combined

    def stringify(self) -> str:
        """Return the rendering of the most recent :meth:`combine` call."""
        with self._lock:
            if self._last is None:
                raise StateError("Nothing has been combined yet")
            return self._last


setattr(BuilderFacade, "class", BuilderFacade.class_)

css_selector_builder = BuilderFacade()
