"""Selector model: the fragment Category enum and the immutable Selector.

A Selector is built by chaining fragment operations, each returning a new
instance:

    builder.element("a").attr('href$=".png"').pseudo_class("focus")
    # -> a[href$=".png"]:focus

Fragments must be added in category order (element, id, class, attribute,
pseudo-class, pseudo-element). Element, id and pseudo-element may each
appear at most once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from selector_builder.errors import DuplicateCategoryError, OutOfOrderError

__all__ = ["Category", "Selector", "combine"]

logger = logging.getLogger(__name__)


class Category(Enum):
    """Fragment categories, declared in the order CSS requires them."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def index(self) -> int:
        return _ORDER.index(self)

    @property
    def unique(self) -> bool:
        """True if the category may occur at most once in a selector."""
        return self in _UNIQUE

    def format(self, value: str) -> str:
        return _TEMPLATES[self].format(value)


_ORDER: tuple[Category, ...] = tuple(Category)

_UNIQUE = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_TEMPLATES: dict[Category, str] = {
    Category.ELEMENT: "{}",
    Category.ID: "#{}",
    Category.CLASS: ".{}",
    Category.ATTRIBUTE: "[{}]",
    Category.PSEUDO_CLASS: ":{}",
    Category.PSEUDO_ELEMENT: "::{}",
}

_EMPTY_PRESENCE: tuple[bool, ...] = (False,) * len(_ORDER)


@dataclass(frozen=True)
class Selector:
    """An immutable, chainable CSS selector under construction.

    Attributes:
        text: The selector string accumulated so far.
        presence: One flag per Category, in category order, set once a
            fragment of that category has been added.
        combined: True for the result of combine and anything chained on it.
    """

    text: str = ""
    presence: tuple[bool, ...] = _EMPTY_PRESENCE
    combined: bool = False

    # --- fragment operations -------------------------------------------------

    def element(self, value: str) -> Selector:
        return self._append(Category.ELEMENT, value, "element")

    def id(self, value: str) -> Selector:
        return self._append(Category.ID, value, "id")

    def class_(self, value: str) -> Selector:
        return self._append(Category.CLASS, value, "class_")

    def attr(self, value: str) -> Selector:
        return self._append(Category.ATTRIBUTE, value, "attr")

    def pseudo_class(self, value: str) -> Selector:
        return self._append(Category.PSEUDO_CLASS, value, "pseudo_class")

    def pseudo_element(self, value: str) -> Selector:
        return self._append(Category.PSEUDO_ELEMENT, value, "pseudo_element")

    # --- combination / output ------------------------------------------------

    @staticmethod
    def combine(left: Selector, combinator: str, right: Selector) -> Selector:
        """Join two selectors with a combinator (" ", "+", "~", ">").

        The combinator is always surrounded by a single space. The result
        starts with cleared category flags and is meant to be stringified
        or used as an operand of a further combine. Fragments chained onto
        it are appended to the right operand's text without regard to its
        categories: combine(a, ">", b).element("x") gives "a > bx".
        """
        text = f"{left.text} {combinator} {right.text}"
        logger.debug("Combined selector: %r", text)
        return Selector(text=text, combined=True)

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    # --- cardinality ----------------------------------------------------------

    def has(self, category: Category) -> bool:
        return self.presence[category.index]

    @property
    def element_count(self) -> int:
        return int(self.has(Category.ELEMENT))

    @property
    def id_count(self) -> int:
        return int(self.has(Category.ID))

    @property
    def pseudo_element_count(self) -> int:
        return int(self.has(Category.PSEUDO_ELEMENT))

    # --- internals ------------------------------------------------------------

    def _append(self, category: Category, value: str, operation: str) -> Selector:
        index = category.index
        if self.combined:
            logger.debug(
                "Appending %s(%r) to combined selector %r", operation, value, self.text
            )
        if category.unique and self.presence[index]:
            logger.debug(
                "Rejected %s(%r): duplicate %s", operation, value, category.value
            )
            raise DuplicateCategoryError(category, operation)

        later = [c for c in _ORDER[index + 1:] if self.presence[c.index]]
        if later:
            conflict = later[-1]
            logger.debug(
                "Rejected %s(%r): %s already present", operation, value, conflict.value
            )
            raise OutOfOrderError(category, operation, conflict)

        presence = list(self.presence)
        presence[index] = True
        text = self.text + category.format(value)
        logger.debug("Appended %s fragment: %r", category.value, text)
        return replace(self, text=text, presence=tuple(presence))


def combine(left: Selector, combinator: str, right: Selector) -> Selector:
    """Module-level alias for Selector.combine."""
    return Selector.combine(left, combinator, right)
