"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selector_builder.model import Category


class SelectorError(Exception):
    """Base error for all rejected builder calls."""

    def __init__(
        self,
        message: str,
        *,
        category: Category | None = None,
        operation: str = "",
    ) -> None:
        super().__init__(message)
        self.category = category
        self.operation = operation


class DuplicateCategoryError(SelectorError):
    """Element, id or pseudo-element was added a second time."""

    def __init__(self, category: Category, operation: str) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one "
            "time inside the selector",
            category=category,
            operation=operation,
        )


class OutOfOrderError(SelectorError):
    """A fragment was added after a fragment of a later category."""

    def __init__(
        self, category: Category, operation: str, conflict: Category
    ) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            category=category,
            operation=operation,
        )
        self.conflict = conflict


class FragmentSpecError(ValueError):
    """A textual ``kind=value`` fragment could not be parsed."""

    def __init__(self, message: str, spec: str = "") -> None:
        super().__init__(message)
        self.spec = spec
