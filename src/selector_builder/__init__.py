"""selector_builder - immutable, chainable builder for CSS selector strings."""

from selector_builder.errors import (
    DuplicateCategoryError,
    FragmentSpecError,
    OutOfOrderError,
    SelectorError,
)
from selector_builder.model import Category, Selector, combine

__version__ = "0.1.0"

builder = Selector()

__all__ = [
    "__version__",
    "builder",
    "combine",
    "Category",
    "Selector",
    "SelectorError",
    "DuplicateCategoryError",
    "OutOfOrderError",
    "FragmentSpecError",
]
