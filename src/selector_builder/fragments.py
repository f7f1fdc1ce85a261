"""Textual fragment specs: ``kind=value`` strings folded through the builder.

Recognised kinds:
    element, id, class, attr, pseudo-class, pseudo-element

Example:
    build_selector(["element=div", "id=main", "class=container"])
    # -> div#main.container
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from selector_builder.errors import FragmentSpecError
from selector_builder.model import Category, Selector

__all__ = ["KINDS", "parse_fragment", "build_selector"]

logger = logging.getLogger(__name__)

# Maps textual kind -> (category, builder method name)
KINDS: dict[str, tuple[Category, str]] = {
    "element": (Category.ELEMENT, "element"),
    "id": (Category.ID, "id"),
    "class": (Category.CLASS, "class_"),
    "attr": (Category.ATTRIBUTE, "attr"),
    "pseudo-class": (Category.PSEUDO_CLASS, "pseudo_class"),
    "pseudo-element": (Category.PSEUDO_ELEMENT, "pseudo_element"),
}


def _split(spec: str) -> tuple[str, str]:
    """Split a ``kind=value`` spec into its normalised kind and raw value.

    Only the first ``=`` separates kind from value, so attribute values such
    as ``attr=href$=".png"`` are kept intact. The value is not inspected.
    """
    kind, sep, value = spec.partition("=")
    if not sep:
        raise FragmentSpecError(f"Expected kind=value, got {spec!r}", spec=spec)
    kind = kind.strip().lower()
    if kind not in KINDS:
        known = ", ".join(KINDS)
        raise FragmentSpecError(
            f"Unknown fragment kind {kind!r} (expected one of: {known})", spec=spec
        )
    return kind, value


def parse_fragment(spec: str) -> tuple[Category, str]:
    """Return the category and raw value of a ``kind=value`` spec."""
    kind, value = _split(spec)
    return KINDS[kind][0], value


def build_selector(specs: Iterable[str], start: Selector | None = None) -> Selector:
    """Apply each spec in order, starting from *start* (or an empty Selector).

    Builder errors propagate unchanged.
    """
    selector = start if start is not None else Selector()
    for spec in specs:
        kind, value = _split(spec)
        method = KINDS[kind][1]
        selector = getattr(selector, method)(value)
    logger.debug("Built selector %r", selector.text)
    return selector
