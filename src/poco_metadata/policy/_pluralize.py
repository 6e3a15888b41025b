"""Suffix-only pluralizer used for resource names."""

from __future__ import annotations

__all__ = ["pluralize"]


def pluralize(s: str | None) -> str | None:
    """Pseudo-pluralize *s* by suffixing.

    A trailing ``y`` becomes ``ies``; anything else gets an ``s``.
    Empty and ``None`` input are returned unchanged. This is a naming
    heuristic, not an English pluralizer: ``"Key"`` becomes ``"Keies"``.
    Policies needing real plurals should override ``resource_name``.

    Example::

        pluralize("Category")  # "Categories"
        pluralize("Order")     # "Orders"
    """
    if not s:
        return s
    if s[-1] == "y":
        return s[:-1] + "ies"
    return s + "s"
