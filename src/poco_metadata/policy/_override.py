"""OverridePolicy — replace individual decisions of a base policy with functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from poco_metadata._types import (
    AutoGeneratedKeyKind,
    PropertyDescriptor,
    TypeDescriptor,
    require_property,
    require_type,
)
from poco_metadata.policy._base import DECISIONS, EntityPolicy

__all__ = ["OverridePolicy"]

F = TypeVar("F", bound=Callable[..., Any])


class OverridePolicy(EntityPolicy):
    """Composite policy: replaced decisions call a function, the rest delegate.

    Replacement functions take the same arguments as the decision they
    replace, without ``self``. The base defaults to a plain ``EntityPolicy``.

    Example::

        policy = OverridePolicy(
            MarkerHierarchyPolicy(),
            throw_on_missing_foreign_key=lambda type_, prop: False,
        )

        @policy.decision("resource_name")
        def resource_name(type_: TypeDescriptor) -> str:
            return type_.name
    """

    def __init__(self, base: EntityPolicy | None = None, **decisions: Callable[..., Any]) -> None:
        self._base = base if base is not None else EntityPolicy()
        self._decisions: dict[str, Callable[..., Any]] = {}
        for name, fn in decisions.items():
            self._set(name, fn)

    @property
    def base(self) -> EntityPolicy:
        """The policy unreplaced decisions delegate to."""
        return self._base

    @property
    def overridden(self) -> frozenset[str]:
        """Names of the replaced decisions."""
        return frozenset(self._decisions)

    def decision(self, name: str) -> Callable[[F], F]:
        """Decorator that replaces decision *name* with the decorated function.

        Registration happens while the policy is being set up; once a
        metadata walk has started the policy must not change.
        """

        def decorator(fn: F) -> F:
            self._set(name, fn)
            return fn

        return decorator

    def _set(self, name: str, fn: Callable[..., Any]) -> None:
        if name not in DECISIONS:
            raise ValueError(f"Unknown decision {name!r}; expected one of {DECISIONS!r}")
        if not callable(fn):
            raise ValueError(f"Replacement for {name!r} must be callable, got {fn!r}")
        self._decisions[name] = fn

    def _dispatch(self, name: str, *args: Any) -> Any:
        fn = self._decisions.get(name)
        if fn is None:
            return getattr(self._base, name)(*args)
        require_type(args[0])
        if len(args) > 1:
            require_property(args[1])
        return fn(*args)

    def should_include(self, type_: TypeDescriptor) -> bool:
        return self._dispatch("should_include", type_)

    def auto_generated_key_kind(self, type_: TypeDescriptor) -> AutoGeneratedKeyKind:
        return self._dispatch("auto_generated_key_kind", type_)

    def resource_name(self, type_: TypeDescriptor) -> str:
        fn = self._decisions.get("resource_name")
        if fn is not None:
            return fn(require_type(type_))
        # A replaced pluralize feeds the default naming rule, unless the base has its own.
        if (
            "pluralize" in self._decisions
            and type(self._base).resource_name is EntityPolicy.resource_name
        ):
            return super().resource_name(type_)
        return self._base.resource_name(type_)

    def is_complex_type(self, type_: TypeDescriptor) -> bool:
        return self._dispatch("is_complex_type", type_)

    def is_key_property(self, type_: TypeDescriptor, prop: PropertyDescriptor) -> bool:
        return self._dispatch("is_key_property", type_, prop)

    def is_version_property(self, type_: TypeDescriptor, prop: PropertyDescriptor) -> bool:
        return self._dispatch("is_version_property", type_, prop)

    def data_property_type(
        self, type_: TypeDescriptor, prop: PropertyDescriptor
    ) -> TypeDescriptor | None:
        return self._dispatch("data_property_type", type_, prop)

    def foreign_key_name(self, type_: TypeDescriptor, prop: PropertyDescriptor) -> str:
        return self._dispatch("foreign_key_name", type_, prop)

    def throw_on_missing_foreign_key(
        self, type_: TypeDescriptor, prop: PropertyDescriptor
    ) -> bool:
        return self._dispatch("throw_on_missing_foreign_key", type_, prop)

    def pluralize(self, s: str | None) -> str | None:
        fn = self._decisions.get("pluralize")
        if fn is None:
            return self._base.pluralize(s)
        return fn(s)

    def __repr__(self) -> str:
        names = ", ".join(sorted(self._decisions))
        return f"OverridePolicy({self._base!r}, overridden=[{names}])"
