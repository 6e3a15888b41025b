"""EntityPolicy — default decisions for metadata generation."""

from __future__ import annotations

from poco_metadata._types import (
    AutoGeneratedKeyKind,
    PropertyDescriptor,
    TypeDescriptor,
    require_property,
    require_type,
)
from poco_metadata.policy._pluralize import pluralize

__all__ = ["DECISIONS", "EntityPolicy"]

# Names of the overridable decisions, in the order a metadata walk consults them.
DECISIONS: tuple[str, ...] = (
    "should_include",
    "is_complex_type",
    "auto_generated_key_kind",
    "resource_name",
    "is_key_property",
    "is_version_property",
    "data_property_type",
    "foreign_key_name",
    "throw_on_missing_foreign_key",
    "pluralize",
)


class EntityPolicy:
    """Describes how a set of types is presented in client metadata.

    A metadata builder calls these methods for every candidate type and
    property. Every decision is a pure function of its arguments, so one
    instance can be shared by concurrent callers. Subclass and override
    individual methods to adapt to a data model.

    Example::

        class AuditFreePolicy(EntityPolicy):
            def should_include(self, type_: TypeDescriptor) -> bool:
                return not type_.name.startswith("Audit")
    """

    def should_include(self, type_: TypeDescriptor) -> bool:
        """Filter types from metadata generation.

        Returns:
            ``True`` if the type should be included, ``False`` otherwise.
        """
        require_type(type_)
        return True

    def auto_generated_key_kind(self, type_: TypeDescriptor) -> AutoGeneratedKeyKind:
        """How the key of *type_* is produced.

        Should be answered even when the key property lives on a base type.
        """
        require_type(type_)
        return AutoGeneratedKeyKind.UNSPECIFIED

    def resource_name(self, type_: TypeDescriptor) -> str:
        """Server resource (endpoint) name for *type_*, e.g. ``"Products"``.

        Clients use this when composing a query URL for the type.
        """
        require_type(type_)
        return self.pluralize(type_.name) or type_.name

    def is_complex_type(self, type_: TypeDescriptor) -> bool:
        """Whether *type_* is a complex (embedded) type rather than an entity.

        Complex types are part of their parent entity instead of being
        related by foreign keys.
        """
        require_type(type_)
        return False

    def is_key_property(self, type_: TypeDescriptor, prop: PropertyDescriptor) -> bool:
        """Whether *prop* is part of the key of *type_*.

        Matches ``<TypeName>ID`` and ``ID`` exactly (case-sensitive).
        """
        require_type(type_)
        name = require_property(prop).name
        if name == type_.name + "ID":
            return True
        return name == "ID"

    def is_version_property(self, type_: TypeDescriptor, prop: PropertyDescriptor) -> bool:
        """Whether *prop* is the optimistic concurrency token of *type_*."""
        require_type(type_)
        return require_property(prop).name == "RowVersion"

    def data_property_type(
        self, type_: TypeDescriptor, prop: PropertyDescriptor
    ) -> TypeDescriptor | None:
        """Type to publish for a data property.

        A server-side wrapper type may be unwrapped for the client here.

        Returns:
            The type to put in the metadata, or ``None`` to omit the property.
        """
        require_type(type_)
        return require_property(prop).property_type

    def foreign_key_name(self, type_: TypeDescriptor, prop: PropertyDescriptor) -> str:
        """Name of the data property holding the foreign key for a scalar navigation.

        If ``Order.Customer`` is backed by ``Order.CustomerID``, this returns
        ``"CustomerID"``.
        """
        require_type(type_)
        return require_property(prop).name + "ID"

    def throw_on_missing_foreign_key(
        self, type_: TypeDescriptor, prop: PropertyDescriptor
    ) -> bool:
        """Whether an unresolved foreign key name is a hard error.

        Returns:
            ``True`` to raise, ``False`` to skip the navigation property.
        """
        require_type(type_)
        require_property(prop)
        return True

    def pluralize(self, s: str | None) -> str | None:
        """Pluralize a type name. See :func:`poco_metadata.policy.pluralize`."""
        return pluralize(s)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
