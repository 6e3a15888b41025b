"""Type and property descriptors shared by every policy."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal

from poco_metadata.exceptions import DescriptorError

__all__ = [
    "AutoGeneratedKeyKind",
    "OnOmittedKey",
    "PropertyDescriptor",
    "TypeDescriptor",
    "require_property",
    "require_type",
]

# Valid values for MetadataConfig.on_omitted_key.
OnOmittedKey = Literal["ignore", "warn", "raise"]


class AutoGeneratedKeyKind(enum.Enum):
    """How the primary key value of an entity is produced.

    ``IDENTITY`` keys are generated by the database server (or are GUIDs),
    ``KEY_GENERATOR`` keys by code on the application server, ``NONE`` keys
    are assigned manually. ``UNSPECIFIED`` leaves the choice to the consumer,
    which treats it like ``NONE``.
    """

    IDENTITY = "Identity"
    KEY_GENERATOR = "KeyGenerator"
    NONE = "None"
    UNSPECIFIED = "Unspecified"


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Immutable description of a candidate type.

    Attributes:
        name: Short type name (e.g. ``"Order"``).
        namespace: Dotted namespace the type lives in. Empty for none.
        ancestors: Base type names, nearest first, excluding the type itself.
        interfaces: Names of implemented interfaces, in declaration order.

    Example::

        order = TypeDescriptor(
            "Order", "Shop.Model", ancestors=("EntityBase", "ModelBase")
        )
        assert list(order.lineage) == ["Order", "EntityBase", "ModelBase"]
    """

    name: str
    namespace: str = ""
    ancestors: tuple[str, ...] = ()
    interfaces: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples so descriptors stay hashable.
        for field in ("ancestors", "interfaces"):
            value = getattr(self, field)
            if isinstance(value, str):
                raise DescriptorError(
                    argument=field, value=value, expected="sequence of type names"
                )
            if not isinstance(value, tuple):
                object.__setattr__(self, field, tuple(value))

    @property
    def full_name(self) -> str:
        """Namespace-qualified name."""
        return f"{self.namespace}.{self.name}" if self.namespace else self.name

    @property
    def lineage(self) -> Iterator[str]:
        """Own name, then ancestors nearest first, then interfaces."""
        yield self.name
        yield from self.ancestors
        yield from self.interfaces


@dataclass(frozen=True, slots=True)
class PropertyDescriptor:
    """Immutable description of a property on an owning type.

    Attributes:
        name: Property name.
        property_type: Declared value type.
        owner: The type declaring the property.
        is_navigation: True for scalar navigation (association) properties.
    """

    name: str
    property_type: TypeDescriptor
    owner: TypeDescriptor
    is_navigation: bool = False

    def __post_init__(self) -> None:
        require_type(self.property_type, "property_type")
        require_type(self.owner, "owner")


def require_type(value: object, argument: str = "type_") -> TypeDescriptor:
    """Fail fast unless *value* is a ``TypeDescriptor``."""
    if not isinstance(value, TypeDescriptor):
        raise DescriptorError(argument=argument, value=value, expected="TypeDescriptor")
    return value


def require_property(value: object, argument: str = "prop") -> PropertyDescriptor:
    """Fail fast unless *value* is a ``PropertyDescriptor``."""
    if not isinstance(value, PropertyDescriptor):
        raise DescriptorError(argument=argument, value=value, expected="PropertyDescriptor")
    return value
