"""Result records of the classification walk."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from poco_metadata._types import AutoGeneratedKeyKind, TypeDescriptor

__all__ = [
    "DataPropertyClassification",
    "NavigationPropertyClassification",
    "TypeClassification",
]


@dataclass(frozen=True, slots=True)
class DataPropertyClassification:
    """Decisions for one published data property.

    Attributes:
        name: Property name.
        data_type: Type to publish (after remapping).
        is_key: Part of the entity key.
        is_version: Concurrency token.
    """

    name: str
    data_type: TypeDescriptor
    is_key: bool
    is_version: bool

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "name": self.name,
            "data_type": self.data_type.full_name,
            "is_key": self.is_key,
            "is_version": self.is_version,
        }


@dataclass(frozen=True, slots=True)
class NavigationPropertyClassification:
    """A scalar navigation property and the data property backing it."""

    name: str
    target_type: TypeDescriptor
    foreign_key_name: str

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "name": self.name,
            "target_type": self.target_type.full_name,
            "foreign_key_name": self.foreign_key_name,
        }


@dataclass(frozen=True, slots=True)
class TypeClassification:
    """Everything a policy decided about one included type.

    Attributes:
        descriptor: The classified type.
        resource_name: Externally addressable collection name.
        is_complex_type: Embedded value rather than an entity.
        auto_generated_key_kind: How the key value is produced.
        data_properties: Published data properties, in input order.
        navigation_properties: Resolved scalar navigations, in input order.
        omitted: Names of data properties the policy left out.
        skipped_navigations: Navigations dropped for a missing foreign key.
    """

    descriptor: TypeDescriptor
    resource_name: str
    is_complex_type: bool
    auto_generated_key_kind: AutoGeneratedKeyKind
    data_properties: tuple[DataPropertyClassification, ...]
    navigation_properties: tuple[NavigationPropertyClassification, ...]
    omitted: tuple[str, ...]
    skipped_navigations: tuple[str, ...]

    @property
    def full_name(self) -> str:
        return self.descriptor.full_name

    @property
    def key_names(self) -> tuple[str, ...]:
        """Names of the key properties."""
        return tuple(p.name for p in self.data_properties if p.is_key)

    @property
    def version_name(self) -> str | None:
        """Name of the first version property, if any."""
        for p in self.data_properties:
            if p.is_version:
                return p.name
        return None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "type": self.descriptor.full_name,
            "resource_name": self.resource_name,
            "is_complex_type": self.is_complex_type,
            "auto_generated_key_kind": self.auto_generated_key_kind.value,
            "data_properties": [p.to_dict() for p in self.data_properties],
            "navigation_properties": [p.to_dict() for p in self.navigation_properties],
            "omitted": list(self.omitted),
            "skipped_navigations": list(self.skipped_navigations),
        }

    def __str__(self) -> str:
        """Return a human-readable multi-line summary."""
        kind = "Complex type" if self.is_complex_type else "Entity"
        lines: list[str] = [f"{kind}: {self.full_name} -> {self.resource_name}"]
        lines.append(f"  Key generation: {self.auto_generated_key_kind.value}")
        for p in self.data_properties:
            flags = [f for f, on in (("key", p.is_key), ("version", p.is_version)) if on]
            suffix = f" [{', '.join(flags)}]" if flags else ""
            lines.append(f"  - {p.name}: {p.data_type.full_name}{suffix}")
        for n in self.navigation_properties:
            lines.append(f"  ~ {n.name} -> {n.target_type.full_name} via {n.foreign_key_name}")
        if self.omitted:
            lines.append(f"  Omitted: {', '.join(self.omitted)}")
        if self.skipped_navigations:
            lines.append(f"  Skipped navigations: {', '.join(self.skipped_navigations)}")
        return "\n".join(lines)
