"""MarkerHierarchyPolicy — classify types by marker base types and interfaces."""

from __future__ import annotations

from dataclasses import dataclass

from poco_metadata._types import (
    AutoGeneratedKeyKind,
    PropertyDescriptor,
    TypeDescriptor,
    require_property,
    require_type,
)
from poco_metadata.policy._base import EntityPolicy

__all__ = ["GUID_TYPE", "MarkerConfig", "MarkerHierarchyPolicy"]

GUID_TYPE = TypeDescriptor("Guid", "System")


@dataclass(frozen=True, slots=True)
class MarkerConfig:
    """Static markers of an object model.

    The defaults describe a model whose entities derive from ``EntityBase``,
    whose embedded values derive from ``ElementBase`` or ``ModelBase``, and
    whose keys are ``EntityKey`` wrappers published as GUIDs.

    Attributes:
        excluded_types: Type names never included, checked first.
        include_interfaces: Marker interfaces that force inclusion.
        include_base_types: Ancestor names that make a type includable.
        framework_namespaces: Namespace prefixes of framework types, which
            are never complex types.
        model_namespace: When set, types outside this namespace are never
            complex types.
        complex_interface: Type name that is always a complex type.
        entity_markers: Lineage names that mark an entity.
        complex_markers: Lineage names that mark a complex type.
        key_kind: Key generation for every type of the model.
        key_property: The single key property name.
        foreign_key_suffix: Appended to a navigation name to get its FK name.
        omitted_properties: Bookkeeping properties left out of the metadata.
        key_wrapper_type: Property type name replaced by ``identifier_type``.
        identifier_type: Canonical type published for wrapped keys.
    """

    excluded_types: frozenset[str] = frozenset({"EntityKey"})
    include_interfaces: frozenset[str] = frozenset(
        {
            "IAssociation",
            "IIntoxicationTest",
            "ILocation",
            "IModelEntity",
            "IReportSection",
            "ISubject",
            "IVehicle",
        }
    )
    include_base_types: frozenset[str] = frozenset({"EntityBase", "ElementBase", "ModelBase"})
    framework_namespaces: tuple[str, ...] = ("System",)
    model_namespace: str | None = None
    complex_interface: str = "IAssociation"
    entity_markers: frozenset[str] = frozenset({"EntityBase"})
    complex_markers: frozenset[str] = frozenset({"IModelElement", "ElementBase", "ModelBase"})
    key_kind: AutoGeneratedKeyKind = AutoGeneratedKeyKind.KEY_GENERATOR
    key_property: str = "EntityKey"
    foreign_key_suffix: str = "FKey"
    omitted_properties: frozenset[str] = frozenset(
        {"JmodelVersion", "CmodelVersion", "TypeName", "EntityType", "PersistenceKeys"}
    )
    key_wrapper_type: str = "EntityKey"
    identifier_type: TypeDescriptor = GUID_TYPE

    def __post_init__(self) -> None:
        overlap = self.entity_markers & self.complex_markers
        if overlap:
            raise ValueError(
                f"entity_markers and complex_markers must be disjoint, "
                f"both contain {sorted(overlap)!r}"
            )
        if not isinstance(self.key_kind, AutoGeneratedKeyKind):
            raise ValueError(
                f"key_kind must be an AutoGeneratedKeyKind, got {self.key_kind!r}"
            )


class MarkerHierarchyPolicy(EntityPolicy):
    """Policy for object models that tag their types with marker ancestors.

    Inclusion and entity/complex classification walk the type's lineage
    looking for marker names; the remaining decisions are fixed naming
    conventions. ``throw_on_missing_foreign_key`` keeps the default.

    Example::

        policy = MarkerHierarchyPolicy()
        order = TypeDescriptor("Order", "Shop", ancestors=("EntityBase", "ModelBase"))
        policy.should_include(order)   # True
        policy.is_complex_type(order)  # False
    """

    def __init__(self, config: MarkerConfig | None = None) -> None:
        self._config = config if config is not None else MarkerConfig()

    @property
    def config(self) -> MarkerConfig:
        """The static marker configuration."""
        return self._config

    def should_include(self, type_: TypeDescriptor) -> bool:
        require_type(type_)
        cfg = self._config
        # Denylist wins over any marker the type may carry.
        if type_.name in cfg.excluded_types:
            return False
        if type_.name in cfg.include_interfaces:
            return True
        if any(name in cfg.include_interfaces for name in type_.interfaces):
            return True
        for name in (type_.name, *type_.ancestors):
            if name in cfg.include_base_types:
                return True
        return False

    def auto_generated_key_kind(self, type_: TypeDescriptor) -> AutoGeneratedKeyKind:
        require_type(type_)
        return self._config.key_kind

    def is_complex_type(self, type_: TypeDescriptor) -> bool:
        """Classify by the first marker found in the type's lineage.

        Assumes that for a real entity the entity marker precedes every
        complex marker in its lineage; the policy cannot verify that.
        """
        require_type(type_)
        cfg = self._config
        if self._is_foreign_namespace(type_.namespace):
            return False
        if type_.name == cfg.complex_interface:
            return True
        for name in type_.lineage:
            if name in cfg.entity_markers:
                return False
            if name in cfg.complex_markers:
                return True
        return False

    def is_key_property(self, type_: TypeDescriptor, prop: PropertyDescriptor) -> bool:
        require_type(type_)
        return require_property(prop).name == self._config.key_property

    def foreign_key_name(self, type_: TypeDescriptor, prop: PropertyDescriptor) -> str:
        require_type(type_)
        return require_property(prop).name + self._config.foreign_key_suffix

    def data_property_type(
        self, type_: TypeDescriptor, prop: PropertyDescriptor
    ) -> TypeDescriptor | None:
        require_type(type_)
        require_property(prop)
        cfg = self._config
        if prop.name in cfg.omitted_properties:
            return None
        if prop.property_type.name == cfg.key_wrapper_type:
            return cfg.identifier_type
        return prop.property_type

    def _is_foreign_namespace(self, namespace: str) -> bool:
        cfg = self._config
        if any(
            namespace == prefix or namespace.startswith(prefix + ".")
            for prefix in cfg.framework_namespaces
        ):
            return True
        if cfg.model_namespace is None:
            return False
        return not (
            namespace == cfg.model_namespace or namespace.startswith(cfg.model_namespace + ".")
        )

    def __repr__(self) -> str:
        return f"MarkerHierarchyPolicy({self._config!r})"
