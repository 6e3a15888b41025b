"""classify_type() — apply a policy to one type and its properties."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable

from poco_metadata._audit import (
    log_excluded_type,
    log_missing_foreign_key,
    log_type_classification,
)
from poco_metadata._types import PropertyDescriptor, TypeDescriptor, require_property, require_type
from poco_metadata.classify._models import (
    DataPropertyClassification,
    NavigationPropertyClassification,
    TypeClassification,
)
from poco_metadata.config._config import MetadataConfig, get_global_config
from poco_metadata.exceptions import DescriptorError, MetadataError, MissingForeignKeyError
from poco_metadata.policy._base import EntityPolicy

__all__ = ["classify_type", "resolve_foreign_key"]

logger = logging.getLogger("poco_metadata")


def resolve_foreign_key(
    policy: EntityPolicy,
    type_: TypeDescriptor,
    navigation: PropertyDescriptor,
    data_property_names: Collection[str],
) -> str | None:
    """Find the data property backing a scalar navigation property.

    Args:
        policy: The active policy.
        type_: The type owning *navigation*.
        navigation: The scalar navigation property.
        data_property_names: Names of the data properties published for *type_*.

    Returns:
        The foreign key name, or ``None`` when it is missing and the policy
        says not to throw.

    Raises:
        MissingForeignKeyError: The foreign key is missing and
            ``policy.throw_on_missing_foreign_key`` returned ``True``.

    Example::

        fk = resolve_foreign_key(policy, order, customer, {"OrderID", "CustomerID"})
        # "CustomerID"
    """
    fk_name = policy.foreign_key_name(type_, navigation)
    if fk_name in data_property_names:
        return fk_name
    if policy.throw_on_missing_foreign_key(type_, navigation):
        raise MissingForeignKeyError(
            type_name=type_.full_name,
            property_name=navigation.name,
            foreign_key_name=fk_name,
        )
    log_missing_foreign_key(type_=type_, property_name=navigation.name, foreign_key_name=fk_name)
    return None


def classify_type(
    policy: EntityPolicy,
    type_: TypeDescriptor,
    properties: Iterable[PropertyDescriptor],
    *,
    config: MetadataConfig | None = None,
) -> TypeClassification | None:
    """Ask *policy* every question about *type_* and collect the answers.

    Decisions are consulted in a fixed order: inclusion, then type-level
    classification (complex type, key generation, resource name), then
    key and version flags and the published type of each data property,
    and finally the foreign key of each scalar navigation property.

    Args:
        policy: The active policy.
        type_: The candidate type.
        properties: Its data and navigation properties.
        config: Optional config. Defaults to the global config.

    Returns:
        A ``TypeClassification``, or ``None`` if the policy excludes the type.

    Raises:
        DescriptorError: A descriptor is missing, malformed, or (with
            ``check_property_owner``) owned by another type.
        MissingForeignKeyError: See :func:`resolve_foreign_key`.
        MetadataError: A key property was omitted and
            ``on_omitted_key`` is ``"raise"``.

    Example::

        result = classify_type(MarkerHierarchyPolicy(), order, order_properties)
        print(result)
    """
    effective = config if config is not None else get_global_config()
    require_type(type_)
    props = [require_property(p, "properties") for p in properties]
    if effective.check_property_owner:
        for p in props:
            if p.owner != type_:
                raise DescriptorError(
                    argument="properties",
                    value=p,
                    message=(
                        f"Property {p.name!r} belongs to {p.owner.full_name}, "
                        f"not {type_.full_name}"
                    ),
                )

    if not policy.should_include(type_):
        if effective.log_decisions:
            log_excluded_type(policy=policy, type_=type_)
        return None

    is_complex = policy.is_complex_type(type_)
    key_kind = policy.auto_generated_key_kind(type_)
    resource_name = policy.resource_name(type_)

    data: list[DataPropertyClassification] = []
    omitted: list[str] = []
    for p in props:
        if p.is_navigation:
            continue
        is_key = policy.is_key_property(type_, p)
        is_version = policy.is_version_property(type_, p)
        data_type = policy.data_property_type(type_, p)
        if data_type is None:
            if is_key:
                _handle_omitted_key(effective, type_, p)
            omitted.append(p.name)
            continue
        data.append(
            DataPropertyClassification(
                name=p.name, data_type=data_type, is_key=is_key, is_version=is_version
            )
        )

    # Complex types are embedded in their owner and carry no associations.
    data_names = {d.name for d in data}
    navigations: list[NavigationPropertyClassification] = []
    skipped: list[str] = []
    if not is_complex:
        for p in props:
            if not p.is_navigation:
                continue
            fk_name = resolve_foreign_key(policy, type_, p, data_names)
            if fk_name is None:
                skipped.append(p.name)
                continue
            navigations.append(
                NavigationPropertyClassification(
                    name=p.name, target_type=p.property_type, foreign_key_name=fk_name
                )
            )

    result = TypeClassification(
        descriptor=type_,
        resource_name=resource_name,
        is_complex_type=is_complex,
        auto_generated_key_kind=key_kind,
        data_properties=tuple(data),
        navigation_properties=tuple(navigations),
        omitted=tuple(omitted),
        skipped_navigations=tuple(skipped),
    )
    if effective.log_decisions:
        log_type_classification(policy=policy, result=result)
    return result


def _handle_omitted_key(
    config: MetadataConfig, type_: TypeDescriptor, prop: PropertyDescriptor
) -> None:
    if config.on_omitted_key == "raise":
        raise MetadataError(
            f"Key property '{type_.full_name}.{prop.name}' was omitted by data_property_type"
        )
    if config.on_omitted_key == "warn":
        logger.warning(
            "Key property %s.%s omitted by data_property_type", type_.full_name, prop.name
        )
