"""poco-metadata — policies for describing data-model types in client metadata.

A metadata builder asks a policy, for every candidate type and property,
whether the type is included, whether it is an entity or a complex type,
which properties are keys, version tokens or foreign keys, and how property
types are published. ``EntityPolicy`` answers with generic conventions;
subclasses or ``OverridePolicy`` replace individual answers.

Example::

    from poco_metadata import MarkerHierarchyPolicy, TypeDescriptor, classify_type

    policy = MarkerHierarchyPolicy()
    order = TypeDescriptor("Order", "Shop", ancestors=("EntityBase", "ModelBase"))
    result = classify_type(policy, order, order_properties)
"""

from importlib.metadata import PackageNotFoundError, version

from poco_metadata._types import AutoGeneratedKeyKind, PropertyDescriptor, TypeDescriptor
from poco_metadata.classify._models import TypeClassification
from poco_metadata.classify._walk import classify_type, resolve_foreign_key
from poco_metadata.config._config import MetadataConfig, configure
from poco_metadata.exceptions import DescriptorError, MetadataError, MissingForeignKeyError
from poco_metadata.policy._base import EntityPolicy
from poco_metadata.policy._marker import MarkerConfig, MarkerHierarchyPolicy
from poco_metadata.policy._override import OverridePolicy
from poco_metadata.policy._pluralize import pluralize

try:
    __version__ = version("poco-metadata")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "AutoGeneratedKeyKind",
    "DescriptorError",
    "EntityPolicy",
    "MarkerConfig",
    "MarkerHierarchyPolicy",
    "MetadataConfig",
    "MetadataError",
    "MissingForeignKeyError",
    "OverridePolicy",
    "PropertyDescriptor",
    "TypeClassification",
    "TypeDescriptor",
    "classify_type",
    "configure",
    "pluralize",
    "resolve_foreign_key",
]
