"""Classification policies — default decisions and specializations."""

from poco_metadata.policy._base import DECISIONS, EntityPolicy
from poco_metadata.policy._marker import GUID_TYPE, MarkerConfig, MarkerHierarchyPolicy
from poco_metadata.policy._override import OverridePolicy
from poco_metadata.policy._pluralize import pluralize

__all__ = [
    "DECISIONS",
    "GUID_TYPE",
    "EntityPolicy",
    "MarkerConfig",
    "MarkerHierarchyPolicy",
    "OverridePolicy",
    "pluralize",
]
