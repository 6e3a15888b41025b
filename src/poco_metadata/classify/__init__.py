"""Classification walk — consult a policy for a type and its properties."""

from poco_metadata.classify._models import (
    DataPropertyClassification,
    NavigationPropertyClassification,
    TypeClassification,
)
from poco_metadata.classify._walk import classify_type, resolve_foreign_key

__all__ = [
    "DataPropertyClassification",
    "NavigationPropertyClassification",
    "TypeClassification",
    "classify_type",
    "resolve_foreign_key",
]
