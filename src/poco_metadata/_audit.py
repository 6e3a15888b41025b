"""Audit logging for classification decisions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from poco_metadata._types import TypeDescriptor

if TYPE_CHECKING:
    from poco_metadata.classify._models import TypeClassification
    from poco_metadata.policy._base import EntityPolicy

__all__ = ["log_excluded_type", "log_missing_foreign_key", "log_type_classification"]

logger = logging.getLogger("poco_metadata")


def log_type_classification(
    *,
    policy: EntityPolicy,
    result: TypeClassification,
) -> None:
    """Log how a type was classified.

    Logging levels:
    - INFO: Summary (type, entity or complex, property counts)
    - DEBUG: Detailed (key, version and omitted properties, foreign keys)
    """
    kind = "complex type" if result.is_complex_type else "entity"
    logger.info(
        "Classified %s as %s by %r — %d data, %d navigation, %d omitted",
        result.full_name,
        kind,
        policy,
        len(result.data_properties),
        len(result.navigation_properties),
        len(result.omitted),
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Details for %s: keys=%s version=%s omitted=%s foreign_keys=%s",
            result.full_name,
            list(result.key_names),
            result.version_name,
            list(result.omitted),
            {p.name: p.foreign_key_name for p in result.navigation_properties},
        )


def log_excluded_type(*, policy: EntityPolicy, type_: TypeDescriptor) -> None:
    """Log a type filtered out by ``should_include``."""
    logger.debug("Excluded %s by %r", type_.full_name, policy)


def log_missing_foreign_key(
    *,
    type_: TypeDescriptor,
    property_name: str,
    foreign_key_name: str,
) -> None:
    """Log a navigation property skipped because its foreign key is missing.

    Emitted on the ``poco_metadata.foreign_key`` sub-logger so the
    warnings can be silenced independently.
    """
    fk_logger = logging.getLogger("poco_metadata.foreign_key")
    fk_logger.warning(
        "Skipping navigation %s.%s — foreign key %r not found",
        type_.full_name,
        property_name,
        foreign_key_name,
    )
