"""Layered configuration for poco-metadata."""

from __future__ import annotations

from dataclasses import dataclass

from poco_metadata._types import OnOmittedKey

__all__ = [
    "MetadataConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]

_VALID_OMITTED_KEY: set[str] = {"ignore", "warn", "raise"}


@dataclass(frozen=True, slots=True)
class MetadataConfig:
    """Settings for the classification walk, with merge semantics.

    Attributes:
        log_decisions: Emit INFO/DEBUG records for every classified type.
        check_property_owner: Reject properties whose ``owner`` is not the
            type being classified.
        on_omitted_key: What to do when ``data_property_type`` omits a
            property that is also a key property. ``"ignore"`` drops it,
            ``"warn"`` drops it and logs a warning, ``"raise"`` raises
            ``MetadataError``.

    Example::

        config = MetadataConfig(log_decisions=True)
        strict = config.merge(on_omitted_key="raise")
    """

    log_decisions: bool = False
    check_property_owner: bool = True
    on_omitted_key: OnOmittedKey = "warn"

    def __post_init__(self) -> None:
        if self.on_omitted_key not in _VALID_OMITTED_KEY:
            raise ValueError(
                f"on_omitted_key must be one of {_VALID_OMITTED_KEY!r}, "
                f"got {self.on_omitted_key!r}"
            )

    def merge(
        self,
        *,
        log_decisions: bool | None = None,
        check_property_owner: bool | None = None,
        on_omitted_key: OnOmittedKey | None = None,
    ) -> MetadataConfig:
        """Return a new config with non-None overrides applied.

        Args:
            log_decisions: Override for log_decisions (ignored if None).
            check_property_owner: Override for check_property_owner (ignored if None).
            on_omitted_key: Override for on_omitted_key (ignored if None).

        Returns:
            A new ``MetadataConfig`` with overrides merged.
        """
        return MetadataConfig(
            log_decisions=(log_decisions if log_decisions is not None else self.log_decisions),
            check_property_owner=(
                check_property_owner
                if check_property_owner is not None
                else self.check_property_owner
            ),
            on_omitted_key=(on_omitted_key if on_omitted_key is not None else self.on_omitted_key),
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = MetadataConfig()


def get_global_config() -> MetadataConfig:
    """Return the current global configuration."""
    return _global_config


def configure(
    *,
    log_decisions: bool | None = None,
    check_property_owner: bool | None = None,
    on_omitted_key: OnOmittedKey | None = None,
) -> MetadataConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.

    Example::

        configure(log_decisions=True)
    """
    global _global_config
    _global_config = _global_config.merge(
        log_decisions=log_decisions,
        check_property_owner=check_property_owner,
        on_omitted_key=on_omitted_key,
    )
    return _global_config


def _set_global_config(cfg: MetadataConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = MetadataConfig()
