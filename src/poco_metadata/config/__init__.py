"""Configuration module for poco-metadata."""

from __future__ import annotations

from poco_metadata.config._config import MetadataConfig, configure, get_global_config

__all__ = ["MetadataConfig", "configure", "get_global_config"]
