"""poco-metadata pytest plugin -- auto-discovered via pytest11 entry point.

This module is registered as a pytest plugin in ``pyproject.toml``::

    [project.entry-points.pytest11]
    poco_metadata = "poco_metadata.testing._plugin"
"""

from __future__ import annotations

# Re-export fixtures so they are auto-discovered by pytest.
from poco_metadata.testing._fixtures import (  # noqa: F401
    base_policy,
    isolated_metadata_config,
    marker_policy,
    metadata_config,
)

__all__ = ["base_policy", "isolated_metadata_config", "marker_policy", "metadata_config"]
