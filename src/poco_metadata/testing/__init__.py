"""poco-metadata testing utilities — descriptor factories, isolation, fixtures.

Example::

    from poco_metadata.testing import make_property, make_type

    def test_order_key(base_policy):
        order = make_type("Order", "EntityBase")
        assert base_policy.is_key_property(order, make_property(order, "OrderID"))
"""

from poco_metadata.testing._descriptors import (
    STRING_TYPE,
    make_navigation,
    make_property,
    make_type,
)
from poco_metadata.testing._fixtures import (
    base_policy,
    isolated_metadata_config,
    marker_policy,
    metadata_config,
)
from poco_metadata.testing._isolation import isolated_config

__all__ = [
    "STRING_TYPE",
    "base_policy",
    "isolated_config",
    "isolated_metadata_config",
    "make_navigation",
    "make_property",
    "make_type",
    "marker_policy",
    "metadata_config",
]
