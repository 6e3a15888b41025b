"""Shared test fixtures for poco-metadata tests."""

from __future__ import annotations

from poco_metadata._types import PropertyDescriptor, TypeDescriptor
from poco_metadata.testing._descriptors import make_navigation, make_property, make_type
from poco_metadata.testing._fixtures import (  # noqa: F401
    base_policy,
    isolated_metadata_config,
    marker_policy,
    metadata_config,
)

# ---------------------------------------------------------------------------
# Sample object model
# ---------------------------------------------------------------------------

INT_TYPE = TypeDescriptor("Int32", "System")
BYTES_TYPE = TypeDescriptor("Byte[]", "System")
ENTITY_KEY = TypeDescriptor("EntityKey", "Model", ancestors=("ElementBase", "ModelBase"))

Customer = make_type("Customer", "EntityBase", "ElementBase", "ModelBase")
Order = make_type("Order", "EntityBase", "ElementBase", "ModelBase")
Address = make_type("Address", "ElementBase", "ModelBase")
Category = make_type("Category", "EntityBase", "ElementBase", "ModelBase")
Widget = make_type("Widget", "Component")


def order_properties() -> list[PropertyDescriptor]:
    """Properties of ``Order`` in the end-to-end scenario."""
    return [
        make_property(Order, "OrderID", INT_TYPE),
        make_property(Order, "CustomerFKey", INT_TYPE),
        make_property(Order, "RowVersion", BYTES_TYPE),
        make_navigation(Order, "Customer", Customer),
    ]

