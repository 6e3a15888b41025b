"""Tests for policy/_override.py — OverridePolicy composite."""

from __future__ import annotations

import pytest

from poco_metadata._types import AutoGeneratedKeyKind, TypeDescriptor
from poco_metadata.exceptions import DescriptorError
from poco_metadata.policy._base import DECISIONS, EntityPolicy
from poco_metadata.policy._marker import MarkerHierarchyPolicy
from poco_metadata.policy._override import OverridePolicy
from poco_metadata.testing._descriptors import make_navigation, make_property, make_type
from tests.conftest import Address, Category, Order


class TestDelegation:
    def test_default_base_is_entity_policy(self):
        policy = OverridePolicy()
        assert type(policy.base) is EntityPolicy
        assert policy.overridden == frozenset()

    def test_unreplaced_decisions_delegate(self):
        policy = OverridePolicy(MarkerHierarchyPolicy())
        assert policy.is_complex_type(Address)
        assert policy.auto_generated_key_kind(Order) is AutoGeneratedKeyKind.KEY_GENERATOR
        assert policy.foreign_key_name(Order, make_navigation(Order, "Customer")) == "CustomerFKey"
        assert policy.resource_name(Category) == "Categories"
        assert policy.pluralize("Order") == "Orders"

    def test_replaced_decision_is_called(self):
        policy = OverridePolicy(
            MarkerHierarchyPolicy(),
            throw_on_missing_foreign_key=lambda type_, prop: False,
        )
        nav = make_navigation(Order, "Customer")
        assert policy.throw_on_missing_foreign_key(nav.owner, nav) is False
        # Everything else still comes from the base.
        assert policy.foreign_key_name(Order, nav) == "CustomerFKey"
        assert policy.overridden == {"throw_on_missing_foreign_key"}

    def test_decision_decorator(self):
        policy = OverridePolicy()

        @policy.decision("is_version_property")
        def is_version(type_: TypeDescriptor, prop) -> bool:
            return prop.name == "Stamp"

        assert is_version.__name__ == "is_version"
        assert policy.is_version_property(Order, make_property(Order, "Stamp"))
        assert not policy.is_version_property(Order, make_property(Order, "RowVersion"))

    def test_replaced_pluralize_feeds_resource_name(self):
        policy = OverridePolicy(pluralize=lambda s: s + "en")
        assert policy.resource_name(make_type("Bestellung")) == "Bestellungen"

    def test_replaced_resource_name(self):
        policy = OverridePolicy(resource_name=lambda type_: type_.name.lower())
        assert policy.resource_name(Order) == "order"

    def test_base_resource_name_kept_when_pluralize_replaced(self):
        class UpperPolicy(EntityPolicy):
            def resource_name(self, type_: TypeDescriptor) -> str:
                return type_.name.upper()

        policy = OverridePolicy(UpperPolicy(), pluralize=lambda s: s + "en")
        assert policy.resource_name(Order) == "ORDER"
        assert policy.pluralize("Order") == "Orderen"

    def test_stacked_overrides(self):
        inner = OverridePolicy(MarkerHierarchyPolicy(), is_complex_type=lambda t: True)
        outer = OverridePolicy(inner, should_include=lambda t: t.name != "Order")
        assert outer.is_complex_type(Order)
        assert not outer.should_include(Order)
        assert outer.should_include(Address)


class TestValidation:
    def test_unknown_decision_rejected(self):
        with pytest.raises(ValueError, match="Unknown decision"):
            OverridePolicy(include=lambda t: True)

    def test_unknown_decision_rejected_by_decorator(self):
        policy = OverridePolicy()
        with pytest.raises(ValueError):
            policy.decision("classify")(lambda t: True)

    def test_non_callable_rejected(self):
        with pytest.raises(ValueError, match="callable"):
            OverridePolicy(should_include=True)  # type: ignore[arg-type]

    def test_replaced_decision_still_rejects_none(self):
        policy = OverridePolicy(should_include=lambda t: True)
        with pytest.raises(DescriptorError):
            policy.should_include(None)  # type: ignore[arg-type]

    def test_replaced_property_decision_still_rejects_none(self):
        policy = OverridePolicy(is_key_property=lambda t, p: True)
        with pytest.raises(DescriptorError):
            policy.is_key_property(Order, None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("name", DECISIONS)
    def test_every_decision_can_be_replaced(self, name: str):
        policy = OverridePolicy(**{name: lambda *args: "sentinel"})
        assert name in policy.overridden

    def test_repr_lists_overrides(self):
        policy = OverridePolicy(should_include=lambda t: True, pluralize=lambda s: s)
        assert repr(policy) == (
            "OverridePolicy(EntityPolicy(), overridden=[pluralize, should_include])"
        )
