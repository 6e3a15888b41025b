"""Tests for exceptions.py — MetadataError hierarchy."""

from __future__ import annotations

import pytest

from poco_metadata.exceptions import DescriptorError, MetadataError, MissingForeignKeyError


class TestMetadataError:
    def test_is_exception(self):
        assert issubclass(MetadataError, Exception)

    def test_message(self):
        assert str(MetadataError("something went wrong")) == "something went wrong"


class TestDescriptorError:
    def test_is_metadata_error_and_type_error(self):
        assert issubclass(DescriptorError, MetadataError)
        assert issubclass(DescriptorError, TypeError)

    def test_attributes(self):
        err = DescriptorError(argument="type_", value=None)
        assert err.argument == "type_"
        assert err.value is None

    def test_default_message(self):
        err = DescriptorError(argument="prop", value=42, expected="PropertyDescriptor")
        msg = str(err)
        assert "PropertyDescriptor" in msg
        assert "'prop'" in msg
        assert "42" in msg

    def test_custom_message(self):
        err = DescriptorError(argument="prop", value=None, message="bad owner")
        assert str(err) == "bad owner"


class TestMissingForeignKeyError:
    def test_is_metadata_error(self):
        assert issubclass(MissingForeignKeyError, MetadataError)

    def test_attributes(self):
        err = MissingForeignKeyError(
            type_name="Model.Order", property_name="Customer", foreign_key_name="CustomerID"
        )
        assert err.type_name == "Model.Order"
        assert err.property_name == "Customer"
        assert err.foreign_key_name == "CustomerID"

    def test_default_message(self):
        err = MissingForeignKeyError(
            type_name="Model.Order", property_name="Customer", foreign_key_name="CustomerID"
        )
        msg = str(err)
        assert "Model.Order.Customer" in msg
        assert "CustomerID" in msg

    def test_catchable_as_metadata_error(self):
        with pytest.raises(MetadataError):
            raise MissingForeignKeyError(type_name="T", property_name="P", foreign_key_name="PID")
