"""Exception hierarchy for poco-metadata."""

from __future__ import annotations

__all__ = [
    "DescriptorError",
    "MetadataError",
    "MissingForeignKeyError",
]


class MetadataError(Exception):
    """Base exception for all poco-metadata errors."""


class DescriptorError(MetadataError, TypeError):
    """A decision received a missing or malformed descriptor.

    This is a programming error in the caller and is never swallowed.

    Attributes:
        argument: Name of the offending argument.
        value: The value that was passed.

    Example::

        try:
            policy.is_complex_type(None)
        except DescriptorError as exc:
            print(exc.argument)  # "type_"
    """

    def __init__(
        self,
        *,
        argument: str,
        value: object,
        expected: str = "descriptor",
        message: str | None = None,
    ) -> None:
        self.argument = argument
        self.value = value
        if message is None:
            message = f"Expected a {expected} for {argument!r}, got {value!r}"
        super().__init__(message)


class MissingForeignKeyError(MetadataError):
    """A navigation property's foreign key name names no data property.

    Raised by the classification walk when the active policy's
    ``throw_on_missing_foreign_key`` decision returns ``True``.

    Attributes:
        type_name: The owning entity type.
        property_name: The navigation property.
        foreign_key_name: The foreign key name the policy computed.
    """

    def __init__(self, *, type_name: str, property_name: str, foreign_key_name: str) -> None:
        self.type_name = type_name
        self.property_name = property_name
        self.foreign_key_name = foreign_key_name
        super().__init__(
            f"Foreign key {foreign_key_name!r} for navigation property "
            f"'{type_name}.{property_name}' does not match any data property"
        )
