"""Ticketing domain validation utilities (attrs validators)."""

from typing import Any

import attrs

from src.platform.exception.exceptions import InvalidLedgerDataError
from src.platform.storage.flat_file import FIELD_SEPARATOR


# Ledger records are pipe-delimited lines with no escaping
_FORBIDDEN_CHARS = (FIELD_SEPARATOR, '\n', '\r')


class StringValidators:
    """Common string validation functions."""

    @staticmethod
    def validate_storable(value: str, field_name: str) -> None:
        """Validate that a value can be written as one ledger field."""
        if any(char in value for char in _FORBIDDEN_CHARS):
            raise InvalidLedgerDataError(f'{field_name} cannot contain "|" or line breaks')

    @staticmethod
    def validate_required_string(value: str, field_name: str) -> None:
        """Validate that a string is not empty or whitespace-only."""
        if not value or not value.strip():
            raise InvalidLedgerDataError(f'{field_name} is required')
        StringValidators.validate_storable(value, field_name)

    @staticmethod
    def required_text(_instance: Any, attribute: 'attrs.Attribute[str]', value: str) -> None:
        """Required, storable text field (for attrs validators)."""
        StringValidators.validate_required_string(value, attribute.name)

    @staticmethod
    def storable_text(_instance: Any, attribute: 'attrs.Attribute[str]', value: str) -> None:
        """Optional, storable text field (for attrs validators)."""
        StringValidators.validate_storable(value, attribute.name)


class NumericValidators:
    """Common numeric validation functions."""

    @staticmethod
    def non_negative(_instance: Any, attribute: 'attrs.Attribute[int]', value: int) -> None:
        """Validate that an integer is zero or more (for attrs validators)."""
        if value < 0:
            raise InvalidLedgerDataError(f'{attribute.name} cannot be negative')
