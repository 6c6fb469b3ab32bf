"""
Guard Clauses

Precondition checks for method and constructor boundaries. Every guard
returns the validated value unchanged so it can be used inline:

    self.name = Guard.not_null_or_whitespace(name, "name")

A failing guard raises a GuardError subclass naming the parameter. These
signal programming errors; business-rule validation returns a Result instead.
"""
import uuid
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Optional, TypeVar, Union

from .exceptions import (
    ArgumentInvalidError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    EmptyIdentifierError,
)
from .utils.uuid_helper import EMPTY_UUID, is_empty_uuid

T = TypeVar('T')
N = TypeVar('N', int, float, Decimal)

# Types without a usable zero-argument constructor
_SPECIAL_DEFAULTS = {
    uuid.UUID: EMPTY_UUID,
    datetime: datetime.min,
    date: date.min,
    time: time.min,
}

# Value-like types whose zero-argument constructor yields the default
_ZERO_CONSTRUCTIBLE = (int, float, complex, Decimal, str, bytes, list, tuple, dict, set, frozenset)

_NO_DEFAULT = object()


def _default_for(value: Any) -> Any:
    for kind, default in _SPECIAL_DEFAULTS.items():
        if isinstance(value, kind):
            return default
    for kind in _ZERO_CONSTRUCTIBLE:
        if isinstance(value, kind):
            return kind()
    return _NO_DEFAULT


class Guard:
    """Static guard clauses for argument validation"""

    @staticmethod
    def not_null(value: Optional[T], param_name: str) -> T:
        """
        Reject None.

        Raises:
            ArgumentNullError: If value is None
        """
        if value is None:
            raise ArgumentNullError(param_name)
        return value

    @staticmethod
    def not_null_or_whitespace(value: Optional[str], param_name: str) -> str:
        """
        Reject None, empty and whitespace-only strings.

        Raises:
            ArgumentInvalidError: If value has no non-whitespace character
        """
        if value is None or not value.strip():
            raise ArgumentInvalidError(param_name, "Value cannot be null, empty, or whitespace.")
        return value

    @staticmethod
    def not_empty(value: Optional[Union[uuid.UUID, str]], param_name: str) -> Union[uuid.UUID, str]:
        """
        Reject missing or nil identifiers.

        Raises:
            EmptyIdentifierError: If value is None, blank or the nil UUID
        """
        if is_empty_uuid(value):
            raise EmptyIdentifierError(param_name)
        return value

    @staticmethod
    def not_default(value: T, param_name: str) -> T:
        """
        Reject the default value of the argument's type.

        Defaults exist for value-like types only: zero numbers, False, empty
        strings and builtin containers, the nil UUID and the minimum date/time
        values. Instances of any other class are never a default.

        Raises:
            ArgumentInvalidError: If value is None or its type's default
        """
        default = _default_for(value) if value is not None else None
        if value is None or (default is not _NO_DEFAULT and value == default):
            raise ArgumentInvalidError(param_name, "Value cannot be the default for its type.")
        return value

    @staticmethod
    def in_range(value: T, minimum: T, maximum: T, param_name: str) -> T:
        """
        Require minimum <= value <= maximum (inclusive on both ends).

        Raises:
            ArgumentOutOfRangeError: If value falls outside the bounds
        """
        if value < minimum or value > maximum:
            raise ArgumentOutOfRangeError(
                param_name, f"Value must be between {minimum} and {maximum}."
            )
        return value

    @staticmethod
    def non_negative(value: N, param_name: str) -> N:
        """
        Reject negative numbers.

        Raises:
            ArgumentOutOfRangeError: If value < 0
        """
        if value < 0:
            raise ArgumentOutOfRangeError(param_name, "Value cannot be negative.")
        return value

    @staticmethod
    def max_length(value: Optional[str], max_length: int, param_name: str) -> Optional[str]:
        """
        Cap string length. None passes through untouched.

        Raises:
            ArgumentInvalidError: If len(value) > max_length
        """
        if value is not None and len(value) > max_length:
            raise ArgumentInvalidError(param_name, f"Maximum length is {max_length}.")
        return value

    @staticmethod
    def that(condition: bool, message: str, param_name: str) -> None:
        """
        Require an arbitrary condition to hold.

        Raises:
            ArgumentInvalidError: With the caller's message if condition is false
        """
        if not condition:
            raise ArgumentInvalidError(param_name, message)
