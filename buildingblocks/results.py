"""
Result Pattern

Outcome of an operation that can fail for expected, business-rule reasons
without raising. A failure carries a human-readable message only.

    def withdraw(self, amount) -> Result:
        if amount > self.balance:
            return Result.failure("Insufficient funds")
        ...
        return Result.success()
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class Result:
    """
    Value-less success/failure outcome.

    Build instances through Result.success() and Result.failure(); the
    constructor rejects inconsistent combinations.
    """

    is_success: bool
    error: Optional[str] = None

    def __post_init__(self):
        """Validate the success/error combination."""
        if self.is_success and self.error is not None:
            raise ValueError("A successful result cannot carry an error")
        if not self.is_success and self.error is None:
            raise ValueError("A failed result requires an error message")

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @classmethod
    def success(cls) -> "Result":
        return cls(True, None)

    @classmethod
    def failure(cls, error: str) -> "Result":
        return cls(False, error)


@dataclass(frozen=True)
class ValueResult(Result, Generic[T]):
    """
    Success/failure outcome carrying a payload on success.

    A failed ValueResult never has a value; reading .value gives None.
    """

    value: Optional[T] = None

    def __post_init__(self):
        """Validate the success/error/value combination."""
        super().__post_init__()
        if not self.is_success and self.value is not None:
            raise ValueError("A failed result cannot carry a value")

    @classmethod
    def success(cls, value: T) -> "ValueResult[T]":
        return cls(True, None, value)

    @classmethod
    def failure(cls, error: str) -> "ValueResult[T]":
        return cls(False, error, None)

    def value_or(self, default: T) -> T:
        """Return the payload on success, otherwise the given default."""
        return self.value if self.is_success else default
