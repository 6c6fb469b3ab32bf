"""
Specification Pattern Implementation

Encapsulates query criteria in reusable, composable objects. A specification
can be checked against an in-memory candidate and, when it knows how, turned
into a SQLAlchemy filter for a mapped model.

Specifications combine with &, | and ~:

    spec = CreatedBySpecification("alice") & ~AttributeEqualsSpecification("status", "closed")
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

from sqlalchemy import and_, not_, or_
from sqlalchemy.sql.elements import ColumnElement


T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """
    Abstract base class for specifications.

    A specification encapsulates a single business rule or query criterion.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check if a candidate object satisfies this specification.

        Args:
            candidate: Object to check

        Returns:
            True if candidate satisfies specification
        """
        pass

    @abstractmethod
    def to_sql_filter(self, model: type) -> ColumnElement[bool]:
        """
        Convert specification to a SQLAlchemy filter expression.

        Args:
            model: Mapped class the filter applies to

        Returns:
            SQLAlchemy filter expression

        Raises:
            NotImplementedError: If the criterion has no SQL form
        """
        pass

    @property
    def supports_sql(self) -> bool:
        """True if to_sql_filter can be used for this specification."""
        return True

    def __call__(self, candidate: T) -> bool:
        return self.is_satisfied_by(candidate)

    def __and__(self, other: "Specification[T]") -> "AndSpecification[T]":
        """Combine specifications with AND."""
        return AndSpecification(self, other)

    def __or__(self, other: "Specification[T]") -> "OrSpecification[T]":
        """Combine specifications with OR."""
        return OrSpecification(self, other)

    def __invert__(self) -> "NotSpecification[T]":
        """Negate specification with NOT."""
        return NotSpecification(self)


class AndSpecification(Specification[T]):
    """Specification that combines two specifications with AND."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)

    def to_sql_filter(self, model: type) -> ColumnElement[bool]:
        return and_(self.left.to_sql_filter(model), self.right.to_sql_filter(model))

    @property
    def supports_sql(self) -> bool:
        return self.left.supports_sql and self.right.supports_sql


class OrSpecification(Specification[T]):
    """Specification that combines two specifications with OR."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)

    def to_sql_filter(self, model: type) -> ColumnElement[bool]:
        return or_(self.left.to_sql_filter(model), self.right.to_sql_filter(model))

    @property
    def supports_sql(self) -> bool:
        return self.left.supports_sql and self.right.supports_sql


class NotSpecification(Specification[T]):
    """Specification that negates another specification."""

    def __init__(self, spec: Specification[T]):
        self.spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.spec.is_satisfied_by(candidate)

    def to_sql_filter(self, model: type) -> ColumnElement[bool]:
        return not_(self.spec.to_sql_filter(model))

    @property
    def supports_sql(self) -> bool:
        return self.spec.supports_sql


class PredicateSpecification(Specification[T]):
    """
    Specification wrapping an arbitrary callable.

    Only evaluable in memory; repositories apply it while iterating.
    """

    def __init__(self, predicate: Callable[[T], bool], description: str = "predicate"):
        self.predicate = predicate
        self.description = description

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self.predicate(candidate))

    def to_sql_filter(self, model: type) -> ColumnElement[bool]:
        raise NotImplementedError(f"{self.description} has no SQL form")

    @property
    def supports_sql(self) -> bool:
        return False


class AttributeEqualsSpecification(Specification[T]):
    """Specification for entities whose attribute equals a value."""

    def __init__(self, attribute: str, value: Any):
        """
        Args:
            attribute: Attribute / mapped column name
            value: Expected value
        """
        self.attribute = attribute
        self.value = value

    def is_satisfied_by(self, candidate: T) -> bool:
        return getattr(candidate, self.attribute, None) == self.value

    def to_sql_filter(self, model: type) -> ColumnElement[bool]:
        column = getattr(model, self.attribute)
        if self.value is None:
            return column.is_(None)
        # NULL-safe so that ~spec keeps rows where the column is NULL
        return column.is_not_distinct_from(self.value)
