"""
Audit Specifications

Concrete specifications over the audit fields every BaseEntity carries.

SQL filters are written so that negating them (~spec) selects the same rows
as negating the in-memory check, including rows whose audit fields are NULL.
Timestamps are compared as aware UTC on both paths.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_
from sqlalchemy.sql.elements import ColumnElement

from ..domain.entities.base_entity import BaseEntity
from ..guard import Guard
from ..utils.clock import as_utc
from .specifications import Specification


class CreatedBySpecification(Specification[BaseEntity]):
    """Specification for entities created by a specific user."""

    def __init__(self, user_id: Optional[str]):
        """
        Initialize specification.

        Args:
            user_id: Creator identifier (None matches entities without a creator)
        """
        self.user_id = user_id

    def is_satisfied_by(self, entity: BaseEntity) -> bool:
        """Check if entity was created by the specified user."""
        return entity.created_by == self.user_id

    def to_sql_filter(self, model: type) -> ColumnElement[bool]:
        """Convert to SQL filter."""
        if self.user_id is None:
            return model.created_by.is_(None)
        return model.created_by.is_not_distinct_from(self.user_id)


class CreatedAfterSpecification(Specification[BaseEntity]):
    """Specification for entities created after a specific instant."""

    def __init__(self, instant: datetime):
        """
        Initialize specification.

        Args:
            instant: Exclusive lower bound on created_at
        """
        self.instant = as_utc(Guard.not_null(instant, "instant"))

    def is_satisfied_by(self, entity: BaseEntity) -> bool:
        """Check if entity was created after the specified instant."""
        created_at = as_utc(entity.created_at)
        return created_at is not None and created_at > self.instant

    def to_sql_filter(self, model: type) -> ColumnElement[bool]:
        """Convert to SQL filter."""
        return and_(model.created_at.is_not(None), model.created_at > self.instant)


class ModifiedSinceSpecification(Specification[BaseEntity]):
    """Specification for entities modified at or after a specific instant."""

    def __init__(self, instant: datetime):
        """
        Initialize specification.

        Args:
            instant: Inclusive lower bound on modified_at
        """
        self.instant = as_utc(Guard.not_null(instant, "instant"))

    def is_satisfied_by(self, entity: BaseEntity) -> bool:
        """Check if entity was modified since the specified instant."""
        modified_at = as_utc(entity.modified_at)
        return modified_at is not None and modified_at >= self.instant

    def to_sql_filter(self, model: type) -> ColumnElement[bool]:
        """Convert to SQL filter."""
        return and_(model.modified_at.is_not(None), model.modified_at >= self.instant)
