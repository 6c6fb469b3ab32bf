"""
Repository layer for data access abstraction.

Contracts (IRepository, IUnitOfWork), the specification pattern used to
express query predicates, and an SQLAlchemy adapter.
"""

from .audit_specifications import (
    CreatedAfterSpecification,
    CreatedBySpecification,
    ModifiedSinceSpecification,
)
from .base_repository import IRepository
from .specifications import (
    AttributeEqualsSpecification,
    PredicateSpecification,
    Specification,
)
from .sqlalchemy_repository import (
    DatabaseSessionManager,
    SqlAlchemyRepository,
    SqlAlchemyUnitOfWork,
)
from .unit_of_work import IUnitOfWork

__all__ = [
    "IRepository",
    "IUnitOfWork",
    "Specification",
    "PredicateSpecification",
    "AttributeEqualsSpecification",
    "CreatedBySpecification",
    "CreatedAfterSpecification",
    "ModifiedSinceSpecification",
    "DatabaseSessionManager",
    "SqlAlchemyRepository",
    "SqlAlchemyUnitOfWork",
]
