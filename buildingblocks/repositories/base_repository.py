"""
Repository contract.

Query/mutate surface over entities. Persistence mechanics live in the
implementation (see sqlalchemy_repository for the bundled adapter).
"""

from abc import ABC, abstractmethod
from typing import AsyncIterator, Callable, Generic, Optional, TypeVar, Union
from uuid import UUID

from ..domain.entities.base_entity import BaseEntity
from .specifications import Specification

T = TypeVar('T', bound=BaseEntity)

# Opaque query filter: a Specification or a plain predicate
Predicate = Union[Specification[T], Callable[[T], bool]]


class IRepository(ABC, Generic[T]):
    """
    Generic repository over an entity type.

    All mutating calls are coroutines; cancelling the awaiting task aborts
    the in-flight call with asyncio.CancelledError. Changes become durable
    only when the owning IUnitOfWork commits.
    """

    @abstractmethod
    async def get_by_id(self, id: UUID) -> Optional[T]:
        """
        Retrieve an entity by its ID.

        Args:
            id: Entity identifier

        Returns:
            Entity or None if not found
        """
        pass

    @abstractmethod
    async def add(self, entity: T) -> None:
        """
        Register a new entity.

        Args:
            entity: Entity to add
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> None:
        """
        Register changes to an existing entity.

        Args:
            entity: Entity with updated values
        """
        pass

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """
        Register an entity for removal.

        Args:
            entity: Entity to delete
        """
        pass

    @abstractmethod
    def query(self, predicate: Optional[Predicate] = None) -> AsyncIterator[T]:
        """
        Lazily iterate entities matching a predicate.

        Nothing is evaluated until the result is iterated:

            async for order in repo.query(CreatedBySpecification("alice")):
                ...

        Args:
            predicate: Specification, callable or None for all entities

        Returns:
            Async iterator over matching entities
        """
        pass
