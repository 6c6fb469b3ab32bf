"""
BaseEntity

Identity, audit metadata and a buffer of pending domain events for any
persisted domain object. Concrete domain types extend it and raise
domain-specific events from their business methods.

BaseEntity carries no metaclass and no class-level annotations,
so it can sit ahead of a SQLAlchemy declarative base in a mapped class:

    class Order(BaseEntity, Base):
        __tablename__ = "orders"
        id: Mapped[UUID] = mapped_column(primary_key=True)
        created_at: Mapped[datetime]
        ...
"""

from datetime import datetime
from typing import List, Optional, Protocol, Tuple, runtime_checkable
from uuid import UUID

from ...utils.clock import utc_now
from ...utils.uuid_helper import generate_uuid
from ..events.domain_event import DomainEvent


@runtime_checkable
class IHasDomainEvents(Protocol):
    """
    Anything that queues domain events.

    BaseEntity already implements the mechanics; the protocol allows generic
    handling (e.g. in a dispatcher) without depending on the base class.
    """

    @property
    def domain_events(self) -> Tuple[DomainEvent, ...]:
        """All domain events raised by the entity."""
        ...

    def clear_domain_events(self) -> None:
        """Clear domain events once they've been dispatched."""
        ...


class BaseEntity:
    """
    Base class for domain entities.

    Attributes:
        id: Primary key, assigned at construction and never reassigned
        created_at: UTC timestamp when the entity was created
        created_by: Identifier of the user who created the entity
        modified_at: UTC timestamp of the last modification
        modified_by: Identifier of the user who last modified the entity

    Not thread-safe: callers must synchronise concurrent mutation of a single
    instance themselves.
    """

    def __init__(self):
        if type(self) is BaseEntity:
            raise TypeError("BaseEntity cannot be instantiated directly; subclass it")
        super().__init__()
        self.id: UUID = generate_uuid()
        self.created_at: datetime = utc_now()
        self.created_by: Optional[str] = None
        self.modified_at: Optional[datetime] = None
        self.modified_by: Optional[str] = None
        self._domain_events: List[DomainEvent] = []

    def _pending_events(self) -> List[DomainEvent]:
        # ORM loads bypass __init__, so the buffer may not exist yet
        try:
            return self._domain_events
        except AttributeError:
            self._domain_events = []
            return self._domain_events

    @property
    def domain_events(self) -> Tuple[DomainEvent, ...]:
        """Pending domain events in the order they were raised (read-only snapshot)."""
        return tuple(self._pending_events())

    def _raise_domain_event(self, event: DomainEvent) -> None:
        """
        Queue a new domain event.

        Intended for subclasses' business methods only.
        """
        self._pending_events().append(event)

    def clear_domain_events(self) -> None:
        """Clear all domain events (after dispatch). Clearing an empty buffer is a no-op."""
        self._pending_events().clear()

    def set_created(self, created_by: str) -> None:
        """
        Set the creator information.

        Usually called when the entity is first persisted. Re-stamps
        created_at with the current instant on every call.

        Args:
            created_by: Identifier of the creating user
        """
        self.created_by = created_by
        self.created_at = utc_now()

    def set_modified(self, modified_by: Optional[str] = None) -> None:
        """
        Mark the entity as updated.

        Args:
            modified_by: Identifier of the modifying user, if known
        """
        self.modified_at = utc_now()
        self.modified_by = modified_by

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseEntity) or type(other) is not type(self):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self), self.id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"
