"""
Domain Event Base Class

All domain events inherit from this.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict
from uuid import UUID

from ...utils.clock import utc_now
from ...utils.uuid_helper import generate_uuid


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for domain events.

    Events are frozen dataclasses. The common fields are keyword-only so
    subclasses can declare their own positional fields:

        @dataclass(frozen=True)
        class OrderPlaced(DomainEvent):
            order_id: UUID
            total: Decimal

    Attributes:
        occurred_at: UTC instant the event happened
        event_id: Unique identifier of this occurrence
    """

    occurred_at: datetime = field(default_factory=utc_now, kw_only=True)
    event_id: UUID = field(default_factory=generate_uuid, kw_only=True)

    @property
    def event_type(self) -> str:
        """Name of the concrete event class."""
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to a plain dictionary (for logging and diagnostics).

        Returns:
            Dictionary with the event fields plus event_type
        """
        data = asdict(self)
        data["event_type"] = self.event_type
        data["event_id"] = str(self.event_id)
        data["occurred_at"] = self.occurred_at.isoformat()
        return data
