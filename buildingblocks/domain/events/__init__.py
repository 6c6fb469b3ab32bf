"""
Domain Events

Immutable records of business-significant occurrences, queued on the
originating entity until an external dispatcher processes them.
"""

from .domain_event import DomainEvent

__all__ = ["DomainEvent"]
