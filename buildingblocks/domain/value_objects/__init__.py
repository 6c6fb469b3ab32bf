"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- QosLevel: MQTT delivery guarantee (immutable enum-like value)
"""

from .qos_level import QosLevel

__all__ = ["QosLevel"]
