"""
QosLevel Value Object

Immutable representation of an MQTT quality-of-service level.
"""

from enum import IntEnum

from ...exceptions import ArgumentOutOfRangeError


class QosLevel(IntEnum):
    """
    MQTT delivery guarantee.

    Being an IntEnum, members can be passed anywhere a plain int QoS is
    accepted.
    """

    AT_MOST_ONCE = 0
    AT_LEAST_ONCE = 1
    EXACTLY_ONCE = 2

    def is_acknowledged(self) -> bool:
        """Check if the broker acknowledges delivery at this level."""
        return self is not QosLevel.AT_MOST_ONCE

    @classmethod
    def from_value(cls, value: int, param_name: str = "qos") -> "QosLevel":
        """
        Create QosLevel from an integer.

        Args:
            value: 0, 1 or 2
            param_name: Parameter label used in the error

        Returns:
            QosLevel instance

        Raises:
            ArgumentOutOfRangeError: If value is not a valid level
        """
        try:
            return cls(value)
        except ValueError:
            raise ArgumentOutOfRangeError(
                param_name, f"Value must be between {min(cls).value} and {max(cls).value}."
            )
