"""
buildingblocks

Cross-cutting abstractions for layered applications: a base entity with
audit fields and domain events, repository/unit-of-work contracts, guard
clauses, a result type, a logging facade, a current-user accessor and an MQTT
client contract.
"""

from .domain.entities.base_entity import BaseEntity, IHasDomainEvents
from .domain.events.domain_event import DomainEvent
from .domain.value_objects.qos_level import QosLevel
from .dtos.mqtt_message import MqttMessage
from .exceptions import (
    ApplicationError,
    ArgumentInvalidError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    ConfigurationError,
    DatabaseError,
    EmptyIdentifierError,
    GuardError,
    MessagingError,
)
from .guard import Guard
from .results import Result, ValueResult
from .services.interfaces import IAppLogger, ICurrentUserService, IMqttClientService

__version__ = "0.1.0"

__all__ = [
    "BaseEntity",
    "IHasDomainEvents",
    "DomainEvent",
    "QosLevel",
    "MqttMessage",
    "ApplicationError",
    "GuardError",
    "ArgumentNullError",
    "ArgumentInvalidError",
    "ArgumentOutOfRangeError",
    "EmptyIdentifierError",
    "ConfigurationError",
    "DatabaseError",
    "MessagingError",
    "Guard",
    "Result",
    "ValueResult",
    "IAppLogger",
    "ICurrentUserService",
    "IMqttClientService",
]
