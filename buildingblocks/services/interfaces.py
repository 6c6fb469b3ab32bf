"""
Service Interfaces

Abstract base classes for cross-cutting services following the Dependency
Inversion Principle. Application code depends on these; concrete
implementations live in infrastructure (or the adapters in this package).
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..constants import DEFAULT_QOS, DEFAULT_RETAIN
from ..dtos.mqtt_message import MqttMessage


class IAppLogger(ABC):
    """
    Leveled logging, independent of the logging backend.

    Messages are %-style templates; positional args are substituted lazily by
    the backend, only when the level is enabled:

        logger.info("Order %s placed by %s", order.id, user_id)
    """

    @abstractmethod
    def trace(self, message: str, *args: Any) -> None:
        """Log a diagnostic message."""
        pass

    @abstractmethod
    def info(self, message: str, *args: Any) -> None:
        """Log an informational message."""
        pass

    @abstractmethod
    def warn(self, message: str, *args: Any) -> None:
        """Log a warning."""
        pass

    @abstractmethod
    def error(self, exc: Optional[BaseException], message: str, *args: Any) -> None:
        """
        Log an error together with the exception that caused it.

        Args:
            exc: Exception to attach (traceback included), or None
            message: Message template
            *args: Template arguments
        """
        pass


class ICurrentUserService(ABC):
    """
    Read-only access to the identity behind the current operation.
    """

    @property
    @abstractmethod
    def user_id(self) -> Optional[str]:
        """Identifier of the current user, or None when anonymous."""
        pass

    @property
    @abstractmethod
    def is_authenticated(self) -> bool:
        """True if the current user has been authenticated."""
        pass


class IMqttClientService(ABC):
    """
    Abstraction for MQTT messaging.

    No transport dependencies here; a concrete implementation (paho, aiomqtt,
    ...) lives in infrastructure. Supports scoped use:

        async with client:
            await client.publish("sensors/temp", "21.5")

    Leaving the block disconnects if the client is still connected.
    """

    @abstractmethod
    async def connect(self) -> None:
        """Connect to the broker."""
        pass

    @abstractmethod
    async def publish(
        self,
        topic: str,
        payload: str,
        retain: bool = DEFAULT_RETAIN,
        qos: int = DEFAULT_QOS,
    ) -> None:
        """
        Publish a message.

        Args:
            topic: Destination topic
            payload: Message body
            retain: Ask the broker to keep the last message on the topic
            qos: Quality-of-service level (0, 1 or 2)
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Disconnect from the broker."""
        pass

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """True if the client is currently connected."""
        pass

    async def publish_message(self, message: MqttMessage) -> None:
        """Publish a prepared MqttMessage."""
        await self.publish(message.topic, message.payload, message.retain, message.qos)

    async def aclose(self) -> None:
        """Release the client, disconnecting first if still connected."""
        if self.is_connected:
            await self.disconnect()

    async def __aenter__(self) -> "IMqttClientService":
        if not self.is_connected:
            await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
