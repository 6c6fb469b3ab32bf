"""
In-Memory MQTT Client

IMqttClientService that keeps published messages in a list instead of
sending them to a broker. Used for tests and for running application code
locally without a broker.
"""

import asyncio
from typing import List, Optional

from ..constants import DEFAULT_QOS, DEFAULT_RETAIN
from ..domain.value_objects.qos_level import QosLevel
from ..dtos.mqtt_message import MqttMessage
from ..exceptions import MessagingError
from ..guard import Guard
from ..utils.logging_utils import get_logger
from .interfaces import IAppLogger, IMqttClientService


class InMemoryMqttClient(IMqttClientService):
    """
    Recording MQTT client.

    Attributes:
        client_id: Identifier used in log messages
        published: Messages published so far, in publish order
    """

    def __init__(self, client_id: str = "buildingblocks", logger: Optional[IAppLogger] = None):
        self.client_id = Guard.not_null_or_whitespace(client_id, "client_id")
        self.published: List[MqttMessage] = []
        self.connect_count = 0
        self._connected = False
        self._logger = logger or get_logger(InMemoryMqttClient)

    @property
    def is_connected(self) -> bool:
        return self._connected

    async def connect(self) -> None:
        # Yield once so the call is a cancellation point like a real connect
        await asyncio.sleep(0)
        self._connected = True
        self.connect_count += 1
        self._logger.info("MQTT client %s connected", self.client_id)

    async def publish(
        self,
        topic: str,
        payload: str,
        retain: bool = DEFAULT_RETAIN,
        qos: int = DEFAULT_QOS,
    ) -> None:
        """
        Record a message.

        Raises:
            ArgumentInvalidError: If the topic is blank
            ArgumentNullError: If the payload is None
            ArgumentOutOfRangeError: If qos is not 0, 1 or 2
            MessagingError: If the client is not connected
        """
        Guard.not_null_or_whitespace(topic, "topic")
        Guard.not_null(payload, "payload")
        level = QosLevel.from_value(qos)
        if not self._connected:
            raise MessagingError(f"MQTT client {self.client_id} is not connected", topic=topic)

        await asyncio.sleep(0)
        message = MqttMessage(topic=topic, payload=payload, retain=retain, qos=int(level))
        self.published.append(message)
        self._logger.trace("Published to %s (qos=%d, retain=%s)", topic, level, retain)

    async def disconnect(self) -> None:
        self._connected = False
        self._logger.info("MQTT client %s disconnected", self.client_id)

    def messages_for(self, topic: str) -> List[MqttMessage]:
        """Messages published to a topic, in publish order."""
        return [m for m in self.published if m.topic == topic]
