"""
MQTT Message DTO

Lightweight DTO for internal use (e.g., logging, testing). Infrastructure
can map this to its concrete message type.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..constants import DEFAULT_QOS, DEFAULT_RETAIN
from ..domain.value_objects.qos_level import QosLevel


class MqttMessage(BaseModel):
    """
    Immutable MQTT message.

    Two messages with the same fields compare equal.
    """

    model_config = ConfigDict(frozen=True)

    topic: str = Field(min_length=1, description="Topic the message is published to")
    payload: str = Field(description="Message payload")
    retain: bool = Field(DEFAULT_RETAIN, description="Broker keeps the last message on the topic")
    qos: int = Field(
        int(DEFAULT_QOS),
        ge=int(QosLevel.AT_MOST_ONCE),
        le=int(QosLevel.EXACTLY_ONCE),
        description="Quality-of-service level (0, 1 or 2)",
    )

    @property
    def qos_level(self) -> QosLevel:
        """QoS as a QosLevel value object."""
        return QosLevel(self.qos)
