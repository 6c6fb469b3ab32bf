"""
Data Transfer Objects (DTOs) Layer

Transport-agnostic value bundles passed between layers. Infrastructure maps
them to its concrete wire types.
"""

from .mqtt_message import MqttMessage

__all__ = ["MqttMessage"]
