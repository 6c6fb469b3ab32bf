"""
Library-wide constants.

Centralizes defaults shared by the contracts and their adapters.
"""
from .domain.value_objects.qos_level import QosLevel

# MQTT publish defaults
DEFAULT_QOS = QosLevel.AT_LEAST_ONCE
DEFAULT_RETAIN = False

# Environment variable prefix for configuration
ENV_PREFIX = "BUILDINGBLOCKS_"

# Rotating log file defaults (10MB per file, keep 5 backups)
DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
