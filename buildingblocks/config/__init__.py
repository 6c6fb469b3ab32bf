"""
Environment-driven configuration for the bundled adapters.
"""

from .settings import DatabaseSettings, LoggingSettings

__all__ = ["DatabaseSettings", "LoggingSettings"]
