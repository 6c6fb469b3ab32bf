"""
Custom exception classes for the building blocks.

Two disjoint channels are modelled here:

- Guard violations (GuardError and subclasses) are programming errors raised
  at method/constructor boundaries. Callers are not expected to recover.
- Operational errors raised by the bundled adapters (configuration, database,
  messaging).

Expected business-rule failures are not exceptions at all; they are returned
as a Result (see buildingblocks.results).
"""


class ApplicationError(Exception):
    """Base exception for all building-block errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class GuardError(ApplicationError, ValueError):
    """Raised when a guard clause rejects an argument"""

    def __init__(self, param_name: str, message: str):
        self.param_name = param_name
        super().__init__(f"{message} (Parameter '{param_name}')", {"param_name": param_name})


class ArgumentNullError(GuardError):
    """Raised when a required argument is None"""

    def __init__(self, param_name: str, message: str | None = None):
        super().__init__(param_name, message or "Value cannot be null.")


class ArgumentInvalidError(GuardError):
    """Raised when an argument has an invalid value"""


class ArgumentOutOfRangeError(ArgumentInvalidError):
    """Raised when an argument falls outside its allowed range"""


class EmptyIdentifierError(ArgumentInvalidError):
    """Raised when an identifier is empty or nil"""

    def __init__(self, param_name: str, message: str | None = None):
        super().__init__(param_name, message or "GUID cannot be empty.")


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, invalid_keys: list[str] | None = None):
        details = {"invalid_keys": invalid_keys} if invalid_keys else {}
        super().__init__(message, details)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)


class MessagingError(ApplicationError):
    """Raised when an MQTT client operation fails"""

    def __init__(self, message: str, topic: str | None = None):
        details = {"topic": topic} if topic else {}
        super().__init__(message, details)
