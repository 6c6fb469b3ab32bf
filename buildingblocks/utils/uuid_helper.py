"""
UUID generation helper for the building blocks.

Provides consistent identifier generation across all entities and events.
"""
import uuid
from typing import Optional, Union

EMPTY_UUID = uuid.UUID(int=0)


def generate_uuid() -> uuid.UUID:
    """
    Generate a new random identifier.

    Returns:
        uuid.UUID: A new UUID4
    """
    return uuid.uuid4()


def is_empty_uuid(value: Optional[Union[uuid.UUID, str]]) -> bool:
    """
    Check whether an identifier is missing or nil.

    Args:
        value: UUID instance, its string form, or None

    Returns:
        True for None, an empty/blank string, or the nil UUID
    """
    if value is None:
        return True
    if isinstance(value, str):
        if not value.strip():
            return True
        try:
            return uuid.UUID(value) == EMPTY_UUID
        except ValueError:
            return False
    return value == EMPTY_UUID
