"""
Domain Entities

Business entities with identity and lifecycle.
"""

from .base_entity import BaseEntity, IHasDomainEvents

__all__ = ["BaseEntity", "IHasDomainEvents"]
