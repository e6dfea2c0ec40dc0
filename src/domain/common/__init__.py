"""Building blocks shared by all domain modules."""

from .entity import Entity, EntityId
from .exceptions import DomainError, InvariantViolationError, ValidationError

__all__ = ["DomainError", "Entity", "EntityId", "InvariantViolationError", "ValidationError"]
