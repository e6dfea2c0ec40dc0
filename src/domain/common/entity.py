"""
Identity for domain entities.

An entity keeps its identity while its attributes change, so two entities
compare equal exactly when their IDs do. IDs are typed per entity, which
keeps a FlashcardId from being passed where a GenerationSourceId is expected.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4


@dataclass(frozen=True)
class EntityId:
    """UUID wrapper; subclass once per entity type."""

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"{type(self).__name__} must wrap a UUID, got {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        return cls(uuid4())


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for entities.

    Subclasses are ``@dataclass(eq=False)`` classes declaring an ``id``
    field, so the identity based comparison below is kept.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.id == self.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"
