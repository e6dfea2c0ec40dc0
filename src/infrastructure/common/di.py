from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from src.core import container
from src.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Wrap a container provider as a FastAPI dependency.

    Everything the provider builds for the request shares the request's
    database session.
    """

    def build(db: DatabaseSession) -> T:
        with container.db.override(db):
            return provider()

    return build
