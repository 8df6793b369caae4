"""Keyed entity stores backing the dummy gateway.

A store maps a reference string to whatever entity was put under it. The
gateway owns one store per entity kind; tests can inject their own to seed
or inspect state.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class Store(ABC):
    """Abstract reference-keyed store."""

    @abstractmethod
    def get(self, reference: str) -> Any:
        """
        Return the entity stored under reference.

        Raises:
            KeyError: If nothing is stored under reference
        """
        pass

    @abstractmethod
    def put(self, reference: str, entity: Any) -> None:
        """Store entity under reference, replacing any previous entry."""
        pass

    @abstractmethod
    def contains(self, reference: str) -> bool:
        """Return True if an entity is stored under reference."""
        pass

    @abstractmethod
    def references(self) -> Iterator[str]:
        """Iterate over stored references in insertion order."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __contains__(self, reference: object) -> bool:
        return isinstance(reference, str) and self.contains(reference)


class InMemoryStore(Store):
    """Dict-backed store. Entries live until the store is garbage collected."""

    def __init__(self) -> None:
        self._entities: dict[str, Any] = {}

    def get(self, reference: str) -> Any:
        return self._entities[reference]

    def put(self, reference: str, entity: Any) -> None:
        self._entities[reference] = entity

    def contains(self, reference: str) -> bool:
        return reference in self._entities

    def references(self) -> Iterator[str]:
        return iter(list(self._entities))

    def __len__(self) -> int:
        return len(self._entities)
