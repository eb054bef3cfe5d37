from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any


class CollisionResolutionScheme(IntEnum):
    """
    Identifiers for the collision resolution strategies a table backend may use.
    All identifiers fall in the range 1..9.
    """
    LINEAR_PROBING = 1
    QUADRATIC_PROBING = 2
    DOUBLE_HASHING = 3
    CHAINED_BUCKET_TREE = 4
    CHAINED_BUCKET = 5


class HashTableADT(ABC):
    """
    Abstract contract shared by hash table backends keyed by a string.

    Concrete backends decide how buckets are laid out and how collisions are
    resolved, and report that choice through get_collision_resolution_scheme().
    """

    @abstractmethod
    def insert(self, key: str, value: Any) -> None:
        """
        Add a key/value pair.

        Raises:
            IllegalNullKeyError: If key is None.
            DuplicateKeyError: If key is already stored.
        """
        raise NotImplementedError("Subclasses must implement this method.")

    @abstractmethod
    def remove(self, key: str) -> bool:
        """
        Remove the pair stored under key.

        Returns:
            bool: True if an entry was removed, False if key was not present.

        Raises:
            IllegalNullKeyError: If key is None.
        """
        raise NotImplementedError("Subclasses must implement this method.")

    @abstractmethod
    def get(self, key: str) -> Any:
        """
        Return the value stored under key.

        Raises:
            IllegalNullKeyError: If key is None.
            KeyNotFoundError: If key is not stored.
        """
        raise NotImplementedError("Subclasses must implement this method.")

    @abstractmethod
    def num_keys(self) -> int:
        raise NotImplementedError("Subclasses must implement this method.")

    @abstractmethod
    def get_load_factor_threshold(self) -> float:
        raise NotImplementedError("Subclasses must implement this method.")

    @abstractmethod
    def get_capacity(self) -> int:
        raise NotImplementedError("Subclasses must implement this method.")

    @abstractmethod
    def get_collision_resolution_scheme(self) -> CollisionResolutionScheme:
        raise NotImplementedError("Subclasses must implement this method.")
