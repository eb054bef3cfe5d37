import logging  # Import logging to provide detailed runtime information.
from typing import Any, List, NamedTuple, Optional, Tuple

from utils.data_structures.hash_table_adt import CollisionResolutionScheme, HashTableADT
from utils.exceptions import (
    DuplicateKeyError,
    IllegalNullKeyError,
    KeyNotFoundError,
    RehashIntegrityError,
)

logger = logging.getLogger(__name__)

# Capacity used by the no-argument constructor
DEFAULT_CAPACITY = 101
# Load factor threshold used by the no-argument constructor
DEFAULT_LOAD_FACTOR_THRESHOLD = 0.75
# Clears the sign bit so the hash is non-negative before the modulo reduction
_HASH_MASK = 0x7FFFFFFF


class Entry(NamedTuple):
    """A single key/record pair stored in a bucket."""
    key: str
    value: Any


class HashTable(HashTableADT):
    """
    A hash table from string keys to records that resolves collisions by separate chaining.

    Each slot of the bucket array holds a list of entries whose keys map to that slot.
    When an insert pushes the load factor to the threshold, the capacity grows to
    ``capacity * 2 + 1`` and every entry is placed again against the new capacity.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY,
                 load_factor_threshold: float = DEFAULT_LOAD_FACTOR_THRESHOLD):
        """
        Initialize an empty table with a given capacity and load factor threshold.

        Args:
            capacity: The number of buckets, a positive integer.
            load_factor_threshold: The load factor at which the table grows (0 < threshold <= 1).

        Raises:
            ValueError: If capacity or load_factor_threshold is out of range.
        """
        # Validate that capacity is a positive integer (bool is rejected even though it is an int)
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Capacity must be a positive integer, got {capacity!r}.")

        # Validate that load factor threshold is within a valid range (0 < threshold <= 1)
        if isinstance(load_factor_threshold, bool) or not isinstance(load_factor_threshold, (int, float)):
            raise ValueError(f"Load factor threshold must be a number, got {load_factor_threshold!r}.")
        if not (0 < load_factor_threshold <= 1):
            raise ValueError("Load factor threshold must be between 0 and 1.")

        # Current length of the bucket array
        self._capacity = capacity

        # Fixed for the lifetime of the table
        self._load_factor_threshold = float(load_factor_threshold)

        # Number of live entries across all buckets
        self._num_keys = 0

        # The bucket array: one (possibly empty) chain per slot
        self._buckets: List[List[Entry]] = self._new_buckets(capacity)

    @staticmethod
    def _new_buckets(capacity: int) -> List[List[Entry]]:
        return [[] for _ in range(capacity)]

    def index_of(self, key: str) -> int:
        """
        Derive the bucket index of a key for the current capacity.

        Args:
            key: The key to hash.
        Returns:
            An index in ``[0, capacity)``.
        """
        return (hash(key) & _HASH_MASK) % self._capacity

    def _check_key(self, key, operation: str) -> None:
        # The null check always comes first, before any hashing or bucket access
        if key is None:
            logger.warning(f"Rejected null key in {operation}.")
            raise IllegalNullKeyError(operation)
        if not isinstance(key, str):
            raise TypeError(f"Keys must be strings, got {type(key).__name__}.")

    def _find(self, key: str) -> Optional[Tuple[List[Entry], int]]:
        """
        Locate the entry for a key.

        Returns:
            The bucket holding the entry and the entry's position in it, or None if absent.
        """
        bucket = self._buckets[self.index_of(key)]
        for position, entry in enumerate(bucket):
            if entry.key == key:
                return bucket, position
        return None

    def _place(self, entry: Entry) -> None:
        # Raw placement: no null, duplicate or growth checks
        self._buckets[self.index_of(entry.key)].append(entry)
        self._num_keys += 1

    def contains(self, key: str) -> bool:
        """
        Check whether the key is stored anywhere in the table.

        Raises:
            IllegalNullKeyError: If key is None.
        """
        self._check_key(key, "contains")
        return self._find(key) is not None

    def __contains__(self, key) -> bool:
        return self.contains(key)

    def insert(self, key: str, value: Any) -> None:
        """
        Add a key/record pair, growing the table if the load factor threshold is reached.

        Args:
            key: The key to add; must not be None and must not already be present.
            value: The record to associate with the key.

        Raises:
            IllegalNullKeyError: If key is None.
            DuplicateKeyError: If key is already present.
        """
        self._check_key(key, "insert")

        # Membership is decided before any state changes so a failed insert leaves the table untouched
        if self.contains(key):
            logger.warning(f"Rejected duplicate key '{key}'.")
            raise DuplicateKeyError(key)

        # An insert into an empty table never evaluates growth
        was_empty = self._num_keys == 0

        self._place(Entry(key, value))
        logger.debug(f"Key '{key}' inserted at index {self.index_of(key)}.")

        # Growth is evaluated once per external insert, never during a rehash
        if not was_empty and self.load_factor() >= self._load_factor_threshold:
            self._resize()

    def _resize(self) -> None:
        """
        Grow the bucket array to ``capacity * 2 + 1`` and place every entry again.
        """
        # Collect entries in bucket order, then in chain order
        entries = [entry for bucket in self._buckets for entry in bucket]

        old_capacity = self._capacity
        self._capacity = old_capacity * 2 + 1
        self._buckets = self._new_buckets(self._capacity)
        self._num_keys = 0

        for entry in entries:
            self._place(entry)

        if self._num_keys != len(entries):
            logger.error(f"Rehash lost entries: placed {self._num_keys} of {len(entries)}.")
            raise RehashIntegrityError(len(entries), self._num_keys)

        logger.info(f"Resized table from capacity {old_capacity} to {self._capacity} "
                    f"({self._num_keys} entries rehashed).")

    def get(self, key: str) -> Any:
        """
        Retrieve the record stored under the key without modifying the table.

        Raises:
            IllegalNullKeyError: If key is None.
            KeyNotFoundError: If key is not present.
        """
        self._check_key(key, "get")
        found = self._find(key)
        if found is None:
            logger.debug(f"Key '{key}' not found.")
            raise KeyNotFoundError(key)
        bucket, position = found
        return bucket[position].value

    def remove(self, key: str) -> bool:
        """
        Remove the entry stored under the key. Capacity is never reduced.

        Returns:
            True if an entry was removed, False if the key was not present.

        Raises:
            IllegalNullKeyError: If key is None.
        """
        self._check_key(key, "remove")
        found = self._find(key)
        if found is None:
            return False
        bucket, position = found
        del bucket[position]
        self._num_keys -= 1
        logger.debug(f"Key '{key}' removed.")
        return True

    def num_keys(self) -> int:
        return self._num_keys

    def __len__(self) -> int:
        return self._num_keys

    def get_load_factor_threshold(self) -> float:
        return self._load_factor_threshold

    def get_capacity(self) -> int:
        return self._capacity

    def get_collision_resolution_scheme(self) -> CollisionResolutionScheme:
        # Separate chaining over an array of lists
        return CollisionResolutionScheme.CHAINED_BUCKET

    def load_factor(self) -> float:
        """Current number of keys divided by capacity."""
        return self._num_keys / self._capacity

    def keys(self) -> List[str]:
        """
        Get all keys, in bucket order. No ordering is guaranteed.
        """
        return [entry.key for bucket in self._buckets for entry in bucket]

    def values(self) -> list:
        """
        Get all records, in bucket order. No ordering is guaranteed.
        """
        return [entry.value for bucket in self._buckets for entry in bucket]

    def items(self) -> List[Entry]:
        return [entry for bucket in self._buckets for entry in bucket]

    def bucket_sizes(self) -> List[int]:
        """
        Get the chain length of every slot, useful for inspecting how keys spread.
        """
        return [len(bucket) for bucket in self._buckets]

    def __repr__(self) -> str:
        return (f"HashTable(capacity={self._capacity}, "
                f"load_factor_threshold={self._load_factor_threshold}, num_keys={self._num_keys})")
