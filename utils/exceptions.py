class HashTableError(Exception):
    """
    Base exception for all errors raised by the hash table.
    """
    pass


class IllegalNullKeyError(HashTableError):
    """
    Raised by insert, get, remove and contains when the key is None.
    """
    def __init__(self, operation: str = "operation"):
        self.operation = operation
        message = f"Null key is not allowed for {operation}"
        super().__init__(message)


class DuplicateKeyError(HashTableError):
    """
    Raised by insert when an entry with an equal key already exists in the table.
    """
    def __init__(self, key):
        self.key = key
        message = f"Key '{key}' is already present in the table"
        super().__init__(message)


class KeyNotFoundError(HashTableError, LookupError):
    """
    Raised by get when no entry matches the requested key.
    """
    def __init__(self, key):
        self.key = key
        message = f"Key '{key}' not found"
        super().__init__(message)


class RehashIntegrityError(HashTableError):
    """
    Internal fault: the entry count after a rehash does not match the count before it.
    """
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        message = f"Rehash placed {actual} entries, expected {expected}"
        super().__init__(message)


class BookParseError(Exception):
    """
    Raised when a book source file is missing required columns or holds an invalid row.
    """
    def __init__(self, source, reason: str, row_number: int = None):
        self.source = source
        self.row_number = row_number
        location = f"{source}" if row_number is None else f"{source}, row {row_number}"
        super().__init__(f"Cannot parse books from {location}: {reason}")
