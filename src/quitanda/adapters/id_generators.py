"""ID generators used by category stores to assign category ids."""

import threading
import uuid

from ulid import monotonic

from quitanda.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are unique, lexicographically sortable identifiers.
    They generally consist of a timestamp and a random component.
    This generator uses the `ulid-py` library to create ULIDs.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class UUIDv4Generator(IdGenerator):
    """UUIDv4 generator.

    UUIDv4 are universally unique identifiers that are randomly generated.
    They are not guaranteed to be sequential or ordered in any way.
    """

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())


class SimpleIdGenerator(IdGenerator):
    """A counter producing "1", "2", ... zero-padded to `length` digits.

    Note:
        Not suitable for production use; primarily for in-memory stores,
        tests and demos.
    """

    def __init__(self, length: int = 1, start: int = 0) -> None:
        self._counter = start
        self._length = length
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new unique identifier."""
        with self._lock:
            self._counter += 1
            return f"{self._counter:0{self._length}d}"
