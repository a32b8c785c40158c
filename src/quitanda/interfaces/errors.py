"""Errors raised by category store implementations.

The service layer never catches or translates these; they reach the caller
unchanged.
"""


class CategoryStoreError(Exception):
    """Base class for all category store errors."""


class StoreUnavailableError(CategoryStoreError):
    """Raised when the backing store cannot be reached or fails transiently."""


class ConstraintViolationError(CategoryStoreError):
    """Raised when a write violates a store constraint (e.g. NOT NULL, length)."""


class InvalidRecordError(CategoryStoreError):
    """Raised when a record cannot be represented by the store (bad value/type)."""


class InvalidQueryError(CategoryStoreError):
    """Raised when a filter or ordering refers to an unknown category field."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Unknown category field in query: {field!r}")
        self.field = field
