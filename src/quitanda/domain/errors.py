"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class NotFoundError(DomainError):
    """Raised when a lookup by key yields no record.

    Transport layers should surface this as a "missing resource" response.
    """

    def __init__(self, kind: str, key: str, message: str | None = None) -> None:
        if message is None:
            message = f"{kind} ({key}) not found"
        super().__init__(message)
        self.kind = kind
        self.key = key


# ============================================================================
#                       Category related errors
# ============================================================================


class CategoryNotFoundError(NotFoundError):
    """Raised when no category matches the requested id."""

    def __init__(self, category_id: str) -> None:
        super().__init__(
            "category", category_id, f"Category with id {category_id} not found"
        )
        self.category_id = category_id
