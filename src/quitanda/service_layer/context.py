"""Caller context passed to mutating category operations."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CallerContext:
    """Identity and tracing details of whoever issued a mutating operation.

    Carried through `update_category` and `delete_category` for audit
    propagation. The category manager does not act on it yet.
    """

    actor: str | None = None
    correlation_id: str | None = None


ANONYMOUS = CallerContext()
