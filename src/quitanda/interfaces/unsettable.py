"""Tri-state handling for partial updates.

This module defines the ``UNSET`` sentinel, the `Unsettable` type alias,
and the `resolve` helper for applying partial updates to categories.

A field of type ``Unsettable[T]`` can take three states:

* ``UNSET``: the field is intentionally left unchanged by the update.
* ``None``: the field is explicitly cleared.
* concrete ``T``: the field is explicitly updated to a new value.

Using this tri-state convention lets updates distinguish between omission,
explicit clearing, and explicit setting of a value.
"""

from dataclasses import dataclass
from typing import TypeAlias, TypeVar


def _get_unset() -> "_UnsetType":
    # Factory used by pickle to retrieve the one true instance.
    return UNSET


@dataclass(frozen=True)
class _UnsetType:
    """Sentinel to mark fields intentionally left unset in updates.

    This is distinct from `None`, which indicates an explicit clearing of a value.
    """

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_unset, ())


# Singleton instance
UNSET = _UnsetType()

T = TypeVar("T")
Unsettable: TypeAlias = T | _UnsetType | None


def is_unset(value: object) -> bool:
    """Return True if `value` is the ``UNSET`` sentinel."""
    return isinstance(value, _UnsetType)


def resolve(value: T | None | _UnsetType, current: T) -> T | None:
    """Resolve a tri-state value against the current value.

    Args:
        value: The new value from the update (may be UNSET, None, or a concrete value).
        current: The current value on the stored record.

    Returns:
        ``current`` when value is UNSET, otherwise ``value`` (which may be None).
    """
    if is_unset(value):
        return current
    return value  # type: ignore[return-value]
