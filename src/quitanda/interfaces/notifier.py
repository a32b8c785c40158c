"""Interface for the domain event notifier."""

import abc
from collections.abc import Mapping
from typing import Any

# pylint: disable=too-few-public-methods


class EventNotifier(abc.ABC):
    """Contract for a fire-and-forget event sink."""

    @abc.abstractmethod
    def emit(self, event_name: str, payload: Mapping[str, Any]) -> None:
        """Publish `event_name` with `payload`. Nothing is returned to the caller."""
