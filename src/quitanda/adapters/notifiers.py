"""Event notifier adapters."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from quitanda.interfaces.notifier import EventNotifier

# pylint: disable=too-few-public-methods

logger = logging.getLogger("quitanda.events")


@dataclass(frozen=True, slots=True)
class EmittedEvent:
    """A notification captured by `InMemoryNotifier`."""

    name: str
    payload: Mapping[str, Any]


class InMemoryNotifier(EventNotifier):
    """Notifier that records every emission in order.

    Non-durable; intended for tests and demos.
    """

    def __init__(self) -> None:
        self.events: list[EmittedEvent] = []

    def emit(self, event_name: str, payload: Mapping[str, Any]) -> None:
        self.events.append(EmittedEvent(name=event_name, payload=dict(payload)))


class LoggingNotifier(EventNotifier):
    """Notifier that writes each emission to the ``quitanda.events`` logger."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def emit(self, event_name: str, payload: Mapping[str, Any]) -> None:
        logger.log(self.level, "Event %s: %s", event_name, dict(payload))
