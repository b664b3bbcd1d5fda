"""
Edit-event transport between collaborating editors.

Only an in-process loopback is provided: transports attached to the same
LoopbackHub see each other's events, serialized to JSON on the way as a
network transport would.
"""

import json
import logging
import time
from dataclasses import asdict, dataclass
from typing import Callable, List, Optional, Tuple

EVENT_KINDS = ('code', 'cursor', 'selection')


@dataclass(frozen=True)
class EditEvent:
    kind: str
    user_id: str
    timestamp: float
    content: Optional[str] = None
    position: Optional[int] = None
    selection: Optional[Tuple[int, int]] = None
    color: Optional[str] = None

    def __post_init__(self):
        if self.kind not in EVENT_KINDS:
            raise ValueError(f"Unknown edit event kind: {self.kind!r}")

    def to_json(self) -> str:
        payload = {key: value for key, value in asdict(self).items() if value is not None}
        return json.dumps(payload)

    @classmethod
    def from_json(cls, data: str) -> "EditEvent":
        payload = json.loads(data)
        if payload.get('selection') is not None:
            payload['selection'] = tuple(payload['selection'])
        return cls(**payload)


def now_ms() -> float:
    return time.time() * 1000


EditHandler = Callable[[EditEvent], None]


class Transport:
    """Interface the editor session talks to."""

    @property
    def is_connected(self) -> bool:
        raise NotImplementedError("Subclasses must implement is_connected")

    def connect(self):
        raise NotImplementedError("Subclasses must implement connect()")

    def close(self):
        raise NotImplementedError("Subclasses must implement close()")

    def publish(self, event: EditEvent):
        raise NotImplementedError("Subclasses must implement publish()")

    def on_remote_edit(self, handler: EditHandler) -> Callable[[], None]:
        """Registers handler for events from other participants; returns an unsubscribe callable."""
        raise NotImplementedError("Subclasses must implement on_remote_edit()")


class LoopbackHub:
    """Fans events out to every connected transport except the sender."""

    def __init__(self):
        self._transports: List["LoopbackTransport"] = []

    def attach(self, transport: "LoopbackTransport"):
        if transport not in self._transports:
            self._transports.append(transport)

    def detach(self, transport: "LoopbackTransport"):
        if transport in self._transports:
            self._transports.remove(transport)

    @property
    def participants(self) -> int:
        return len(self._transports)

    def broadcast(self, sender: "LoopbackTransport", data: str):
        for transport in list(self._transports):
            if transport is not sender:
                transport._deliver(data)


class LoopbackTransport(Transport):
    def __init__(self, hub: LoopbackHub):
        self.hub = hub
        self._connected = False
        self._handlers: List[EditHandler] = []

    @property
    def is_connected(self) -> bool:
        return self._connected

    def connect(self):
        self.hub.attach(self)
        self._connected = True
        logging.info(f"LoopbackTransport - connected ({self.hub.participants} participants)")

    def close(self):
        self.hub.detach(self)
        self._connected = False
        logging.info("LoopbackTransport - closed")

    def publish(self, event: EditEvent):
        if not self._connected:
            logging.debug(f"LoopbackTransport - not connected, dropping {event.kind} event")
            return
        self.hub.broadcast(self, event.to_json())

    def on_remote_edit(self, handler: EditHandler) -> Callable[[], None]:
        self._handlers.append(handler)

        def unsubscribe():
            if handler in self._handlers:
                self._handlers.remove(handler)
        return unsubscribe

    def _deliver(self, data: str):
        event = EditEvent.from_json(data)
        for handler in list(self._handlers):
            handler(event)
