import logging
from typing import Protocol

logger = logging.getLogger(__name__)

NEW_RESULT_EVENT = "newResult"


class Broadcaster(Protocol):
    def publish(self, event: str, payload: dict) -> None:
        ...


class NullBroadcaster:
    """Drops every event. Used when no live viewers are wired up."""

    def publish(self, event: str, payload: dict) -> None:
        logger.debug("Dropping %s event (no broadcast channel)", event)


class SocketIOBroadcaster:
    """
    Fan-out to every connected Socket.IO client.

    Fire-and-forget: a failing transport is logged and never reaches the
    request that triggered the publish.
    """

    def __init__(self, socketio):
        self.socketio = socketio

    def publish(self, event: str, payload: dict) -> None:
        try:
            self.socketio.emit(event, payload)
        except Exception:
            logger.exception("Failed to broadcast %s event", event)
