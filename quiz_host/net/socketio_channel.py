"""Socket.IO transport between the host controller and the coordinating service."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any, Protocol

import socketio
from socketio.exceptions import BadNamespaceError, ConnectionError as SocketIOConnectionError

from quiz_host.constants.network_constants import CONNECT_WAIT_TIMEOUT_SECONDS
from quiz_host.core.errors import ChannelError

logger = logging.getLogger(__name__)

InboundHandler = Callable[[Any], None]
Dispatcher = Callable[[InboundHandler, Any], None]


class MessageChannel(Protocol):
    """What the controller needs from a transport."""

    def send(self, event: str, payload: dict[str, Any]) -> None: ...

    def on(self, event: str, handler: InboundHandler) -> None: ...

    def is_connected(self) -> bool: ...


def call_directly(handler: InboundHandler, data: Any) -> None:
    handler(data)


class SocketIOChannel:
    """Duplex JSON channel backed by a ``python-socketio`` client.

    Inbound events arrive on the client's background thread; each one is
    handed to ``dispatcher`` which decides on which thread the handler runs.
    """

    def __init__(
        self,
        server_url: str,
        dispatcher: Dispatcher = call_directly,
        client: socketio.Client | None = None,
    ) -> None:
        self._server_url = server_url
        self._dispatcher = dispatcher
        self._client = client or socketio.Client(reconnection=True)
        self._client.on("connect", self._handle_connect)
        self._client.on("disconnect", self._handle_disconnect)

    @property
    def server_url(self) -> str:
        return self._server_url

    def is_connected(self) -> bool:
        return bool(self._client.connected)

    def connect(self) -> None:
        if self.is_connected():
            return
        logger.info("Connecting to %s", self._server_url)
        try:
            self._client.connect(self._server_url, wait_timeout=CONNECT_WAIT_TIMEOUT_SECONDS)
        except SocketIOConnectionError as exc:
            logger.error("Could not reach %s: %s", self._server_url, exc)
            raise ChannelError(f"Could not reach the quiz server at {self._server_url}.") from exc

    def disconnect(self) -> None:
        if self.is_connected():
            self._client.disconnect()

    def send(self, event: str, payload: dict[str, Any]) -> None:
        if not self.is_connected():
            raise ChannelError("Not connected to the quiz server.")
        logger.info("-> %s %s", event, payload)
        try:
            self._client.emit(event, payload)
        except BadNamespaceError as exc:
            logger.error("Emit of %s failed: %s", event, exc)
            raise ChannelError(f"Could not send '{event}' to the quiz server.") from exc

    def on(self, event: str, handler: InboundHandler) -> None:
        def receive(*args: Any) -> None:
            data = args[0] if args else None
            logger.info("<- %s %s", event, data)
            self._dispatcher(handler, data)

        self._client.on(event, receive)

    def _handle_connect(self) -> None:
        logger.info("Connected to %s", self._server_url)

    def _handle_disconnect(self, *args: Any) -> None:
        logger.warning("Disconnected from %s", self._server_url)
