import pytest
from socketio.exceptions import BadNamespaceError, ConnectionError as SocketIOConnectionError

from quiz_host.core.errors import ChannelError
from quiz_host.net.socketio_channel import SocketIOChannel


class FakeClient:
    """Mimics the parts of ``socketio.Client`` the channel touches."""

    def __init__(self, fail_connect=False, fail_emit=False):
        self.connected = False
        self.handlers = {}
        self.emitted = []
        self.fail_connect = fail_connect
        self.fail_emit = fail_emit
        self.connect_args = None

    def on(self, event, handler):
        self.handlers[event] = handler

    def connect(self, url, wait_timeout=1):
        if self.fail_connect:
            raise SocketIOConnectionError("refused")
        self.connect_args = (url, wait_timeout)
        self.connected = True

    def disconnect(self):
        self.connected = False

    def emit(self, event, data):
        if self.fail_emit:
            raise BadNamespaceError("/ is not a connected namespace.")
        self.emitted.append((event, data))


def test_send_emits_when_connected():
    client = FakeClient()
    channel = SocketIOChannel("http://quiz.test", client=client)
    channel.connect()

    channel.send("create-room", {"roomCode": "A", "maxPlayers": 2})

    assert client.connect_args[0] == "http://quiz.test"
    assert client.emitted == [("create-room", {"roomCode": "A", "maxPlayers": 2})]


def test_send_while_disconnected_fails():
    channel = SocketIOChannel("http://quiz.test", client=FakeClient())
    with pytest.raises(ChannelError):
        channel.send("create-room", {})


def test_connect_failure_is_wrapped():
    channel = SocketIOChannel("http://quiz.test", client=FakeClient(fail_connect=True))
    with pytest.raises(ChannelError, match="quiz.test"):
        channel.connect()
    assert not channel.is_connected()


def test_emit_failure_is_wrapped():
    client = FakeClient(fail_emit=True)
    channel = SocketIOChannel("http://quiz.test", client=client)
    channel.connect()
    with pytest.raises(ChannelError):
        channel.send("start-quiz", {"roomCode": "A"})


def test_inbound_events_go_through_dispatcher():
    routed = []
    client = FakeClient()
    channel = SocketIOChannel(
        "http://quiz.test",
        dispatcher=lambda handler, data: routed.append((handler, data)),
        client=client,
    )
    received = []
    channel.on("lobby-update", received.append)

    client.handlers["lobby-update"]({"players": []})

    assert received == []
    handler, data = routed[0]
    handler(data)
    assert received == [{"players": []}]


def test_event_without_payload_delivers_none():
    client = FakeClient()
    channel = SocketIOChannel("http://quiz.test", client=client)
    received = []
    channel.on("session-ended", received.append)

    client.handlers["session-ended"]()

    assert received == [None]


def test_disconnect_only_when_connected():
    client = FakeClient()
    channel = SocketIOChannel("http://quiz.test", client=client)
    channel.disconnect()
    channel.connect()
    channel.disconnect()
    assert not client.connected
