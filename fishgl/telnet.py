"""A single-client telnet server driven by periodic calls to ``loop()``."""

from __future__ import annotations

import select
import socket
import time
from typing import Callable, Optional

Callback = Callable[[str], None]


class TelnetBase:
    """Accepts one client at a time and reports connection events to callbacks."""

    def __init__(self, keep_alive_interval: int = 1000, drain_delay: float = 0.05) -> None:
        self.keep_alive_interval = keep_alive_interval
        self.drain_delay = drain_delay
        self.connected = False
        self.ip = ""
        self.last_attempt_ip = ""
        self.port: Optional[int] = None
        self._server: Optional[socket.socket] = None
        self._client: Optional[socket.socket] = None
        self._rx = bytearray()
        self._peer_closed = False
        self._last_status_check = 0.0
        self._on_connect: Optional[Callback] = None
        self._on_connection_attempt: Optional[Callback] = None
        self._on_reconnect: Optional[Callback] = None
        self._on_disconnect: Optional[Callback] = None
        self._on_input: Optional[Callback] = None

    def __enter__(self) -> "TelnetBase":
        return self

    def __exit__(self, *exc) -> None:
        if self.connected:
            self.disconnect_client(False)
        self.stop()

    # server lifecycle

    def begin(self, port: int = 23, host: str = "0.0.0.0") -> bool:
        """Start listening on host:port; the bound port is stored in ``port``."""
        self.ip = ""
        if self._server is not None:
            self._server.close()
        server = socket.create_server((host, port))
        server.setblocking(False)
        self._server = server
        self.port = server.getsockname()[1]
        return True

    def loop(self) -> None:
        """Accept connections, check the client is alive and handle its input."""
        if self._server is None:
            raise RuntimeError("begin() has not been called")
        self._process_client_connection()
        self._perform_keep_alive_check()
        self._handle_client_input()

    def stop(self) -> None:
        """Stop listening for new connections."""
        if self._server is not None:
            self._server.close()
            self._server = None

    def is_connected(self) -> bool:
        """Whether a client is attached and its connection is still open."""
        if self._client is None:
            return False
        self._poll()
        return not self._peer_closed

    def disconnect_client(self, trigger_event: bool = True) -> None:
        """Drop the current client, optionally reporting it to on_disconnect."""
        if self._client is not None:
            self._empty_client_stream()
            self._client.close()
            self._client = None
        if trigger_event and self._on_disconnect is not None:
            self._on_disconnect(self.ip)
        self.ip = ""
        self.connected = False

    # callbacks

    def on_connect(self, callback: Callback) -> None:
        self._on_connect = callback

    def on_connection_attempt(self, callback: Callback) -> None:
        self._on_connection_attempt = callback

    def on_reconnect(self, callback: Callback) -> None:
        self._on_reconnect = callback

    def on_disconnect(self, callback: Callback) -> None:
        self._on_disconnect = callback

    def on_input_received(self, callback: Callback) -> None:
        self._on_input = callback

    # connection handling

    def _process_client_connection(self) -> None:
        try:
            new_client, _ = self._server.accept()
        except (BlockingIOError, InterruptedError):
            return
        new_client.setblocking(True)
        if not self.connected:
            self._connect_client(new_client)
        else:
            self._handle_existing_connection(new_client)

    def _handle_existing_connection(self, new_client: socket.socket) -> None:
        attempted_ip = _peer_ip(new_client)
        if not self.is_connected():
            self.disconnect_client()
            new_client.close()
            return
        if attempted_ip == self.ip:
            self._handle_reconnection(new_client, attempted_ip)
        else:
            self._notify_connection_attempt(attempted_ip)
            new_client.close()

    def _handle_reconnection(self, new_client: socket.socket, attempted_ip: str) -> None:
        self.disconnect_client(False)
        self._connect_client(new_client, False)
        if self._on_reconnect is not None:
            self._on_reconnect(attempted_ip)

    def _notify_connection_attempt(self, attempted_ip: str) -> None:
        self.last_attempt_ip = attempted_ip
        if self._on_connection_attempt is not None:
            self._on_connection_attempt(attempted_ip)

    def _connect_client(self, client: socket.socket, trigger_event: bool = True) -> None:
        self._client = client
        self._rx.clear()
        self._peer_closed = False
        self.ip = _peer_ip(client)
        try:
            client.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        except OSError:
            pass
        if trigger_event and self._on_connect is not None:
            self._on_connect(self.ip)
        self._empty_client_stream()
        self.connected = True

    def _perform_keep_alive_check(self) -> None:
        if self._keep_alive_due() and self.connected and not self.is_connected():
            self.disconnect_client()

    def _keep_alive_due(self) -> bool:
        now = time.monotonic() * 1000.0
        if now - self._last_status_check >= self.keep_alive_interval:
            self._last_status_check = now
            return True
        return False

    def _handle_client_input(self) -> None:
        if self._on_input is not None and self._client is not None and self._available():
            self._handle_input()

    def _handle_input(self) -> None:
        c = self._read_byte()
        if c >= 0:
            self._on_input(chr(c))

    # socket I/O

    def _poll(self) -> None:
        """Move whatever the client has sent into the receive buffer."""
        while self._client is not None and not self._peer_closed:
            try:
                ready, _, _ = select.select([self._client], [], [], 0)
            except (OSError, ValueError):
                self._peer_closed = True
                break
            if not ready:
                break
            try:
                data = self._client.recv(4096)
            except OSError:
                data = b""
            if not data:
                self._peer_closed = True
                break
            self._rx.extend(data)

    def _available(self) -> int:
        if self._client is None:
            return 0
        self._poll()
        return len(self._rx)

    def _read_byte(self) -> int:
        if not self._rx:
            self._poll()
        if not self._rx:
            return -1
        value = self._rx[0]
        del self._rx[0]
        return value

    def _send(self, data: bytes) -> int:
        if self._client is None:
            return 0
        try:
            self._client.sendall(data)
        except OSError:
            self._peer_closed = True
            return 0
        return len(data)

    def _empty_client_stream(self) -> None:
        self._rx.clear()
        if self.drain_delay:
            time.sleep(self.drain_delay)
        self._poll()
        self._rx.clear()


def _peer_ip(sock: socket.socket) -> str:
    try:
        return sock.getpeername()[0]
    except OSError:
        return ""


class Telnet(TelnetBase):
    """Telnet server delivering whole lines (or single characters) as input."""

    def __init__(
        self,
        keep_alive_interval: int = 1000,
        drain_delay: float = 0.05,
        line_mode: bool = True,
    ) -> None:
        super().__init__(keep_alive_interval, drain_delay)
        self.line_mode = line_mode
        self._input = ""

    def _handle_input(self) -> None:
        code = self._read_byte()
        if code < 0:
            return
        c = chr(code)
        if self.line_mode:
            if c != "\n":
                if 32 <= code < 127:
                    self._input += c
            else:
                line, self._input = self._input, ""
                self._on_input(line)
        elif self._input:
            pending, self._input = self._input, ""
            self._on_input(pending + c)
        else:
            self._on_input(c)

    def println(self) -> None:
        """Send a line break to the client."""
        if self._client is not None and self.is_connected():
            self._send(b"\r\n")

    def printf(self, fmt: str, *args) -> int:
        """Send fmt % args to the client; return the number of bytes written."""
        if self._client is None or not self.is_connected():
            return 0
        text = fmt % args if args else fmt
        return self._send(text.encode("utf-8"))


class TelnetStream(TelnetBase):
    """Telnet server exposing the client as a byte stream."""

    def available(self) -> int:
        """Number of received bytes waiting to be read."""
        if self._client is not None and self.is_connected():
            return len(self._rx)
        return 0

    def read(self) -> int:
        """Next received byte, -1 when none is waiting, 0 without a client."""
        if self._client is not None and self.is_connected():
            return self._read_byte()
        return 0

    def peek(self) -> int:
        """Next received byte without consuming it; -1 or 0 as for read()."""
        if self._client is not None and self.is_connected():
            return self._rx[0] if self._rx else -1
        return 0

    def flush(self) -> None:
        """Discard received bytes that have not been read."""
        if self._client is not None and self.is_connected():
            self._rx.clear()

    def write(self, data: int) -> int:
        """Send one byte; return the number of bytes written."""
        if self._client is not None and self.is_connected():
            return self._send(bytes([data & 0xFF]))
        return 0