"""Length-prefixed TCP messaging between two players."""

from __future__ import annotations

import logging
import socket
import struct

from seabattle.ship import Cell, Ship

logger = logging.getLogger(__name__)

_UINT32 = struct.Struct(">I")
_INT32 = struct.Struct(">i")


def encode_string(text: str) -> bytes:
    """Encode text as a 32-bit big-endian byte count followed by UTF-8 bytes."""
    raw = text.encode("utf-8")
    return _UINT32.pack(len(raw)) + raw


def decode_string(data: bytes) -> str:
    """Decode a string written by encode_string; trailing bytes are ignored."""
    return _PacketReader(data).string()


class _PacketReader:
    """Reads big-endian fields from a packet payload in order."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def _take(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._data):
            raise ValueError("packet too short")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def int32(self) -> int:
        return _INT32.unpack(self._take(_INT32.size))[0]

    def uint32(self) -> int:
        return _UINT32.unpack(self._take(_UINT32.size))[0]

    def string(self) -> str:
        length = self.uint32()
        return self._take(length).decode("utf-8", errors="replace")


class NetworkManager:
    """A blocking connection to the other player, as host or as client.

    Every packet travels as a 32-bit big-endian size followed by its payload.
    Failures raise ConnectionError; malformed packets raise ValueError.
    """

    def __init__(self, sock: socket.socket | None = None) -> None:
        self.socket = sock
        self.listener: socket.socket | None = None
        self.is_server = False

    def __enter__(self) -> NetworkManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def start_server(self, port: int) -> None:
        """Listen on the port and wait for one client to connect."""
        self.is_server = True
        listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            listener.bind(("", port))
            listener.listen(1)
        except OSError as exc:
            listener.close()
            raise ConnectionError(f"cannot listen on port {port}") from exc
        self.listener = listener
        logger.info("waiting for a client on port %d", port)
        try:
            conn, address = listener.accept()
        except OSError as exc:
            raise ConnectionError("failed to accept a connection") from exc
        self.socket = conn
        logger.info("client connected from %s", address)

    def start_client(self, ip: str, port: int) -> None:
        """Connect to a host at the given address."""
        self.is_server = False
        try:
            self.socket = socket.create_connection((ip, port))
        except OSError as exc:
            raise ConnectionError(f"cannot connect to {ip}:{port}") from exc
        logger.info("connected to %s:%d", ip, port)

    def close(self) -> None:
        """Close the connection and the listening socket, if any."""
        for sock in (self.socket, self.listener):
            if sock is not None:
                sock.close()
        self.socket = None
        self.listener = None

    def _connected(self) -> socket.socket:
        if self.socket is None:
            raise ConnectionError("not connected")
        return self.socket

    def _send_packet(self, payload: bytes) -> None:
        try:
            self._connected().sendall(_UINT32.pack(len(payload)) + payload)
        except OSError as exc:
            raise ConnectionError("failed to send packet") from exc

    def _recv_exact(self, count: int) -> bytes:
        sock = self._connected()
        chunks = bytearray()
        while len(chunks) < count:
            try:
                chunk = sock.recv(count - len(chunks))
            except OSError as exc:
                raise ConnectionError("failed to receive packet") from exc
            if not chunk:
                raise ConnectionError("connection closed")
            chunks.extend(chunk)
        return bytes(chunks)

    def _receive_packet(self) -> _PacketReader:
        (size,) = _UINT32.unpack(self._recv_exact(_UINT32.size))
        return _PacketReader(self._recv_exact(size))

    def send_message(self, message: str) -> None:
        """Send a text message."""
        self._send_packet(encode_string(message))

    def receive_message(self) -> str:
        """Wait for a text message and return it."""
        return self._receive_packet().string()

    def send_board(self, ships: list[Ship]) -> None:
        """Send the ships' positions, orientations and lengths."""
        payload = bytearray(_UINT32.pack(len(ships)))
        for ship in ships:
            x, y = ship.position
            payload += _INT32.pack(x) + _INT32.pack(y)
            payload += _UINT32.pack(1 if ship.horizontal else 0)
            payload += _UINT32.pack(ship.length)
        self._send_packet(bytes(payload))

    def receive_board(self) -> list[Ship]:
        """Wait for a board sent by send_board and return its ships."""
        reader = self._receive_packet()
        ships = []
        for _ in range(reader.uint32()):
            x = reader.int32()
            y = reader.int32()
            horizontal = reader.int32()
            length = reader.int32()
            ships.append(Ship(length, (x, y), horizontal == 1))
        return ships

    def send_shot(self, pos: Cell) -> None:
        """Send the coordinates of a shot."""
        x, y = pos
        self._send_packet(_INT32.pack(x) + _INT32.pack(y))

    def receive_shot(self) -> Cell:
        """Wait for a shot and return its coordinates."""
        reader = self._receive_packet()
        x = reader.int32()
        y = reader.int32()
        return (x, y)

    def send_shot_result(self, hit: bool) -> None:
        """Send whether the last shot hit."""
        self._send_packet(_UINT32.pack(1 if hit else 0))

    def receive_shot_result(self) -> bool:
        """Wait for the result of a shot; True means a hit."""
        return self._receive_packet().uint32() == 1