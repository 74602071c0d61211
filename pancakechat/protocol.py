"""Packet types, request builders and parsers for the chat server's payloads."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_CRLF = b"\r\n"


class PacketType(Enum):
    """Kinds of packet exchanged with the server, named by their codes."""

    SCU = "SCU"  # search for a user
    ADF = "ADF"  # add a friend
    DEF = "DEF"  # delete a friend
    RFR = "RFR"  # incoming friend request / reply to one
    GFI = "GFI"  # full friend list
    AFI = "AFI"  # a friend was added
    DFI = "DFI"  # a friend was removed
    RAV = "RAV"  # a friend's avatar
    RMA = "RMA"  # an incoming message
    SMA = "SMA"  # acknowledgement of a sent message
    ROC = "ROC"  # an incoming voice call
    RDY = "RDY"  # client ready


@dataclass(frozen=True)
class Packet:
    """A packet's type and its raw content."""

    type: PacketType
    content: bytes = b""


@dataclass(frozen=True)
class IncomingMessage:
    """A chat message received from another user."""

    username: str
    time_ms: int
    content: str


def _as_bytes(content: bytes | bytearray | str) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


def _text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _request(packet_type: PacketType, text: str) -> Packet:
    return Packet(packet_type, text.encode("latin-1", errors="replace"))


def parse_friend_list(content: bytes | str) -> list[str]:
    """Names in a friend list; a trailing name without ``\\r\\n`` is dropped."""
    data = _as_bytes(content)
    *names, _rest = data.split(_CRLF)
    return [_text(name) for name in names]


def parse_friend_name(content: bytes | str) -> str | None:
    """The single name before the first ``\\r\\n``, or None when there is none."""
    data = _as_bytes(content)
    name, sep, _rest = data.partition(_CRLF)
    return _text(name) if sep else None


def parse_avatar(content: bytes | str) -> tuple[str, bytes] | None:
    """The owner's name and the image bytes that follow it, or None."""
    data = _as_bytes(content)
    name, sep, image = data.partition(_CRLF)
    if not sep:
        return None
    return _text(name), image


def parse_incoming_message(content: bytes | str) -> IncomingMessage:
    """Sender, send time in milliseconds and text of an incoming message."""
    data = _as_bytes(content)
    username, sep, rest = data.partition(_CRLF)
    time_text, sep2, body = rest.partition(_CRLF) if sep else (b"", b"", b"")
    if not sep2:
        body = b""
    text = _text(body.split(b"\x00", 1)[0])[:-2]
    return IncomingMessage(_text(username), _to_int(_text(time_text)), text)


def parse_send_ack(content: bytes | str) -> tuple[int, int]:
    """Identifier of the acknowledged message and the server's time for it."""
    data = _as_bytes(content)
    message_id, sep, rest = data.partition(_CRLF)
    time_text = _text(rest.split(b"\x00", 1)[0])[:-2] if sep else ""
    return _to_int(_text(message_id)), _to_int(time_text)


def parse_call_request(content: bytes | str) -> str:
    """Name of the user calling; without ``\\r\\n`` the last byte is dropped."""
    data = _as_bytes(content)
    name, sep, _rest = data.partition(_CRLF)
    return _text(name if sep else data[:-1])


def parse_friend_request(content: bytes | str) -> str:
    """Name of the user asking to become a friend."""
    return _text(_as_bytes(content)[:-2])


def search_request(username: str) -> Packet:
    return _request(PacketType.SCU, f"{username}\r\n")


def add_friend_request(username: str) -> Packet:
    return _request(PacketType.ADF, f"{username}\r\n")


def delete_friend_request(username: str) -> Packet:
    return _request(PacketType.DEF, f"{username}\r\n")


def friend_request_reply(username: str, accept: bool) -> Packet:
    return _request(PacketType.RFR, f"{username}\r\n{1 if accept else 0}\r\n")


def friend_list_request() -> Packet:
    return _request(PacketType.GFI, "1\r\n")


def ready_request() -> Packet:
    return Packet(PacketType.RDY, b"")