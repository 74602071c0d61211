"""Pending friend requests and the replies sent for them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .protocol import Packet, friend_request_reply, parse_friend_request


class FriendRequests:
    """Friend requests received from other users, in arrival order."""

    def __init__(self) -> None:
        self._pending: list[str] = []

    def add(self, username: str) -> None:
        """Add a request from ``username``."""
        self._pending.append(username)

    def remove(self, username: str) -> int:
        """Drop every request from ``username``; returns how many were dropped."""
        before = len(self._pending)
        self._pending = [name for name in self._pending if name != username]
        return before - len(self._pending)

    def respond(self, username: str, accept: bool) -> Packet:
        """Accept or reject the request from ``username`` and drop it.

        Returns the reply to send. Raises ``KeyError`` when no such request exists.
        """
        if username not in self._pending:
            raise KeyError(username)
        packet = friend_request_reply(username, accept)
        self.remove(username)
        return packet

    def handle_packets(self, contents: Iterable[bytes | str]) -> list[str]:
        """Add the requests carried by the given packet contents; returns the names."""
        added: list[str] = []
        for content in contents:
            if not content:
                continue
            name = parse_friend_request(content)
            self.add(name)
            added.append(name)
        return added

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._pending))

    def __len__(self) -> int:
        return len(self._pending)