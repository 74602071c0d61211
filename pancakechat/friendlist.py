"""The friend list: names kept in sorted order."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Iterator

from .protocol import Packet, delete_friend_request


class FriendList:
    """The logged-in user's friends, sorted by name."""

    def __init__(self) -> None:
        self._names: list[str] = []

    def add(self, username: str) -> int:
        """Insert ``username`` after any equal or smaller names.

        Returns the position it was inserted at.
        """
        index = bisect_right(self._names, username)
        self._names.insert(index, username)
        return index

    def remove(self, username: str) -> bool:
        """Drop the first entry for ``username``; True when one was dropped."""
        try:
            self._names.remove(username)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._names.clear()

    def replace_all(self, usernames: Iterable[str]) -> list[str]:
        """Replace the whole list with ``usernames``; returns them in arrival order."""
        self.clear()
        added = []
        for name in usernames:
            self.add(name)
            added.append(name)
        return added

    def delete_request(self, username: str) -> Packet:
        """The packet asking the server to end the friendship with ``username``.

        Raises ``KeyError`` when ``username`` is not a friend.
        """
        if username not in self._names:
            raise KeyError(username)
        return delete_friend_request(username)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, username: object) -> bool:
        return username in self._names