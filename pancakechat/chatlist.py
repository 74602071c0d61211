"""The list of recent chats: ordering, unread counters and visibility."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone

# Day boundaries and displayed clock times follow UTC+8.
_TZ = timezone(timedelta(hours=8))
_DAY_OFFSET = 57600
_DAY = 86400
_YESTERDAY = "昨天"


def _seconds(now: float | datetime | None) -> int:
    if now is None:
        return int(datetime.now(tz=_TZ).timestamp())
    if isinstance(now, datetime):
        return int(now.timestamp())
    return int(now)


def format_last_time(last_time_ms: int, now: float | datetime | None = None) -> str:
    """Text shown for a chat's last activity.

    Empty for a time of 0, ``hh:mm`` for today, ``昨天`` for yesterday and
    ``yy/MM/dd`` otherwise. ``now`` is a datetime or epoch seconds; the
    current time is used when it is None.
    """
    if last_time_ms == 0:
        return ""
    then = int(last_time_ms) // 1000
    current = _seconds(now)
    days = (current - _DAY_OFFSET) // _DAY - (then - _DAY_OFFSET) // _DAY
    moment = datetime.fromtimestamp(then, tz=_TZ)
    if days == 0:
        return moment.strftime("%H:%M")
    if days == 1:
        return _YESTERDAY
    return moment.strftime("%y/%m/%d")


@dataclass
class ChatEntry:
    """One chat in the list: who it is with, its preview and unread count."""

    username: str
    last_time: int = 0
    unread: int = 0
    content: str = ""
    hidden: bool = False

    def set_content(self, content: str, time_ms: int) -> None:
        """Set the preview text; the last time only ever moves forward."""
        self.content = content
        self.last_time = max(self.last_time, int(time_ms))

    def add_unread(self) -> int:
        self.unread += 1
        return self.unread

    def clear_unread(self) -> None:
        self.unread = 0


def _noop(*_args: object) -> None:
    return None


class ChatList:
    """Chats ordered by most recent activity, with one optionally selected.

    ``on_read`` receives the change in read-message count, ``on_save`` a copy
    of each entry that must be stored and ``on_delete`` the name of each chat
    that must be removed from storage.
    """

    def __init__(
        self,
        entries: Iterable[ChatEntry] = (),
        on_read: Callable[[int], object] | None = None,
        on_save: Callable[[ChatEntry], object] | None = None,
        on_delete: Callable[[str], object] | None = None,
    ) -> None:
        self._on_read = on_read or _noop
        self._on_save = on_save or _noop
        self._on_delete = on_delete or _noop
        self._items: list[ChatEntry] = []
        self.current: str | None = None
        for entry in entries:
            self._items.insert(self._position_for(entry.last_time), entry)

    def _position_for(self, time_ms: int) -> int:
        return next(
            (i for i, item in enumerate(self._items) if item.last_time < time_ms),
            len(self._items),
        )

    def _find(self, username: str) -> tuple[int, ChatEntry] | None:
        return next(
            ((i, item) for i, item in enumerate(self._items) if item.username == username),
            None,
        )

    def _save(self, entry: ChatEntry) -> None:
        self._on_save(replace(entry))

    def set_content(self, username: str, content: str, time_ms: int) -> ChatEntry:
        """Record a new message preview for ``username`` and move the chat up."""
        new_index = self._position_for(time_ms)
        found = self._find(username)
        if found is None:
            self.add(username)
            return self.set_content(username, content, time_ms)
        index, entry = found
        chosen = self.current == username
        entry.set_content(content, time_ms)
        if entry.hidden:
            self.show(username)
        if not chosen:
            entry.add_unread()
            self._on_read(-1)
        self._save(entry)
        self._items.pop(index)
        self._items.insert(new_index, entry)
        return entry

    def add(self, username: str) -> ChatEntry:
        """Add an empty chat with ``username`` unless one already exists."""
        found = self._find(username)
        if found is not None:
            return found[1]
        entry = ChatEntry(username)
        self._items.insert(self._position_for(entry.last_time), entry)
        self._save(entry)
        return entry

    def show(self, username: str) -> None:
        """Make a hidden chat visible again."""
        found = self._find(username)
        if found is None:
            return
        entry = found[1]
        self._on_read(-entry.unread)
        entry.hidden = False
        self._save(entry)

    def select(self, username: str) -> ChatEntry:
        """Select the chat with ``username``, creating it when missing."""
        found = self._find(username)
        if found is None:
            self.add(username)
            return self.select(username)
        entry = found[1]
        if entry.hidden:
            self.show(username)
        self._on_read(entry.unread)
        entry.clear_unread()
        self._save(entry)
        self.current = username
        return entry

    def hide(self, username: str) -> None:
        """Hide the chat with ``username`` from the list."""
        found = self._find(username)
        if found is None:
            return
        entry = found[1]
        self._on_read(entry.unread)
        entry.hidden = True
        self._save(entry)
        if self.current == username:
            self.current = None

    def delete(self, username: str) -> None:
        """Remove the chat with ``username`` and drop it from storage."""
        found = self._find(username)
        if found is not None:
            index, entry = found
            self._on_read(entry.unread)
            if self.current == username:
                self.current = None
            self._items.pop(index)
        self._on_delete(username)

    def click(self, username: str) -> str:
        """The user clicked a chat; returns the name of the chat to open.

        Raises ``KeyError`` when there is no chat with ``username``.
        """
        found = self._find(username)
        if found is None:
            raise KeyError(username)
        entry = found[1]
        self._on_read(entry.unread)
        entry.clear_unread()
        self._save(entry)
        self.current = username
        return username

    def visible(self) -> list[ChatEntry]:
        """Chats that are not hidden, most recent first."""
        return [entry for entry in self._items if not entry.hidden]

    def __iter__(self) -> Iterator[ChatEntry]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)