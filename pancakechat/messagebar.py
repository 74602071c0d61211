"""The message area: per-user conversations, delivery acks and voice-call notes."""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .config import Session
from .protocol import (
    IncomingMessage,
    parse_call_request,
    parse_incoming_message,
    parse_send_ack,
)

CALL_WINDOW_OFFSET = (200, 30)


class CallOutcome(Enum):
    """How a voice call ended."""

    NORMAL_CALL = "normal_call"
    REJECT = "reject"
    FRIEND_CANCEL = "friend_cancel"


@dataclass(frozen=True)
class Message:
    """One message in a conversation."""

    content: str
    time_ms: int
    outgoing: bool = False


def call_summary(outcome: CallOutcome, duration: str = "") -> str:
    """Text recorded in the conversation when a voice call ends."""
    outcome = CallOutcome(outcome)
    if outcome is CallOutcome.NORMAL_CALL:
        return f"通话时长 {duration} ☏"
    if outcome is CallOutcome.REJECT:
        return "已拒绝 ☏"
    return "对方已取消 ☏"


def _now_ms() -> int:
    return int(time.time() * 1000)


class MessageBar:
    """Conversations kept per user, and which one is on screen."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self._conversations: dict[str, list[Message]] = {}
        self._hidden: set[str] = set()
        self.now_user = ""
        self.chat_user_name = ""
        self.sent_ids: set[int] = set()
        self.notifications = 0
        self.incoming_call: tuple[str, tuple[int, int]] | None = None

    def _ensure(self, username: str) -> list[Message]:
        return self._conversations.setdefault(username, [])

    def change_to_user(self, username: str) -> None:
        """Show the conversation with ``username``, creating it when missing."""
        self.chat_user_name = username
        self._ensure(username)
        if self.now_user != username:
            if self.now_user:
                self._hidden.add(self.now_user)
            self.now_user = username
            self._hidden.discard(username)

    def hide_user(self, username: str) -> None:
        """Take the conversation with ``username`` off screen."""
        if self.now_user == username:
            self.chat_user_name = ""
        if username not in self._conversations:
            return
        self._hidden.add(username)
        if self.now_user == username:
            self.now_user = ""

    def delete_user(self, username: str) -> None:
        """Drop the conversation with ``username`` and its history."""
        if self.now_user == username:
            self.chat_user_name = ""
            self.now_user = ""
        self._conversations.pop(username, None)
        self._hidden.discard(username)

    def messages(self, username: str) -> list[Message]:
        """Messages exchanged with ``username``, oldest first."""
        return list(self._conversations.get(username, ()))

    def handle_incoming(self, contents: Iterable[bytes | str]) -> list[IncomingMessage]:
        """Store the messages carried by the given packet contents."""
        received: list[IncomingMessage] = []
        for content in contents:
            if not content:
                continue
            message = parse_incoming_message(content)
            self._ensure(message.username).append(Message(message.content, message.time_ms))
            self.notifications += 1
            received.append(message)
        return received

    def handle_send_acks(self, contents: Iterable[bytes | str]) -> list[int]:
        """Mark the acknowledged messages as sent; returns their identifiers."""
        acked: list[int] = []
        for content in contents:
            if not content:
                continue
            message_id, _server_time = parse_send_ack(content)
            self.sent_ids.add(message_id)
            acked.append(message_id)
        return acked

    def handle_call_requests(self, contents: Iterable[bytes | str]) -> str | None:
        """Take the first incoming call; returns the caller, or None when busy or none."""
        for content in contents:
            if not content:
                continue
            caller = parse_call_request(content)
            if self.session.voice_chatting:
                return None
            self.session.voice_chatting = True
            dx, dy = CALL_WINDOW_OFFSET
            position = (self.session.main_window_x + dx, self.session.main_window_y + dy)
            self.incoming_call = (caller, position)
            return caller
        return None

    def call_closed(
        self,
        outcome: CallOutcome,
        duration: str,
        username: str,
        time_ms: int | None = None,
    ) -> Message:
        """Record the end of a voice call with ``username``; returns the note added."""
        self.session.voice_chatting = False
        self.incoming_call = None
        note = Message(call_summary(outcome, duration), _now_ms() if time_ms is None else int(time_ms))
        self._ensure(username).append(note)
        return note