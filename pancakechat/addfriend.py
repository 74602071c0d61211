"""The add-friend dialog: searching for a user and sending a friend request."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .protocol import Packet, add_friend_request, search_request

_USERNAME = re.compile(r"[a-zA-Z0-9]{0,16}")

TIP_NO_SERVER = "无法连接到服务器!"
TIP_EMPTY_NAME = "用户名不得为空"
TIP_BAD_FORMAT = "格式错误"
TIP_NO_SUCH_USER = "该用户名不存在"
TIP_FOUND = "查找成功"
TIP_SELF = "不能添加自己为好友"
TIP_DUPLICATE = "重复发送好友请求"
TIP_ALREADY_FRIEND = "该用户已经是好友"
TIP_THEY_ASKED = "该用户已经向你提交了好友申请"
TIP_SENT = "好友请求已发送"


def _as_bytes(content: bytes | bytearray | str) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


class AddFriendDialog:
    """State of the dialog used to look a user up and ask them to be a friend."""

    NO_SEARCH_RESULT_HEIGHT = 185
    WITH_SEARCH_RESULT_HEIGHT = 301

    def __init__(self, connected: bool = True) -> None:
        self.connected = connected
        self.entry = ""
        self.query = ""
        self.found_user = ""
        self.tip = ""
        self.tip_is_error = True
        self.busy = False
        self.result_visible = False
        self.height = self.NO_SEARCH_RESULT_HEIGHT

    def _enable(self) -> None:
        self.busy = False

    def _error(self, text: str) -> None:
        self.tip_is_error = True
        self.tip = text

    def search(self, username: str) -> Packet | None:
        """Start a search; returns the packet to send, or None when nothing is sent.

        Raises ``ValueError`` for names that are not up to 16 letters or digits.
        """
        if not _USERNAME.fullmatch(username):
            raise ValueError(f"invalid username: {username!r}")
        self.entry = username
        if not self.connected:
            self.tip = TIP_NO_SERVER
            return None
        self.busy = True
        self._error("")
        if not username:
            self.tip = TIP_EMPTY_NAME
            self._enable()
            return None
        self.query = username
        return search_request(username)

    def handle_search_replies(self, replies: Iterable[bytes | str]) -> bool:
        """Apply the server's answers to a search; True when a user was found."""
        for reply in replies:
            data = _as_bytes(reply)
            if not data:
                continue
            if data.startswith(b"-2"):
                self.tip = TIP_BAD_FORMAT
                self._enable()
                continue
            if data.startswith(b"0"):
                self.tip = TIP_NO_SUCH_USER
                self._enable()
                self.entry = ""
                continue
            self._enable()
            self.tip_is_error = False
            self.tip = TIP_FOUND
            self.found_user = self.query
            self.result_visible = True
            self.height = self.WITH_SEARCH_RESULT_HEIGHT
            return True
        return False

    def add_friend(self) -> Packet | None:
        """Ask to befriend the user found; returns the packet, or None when offline.

        Raises ``RuntimeError`` when no user has been found yet.
        """
        if not self.found_user:
            raise RuntimeError("no user has been found to add")
        if not self.connected:
            self.tip = TIP_NO_SERVER
            return None
        self.busy = True
        self._error("")
        return add_friend_request(self.found_user)

    def handle_add_replies(self, replies: Iterable[bytes | str]) -> bool:
        """Apply the server's answers to a friend request; True when it was sent."""
        sent = False
        for reply in replies:
            data = _as_bytes(reply)
            if not data:
                continue
            if data.startswith(b"-3"):
                self.tip = TIP_SELF
                continue
            if data.startswith(b"-2"):
                self.tip = TIP_BAD_FORMAT
                continue
            if data.startswith(b"-1"):
                self.tip = TIP_DUPLICATE
                continue
            if data.startswith(b"0"):
                self.tip = TIP_BAD_FORMAT
                continue
            if data.startswith(b"2"):
                self.tip = TIP_ALREADY_FRIEND
                continue
            if data.startswith(b"3"):
                self.tip = TIP_THEY_ASKED
                continue
            self.tip_is_error = False
            self.tip = TIP_SENT
            sent = True
            break
        self._enable()
        return sent

    def disconnected(self) -> None:
        """The connection to the server was lost."""
        self.connected = False
        self._enable()
        self.tip = TIP_NO_SERVER