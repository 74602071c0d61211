"""The main window: routes server packets to the friend, chat and message panels."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path

from .chatlist import ChatList
from .config import AvatarSize, Session
from .fileprocess import save_file
from .friendinfo import FriendInformation
from .friendlist import FriendList
from .messagebar import MessageBar
from .protocol import (
    Packet,
    PacketType,
    friend_list_request,
    parse_avatar,
    parse_friend_list,
    parse_friend_name,
    ready_request,
)


class View(Enum):
    """Which side of the main window is showing."""

    CHAT = "chat"
    FRIENDS = "friends"


class MainWindow:
    """The logged-in client's main window and the panels it coordinates."""

    def __init__(self, session: Session, app_dir: str | Path, send: Callable[[Packet], object]) -> None:
        self.session = session
        self.app_dir = Path(app_dir)
        self._send = send
        self.unread_total = 0
        self.view = View.CHAT
        self.maximized = False
        self.closed = False
        self.friends = FriendList()
        self.friend_info = FriendInformation(session, self.app_dir)
        self.chat_list = ChatList(on_read=self._on_read)
        self.message_bar = MessageBar(session)
        self._send(friend_list_request())
        self._send(ready_request())

    def _on_read(self, count: int) -> None:
        self.unread_total -= count

    @property
    def chat_user_name(self) -> str:
        """Name shown above the open conversation."""
        return self.message_bar.chat_user_name

    def _add_friend(self, name: str) -> None:
        self.friends.add(name)
        self.chat_list.add(name)

    def _delete_friend(self, name: str) -> None:
        self.friends.remove(name)
        self.friend_info.friend_deleted(name)
        self.chat_list.delete(name)
        self.message_bar.delete_user(name)

    def handle_packet(self, packet: Packet) -> object:
        """Apply one packet from the server; returns what it carried, if anything."""
        content = packet.content
        kind = packet.type
        if kind is PacketType.GFI:
            if not content:
                return []
            names = parse_friend_list(content)
            self.friends.clear()
            for name in names:
                self._add_friend(name)
            return names
        if kind in (PacketType.AFI, PacketType.DFI):
            name = parse_friend_name(content) if content else None
            if name is not None:
                if kind is PacketType.AFI:
                    self._add_friend(name)
                else:
                    self._delete_friend(name)
            return name
        if kind is PacketType.RAV:
            avatar = parse_avatar(content) if content else None
            if avatar is None:
                return None
            name, image = avatar
            directory = self.session.avatar_dir(self.app_dir, AvatarSize.ORIGINAL)
            return save_file(image, directory, f"{name}.png")
        if kind is PacketType.RMA:
            received = self.message_bar.handle_incoming([content])
            for message in received:
                self.chat_list.set_content(message.username, message.content, message.time_ms)
            return received
        if kind is PacketType.SMA:
            return self.message_bar.handle_send_acks([content])
        if kind is PacketType.ROC:
            return self.message_bar.handle_call_requests([content])
        return None

    def switch_to_chat(self) -> None:
        self.view = View.CHAT

    def switch_to_friends(self) -> None:
        self.view = View.FRIENDS

    def open_chat(self, username: str) -> None:
        """Switch to the chat side and open the conversation with ``username``."""
        self.switch_to_chat()
        self.chat_list.select(username)
        self.message_bar.change_to_user(username)

    def moved(self, x: int, y: int) -> None:
        """Remember where the window now is."""
        self.session.main_window_x = x
        self.session.main_window_y = y

    def close(self) -> None:
        """Close every open picture viewer, then the window."""
        for viewer in self.session.opened_viewers:
            if viewer is not None:
                viewer.close()
        self.closed = True